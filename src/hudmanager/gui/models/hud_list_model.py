"""Qt list model exposing one section of the HUD list."""

from __future__ import annotations

from typing import List

from PySide6.QtCore import QAbstractListModel, QByteArray, QModelIndex, QObject, Qt

from ...models.hud import Hud
from ..viewmodels.hud_list_viewmodel import HudListViewModel
from .roles import HudRoles, role_names


class HudListModel(QAbstractListModel):
    """List model over either the favorite or the non-favorite HUDs.

    Rows follow the view model's ordering and current search results.  The
    model resets whenever the view model reports a change.
    """

    def __init__(
        self,
        view_model: HudListViewModel,
        *,
        favorites: bool,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._view_model = view_model
        self._favorites = favorites
        self._rows: List[Hud] = self._collect()
        view_model.huds_changed.connect(self.refresh)
        view_model.search_results.changed.connect(lambda *_: self.refresh())

    # ------------------------------------------------------------------
    # QAbstractListModel API
    # ------------------------------------------------------------------
    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:  # noqa: N802
        if parent.isValid():
            return 0
        return len(self._rows)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole):  # noqa: N802
        if not index.isValid() or not 0 <= index.row() < len(self._rows):
            return None
        hud = self._rows[index.row()]
        if role in (Qt.ItemDataRole.DisplayRole, HudRoles.NAME):
            return hud.name
        if role in (Qt.ItemDataRole.ToolTipRole, HudRoles.PATH):
            return str(hud.location)
        if role == HudRoles.FAVORITE:
            return hud.favorite
        if role == HudRoles.IS_ACTIVE:
            return self._view_model.is_active(hud.name)
        return None

    def setData(self, index: QModelIndex, value, role: int = Qt.ItemDataRole.EditRole) -> bool:  # noqa: N802
        if role != HudRoles.FAVORITE or not index.isValid():
            return False
        if not 0 <= index.row() < len(self._rows):
            return False
        hud = self._rows[index.row()]
        if bool(value) == hud.favorite:
            return False
        # The toggle re-sorts the list, which resets this model.
        self._view_model.toggle_favorite(hud.name)
        return True

    def roleNames(self) -> dict[int, QByteArray]:  # type: ignore[override]
        names = role_names({int(Qt.ItemDataRole.DisplayRole): b"display"})
        return {int(role): QByteArray(name) for role, name in names.items()}

    def flags(self, index: QModelIndex) -> Qt.ItemFlag:  # noqa: N802
        if not index.isValid():
            return Qt.ItemFlag.NoItemFlags
        return Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsSelectable

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------
    def refresh(self) -> None:
        self.beginResetModel()
        self._rows = self._collect()
        self.endResetModel()

    def hud_at(self, row: int) -> Hud | None:
        if 0 <= row < len(self._rows):
            return self._rows[row]
        return None

    def activate_row(self, row: int) -> bool:
        hud = self.hud_at(row)
        if hud is None:
            return False
        return self._view_model.activate(hud.name)

    def _collect(self) -> List[Hud]:
        if self._favorites:
            return self._view_model.favorite_huds()
        return self._view_model.other_huds()
