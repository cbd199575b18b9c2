"""Pure Python HudListViewModel: no Qt dependency.

Drives the HUD list: startup loading, search, favorite toggling and
activation, and the status line that reports the last failure.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Set

from ...errors import (
    AlreadyActiveError,
    FavoritesEncodingError,
    HudManagerError,
    HudNotFoundError,
    NoResultsError,
)
from ...errors.handler import ErrorHandler, ErrorSeverity
from ...events.bus import EventBus
from ...events.hud_events import HudsScannedEvent
from ...library.manager import HudLibrary
from ...models.hud import Hud
from ...search.filter import SearchFilter
from .base import BaseViewModel
from .signal import ObservableProperty, Signal

# Expected user-facing outcomes rather than failures.
_WARNINGS = (AlreadyActiveError, NoResultsError)


class HudListViewModel(BaseViewModel):
    """HUD list ViewModel, pure Python."""

    def __init__(
        self,
        library: HudLibrary,
        event_bus: EventBus,
        search_filter: Optional[SearchFilter] = None,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        super().__init__()
        self._library = library
        self._search = search_filter or SearchFilter()
        self._errors = error_handler or ErrorHandler(logging.getLogger(__name__), event_bus)
        self._errors.register_status_callback(self._on_status)

        self.status_message = ObservableProperty("")
        self.search_query = ObservableProperty("")
        self.search_results: ObservableProperty = ObservableProperty(None)

        self.huds_changed = Signal()
        self.error_occurred = Signal()

        self.subscribe_event(event_bus, HudsScannedEvent, self._on_scanned)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def library(self) -> HudLibrary:
        return self._library

    @property
    def huds(self) -> List[Hud]:
        return self._library.huds

    @property
    def active(self) -> Optional[Hud]:
        return self._library.active

    @property
    def last_error(self) -> Optional[Exception]:
        return self._errors.last_error

    def is_active(self, name: str) -> bool:
        active = self._library.active
        return active is not None and active.name == name

    def is_visible(self, hud: Hud) -> bool:
        results: Optional[Set[str]] = self.search_results.value
        return results is None or hud.name in results

    def favorite_huds(self) -> List[Hud]:
        """Visible HUDs from the favorited prefix of the list."""

        visible: List[Hud] = []
        for hud in self._library:
            if not hud.favorite:
                break
            if self.is_visible(hud):
                visible.append(hud)
        return visible

    def other_huds(self) -> List[Hud]:
        return [hud for hud in self._library if not hud.favorite and self.is_visible(hud)]

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def load(self) -> None:
        """Read favorites and scan, as done once at startup."""

        self.status_message.value = ""
        try:
            self._library.update_favorites()
        except FavoritesEncodingError as exc:
            # Favorites stay empty for this session; the scan still runs.
            self._report(exc)
        except HudManagerError as exc:
            self._report(exc)
            return
        self.refresh(clear_status=False)

    def refresh(self, clear_status: bool = True) -> None:
        if clear_status:
            self.status_message.value = ""
        try:
            self._library.scan()
        except HudManagerError as exc:
            self._report(exc)
            self.huds_changed.emit()

    def search(self, query: str) -> None:
        self.search_query.value = query
        self.search_results.value = None
        self.status_message.value = ""
        try:
            self.search_results.value = self._search.filter(query, self._library.names())
        except NoResultsError as exc:
            self._report(exc)

    def clear_search(self) -> None:
        self.search("")

    def toggle_favorite(self, name: str) -> bool:
        """Flip *name*'s favorite flag and persist the favorites list."""

        self.status_message.value = ""
        value = self._library.toggle_favorite(name)
        try:
            self._library.save_favorites()
        except HudManagerError as exc:
            self._report(exc)
        self.huds_changed.emit()
        return value

    def activate(self, name: str) -> bool:
        """Make *name* the active HUD and rescan; return ``True`` on success."""

        self.status_message.value = ""
        try:
            self._library.activate(name)
        except HudNotFoundError:
            raise
        except AlreadyActiveError as exc:
            self._report(exc)
            return False
        except HudManagerError as exc:
            self._report(exc)
            # The move may have been partial; resync with disk.
            self.refresh(clear_status=False)
            return False
        self.refresh(clear_status=False)
        return self.is_active(name)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _report(self, exc: HudManagerError) -> None:
        severity = ErrorSeverity.WARNING if isinstance(exc, _WARNINGS) else ErrorSeverity.ERROR
        self._errors.handle(exc, severity)
        self.error_occurred.emit(str(exc))

    def _on_status(self, message: str, _severity: ErrorSeverity) -> None:
        self.status_message.value = message

    def _on_scanned(self, _event: HudsScannedEvent) -> None:
        self.huds_changed.emit()
