"""Role definitions shared by the HUD list models."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict

from PySide6.QtCore import Qt


class HudRoles(IntEnum):
    """Custom roles exposed to QML or widgets."""

    NAME = Qt.UserRole + 1
    PATH = Qt.UserRole + 2
    FAVORITE = Qt.UserRole + 3
    IS_ACTIVE = Qt.UserRole + 4


def role_names(base: Dict[int, bytes] | None = None) -> Dict[int, bytes]:
    """Return a mapping of Qt role numbers to byte names."""

    mapping: Dict[int, bytes] = {} if base is None else dict(base)
    mapping.update(
        {
            HudRoles.NAME: b"name",
            HudRoles.PATH: b"path",
            HudRoles.FAVORITE: b"favorite",
            HudRoles.IS_ACTIVE: b"isActive",
        }
    )
    return mapping
