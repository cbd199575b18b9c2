"""HUD collection management helpers."""

from .manager import HudLibrary
from .paths import resolve_content_root, resolve_root

__all__ = ["HudLibrary", "resolve_content_root", "resolve_root"]
