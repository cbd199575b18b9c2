"""Application-wide context shared by the CLI and the view layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from .errors import FavoritesEncodingError
from .errors.handler import ErrorHandler, ErrorSeverity
from .events.bus import EventBus
from .utils.logging import configure_logging, get_logger

if TYPE_CHECKING:  # pragma: no cover - only for type checking
    from .library.manager import HudLibrary
    from .search.filter import SearchFilter
    from .settings.manager import SettingsManager


def _create_settings_manager(path: Optional[Path] = None) -> "SettingsManager":
    from .settings.manager import SettingsManager

    manager = SettingsManager(path)
    manager.load()
    return manager


@dataclass
class AppContext:
    """Container object wiring settings, the HUD library and search."""

    settings: "SettingsManager" = field(default_factory=_create_settings_manager)
    events: EventBus = field(default_factory=EventBus)
    root_override: Optional[Path] = None
    library: "HudLibrary" = field(init=False)
    search: "SearchFilter" = field(init=False)
    errors: ErrorHandler = field(init=False)

    def __post_init__(self) -> None:
        from .library.manager import HudLibrary
        from .search.filter import SearchFilter

        configure_logging(self.settings.get("logging.level", "INFO"))
        self.library = HudLibrary(event_bus=self.events)
        self.search = SearchFilter(threshold=float(self.settings.get("search.threshold")))
        self.errors = ErrorHandler(get_logger(), self.events)

    @classmethod
    def create(
        cls,
        *,
        settings_path: Optional[Path] = None,
        root: Optional[Path] = None,
    ) -> "AppContext":
        return cls(settings=_create_settings_manager(settings_path), root_override=root)

    def resolve_root(self, executable: Optional[Path] = None) -> Path:
        """Bind and return the content root (override, settings, then program location)."""

        from .library.paths import resolve_root

        override = self.root_override or self.settings.get("content_root")
        root = resolve_root(override, executable)
        self.library.bind_path(root)
        return root

    def initialize_library(self, executable: Optional[Path] = None) -> None:
        """Resolve the root, load favorites and scan.

        Mirrors startup: favorites must be known before the scan flags HUDs.
        An unreadable favorites file is reported and the session continues
        without favorites.
        """

        self.resolve_root(executable)
        try:
            self.library.update_favorites()
        except FavoritesEncodingError as exc:
            self.errors.handle(exc, ErrorSeverity.WARNING)
        self.library.scan()
