"""HUD collection management: scanning, activation and favorites."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Optional, Set

from ..config import (
    DESCRIPTOR_NAME,
    FAVORITES_FILE_NAME,
    HUDS_DIR_NAME,
    SCAN_MAX_DEPTH,
)
from ..errors import (
    AlreadyActiveError,
    FavoritesEncodingError,
    HudIOError,
    HudNotFoundError,
    LibraryUnavailableError,
)
from ..events.bus import EventBus
from ..events.hud_events import FavoritesSavedEvent, HudActivatedEvent, HudsScannedEvent
from ..models.hud import Hud, favorite_prefix, sort_huds
from ..utils.fileio import write_text_atomic
from ..utils.logging import get_logger
from ..utils.pathutils import ensure_dir, walk_dir

LOGGER = get_logger()


class HudLibrary:
    """Own the scanned HUDs, the active HUD and the favorites set.

    The content root holds at most one HUD directly (the *active* one); all
    others live in ``<root>/huds``.  ``huds`` is kept sorted favorites-first
    and alphabetically within each group.
    """

    def __init__(self, root: Path | None = None, *, event_bus: EventBus | None = None) -> None:
        self._root: Path | None = root
        self._huds: List[Hud] = []
        self._active: Optional[Hud] = None
        self._favorites: Set[str] = set()
        self._events = event_bus

    # ------------------------------------------------------------------
    # Basic properties
    # ------------------------------------------------------------------
    def root(self) -> Path | None:
        return self._root

    def bind_path(self, root: Path) -> None:
        self._root = root

    @property
    def huds(self) -> List[Hud]:
        return list(self._huds)

    @property
    def active(self) -> Optional[Hud]:
        return self._active

    @property
    def favorites(self) -> Set[str]:
        return set(self._favorites)

    def __iter__(self) -> Iterator[Hud]:
        return iter(list(self._huds))

    def __len__(self) -> int:
        return len(self._huds)

    def names(self) -> List[str]:
        return [hud.name for hud in self._huds]

    def get(self, name: str) -> Hud:
        for hud in self._huds:
            if hud.name == name:
                return hud
        raise HudNotFoundError(f"hud `{name}` does not exist")

    def huds_dir(self) -> Path:
        return self._require_root() / HUDS_DIR_NAME

    def favorites_path(self) -> Path:
        return self.huds_dir() / FAVORITES_FILE_NAME

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------
    def scan(self, root: Path | None = None) -> List[Hud]:
        """Rebuild the collection from disk and return the sorted HUDs.

        The first descriptor found under the content root marks the active
        HUD; any further candidates there are ignored.  Every descriptor under
        ``huds/`` adds an inactive HUD.
        """

        if root is not None:
            self.bind_path(root)
        root = self._require_root()
        huds_dir = root / HUDS_DIR_NAME

        self._huds.clear()
        self._active = None
        seen: Set[str] = set()

        for descriptor in self._iter_descriptors(root, excluded={root, huds_dir}, required=True):
            if self._active is None:
                hud = self._make_hud(descriptor)
                self._huds.append(hud)
                self._active = hud
                seen.add(hud.name)
            else:
                LOGGER.debug("Ignoring extra HUD candidate at content root: %s", descriptor.parent)

        if huds_dir.is_dir():
            for descriptor in self._iter_descriptors(huds_dir, excluded={huds_dir}, required=False):
                hud = self._make_hud(descriptor)
                if hud.name in seen:
                    LOGGER.warning("Skipping duplicate HUD name %r at %s", hud.name, hud.location)
                    continue
                seen.add(hud.name)
                self._huds.append(hud)

        self._huds = sort_huds(self._huds)
        LOGGER.info(
            "Scanned %d HUD(s) in %s (active: %s)",
            len(self._huds),
            root,
            self._active.name if self._active else "none",
        )
        self._publish(
            HudsScannedEvent(
                root=str(root),
                hud_count=len(self._huds),
                active=self._active.name if self._active else None,
            )
        )
        return self.huds

    def _iter_descriptors(self, base: Path, *, excluded: Set[Path], required: bool) -> Iterator[Path]:
        try:
            for path in walk_dir(base, SCAN_MAX_DEPTH, on_error=_log_skipped):
                if path.name != DESCRIPTOR_NAME or path.parent in excluded:
                    continue
                if path.is_file():
                    yield path
        except OSError as exc:
            if required:
                raise HudIOError(f"failed to read `{base}`: {exc}") from exc
            LOGGER.debug("Skipping unreadable directory %s: %s", base, exc)

    def _make_hud(self, descriptor: Path) -> Hud:
        hud = Hud.from_descriptor(descriptor)
        hud.favorite = hud.name in self._favorites
        return hud

    # ------------------------------------------------------------------
    # Activation
    # ------------------------------------------------------------------
    def activate(self, name: str) -> Hud:
        """Move *name* into the content root, parking the current HUD in ``huds/``.

        When parking the current HUD succeeds but moving the new one fails,
        no HUD is active afterwards and the error is raised; callers should
        rescan to pick up the state on disk.
        """

        root = self._require_root()
        target = self.get(name)
        previous = self._active if self._active is not None and self._active.exists() else None

        if previous is not None and previous.name == name:
            raise AlreadyActiveError("hud already active")

        if previous is not None:
            huds_dir = root / HUDS_DIR_NAME
            try:
                ensure_dir(huds_dir)
            except OSError as exc:
                raise HudIOError(f"failed to create `{huds_dir}`: {exc}") from exc
            parked = huds_dir / previous.name
            self._move(previous.location, parked)
            previous.location = parked

        destination = root / target.name
        try:
            self._move(target.location, destination)
        except HudIOError:
            if previous is not None:
                self._active = None
            raise
        target.location = destination
        self._active = target

        LOGGER.info(
            "Activated HUD %r (previous: %s)", name, previous.name if previous else "none"
        )
        self._publish(HudActivatedEvent(name=name, previous=previous.name if previous else None))
        return target

    def _move(self, source: Path, destination: Path) -> None:
        if destination.exists():
            raise HudIOError(f"failed to move hud: `{destination}` already exists")
        try:
            source.rename(destination)
        except OSError as exc:
            raise HudIOError(f"failed to move hud: {exc}") from exc
        LOGGER.info("Moved %s -> %s", source, destination)

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------
    def toggle_favorite(self, name: str) -> bool:
        """Flip the favorite flag of *name* in memory and return the new value."""

        hud = self.get(name)
        return self.set_favorite(name, not hud.favorite)

    def set_favorite(self, name: str, value: bool) -> bool:
        hud = self.get(name)
        hud.favorite = bool(value)
        self._huds = sort_huds(self._huds)
        return hud.favorite

    def save_favorites(self) -> List[str]:
        """Write the favorited prefix of ``huds`` to ``favorites.txt``.

        ``favorites`` is rebuilt from the same prefix so the file and the
        in-memory set never diverge.
        """

        huds_dir = self.huds_dir()
        try:
            ensure_dir(huds_dir)
        except OSError as exc:
            raise HudIOError(f"failed to create `{huds_dir}`: {exc}") from exc

        names = [hud.name for hud in favorite_prefix(self._huds)]
        write_text_atomic(huds_dir / FAVORITES_FILE_NAME, "\n".join(names))
        self._favorites = set(names)
        LOGGER.info("Saved %d favorite HUD(s)", len(names))
        self._publish(FavoritesSavedEvent(names=names))
        return names

    def update_favorites(self) -> Set[str]:
        """Load ``favorites.txt``, creating an empty one when it is missing."""

        path = self.favorites_path()
        if not path.exists():
            try:
                ensure_dir(path.parent)
                path.touch()
            except OSError as exc:
                raise HudIOError(f"failed to create `{path.name}`: {exc}") from exc
            self._favorites = set()
            self._apply_favorites()
            return self.favorites

        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise HudIOError(f"failed to read `{path.name}`: {exc}") from exc
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            self._favorites = set()
            self._apply_favorites()
            raise FavoritesEncodingError(f"failed to read `{path.name}`: not valid UTF-8") from exc

        self._favorites = {line for line in _split_lines(text) if line}
        self._apply_favorites()
        LOGGER.debug("Loaded %d favorite HUD name(s)", len(self._favorites))
        return self.favorites

    def _apply_favorites(self) -> None:
        for hud in self._huds:
            hud.favorite = hud.name in self._favorites
        self._huds = sort_huds(self._huds)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _require_root(self) -> Path:
        if self._root is None:
            raise LibraryUnavailableError("No content root is bound")
        return self._root

    def _publish(self, event) -> None:
        if self._events is not None:
            self._events.publish(event)


def _log_skipped(path: Path, exc: OSError) -> None:
    LOGGER.debug("Skipping unreadable directory %s: %s", path, exc)


def _split_lines(text: str) -> Iterator[str]:
    # Only line terminators are removed; names keep any other whitespace.
    for line in text.split("\n"):
        yield line[:-1] if line.endswith("\r") else line


__all__ = ["HudLibrary"]
