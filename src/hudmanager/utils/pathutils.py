"""Utilities for walking and arranging the HUD directory layout."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterator, Optional

from .logging import get_logger

LOGGER = get_logger()


def walk_dir(
    root: Path,
    max_depth: int,
    *,
    on_error: Optional[Callable[[Path, OSError], None]] = None,
) -> Iterator[Path]:
    """Yield *root* and its descendants depth-first, down to *max_depth*.

    ``root`` itself is depth ``0``.  Entries inside each directory are
    yielded in name order so traversal is reproducible across platforms.
    Symlinked directories are reported but not descended into.

    Listing ``root`` raises :class:`OSError` to the caller.  Failures
    further down are passed to *on_error* (or logged) and the affected
    sub-tree is skipped.
    """

    yield root
    if max_depth <= 0:
        return
    entries = _sorted_entries(root)
    yield from _walk_entries(entries, 1, max_depth, on_error)


def _sorted_entries(directory: Path) -> list[os.DirEntry]:
    with os.scandir(directory) as iterator:
        return sorted(iterator, key=lambda entry: entry.name)


def _walk_entries(
    entries: list[os.DirEntry],
    depth: int,
    max_depth: int,
    on_error: Optional[Callable[[Path, OSError], None]],
) -> Iterator[Path]:
    for entry in entries:
        path = Path(entry.path)
        yield path
        if depth >= max_depth:
            continue
        try:
            if not entry.is_dir(follow_symlinks=False):
                continue
            children = _sorted_entries(path)
        except OSError as exc:
            if on_error is not None:
                on_error(path, exc)
            else:
                LOGGER.debug("Skipping unreadable entry %s: %s", path, exc)
            continue
        yield from _walk_entries(children, depth + 1, max_depth, on_error)


def ensure_dir(path: Path) -> Path:
    """Create *path* (and parents) if needed and return it."""

    path.mkdir(parents=True, exist_ok=True)
    return path


def ends_with_parts(path: Path, *parts: str) -> bool:
    """Return ``True`` when the trailing components of *path* equal *parts*."""

    if not parts:
        return True
    tail = path.parts[-len(parts):]
    return tuple(tail) == parts


__all__ = ["ends_with_parts", "ensure_dir", "walk_dir"]
