"""Locate the game's ``custom`` folder from where the program runs."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from ..config import CONTENT_ROOT_NAME, HUDS_DIR_NAME
from ..errors import LayoutError
from ..utils.pathutils import ends_with_parts


def current_executable() -> Path:
    """Return the path of the running program.

    Frozen builds report the bundled executable; otherwise the launched
    script stands in for it.
    """

    if getattr(sys, "frozen", False):
        return Path(sys.executable)
    return Path(sys.argv[0]).resolve()


def resolve_content_root(executable: Optional[Path] = None) -> Path:
    """Return the content root that holds the program.

    The program must sit in ``custom`` or in ``custom/huds``.  Only path
    components are compared; the filesystem is not touched.
    """

    exe = executable if executable is not None else current_executable()
    directory = exe.parent

    if ends_with_parts(directory, CONTENT_ROOT_NAME, HUDS_DIR_NAME):
        return directory.parent
    if ends_with_parts(directory, CONTENT_ROOT_NAME):
        return directory
    raise LayoutError(
        f"exe must be in `{CONTENT_ROOT_NAME}` or `{CONTENT_ROOT_NAME}/{HUDS_DIR_NAME}`"
    )


def resolve_root(override: Optional[str | Path] = None, executable: Optional[Path] = None) -> Path:
    """Return *override* when configured, otherwise the detected content root."""

    if override in (None, ""):
        return resolve_content_root(executable)
    candidate = Path(override).expanduser()
    if not candidate.is_dir():
        raise LayoutError(f"Content root does not exist: {candidate}")
    return candidate.resolve()


__all__ = ["current_executable", "resolve_content_root", "resolve_root"]
