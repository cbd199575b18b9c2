"""Small helpers for reading and writing files under the content root."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from ..errors import HudIOError, SettingsLoadError


def read_json(path: Path) -> dict[str, Any]:
    """Return the JSON object stored at *path*."""

    try:
        with path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, ValueError) as exc:
        raise SettingsLoadError(f"Could not read {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise SettingsLoadError(f"Expected a JSON object in {path}")
    return data


def write_json(path: Path, data: dict[str, Any]) -> None:
    """Serialise *data* to *path* atomically."""

    payload = json.dumps(data, indent=2, ensure_ascii=False, sort_keys=True)
    write_text_atomic(path, payload + "\n")


def write_text_atomic(path: Path, text: str, *, encoding: str = "utf-8") -> None:
    """Replace *path* with *text* so readers never observe a partial file.

    The content is written to a sibling temporary file first and moved over
    the destination with :func:`os.replace`.
    """

    tmp_path: Path | None = None
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        tmp_path = Path(tmp_name)
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, path)
    except OSError as exc:
        if tmp_path is not None:
            try:
                tmp_path.unlink()
            except OSError:
                pass
        raise HudIOError(f"failed to write `{path.name}`: {exc}") from exc


__all__ = ["read_json", "write_json", "write_text_atomic"]
