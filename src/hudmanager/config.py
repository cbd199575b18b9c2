"""Default configuration values for hudmanager."""

from __future__ import annotations

from typing import Final

# ``CONTENT_ROOT_NAME`` is the game's user-content folder. The active HUD lives
# directly beneath it while every other HUD rests in ``HUDS_DIR_NAME``.
CONTENT_ROOT_NAME: Final[str] = "custom"
HUDS_DIR_NAME: Final[str] = "huds"

# A directory qualifies as a HUD when it contains this file. Its contents are
# never read.
DESCRIPTOR_NAME: Final[str] = "info.vdf"
FAVORITES_FILE_NAME: Final[str] = "favorites.txt"

# ``walk_dir`` depth used by the scanner: ``custom/<hud>/info.vdf`` sits at
# depth two relative to the content root.
SCAN_MAX_DEPTH: Final[int] = 2

# Search results scoring at least this fraction of the best score are kept.
SEARCH_RELATIVE_THRESHOLD: Final[float] = 0.8

SETTINGS_DIR_NAME: Final[str] = "hudmanager"
SETTINGS_FILE_NAME: Final[str] = "settings.json"

TEST_HUD_COUNT: Final[int] = 50
