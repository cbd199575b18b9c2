"""Developer helpers for building throwaway HUD layouts."""

from __future__ import annotations

import random
from pathlib import Path
from typing import List, Optional

from .config import CONTENT_ROOT_NAME, DESCRIPTOR_NAME, HUDS_DIR_NAME, TEST_HUD_COUNT

_ADJECTIVES = (
    "amber", "brave", "calm", "dusty", "eager", "fuzzy", "gentle", "hollow",
    "icy", "jolly", "keen", "lucky", "misty", "noble", "odd", "proud",
    "quiet", "rusty", "shiny", "tidy", "urban", "vivid", "wild", "young",
)
_NOUNS = (
    "anvil", "badger", "canyon", "dagger", "ember", "falcon", "glacier",
    "harbor", "island", "jackal", "kettle", "lantern", "meadow", "needle",
    "otter", "pepper", "quarry", "rocket", "saddle", "thistle", "valley",
    "walrus", "yonder", "zephyr",
)


def generate_test_huds(
    base: Path,
    count: int = TEST_HUD_COUNT,
    *,
    rng: Optional[random.Random] = None,
) -> List[Path]:
    """Create up to *count* HUD folders under ``base/custom/huds`` and return them.

    Each folder is named ``<adjective>-<noun>-hud`` and holds an empty
    descriptor file.  Names that already exist are left alone and are not
    part of the returned list.
    """

    rng = rng or random.Random()
    huds_dir = base / CONTENT_ROOT_NAME / HUDS_DIR_NAME
    huds_dir.mkdir(parents=True, exist_ok=True)

    created: List[Path] = []
    for _ in range(count):
        name = f"{rng.choice(_ADJECTIVES)}-{rng.choice(_NOUNS)}-hud"
        hud = huds_dir / name
        if hud.exists():
            continue
        hud.mkdir()
        (hud / DESCRIPTOR_NAME).touch()
        created.append(hud)
    return created


__all__ = ["generate_test_huds"]
