import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make the sources importable without installing the package.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def make_hud(parent: Path, name: str) -> Path:
    """Create ``parent/name`` holding an empty descriptor file."""

    hud = parent / name
    hud.mkdir(parents=True, exist_ok=True)
    (hud / "info.vdf").touch()
    return hud


@pytest.fixture()
def content_root(tmp_path: Path) -> Path:
    """A ``custom`` folder with one active HUD and three parked ones."""

    root = tmp_path / "custom"
    huds = root / "huds"
    huds.mkdir(parents=True)
    make_hud(root, "toonhud")
    for name in ("rayshud", "budhud", "m0rehud"):
        make_hud(huds, name)
    return root
