from __future__ import annotations

import random
import tempfile
from pathlib import Path

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required for the settings layer", exc_type=ImportError)

from typer.testing import CliRunner

from hudmanager.cli import app
from hudmanager.devtools import generate_test_huds

runner = CliRunner()


def _invoke(content_root: Path, tmp_path: Path, *args: str):
    return runner.invoke(
        app,
        ["--root", str(content_root), "--settings", str(tmp_path / "settings.json"), *args],
    )


def test_list_shows_huds(content_root: Path, tmp_path: Path) -> None:
    result = _invoke(content_root, tmp_path, "list")
    assert result.exit_code == 0, result.output
    for name in ("budhud", "m0rehud", "rayshud", "toonhud"):
        assert name in result.output


def test_activate_command(content_root: Path, tmp_path: Path) -> None:
    result = _invoke(content_root, tmp_path, "activate", "rayshud")
    assert result.exit_code == 0, result.output
    assert (content_root / "rayshud").is_dir()
    assert (content_root / "huds" / "toonhud").is_dir()


def test_activate_active_hud_fails(content_root: Path, tmp_path: Path) -> None:
    result = _invoke(content_root, tmp_path, "activate", "toonhud")
    assert result.exit_code == 1
    assert "hud already active" in result.output


def test_favorite_and_unfavorite(content_root: Path, tmp_path: Path) -> None:
    favorites = content_root / "huds" / "favorites.txt"
    assert _invoke(content_root, tmp_path, "favorite", "rayshud").exit_code == 0
    assert _invoke(content_root, tmp_path, "favorite", "budhud").exit_code == 0
    assert favorites.read_text(encoding="utf-8") == "budhud\nrayshud"

    assert _invoke(content_root, tmp_path, "unfavorite", "budhud").exit_code == 0
    assert favorites.read_text(encoding="utf-8") == "rayshud"


def test_favorite_unknown_hud(content_root: Path, tmp_path: Path) -> None:
    result = _invoke(content_root, tmp_path, "favorite", "nohud")
    assert result.exit_code == 1
    assert "nohud" in result.output


def test_search_prints_matches(content_root: Path, tmp_path: Path) -> None:
    result = _invoke(content_root, tmp_path, "search", "toon")
    assert result.exit_code == 0, result.output
    assert "toonhud" in result.output.splitlines()
    assert "rayshud" not in result.output.splitlines()


def test_search_without_results(content_root: Path, tmp_path: Path) -> None:
    result = _invoke(content_root, tmp_path, "search", "zzzznomatch")
    assert result.exit_code == 1
    assert "no results" in result.output


def test_reveal_launches_folder(content_root: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    launched = []
    monkeypatch.setattr("typer.launch", lambda target, **_: launched.append(target) or 0)
    assert _invoke(content_root, tmp_path, "reveal").exit_code == 0
    assert _invoke(content_root, tmp_path, "reveal", "budhud").exit_code == 0
    root = content_root.resolve()
    assert launched == [str(root / "toonhud"), str(root / "huds" / "budhud")]


def test_missing_root_is_reported(tmp_path: Path) -> None:
    result = _invoke(tmp_path / "missing", tmp_path, "list")
    assert result.exit_code == 1
    assert "Content root does not exist" in result.output


def test_gen_test_huds_command(tmp_path: Path) -> None:
    result = runner.invoke(app, ["gen-test-huds", "--target", str(tmp_path), "--count", "5"])
    assert result.exit_code == 0, result.output
    huds = list((tmp_path / "custom" / "huds").iterdir())
    assert 1 <= len(huds) <= 5
    assert all((hud / "info.vdf").is_file() for hud in huds)
    assert f"Created {len(huds)} HUD folder(s)" in result.output


def test_gen_test_huds_defaults_to_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["gen-test-huds", "-n", "3"])
    assert result.exit_code == 0, result.output
    assert any((tmp_path / "custom" / "huds").iterdir())


def test_generate_test_huds_names(tmp_path: Path) -> None:
    created = generate_test_huds(tmp_path, 10, rng=random.Random(7))
    assert 1 <= len(created) <= 10
    assert len(set(created)) == len(created)
    assert all(path.name.endswith("-hud") for path in created)
    assert all(path.parent == tmp_path / "custom" / "huds" for path in created)


def test_generate_test_huds_skips_existing_names(tmp_path: Path) -> None:
    first = generate_test_huds(tmp_path, 10, rng=random.Random(3))
    again = generate_test_huds(tmp_path, 10, rng=random.Random(3))
    assert first
    assert again == []
    assert len(list((tmp_path / "custom" / "huds").iterdir())) == len(first)


def test_bad_favorites_file_does_not_block_commands(content_root: Path, tmp_path: Path) -> None:
    favorites = content_root / "huds" / "favorites.txt"
    favorites.write_bytes(b"\xff\xfe")

    result = _invoke(content_root, tmp_path, "list")
    assert result.exit_code == 0, result.output
    for name in ("budhud", "m0rehud", "rayshud", "toonhud"):
        assert name in result.output

    result = _invoke(content_root, tmp_path, "favorite", "rayshud")
    assert result.exit_code == 0, result.output
    assert favorites.read_text(encoding="utf-8") == "rayshud"


def test_io_failure_prints_error(
    content_root: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    real_mkstemp = tempfile.mkstemp

    def refuse(*args, **kwargs):
        if "favorites" in kwargs.get("prefix", ""):
            raise PermissionError("read-only")
        return real_mkstemp(*args, **kwargs)

    monkeypatch.setattr("tempfile.mkstemp", refuse)
    result = _invoke(content_root, tmp_path, "favorite", "rayshud")
    assert result.exit_code == 1
    assert "Error: failed to write `favorites.txt`" in result.output
    assert "Unexpected" not in result.output


def test_blank_search_lists_everything(content_root: Path, tmp_path: Path) -> None:
    result = _invoke(content_root, tmp_path, "search", "   ")
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    for name in ("budhud", "m0rehud", "rayshud", "toonhud"):
        assert name in lines
