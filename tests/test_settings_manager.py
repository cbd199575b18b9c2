from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

pytest.importorskip("PySide6", reason="PySide6 is required for settings tests", exc_type=ImportError)
pytest.importorskip("PySide6.QtWidgets", reason="Qt widgets not available", exc_type=ImportError)
pytest.importorskip("PySide6.QtTest", reason="Qt test helpers not available", exc_type=ImportError)

from PySide6.QtTest import QSignalSpy
from PySide6.QtWidgets import QApplication

from hudmanager.errors import SettingsLoadError, SettingsValidationError
from hudmanager.settings.manager import SettingsManager, default_settings_path


@pytest.fixture(scope="module")
def qapp() -> QApplication:
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


def test_settings_manager_roundtrip(tmp_path: Path, qapp: QApplication) -> None:
    settings_path = tmp_path / "settings.json"
    manager = SettingsManager(path=settings_path)
    manager.load()
    assert settings_path.exists()
    assert manager.get("content_root") is None
    assert manager.get("search.threshold") == 0.8
    spy = QSignalSpy(manager.settingsChanged)
    root = tmp_path / "custom"
    manager.set("content_root", root)
    qapp.processEvents()
    assert spy.count() == 1
    assert manager.get("content_root") == str(root)
    stored = json.loads(settings_path.read_text(encoding="utf-8"))
    assert stored["content_root"] == str(root)


def test_settings_manager_nested_updates_preserve_defaults(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    manager = SettingsManager(path=settings_path)
    manager.load()
    manager.set("search.threshold", 0.5)
    assert manager.get("search.threshold") == 0.5
    assert manager.get("logging.level") == "INFO"
    assert manager.get("missing.key", "fallback") == "fallback"


def test_settings_manager_merges_partial_file(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(json.dumps({"logging": {"level": "debug"}}), encoding="utf-8")
    manager = SettingsManager(path=settings_path)
    manager.load()
    assert manager.get("logging.level") == "DEBUG"
    assert manager.get("search.threshold") == 0.8
    assert manager.get("schema") == "hudmanager/settings@1"


def test_settings_manager_rejects_invalid_values(tmp_path: Path) -> None:
    manager = SettingsManager(path=tmp_path / "settings.json")
    manager.load()
    with pytest.raises(SettingsValidationError):
        manager.set("search.threshold", 1.5)
    assert manager.get("search.threshold") == 0.8


def test_settings_manager_rejects_broken_json(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    settings_path.write_text("{not json", encoding="utf-8")
    with pytest.raises(SettingsLoadError):
        SettingsManager(path=settings_path).load()


def test_default_settings_path_honours_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    if os.name == "nt":
        pytest.skip("XDG paths only apply on POSIX")
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert default_settings_path() == tmp_path / "hudmanager" / "settings.json"
