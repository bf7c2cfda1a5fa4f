# tests/test_paths.py

from pathlib import Path

import weatherdash.paths as paths


def test_root_constants_are_paths():
    assert isinstance(paths.ROOT_DIR, Path)
    assert isinstance(paths.ASSETS, Path)
    assert isinstance(paths.LOGS, Path)


def test_stylesheet_ships_with_assets():
    assert paths.asset_path("style.css").exists()


def test_root_path_joins_correctly():
    p = paths.root_path("foo", "bar.txt")
    assert str(paths.ROOT_DIR) in str(p)
    assert p.name == "bar.txt"
    assert p.parent.name == "foo"


def test_ensure_dirs_creates_logs(monkeypatch, tmp_path):
    fake_logs = tmp_path / "logs"
    monkeypatch.setattr(paths, "LOGS", fake_logs)
    paths.ensure_dirs()
    assert fake_logs.is_dir()
