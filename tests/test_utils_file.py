"""Tests for portablesettings.utils.file helpers."""

import sys
from pathlib import Path

import pytest

from portablesettings.utils.file import application_directory, remove_file, write_text_atomic


def test_application_directory_frozen(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "frozen", True, raising=False)
    monkeypatch.setattr(sys, "executable", str(tmp_path / "app.exe"))
    assert application_directory() == tmp_path.resolve()


def test_application_directory_script(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delattr(sys, "frozen", raising=False)
    monkeypatch.setattr(sys, "argv", [str(tmp_path / "run.py")])
    assert application_directory() == tmp_path.resolve()


def test_application_directory_interactive(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delattr(sys, "frozen", raising=False)
    monkeypatch.setattr(sys, "argv", [""])
    monkeypatch.chdir(tmp_path)
    assert application_directory() == Path.cwd()


def test_write_text_atomic_replaces_content(tmp_path: Path) -> None:
    target = tmp_path / "portable.config"
    target.write_text("old", encoding="utf-8")

    write_text_atomic(target, "new")

    assert target.read_text(encoding="utf-8") == "new"
    assert [p.name for p in tmp_path.iterdir()] == ["portable.config"]


def test_remove_file(tmp_path: Path) -> None:
    target = tmp_path / "portable.config"
    target.write_text("x", encoding="utf-8")

    assert remove_file(target) is True
    assert not target.exists()
    assert remove_file(target) is False
