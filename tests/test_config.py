"""Tests for resource path resolution."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from floorelevation.config import DEFAULT_SHARED_PARAMETER_FILE, get_writable_resource_path


@pytest.fixture
def bundled_file(tmp_path: Path) -> Path:
    bundle = tmp_path / "bundle"
    bundle.mkdir()
    path = bundle / "params.txt"
    path.write_text("bundled", encoding="utf-8")
    return path


class TestWritableResourcePath:
    def test_development_mode_uses_file_in_place(self, monkeypatch) -> None:
        monkeypatch.delattr(sys, "_MEIPASS", raising=False)
        assert get_writable_resource_path(DEFAULT_SHARED_PARAMETER_FILE) == DEFAULT_SHARED_PARAMETER_FILE

    def test_frozen_build_copies_to_user_folder(self, monkeypatch, tmp_path: Path, bundled_file: Path) -> None:
        monkeypatch.setattr(sys, "_MEIPASS", str(bundled_file.parent), raising=False)
        user_dir = tmp_path / "user"

        path = get_writable_resource_path(str(bundled_file), user_dir=str(user_dir))

        assert Path(path) == user_dir / "params.txt"
        assert Path(path).read_text(encoding="utf-8") == "bundled"

    def test_frozen_build_keeps_existing_user_copy(self, monkeypatch, tmp_path: Path, bundled_file: Path) -> None:
        monkeypatch.setattr(sys, "_MEIPASS", str(bundled_file.parent), raising=False)
        user_dir = tmp_path / "user"
        user_dir.mkdir()
        (user_dir / "params.txt").write_text("edited", encoding="utf-8")

        path = get_writable_resource_path(str(bundled_file), user_dir=str(user_dir))

        assert Path(path).read_text(encoding="utf-8") == "edited"
