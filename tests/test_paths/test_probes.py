"""Тесты проверок файловой системы, abs_path и home_dir."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

import ufile.paths
from ufile.paths import abs_path, file_exists, home_dir, is_dir, path_exists, user_home_dir


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    path = tmp_path / "sample.txt"
    path.write_text("data\n", encoding="utf-8")
    return path


def test_probes_on_file(sample_file: Path) -> None:
    assert file_exists(sample_file)
    assert path_exists(str(sample_file))
    assert not is_dir(sample_file)


def test_probes_on_folder(tmp_path: Path) -> None:
    assert not file_exists(tmp_path)
    assert path_exists(tmp_path)
    assert is_dir(str(tmp_path))


def test_probes_return_false_for_missing_paths(tmp_path: Path) -> None:
    missing = tmp_path / "nope" / "missing.ini"
    assert not file_exists(missing)
    assert not path_exists(missing)
    assert not is_dir(missing)


def test_probes_return_false_for_invalid_paths() -> None:
    assert not file_exists("bad\0name")
    assert not path_exists("bad\0name")
    assert not is_dir("bad\0name")


def test_abs_path_resolves_relative_names() -> None:
    assert abs_path("some/./file.txt") == os.path.join(os.getcwd(), "some", "file.txt")


def test_abs_path_falls_back_to_normalized_path(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken_abspath(path: str) -> str:
        raise FileNotFoundError("current directory was removed")

    monkeypatch.setattr(ufile.paths.os.path, "abspath", broken_abspath)
    assert abs_path("a/./b/../c") == os.path.normpath("a/./b/../c")


def test_home_dir_matches_user_home() -> None:
    assert home_dir() == str(Path.home())


def test_home_dir_falls_back_to_current_folder(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(ufile.paths, "user_home_dir", lambda: None)
    assert home_dir() == os.getcwd()


def test_user_home_dir_is_none_when_unresolvable(monkeypatch: pytest.MonkeyPatch) -> None:
    def no_home() -> Path:
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(ufile.paths.Path, "home", staticmethod(no_home))
    assert user_home_dir() is None
