# tests/5_core/test_utils_paths.py
"""Tests for gib.utils.utils_paths."""

from pathlib import Path

import gib.utils.utils_paths as mod_paths


def test_normalize_module_path_trailing_separator(tmp_path: Path) -> None:
    # --- execute ---
    with_sep = mod_paths.normalize_module_path(f"{tmp_path}/core/")
    without = mod_paths.normalize_module_path(tmp_path / "core")

    # --- validate ---
    assert with_sep == without
    assert with_sep.is_absolute()


def test_shorten_prefers_shortest_relative(tmp_path: Path) -> None:
    # --- setup ---
    target = tmp_path / "a" / "b" / "file.txt"

    # --- execute ---
    result = mod_paths.shorten_path_for_display(
        target, cwd=tmp_path, root=tmp_path / "a"
    )

    # --- validate ---
    assert result == str(Path("b") / "file.txt")


def test_shorten_same_dir_is_dot(tmp_path: Path) -> None:
    assert mod_paths.shorten_path_for_display(tmp_path, cwd=tmp_path) == "."


def test_shorten_falls_back_to_absolute(tmp_path: Path) -> None:
    # --- setup ---
    other = tmp_path / "x"

    # --- execute ---
    result = mod_paths.shorten_path_for_display(other, cwd=tmp_path / "y")

    # --- validate ---
    assert result == str(other.resolve())
