# tests/5_core/test_create_path_map.py
"""Tests for gib.modules (path map and change attribution)."""

import os
import re
import sys
from pathlib import Path

import pytest

import gib.modules as mod_modules
from gib.utils import normalize_module_path
from tests.utils import make_module, make_module_tree


# ---------------------------------------------------------------------------
# create_path_map
# ---------------------------------------------------------------------------


def test_keys_are_absolute_and_resolved(tmp_path: Path) -> None:
    # --- setup ---
    modules = make_module_tree(tmp_path, "core", "web")

    # --- execute ---
    path_map = mod_modules.create_path_map(modules)

    # --- validate ---
    assert set(path_map) == {(tmp_path / "core").resolve(), (tmp_path / "web").resolve()}
    assert all(p.is_absolute() for p in path_map)
    assert path_map[(tmp_path / "core").resolve()] is modules[0]


def test_relative_basedir_is_made_absolute(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    # --- setup ---
    (tmp_path / "core").mkdir()
    monkeypatch.chdir(tmp_path)
    module = mod_modules.Module("core", Path("core"))

    # --- execute ---
    path_map = mod_modules.create_path_map([module])

    # --- validate ---
    assert list(path_map) == [(tmp_path / "core").resolve()]


@pytest.mark.parametrize(
    "spelling",
    ["{root}/core/", "{root}/core/.", "{root}/web/../core", "{root}/./core//"],
)
def test_spellings_normalize_to_same_key(tmp_path: Path, spelling: str) -> None:
    # --- setup ---
    make_module_tree(tmp_path, "core", "web")
    plain = mod_modules.Module("core", tmp_path / "core")
    odd = mod_modules.Module("core-odd", Path(spelling.format(root=tmp_path)))

    # --- execute ---
    plain_map = mod_modules.create_path_map([plain])
    odd_map = mod_modules.create_path_map([odd])

    # --- validate ---
    assert list(plain_map) == list(odd_map)


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges")
def test_symlink_normalizes_to_target(tmp_path: Path) -> None:
    # --- setup ---
    real = make_module(tmp_path, "real")
    link = tmp_path / "link"
    os.symlink(real.basedir, link)
    via_link = mod_modules.Module("linked", link)

    # --- execute ---
    path_map = mod_modules.create_path_map([via_link])

    # --- validate ---
    assert list(path_map) == [normalize_module_path(real.basedir)]


def test_accepts_any_descriptor(tmp_path: Path) -> None:
    """Only name and basedir are required from the orchestrator's model."""

    class Project:
        def __init__(self, name: str, basedir: str) -> None:
            self.name = name
            self.basedir = basedir

    # --- setup ---
    project = Project("api", str(tmp_path))

    # --- execute ---
    path_map = mod_modules.create_path_map([project])

    # --- validate ---
    assert path_map[tmp_path.resolve()] is project


# ---------------------------------------------------------------------------
# find_owning_module / changed_modules
# ---------------------------------------------------------------------------


def test_find_owning_module_picks_closest_root(tmp_path: Path) -> None:
    # --- setup ---
    parent, child = make_module_tree(tmp_path, "parent", "parent/child")
    path_map = mod_modules.create_path_map([parent, child])
    changed = tmp_path / "parent" / "child" / "src" / "Main.java"

    # --- execute and validate ---
    assert mod_modules.find_owning_module(changed, path_map) is child
    assert mod_modules.find_owning_module(tmp_path / "parent" / "pom.xml", path_map) is (
        parent
    )
    assert mod_modules.find_owning_module(tmp_path / "README.md", path_map) is None


def test_changed_modules_relative_and_deduplicated(tmp_path: Path) -> None:
    # --- setup ---
    core, web = make_module_tree(tmp_path, "core", "web")
    path_map = mod_modules.create_path_map([core, web])

    # --- execute ---
    result = mod_modules.changed_modules(
        ["web/a.py", "core/b.py", "web/c.py", "README.md"],
        path_map,
        root=tmp_path,
    )

    # --- validate ---
    assert result == [web, core]


def test_changed_modules_absolute_paths(tmp_path: Path) -> None:
    # --- setup ---
    (core,) = make_module_tree(tmp_path, "core")
    path_map = mod_modules.create_path_map([core])

    # --- execute ---
    result = mod_modules.changed_modules(
        [tmp_path / "core" / "x.txt"], path_map, root=tmp_path / "elsewhere"
    )

    # --- validate ---
    assert result == [core]


def test_changed_modules_exclude(tmp_path: Path) -> None:
    # --- setup ---
    core, docs = make_module_tree(tmp_path, "core", "docs")
    path_map = mod_modules.create_path_map([core, docs])

    # --- execute ---
    result = mod_modules.changed_modules(
        ["docs/index.md", "core/README.md", "core/src/a.py"],
        path_map,
        root=tmp_path,
        exclude=re.compile(r"(^docs/|\.md$)"),
    )

    # --- validate ---
    assert result == [core]


def test_changed_modules_nothing_changed(tmp_path: Path) -> None:
    # --- setup ---
    path_map = mod_modules.create_path_map(make_module_tree(tmp_path, "core"))

    # --- execute and validate ---
    assert mod_modules.changed_modules([], path_map, root=tmp_path) == []
