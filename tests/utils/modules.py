# tests/utils/modules.py

from pathlib import Path

from gib.modules import Module


def make_module(root: Path, name: str, *dependencies: str) -> Module:
    """Create ``root/name`` on disk and return its descriptor."""
    basedir = root / name
    basedir.mkdir(parents=True, exist_ok=True)
    return Module(name=name, basedir=basedir, dependencies=dependencies)


def make_module_tree(root: Path, *names: str) -> list[Module]:
    """Create one module directory per name (names may be nested, a/b)."""
    return [make_module(root, name) for name in names]
