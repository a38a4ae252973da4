# src/gib/modules.py
"""Map build modules to their root directories.

The path map lets a changed file be attributed to the module that owns it:
walk up from the file until a module root is found.
"""

import os
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, TypeVar

from .logs import getAppLogger
from .utils import normalize_module_path


class ModuleDescriptor(Protocol):
    """What the index needs from the orchestrator's module model."""

    @property
    def name(self) -> str: ...

    @property
    def basedir(self) -> str | os.PathLike[str]: ...


@dataclass(frozen=True)
class Module:
    """Plain module descriptor for callers without their own project model."""

    name: str
    basedir: Path
    dependencies: tuple[str, ...] = field(default=())


M = TypeVar("M", bound=ModuleDescriptor)


def create_path_map(modules: Iterable[M]) -> dict[Path, M]:
    """Index modules by their normalized root directory.

    Two modules normalizing to the same root is a caller error; the last
    one wins.
    """
    logger = getAppLogger()
    path_map: dict[Path, M] = {}
    for module in modules:
        path = normalize_module_path(module.basedir)
        logger.trace(f"[create_path_map] {module.name} -> {path}")
        path_map[path] = module
    return path_map


def find_owning_module(path: Path, path_map: Mapping[Path, M]) -> M | None:
    """Return the module whose root is the closest ancestor of ``path``."""
    current = normalize_module_path(path)
    while True:
        if current in path_map:
            return path_map[current]
        parent = current.parent
        if parent == current:  # Reached filesystem root
            return None
        current = parent


def changed_modules(
    changed_paths: Iterable[str | os.PathLike[str]],
    path_map: Mapping[Path, M],
    *,
    root: Path,
    exclude: re.Pattern[str] | None = None,
) -> list[M]:
    """Attribute changed files to their owning modules.

    Args:
        changed_paths: Changed files, absolute or relative to ``root``.
        path_map: Result of create_path_map().
        root: Working tree root used for relative paths and for ``exclude``.
        exclude: Files whose root-relative POSIX path contains a match are
            ignored.

    Returns:
        Owning modules in first-seen order, without duplicates.
    """
    logger = getAppLogger()
    root = normalize_module_path(root)
    found: dict[int, M] = {}
    for changed in changed_paths:
        path = normalize_module_path(root / changed)
        if exclude is not None:
            try:
                rel = path.relative_to(root).as_posix()
            except ValueError:
                rel = path.as_posix()
            if exclude.search(rel):
                logger.debug("Ignoring excluded change: %s", rel)
                continue
        module = find_owning_module(path, path_map)
        if module is None:
            logger.debug("Change outside of any module: %s", path)
            continue
        found.setdefault(id(module), module)
    return list(found.values())
