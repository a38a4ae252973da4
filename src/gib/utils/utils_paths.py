# src/gib/utils/utils_paths.py


import os
from pathlib import Path


def normalize_module_path(path: str | os.PathLike[str]) -> Path:
    """Return the canonical form of a module root.

    Absolute, with ``.``/``..`` collapsed and symlinks resolved, so two
    spellings of the same directory compare equal. Trailing separators
    are dropped by Path itself.
    """
    return Path(path).expanduser().resolve()


def shorten_path_for_display(
    path: Path | str,
    *,
    cwd: Path | None = None,
    root: Path | None = None,
) -> str:
    """Shorten an absolute path for display purposes.

    Tries to make the path relative to cwd first, then root, and picks
    the shortest result. If neither works, returns the absolute path as a string.
    """
    path_obj = Path(path).resolve()

    candidates: list[str] = []
    for base in (cwd, root):
        if base is None:
            continue
        try:
            rel = str(path_obj.relative_to(Path(base).resolve()))
        except ValueError:
            continue
        candidates.append(rel or ".")

    if candidates:
        return min(candidates, key=len)

    return str(path_obj)
