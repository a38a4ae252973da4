# src/gib/utils/__init__.py

from .utils_paths import normalize_module_path, shorten_path_for_display


__all__ = [  # noqa: RUF022
    # utils_paths
    "normalize_module_path",
    "shorten_path_for_display",
]
