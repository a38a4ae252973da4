# src/gib/config/config_loader.py
"""Collect raw properties from the command line and from pyproject.toml."""

import tomllib
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from gib.constants import DEFAULT_PYPROJECT_NAME, PROPERTY_PREFIX
from gib.logs import getAppLogger
from gib.meta import PROGRAM_CONFIG


def parse_definitions(definitions: Iterable[str] | None) -> dict[str, str]:
    """Turn ``-D key=value`` definitions into an overrides mapping.

    ``-D key`` alone means ``key=true``, like a bare system property.
    Later definitions win over earlier ones.
    """
    overrides: dict[str, str] = {}
    for definition in definitions or ():
        key, sep, value = definition.partition("=")
        key = key.strip()
        if not key:
            xmsg = f"Invalid property definition '{definition}': missing key"
            raise ValueError(xmsg)
        overrides[key] = value if sep else "true"
    return overrides


def find_pyproject(cwd: Path, explicit: str | None = None) -> Path | None:
    """Locate the top-level project's pyproject.toml.

    Search order:
      1. Explicit path from CLI (--pyproject)
      2. cwd and its parents, returning the closest match
    """
    logger = getAppLogger()

    if explicit:
        path = Path(explicit).expanduser().resolve()
        logger.trace(f"[find_pyproject] Checking explicit path: {path}")
        if not path.exists():
            xmsg = f"Specified pyproject file not found: {path}"
            raise FileNotFoundError(xmsg)
        if path.is_dir():
            xmsg = f"Specified pyproject path is a directory, not a file: {path}"
            raise ValueError(xmsg)
        return path

    current = cwd
    while True:
        candidate = current / DEFAULT_PYPROJECT_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:  # Reached filesystem root
            break
        current = parent

    logger.trace(f"[find_pyproject] No {DEFAULT_PYPROJECT_NAME} in {cwd} or parents")
    return None


def _stringify(key: str, value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    if isinstance(value, list):
        return ",".join(_stringify(key, item) for item in value)  # pyright: ignore[reportUnknownVariableType]
    xmsg = (
        f"Unsupported value for [tool.{PROGRAM_CONFIG}] key '{key}': "
        f"{type(value).__name__}"
    )
    raise TypeError(xmsg)


def load_project_properties(pyproject_path: Path) -> dict[str, str]:
    """Read the ``[tool.gib]`` table as project-level properties.

    Keys may omit the ``gib.`` prefix; values are converted to the string
    form the resolver expects (booleans as ``true``/``false``, lists joined
    with commas).
    """
    logger = getAppLogger()
    try:
        with pyproject_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        xmsg = f"Error while loading '{pyproject_path.name}': {e}"
        raise ValueError(xmsg) from e

    table = data.get("tool", {}).get(PROGRAM_CONFIG, {})
    if not isinstance(table, dict):
        xmsg = f"[tool.{PROGRAM_CONFIG}] in {pyproject_path.name} must be a table"
        raise TypeError(xmsg)

    properties: dict[str, str] = {}
    for key, value in table.items():  # pyright: ignore[reportUnknownVariableType]
        full_key = key if key.startswith(PROPERTY_PREFIX) else PROPERTY_PREFIX + key
        properties[full_key] = _stringify(full_key, value)

    logger.trace(
        f"[load_project_properties] {len(properties)} propert(ies) "
        f"from {pyproject_path}"
    )
    return properties
