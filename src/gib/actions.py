# src/gib/actions.py
import re
import subprocess
from contextlib import suppress
from importlib import metadata
from pathlib import Path

from .logs import getAppLogger
from .meta import PROGRAM_PACKAGE, Metadata


def get_metadata() -> Metadata:
    """Return (version, commit) for this tool.

    - Installed → distribution metadata
    - Source checkout → read pyproject.toml
    Commit comes from git when available.
    """
    logger = getAppLogger()
    version = "unknown"
    commit = "unknown"
    root = Path(__file__).resolve().parents[2]

    try:
        version = metadata.version(PROGRAM_PACKAGE)
    except metadata.PackageNotFoundError:
        pyproject = root / "pyproject.toml"
        if pyproject.exists():
            logger.trace(f"trying to read metadata from {pyproject}")
            text = pyproject.read_text(encoding="utf-8")
            match = re.search(r'(?m)^\s*version\s*=\s*["\']([^"\']+)["\']', text)
            if match:
                version = match.group(1)

    # Try git for commit
    with suppress(OSError, subprocess.CalledProcessError):
        logger.trace("trying to get commit from git")
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],  # noqa: S607
            cwd=root,
            capture_output=True,
            text=True,
            check=True,
        )
        commit = result.stdout.strip()

    logger.trace(f"got package version {version} with commit {commit}")
    return Metadata(version, commit)
