# src/gib/meta.py
"""Program identity shared by the CLI, the logger and the property prefix."""

from dataclasses import dataclass


PROGRAM_PACKAGE = "gib"
PROGRAM_SCRIPT = "gib"
PROGRAM_DISPLAY = "gib (git incremental build)"
PROGRAM_ENV = "GIB"
PROGRAM_CONFIG = "gib"  # [tool.gib] table in pyproject.toml


@dataclass(frozen=True)
class Metadata:
    version: str
    commit: str
