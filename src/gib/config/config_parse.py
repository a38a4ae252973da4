# src/gib/config/config_parse.py
"""Typed parsing of raw property strings."""

import re
from collections.abc import Iterable

from gib.constants import BOOLEAN_CHOICES

from .config_errors import (
    InvalidBooleanError,
    InvalidEnumValueError,
    InvalidPatternError,
)


_PATTERN_SEPARATORS = re.compile(r"[,\s]+")


def parse_bool(key: str, raw: str) -> bool:
    """Parse 'true' or 'false' (case-sensitive)."""
    if raw == "true":
        return True
    if raw == "false":
        return False
    raise InvalidBooleanError(key, raw, BOOLEAN_CHOICES)


def parse_list(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated value into trimmed, non-empty items."""
    if not raw:
        return ()
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def parse_pattern(key: str, raw: str | None) -> re.Pattern[str] | None:
    if raw is None or not raw.strip():
        return None
    try:
        return re.compile(raw)
    except re.error as e:
        raise InvalidPatternError(key, raw, str(e)) from e


def parse_patterns(key: str, raw: str | None) -> tuple[re.Pattern[str], ...]:
    """Compile each comma/whitespace-separated token as a regular expression."""
    if not raw:
        return ()
    patterns: list[re.Pattern[str]] = []
    for token in _PATTERN_SEPARATORS.split(raw.strip()):
        if not token:
            continue
        try:
            patterns.append(re.compile(token))
        except re.error as e:
            raise InvalidPatternError(key, token, str(e)) from e
    return tuple(patterns)


def parse_args_map(raw: str | None) -> dict[str, str]:
    """Parse whitespace-separated ``key=value`` tokens.

    ``"x=true a=false"`` -> ``{"x": "true", "a": "false"}``; a bare ``key``
    maps to an empty string.
    """
    if not raw:
        return {}
    args: dict[str, str] = {}
    for token in raw.split():
        name, _, value = token.partition("=")
        args[name] = value
    return args


def parse_choice(key: str, raw: str, choices: Iterable[str]) -> str:
    """Return the lower-cased literal if it is one of ``choices``."""
    allowed = tuple(choices)
    value = raw.strip().lower()
    if value not in allowed:
        raise InvalidEnumValueError(key, raw, allowed)
    return value
