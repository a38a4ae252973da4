# src/gib/config/config_errors.py
"""Errors raised while resolving properties into a Configuration.

All of them are ValueErrors so the CLI reports them as controlled
termination (exit code 1) rather than internal errors.
"""

from collections.abc import Iterable


class ConfigurationError(ValueError):
    """Base class for every property resolution failure."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class UnrecognizedPropertyError(ConfigurationError):
    """A key carries the reserved prefix but names no known property."""

    def __init__(self, key: str, valid_names: Iterable[str], hint: str | None) -> None:
        valid = list(valid_names)
        msg = f"Unsupported property: {key}"
        if hint:
            msg += f"\nHint: did you mean {hint}?"
        msg += "\nValid properties: " + ", ".join(valid)
        super().__init__(msg, key=key)
        self.hint = hint
        self.valid_names = valid


class InvalidEnumValueError(ConfigurationError):
    """A property expects one of a fixed set of literals."""

    def __init__(self, key: str, value: str, choices: Iterable[str]) -> None:
        self.value = value
        self.choices = tuple(choices)
        msg = (
            f"Invalid value '{value}' for property {key}; "
            f"expected one of: {', '.join(self.choices)}"
        )
        super().__init__(msg, key=key)


class InvalidBooleanError(InvalidEnumValueError):
    """A boolean property got something other than 'true' or 'false'."""


class InvalidPatternError(ConfigurationError):
    """A pattern property holds a malformed regular expression.

    The underlying ``re.error`` is chained as ``__cause__``.
    """

    def __init__(self, key: str, pattern: str, reason: str) -> None:
        self.pattern = pattern
        super().__init__(
            f"Invalid regular expression '{pattern}' in property {key}: {reason}",
            key=key,
        )


class DerivedModeConflictError(ConfigurationError):
    """The refinement property of a derived mode holds an invalid literal.

    The InvalidEnumValueError describing the literal is chained as ``__cause__``.
    """
