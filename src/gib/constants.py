# src/gib/constants.py
"""Central constants used across the project."""


# --- env keys ---
DEFAULT_ENV_LOG_LEVEL: str = "LOG_LEVEL"

# --- program defaults ---
DEFAULT_LOG_LEVEL: str = "info"
LEVEL_ORDER: list[str] = [
    "trace",
    "debug",
    "info",
    "warning",
    "error",
    "critical",
    "silent",
]

# --- property keys ---
# every recognized property is namespaced under this prefix
PROPERTY_PREFIX: str = "gib."

# --- literal sets ---
# buildUpstream / buildDownstream
MODE_NEVER: frozenset[str] = frozenset({"never", "false"})
MODE_ALWAYS: frozenset[str] = frozenset({"always", "true"})
BUILD_MODE_CHOICES: tuple[str, ...] = ("never", "false", "always", "true", "derived")

# buildUpstreamMode
UPSTREAM_MODE_CHANGED: str = "changed"
UPSTREAM_MODE_IMPACTED: str = "impacted"
UPSTREAM_MODE_CHOICES: tuple[str, ...] = (UPSTREAM_MODE_CHANGED, UPSTREAM_MODE_IMPACTED)

BOOLEAN_CHOICES: tuple[str, ...] = ("true", "false")

# --- pyproject ---
DEFAULT_PYPROJECT_NAME: str = "pyproject.toml"
