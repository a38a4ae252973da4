# src/gib/__init__.py

"""gib: select the modules of a multi-module build to rebuild from git changes.

Full developer API
==================
This package re-exports all non-private symbols from its submodules,
making it suitable for programmatic use from build integrations.
Anything prefixed with "_" is considered internal and may change.

Highlights:
    - main()                   → CLI entrypoint
    - resolve_configuration()  → Properties + make behavior → Configuration
    - create_path_map()        → Module root → module lookup
    - changed_modules()        → Changed files → owning modules
"""

from .actions import get_metadata
from .cli import main
from .config import (
    PROPERTIES,
    Configuration,
    ConfigurationError,
    DerivedModeConflictError,
    InvalidBooleanError,
    InvalidEnumValueError,
    InvalidPatternError,
    MakeBehavior,
    Property,
    PropertyKey,
    UnrecognizedPropertyError,
    UpstreamMode,
    check_properties,
    derive_build_downstream,
    derive_upstream_mode,
    is_enabled,
    resolve_configuration,
    resolve_property,
)
from .constants import DEFAULT_ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL, PROPERTY_PREFIX
from .logs import getAppLogger
from .meta import (
    PROGRAM_CONFIG,
    PROGRAM_DISPLAY,
    PROGRAM_ENV,
    PROGRAM_PACKAGE,
    PROGRAM_SCRIPT,
    Metadata,
)
from .modules import (
    Module,
    ModuleDescriptor,
    changed_modules,
    create_path_map,
    find_owning_module,
)
from .utils import normalize_module_path


__all__ = [  # noqa: RUF022
    # actions
    "get_metadata",
    # cli
    "main",
    # config
    "PROPERTIES",
    "Configuration",
    "ConfigurationError",
    "DerivedModeConflictError",
    "InvalidBooleanError",
    "InvalidEnumValueError",
    "InvalidPatternError",
    "MakeBehavior",
    "Property",
    "PropertyKey",
    "UnrecognizedPropertyError",
    "UpstreamMode",
    "check_properties",
    "derive_build_downstream",
    "derive_upstream_mode",
    "is_enabled",
    "resolve_configuration",
    "resolve_property",
    # constants
    "DEFAULT_ENV_LOG_LEVEL",
    "DEFAULT_LOG_LEVEL",
    "PROPERTY_PREFIX",
    # logs
    "getAppLogger",
    # meta
    "Metadata",
    "PROGRAM_CONFIG",
    "PROGRAM_DISPLAY",
    "PROGRAM_ENV",
    "PROGRAM_PACKAGE",
    "PROGRAM_SCRIPT",
    # modules
    "Module",
    "ModuleDescriptor",
    "changed_modules",
    "create_path_map",
    "find_owning_module",
    # utils
    "normalize_module_path",
]
