# src/gib/config/__init__.py

"""Property resolution for gib.

This package turns raw properties and the orchestrator's make behavior into
an immutable Configuration.
"""

from .config_errors import (
    ConfigurationError,
    DerivedModeConflictError,
    InvalidBooleanError,
    InvalidEnumValueError,
    InvalidPatternError,
    UnrecognizedPropertyError,
)
from .config_loader import find_pyproject, load_project_properties, parse_definitions
from .config_parse import (
    parse_args_map,
    parse_bool,
    parse_choice,
    parse_list,
    parse_pattern,
    parse_patterns,
)
from .config_properties import (
    PROPERTIES,
    VALID_NAMES,
    Property,
    PropertyKey,
    check_properties,
    resolve_property,
)
from .config_resolve import (
    MakeBehaviorProbe,
    derive_build_downstream,
    derive_upstream_mode,
    is_enabled,
    resolve_configuration,
)
from .config_types import (
    Configuration,
    ConfigurationDict,
    DownstreamInputs,
    MakeBehavior,
    MakeBehaviorAccessor,
    ProjectProperties,
    RawOverrides,
    UpstreamInputs,
    UpstreamMode,
)


__all__ = [  # noqa: RUF022
    # config_errors
    "ConfigurationError",
    "DerivedModeConflictError",
    "InvalidBooleanError",
    "InvalidEnumValueError",
    "InvalidPatternError",
    "UnrecognizedPropertyError",
    # config_loader
    "find_pyproject",
    "load_project_properties",
    "parse_definitions",
    # config_parse
    "parse_args_map",
    "parse_bool",
    "parse_choice",
    "parse_list",
    "parse_pattern",
    "parse_patterns",
    # config_properties
    "PROPERTIES",
    "VALID_NAMES",
    "Property",
    "PropertyKey",
    "check_properties",
    "resolve_property",
    # config_resolve
    "MakeBehaviorProbe",
    "derive_build_downstream",
    "derive_upstream_mode",
    "is_enabled",
    "resolve_configuration",
    # config_types
    "Configuration",
    "ConfigurationDict",
    "DownstreamInputs",
    "MakeBehavior",
    "MakeBehaviorAccessor",
    "ProjectProperties",
    "RawOverrides",
    "UpstreamInputs",
    "UpstreamMode",
]
