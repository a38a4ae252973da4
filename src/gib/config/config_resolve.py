# src/gib/config/config_resolve.py
"""Resolve raw properties and the orchestrator's make behavior into a
Configuration.

Derived modes (``buildUpstream``/``buildUpstreamMode`` and
``buildDownstream``) are pure functions over explicit input records so each
row of their decision tables can be exercised directly.
"""

from collections.abc import Mapping
from types import MappingProxyType

from gib.constants import (
    BUILD_MODE_CHOICES,
    MODE_ALWAYS,
    MODE_NEVER,
    UPSTREAM_MODE_CHOICES,
    UPSTREAM_MODE_IMPACTED,
)
from gib.logs import getAppLogger

from .config_errors import DerivedModeConflictError, InvalidEnumValueError
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
    Property,
    PropertyKey,
    check_properties,
    resolve_property,
)
from .config_types import (
    Configuration,
    DownstreamInputs,
    MakeBehavior,
    MakeBehaviorAccessor,
    UpstreamInputs,
    UpstreamMode,
)


# --------------------------------------------------------------------------- #
# helpers
# --------------------------------------------------------------------------- #


class MakeBehaviorProbe:
    """Query the orchestrator's make behavior lazily, at most once.

    One probe lives for exactly one resolution.
    """

    def __init__(self, accessor: MakeBehaviorAccessor | None) -> None:
        self._accessor = accessor
        self._queried = False
        self._value: MakeBehavior | None = None

    def __call__(self) -> MakeBehavior | None:
        if not self._queried:
            self._queried = True
            if self._accessor is not None:
                self._value = self._accessor()
            getAppLogger().trace(f"[make_behavior] orchestrator reports {self._value}")
        return self._value

    @property
    def queried(self) -> bool:
        return self._queried


def _resolve_upstream_refinement(raw_upstream_mode: str | None) -> UpstreamMode:
    key = Property.build_upstream_mode.full_name()
    if raw_upstream_mode is None:
        return UpstreamMode.CHANGED
    try:
        mode = parse_choice(key, raw_upstream_mode, UPSTREAM_MODE_CHOICES)
    except InvalidEnumValueError as e:
        xmsg = (
            f"Cannot derive the upstream build mode: {key} is "
            f"'{raw_upstream_mode}' but must be one of "
            f"{', '.join(UPSTREAM_MODE_CHOICES)}"
        )
        raise DerivedModeConflictError(xmsg, key=key) from e
    if mode == UPSTREAM_MODE_IMPACTED:
        return UpstreamMode.IMPACTED
    return UpstreamMode.CHANGED


def derive_upstream_mode(inputs: UpstreamInputs) -> UpstreamMode:
    """Derive which upstream modules to build.

    =================  =================  ============  ========
    buildUpstream      buildUpstreamMode  make behavior result
    =================  =================  ============  ========
    never / false      any                any           NONE
    always / true      unset / changed    any           CHANGED
    always / true      impacted           any           IMPACTED
    derived            any                none / down   NONE
    derived            unset / changed    up / both     CHANGED
    derived            impacted           up / both     IMPACTED
    =================  =================  ============  ========

    The make behavior is only queried for ``derived``; ``buildUpstreamMode``
    is only validated when upstream building is actually on.
    """
    logger = getAppLogger()
    key = Property.build_upstream.full_name()
    value = parse_choice(key, inputs.raw_upstream, BUILD_MODE_CHOICES)

    if value in MODE_NEVER:
        return UpstreamMode.NONE
    if value not in MODE_ALWAYS:
        behavior = inputs.make_behavior()
        if behavior is None or not behavior.includes_upstream:
            logger.debug(
                "%s is derived, orchestrator make behavior %s: no upstream build",
                key,
                behavior.value if behavior else "none",
            )
            return UpstreamMode.NONE
    return _resolve_upstream_refinement(inputs.raw_upstream_mode)


def derive_build_downstream(inputs: DownstreamInputs) -> bool:
    """Derive whether downstream modules (dependents) get built.

    ``never``/``false`` -> False, ``always``/``true`` -> True, ``derived`` ->
    True only when the make behavior is downstream or both.
    """
    key = Property.build_downstream.full_name()
    value = parse_choice(key, inputs.raw_downstream, BUILD_MODE_CHOICES)
    if value in MODE_NEVER:
        return False
    if value in MODE_ALWAYS:
        return True
    behavior = inputs.make_behavior()
    return behavior is not None and behavior.includes_downstream


def _required(key: PropertyKey, value: str | None) -> str:
    # every key read through here has a default in the registry
    if value is None:
        xmsg = f"Property {key.full_name()} has no value and no default"
        raise RuntimeError(xmsg)
    return value


# --------------------------------------------------------------------------- #
# main resolver
# --------------------------------------------------------------------------- #


def is_enabled(
    overrides: Mapping[str, str],
    project_properties: Mapping[str, str] | None = None,
) -> bool:
    """Check ``gib.enabled`` alone, without resolving everything else."""
    key = Property.enabled
    return parse_bool(
        key.full_name(),
        _required(key, resolve_property(key, overrides, project_properties)),
    )


def resolve_configuration(
    overrides: Mapping[str, str],
    project_properties: Mapping[str, str] | None = None,
    make_behavior: MakeBehaviorAccessor | None = None,
) -> Configuration:
    """Build the Configuration for one invocation.

    Args:
        overrides: Explicit properties (highest precedence).
        project_properties: Properties declared by the top-level project.
        make_behavior: Accessor for the orchestrator's make behavior; called
            at most once, and only if a derived mode needs it.

    Raises:
        ConfigurationError: On the first invalid key or value. No partially
            resolved Configuration is ever returned.
    """
    logger = getAppLogger()
    logger.trace(
        f"[resolve_configuration] {len(overrides)} override(s), "
        f"{len(project_properties or {})} project propert(ies)"
    )
    check_properties(overrides)

    raw: dict[str, str | None] = {
        prop.full_name(): resolve_property(prop, overrides, project_properties)
        for prop in PROPERTIES
    }

    def _bool(key: PropertyKey) -> bool:
        return parse_bool(key.full_name(), _required(key, raw[key.full_name()]))

    def _str(key: PropertyKey) -> str:
        return _required(key, raw[key.full_name()])

    probe = MakeBehaviorProbe(make_behavior)

    upstream_mode = derive_upstream_mode(
        UpstreamInputs(
            raw_upstream=_str(Property.build_upstream),
            raw_upstream_mode=raw[Property.build_upstream_mode.full_name()],
            make_behavior=probe,
        )
    )
    build_downstream = derive_build_downstream(
        DownstreamInputs(
            raw_downstream=_str(Property.build_downstream),
            make_behavior=probe,
        )
    )

    configuration = Configuration(
        enabled=_bool(Property.enabled),
        disable_branch_comparison=_bool(Property.disable_branch_comparison),
        reference_branch=_str(Property.reference_branch),
        fetch_reference_branch=_bool(Property.fetch_reference_branch),
        base_branch=_str(Property.base_branch),
        fetch_base_branch=_bool(Property.fetch_base_branch),
        compare_to_merge_base=_bool(Property.compare_to_merge_base),
        uncommited=_bool(Property.uncommited),
        untracked=_bool(Property.untracked),
        exclude_path_regex=parse_pattern(
            Property.exclude_path_regex.full_name(),
            raw[Property.exclude_path_regex.full_name()],
        ),
        skip_tests_for_upstream_modules=_bool(
            Property.skip_tests_for_upstream_modules
        ),
        args_for_upstream_modules=MappingProxyType(
            parse_args_map(raw[Property.args_for_upstream_modules.full_name()])
        ),
        build_all=_bool(Property.build_all),
        force_build_modules=parse_patterns(
            Property.force_build_modules.full_name(),
            raw[Property.force_build_modules.full_name()],
        ),
        exclude_transitive_modules_packaged_as=parse_list(
            raw[Property.exclude_transitive_modules_packaged_as.full_name()]
        ),
        fail_on_missing_git_dir=_bool(Property.fail_on_missing_git_dir),
        fail_on_error=_bool(Property.fail_on_error),
        build_upstream_mode=upstream_mode,
        build_downstream=build_downstream,
        sources=MappingProxyType(
            {name: value for name, value in raw.items() if value is not None}
        ),
    )

    logger.debug(
        "Resolved build scope: upstream=%s, downstream=%s (make behavior %s)",
        upstream_mode.value,
        build_downstream,
        "queried" if probe.queried else "not needed",
    )
    return configuration
