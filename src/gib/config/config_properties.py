# src/gib/config/config_properties.py
"""Catalog of recognized properties and single-key resolution.

Every property has a canonical name, an optional deprecated alias and a
default. Full names carry PROPERTY_PREFIX (``gib.buildUpstream``).
"""

from collections.abc import Mapping
from dataclasses import dataclass
from difflib import get_close_matches

from gib.constants import PROPERTY_PREFIX
from gib.logs import getAppLogger

from .config_errors import UnrecognizedPropertyError


@dataclass(frozen=True)
class PropertyKey:
    name: str
    default: str | None = None
    deprecated_name: str | None = None

    def full_name(self) -> str:
        return PROPERTY_PREFIX + self.name

    def deprecated_full_name(self) -> str | None:
        if self.deprecated_name is None:
            return None
        return PROPERTY_PREFIX + self.deprecated_name

    def candidates(self) -> tuple[str, ...]:
        """Full names to look up, in precedence order (canonical first)."""
        deprecated = self.deprecated_full_name()
        if deprecated is None:
            return (self.full_name(),)
        return (self.full_name(), deprecated)


class Property:
    """Namespace of every recognized property."""

    enabled = PropertyKey("enabled", "true")
    disable_branch_comparison = PropertyKey("disableBranchComparison", "false")
    reference_branch = PropertyKey("referenceBranch", "refs/remotes/origin/develop")
    fetch_reference_branch = PropertyKey("fetchReferenceBranch", "false")
    base_branch = PropertyKey("baseBranch", "HEAD")
    fetch_base_branch = PropertyKey("fetchBaseBranch", "false")
    compare_to_merge_base = PropertyKey("compareToMergeBase", "true")
    uncommited = PropertyKey("uncommited", "true")
    untracked = PropertyKey("untracked", "true")
    exclude_path_regex = PropertyKey("excludePathRegex", None, "exclude")
    skip_tests_for_upstream_modules = PropertyKey(
        "skipTestsForUpstreamModules", "false", "skipTestsForNotImpactedModules"
    )
    args_for_upstream_modules = PropertyKey(
        "argsForUpstreamModules", "", "argsForNotImpactedModules"
    )
    build_all = PropertyKey("buildAll", "false")
    force_build_modules = PropertyKey("forceBuildModules", "")
    exclude_transitive_modules_packaged_as = PropertyKey(
        "excludeTransitiveModulesPackagedAs", ""
    )
    fail_on_missing_git_dir = PropertyKey("failOnMissingGitDir", "true")
    fail_on_error = PropertyKey("failOnError", "true")
    build_downstream = PropertyKey("buildDownstream", "always")
    build_upstream = PropertyKey("buildUpstream", "derived")
    build_upstream_mode = PropertyKey("buildUpstreamMode", "changed")


PROPERTIES: tuple[PropertyKey, ...] = tuple(
    value for value in vars(Property).values() if isinstance(value, PropertyKey)
)

# every accepted full name (canonical and deprecated), in registry order
VALID_NAMES: tuple[str, ...] = tuple(
    name for prop in PROPERTIES for name in prop.candidates()
)


def resolve_property(
    key: PropertyKey,
    overrides: Mapping[str, str],
    project_properties: Mapping[str, str] | None = None,
) -> str | None:
    """Return the effective raw value of one property.

    Precedence: override (canonical, then deprecated alias), then project
    property (canonical, then deprecated alias), then the default.
    """
    logger = getAppLogger()
    tiers = (("override", overrides), ("project", project_properties or {}))
    for tier, source in tiers:
        for candidate in key.candidates():
            if candidate in source:
                if candidate != key.full_name():
                    logger.warning(
                        "Property %s is deprecated, use %s instead.",
                        candidate,
                        key.full_name(),
                    )
                logger.trace(
                    f"[resolve_property] {key.full_name()} from {tier}: "
                    f"{source[candidate]!r}"
                )
                return source[candidate]
    return key.default


def check_properties(overrides: Mapping[str, str]) -> None:
    """Fail on any prefixed override key that is not a known property.

    Keys without the prefix belong to someone else and are ignored.
    """
    for key in overrides:
        if not key.startswith(PROPERTY_PREFIX) or key in VALID_NAMES:
            continue
        close = get_close_matches(key, VALID_NAMES, n=1, cutoff=0.6)
        raise UnrecognizedPropertyError(
            key, VALID_NAMES, close[0] if close else None
        )
