# src/gib/config/config_types.py


import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, TypedDict, cast

from typing_extensions import NotRequired


RawOverrides = Mapping[str, str]
ProjectProperties = Mapping[str, str]


class UpstreamMode(str, Enum):
    """Which upstream modules (dependencies of changed ones) get built."""

    NONE = "none"
    CHANGED = "changed"  # upstream of changed modules
    IMPACTED = "impacted"  # upstream of changed and downstream modules


class MakeBehavior(str, Enum):
    """The orchestrator's own request to build upstream/downstream modules.

    Mirrors ``-am`` (also make), ``-amd`` (also make dependents) and both.
    """

    NONE = "none"
    UPSTREAM = "upstream"
    DOWNSTREAM = "downstream"
    BOTH = "both"

    @property
    def includes_upstream(self) -> bool:
        return self in (MakeBehavior.UPSTREAM, MakeBehavior.BOTH)

    @property
    def includes_downstream(self) -> bool:
        return self in (MakeBehavior.DOWNSTREAM, MakeBehavior.BOTH)


# None means the orchestrator reported no make behavior at all
MakeBehaviorAccessor = Callable[[], MakeBehavior | None]


@dataclass(frozen=True)
class UpstreamInputs:
    raw_upstream: str
    raw_upstream_mode: str | None
    make_behavior: MakeBehaviorAccessor


@dataclass(frozen=True)
class DownstreamInputs:
    raw_downstream: str
    make_behavior: MakeBehaviorAccessor


class ConfigurationDict(TypedDict):
    """JSON-friendly view of a Configuration (see Configuration.to_dict)."""

    enabled: bool
    disable_branch_comparison: bool
    reference_branch: str
    fetch_reference_branch: bool
    base_branch: str
    fetch_base_branch: bool
    compare_to_merge_base: bool
    uncommited: bool
    untracked: bool
    skip_tests_for_upstream_modules: bool
    args_for_upstream_modules: dict[str, str]
    build_all: bool
    force_build_modules: list[str]
    exclude_transitive_modules_packaged_as: list[str]
    fail_on_missing_git_dir: bool
    fail_on_error: bool
    build_upstream_mode: str
    build_downstream: bool
    exclude_path_regex: NotRequired[str]  # only present when configured


@dataclass(frozen=True)
class Configuration:
    """Resolved settings for one build invocation.

    Created by resolve_configuration(); never mutated afterwards.
    """

    enabled: bool
    disable_branch_comparison: bool
    reference_branch: str
    fetch_reference_branch: bool
    base_branch: str
    fetch_base_branch: bool
    compare_to_merge_base: bool
    uncommited: bool
    untracked: bool
    exclude_path_regex: re.Pattern[str] | None
    skip_tests_for_upstream_modules: bool
    args_for_upstream_modules: Mapping[str, str]
    build_all: bool
    force_build_modules: tuple[re.Pattern[str], ...]
    exclude_transitive_modules_packaged_as: tuple[str, ...]
    fail_on_missing_git_dir: bool
    fail_on_error: bool
    build_upstream_mode: UpstreamMode
    build_downstream: bool
    # raw string values actually used, keyed by canonical full name
    sources: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), compare=False
    )

    def to_dict(self) -> ConfigurationDict:
        """Convert to a JSON-serializable dictionary."""
        data: dict[str, Any] = {
            "enabled": self.enabled,
            "disable_branch_comparison": self.disable_branch_comparison,
            "reference_branch": self.reference_branch,
            "fetch_reference_branch": self.fetch_reference_branch,
            "base_branch": self.base_branch,
            "fetch_base_branch": self.fetch_base_branch,
            "compare_to_merge_base": self.compare_to_merge_base,
            "uncommited": self.uncommited,
            "untracked": self.untracked,
            "skip_tests_for_upstream_modules": self.skip_tests_for_upstream_modules,
            "args_for_upstream_modules": dict(self.args_for_upstream_modules),
            "build_all": self.build_all,
            "force_build_modules": [p.pattern for p in self.force_build_modules],
            "exclude_transitive_modules_packaged_as": list(
                self.exclude_transitive_modules_packaged_as
            ),
            "fail_on_missing_git_dir": self.fail_on_missing_git_dir,
            "fail_on_error": self.fail_on_error,
            "build_upstream_mode": self.build_upstream_mode.value,
            "build_downstream": self.build_downstream,
        }
        if self.exclude_path_regex is not None:
            data["exclude_path_regex"] = self.exclude_path_regex.pattern
        return cast("ConfigurationDict", data)
