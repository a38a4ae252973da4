# tests/utils/__init__.py

from .constants import DEFAULT_TEST_LOG_LEVEL
from .modules import make_module, make_module_tree
from .patch_everywhere import patch_everywhere
from .properties import full, make_behavior_mock
from .trace import TEST_TRACE, make_test_trace


__all__ = [  # noqa: RUF022
    # constants
    "DEFAULT_TEST_LOG_LEVEL",
    # modules
    "make_module",
    "make_module_tree",
    # patch_everywhere
    "patch_everywhere",
    # properties
    "full",
    "make_behavior_mock",
    # trace
    "TEST_TRACE",
    "make_test_trace",
]
