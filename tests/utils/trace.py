# tests/utils/trace.py
"""Trace logger for pytest diagnostics.

Writes directly to sys.__stderr__ to bypass pytest's capture system.
Enable by setting TEST_TRACE=1 (or 'true', 'yes').
"""

import os
import sys
import time
from collections.abc import Callable
from typing import Any


TEST_TRACE_ENABLED = os.getenv("TEST_TRACE", "").lower() in {"1", "true", "yes"}


def make_test_trace(icon: str = "🧪") -> Callable[..., Any]:
    def local_trace(label: str, *args: Any) -> Any:
        return TEST_TRACE(label, *args, icon=icon)

    return local_trace


def TEST_TRACE(label: str, *args: Any, icon: str = "🧪") -> None:  # noqa: N802
    """Emit a flush-safe diagnostic line when TEST_TRACE is enabled."""
    if not TEST_TRACE_ENABLED:
        return
    ts = f"{time.monotonic():.6f}"
    msg = f"{icon} [TEST TRACE {ts}] {label}: " + " ".join(map(str, args))
    stream = sys.__stderr__
    if stream is not None:
        stream.write(msg + "\n")
        stream.flush()
