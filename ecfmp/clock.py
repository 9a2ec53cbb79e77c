"""A clock that can be frozen for tests."""

from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import Optional

_lock = threading.Lock()
_test_now: Optional[datetime] = None


def time_now() -> datetime:
    """Return the fixed test time if one is set, otherwise the current UTC time."""
    with _lock:
        fixed = _test_now
    return fixed if fixed is not None else datetime.now(timezone.utc)


def set_test_now(now: datetime) -> None:
    """Fix the time returned by time_now."""
    global _test_now
    with _lock:
        _test_now = now


def unset_test_now() -> None:
    """Return time_now to the real clock."""
    global _test_now
    with _lock:
        _test_now = None