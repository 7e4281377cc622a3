"""
Instance counting for geometric entities.

Ids are drawn from a monotonically increasing counter that is passed into
every entity constructor. DEFAULT_COUNTER is the process-wide source used
when none is given.

Separately from ids, every successful construction is recorded in a
process-wide creation tally, whichever counter supplied the id.
"""

import threading


class InstanceCounter:
    """
    Monotonic id source.

    The first id handed out is 1. The count is never decremented, including
    when entities are disposed, so it doubles as the number of ids handed
    out by this counter.
    """

    def __init__(self, start: int = 0):
        self._value = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        """Increment the counter and return the new value."""
        with self._lock:
            self._value += 1
            return self._value

    @property
    def total_created(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"InstanceCounter(total_created={self._value})"


DEFAULT_COUNTER = InstanceCounter()

_creation_lock = threading.Lock()
_creation_total = 0


def record_creation() -> int:
    """Add one construction to the process-wide tally and return the new total."""
    global _creation_total
    with _creation_lock:
        _creation_total += 1
        return _creation_total


def creation_total() -> int:
    """Number of entities constructed in this process, across all counters."""
    return _creation_total
