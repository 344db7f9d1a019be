"""Thread-safe cyclic serial number generator."""

from __future__ import annotations

import threading

_MAX_UINT64 = 2**64 - 1


class SNGenerator:
    """Hands out serial numbers from ``start`` to ``maximum``, then wraps around.

    A ``maximum`` of 0 means the largest unsigned 64-bit value.
    """

    def __init__(self, start: int = 1, maximum: int = 0) -> None:
        if maximum == 0:
            maximum = _MAX_UINT64
        self._start = start
        self._max = maximum
        self._next = start
        self._cycle_count = 0
        self._lock = threading.Lock()

    @property
    def start(self) -> int:
        """The first serial number."""
        return self._start

    @property
    def maximum(self) -> int:
        """The largest serial number."""
        return self._max

    @property
    def next(self) -> int:
        """The serial number the next call to get() returns."""
        with self._lock:
            return self._next

    @property
    def cycle_count(self) -> int:
        """How many times the generator has wrapped around."""
        with self._lock:
            return self._cycle_count

    def get(self) -> int:
        """Return a serial number and advance to the next one."""
        with self._lock:
            sn = self._next
            if sn == self._max:
                self._next = self._start
                self._cycle_count += 1
            else:
                self._next += 1
            return sn