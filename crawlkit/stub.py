"""A base component that keeps its ID, score and call counters."""

from __future__ import annotations

import threading
from typing import Optional

from .base import CalculateScore, Counts, Module, Summary
from .errors import IllegalParameterError
from .mid import split_mid

_MASK = 2**64 - 1


class ModuleInternal(Module):
    """Component base with thread-safe counters, for concrete components to extend."""

    def __init__(
        self, mid: str, score_calculator: Optional[CalculateScore] = None
    ) -> None:
        try:
            _, _, addr = split_mid(mid)
        except IllegalParameterError as err:
            raise IllegalParameterError(f"illegal ID {mid!r}: {err}") from err
        self._mid = mid
        self._addr = addr
        self._score_calculator = score_calculator
        self._score = 0
        self._called = 0
        self._accepted = 0
        self._completed = 0
        self._handling = 0
        self._lock = threading.Lock()

    @property
    def id(self) -> str:
        return self._mid

    @property
    def addr(self) -> str:
        return self._addr

    @property
    def score(self) -> int:
        with self._lock:
            return self._score

    @score.setter
    def score(self, value: int) -> None:
        with self._lock:
            self._score = value

    @property
    def score_calculator(self) -> Optional[CalculateScore]:
        return self._score_calculator

    @property
    def called_count(self) -> int:
        with self._lock:
            return self._called

    @property
    def accepted_count(self) -> int:
        with self._lock:
            return self._accepted

    @property
    def completed_count(self) -> int:
        with self._lock:
            return self._completed

    @property
    def handling_number(self) -> int:
        with self._lock:
            return self._handling

    def counts(self) -> Counts:
        """Return all counters as one consistent snapshot."""
        with self._lock:
            return Counts(
                called_count=self._called,
                accepted_count=self._accepted,
                completed_count=self._completed,
                handling_number=self._handling,
            )

    def summary(self) -> Summary:
        """Return the component's ID and counters."""
        counts = self.counts()
        return Summary(
            id=self.id,
            called=counts.called_count,
            accepted=counts.accepted_count,
            completed=counts.completed_count,
            handling=counts.handling_number,
        )

    def incr_called_count(self) -> None:
        with self._lock:
            self._called = (self._called + 1) & _MASK

    def incr_accepted_count(self) -> None:
        with self._lock:
            self._accepted = (self._accepted + 1) & _MASK

    def incr_completed_count(self) -> None:
        with self._lock:
            self._completed = (self._completed + 1) & _MASK

    def incr_handling_number(self) -> None:
        with self._lock:
            self._handling = (self._handling + 1) & _MASK

    def decr_handling_number(self) -> None:
        """Decrease the handling number; it wraps around below zero."""
        with self._lock:
            self._handling = (self._handling - 1) & _MASK

    def clear(self) -> None:
        """Reset every counter to zero."""
        with self._lock:
            self._called = 0
            self._accepted = 0
            self._completed = 0
            self._handling = 0