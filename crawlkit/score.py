"""Load scores used to balance work between components."""

from __future__ import annotations

from .base import Counts, Module

_MASK = 2**64 - 1


def calculate_score_simple(counts: Counts) -> int:
    """Weight the counters: handling most, then completed, accepted, called."""
    return (
        counts.called_count
        + (counts.accepted_count << 1)
        + (counts.completed_count << 2)
        + (counts.handling_number << 4)
    ) & _MASK


def set_score(module: Module) -> bool:
    """Recompute a component's score; return whether it changed."""
    calculator = module.score_calculator or calculate_score_simple
    new_score = calculator(module.counts())
    if new_score == module.score:
        return False
    module.score = new_score
    return True