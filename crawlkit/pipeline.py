"""An item pipeline that runs items through a chain of processors."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from .base import CalculateScore, Pipeline, ProcessItem, Summary
from .data import Item
from .errors import CrawlerError, ErrorType, IllegalParameterError
from .stub import ModuleInternal

logger = logging.getLogger(__name__)


def _parameter_error(message: str) -> CrawlerError:
    return CrawlerError.from_error(ErrorType.PIPELINE, IllegalParameterError(message))


@dataclass(frozen=True)
class _ExtraSummary:
    fail_fast: bool
    processor_number: int


class LocalPipeline(ModuleInternal, Pipeline):
    """Runs each item through its processors in order.

    A processor returns the item to pass on, or None to keep the current
    one, and raises to report an error.
    """

    def __init__(
        self,
        mid: str,
        item_processors: Optional[Sequence[Optional[ProcessItem]]],
        score_calculator: Optional[CalculateScore] = None,
    ) -> None:
        super().__init__(mid, score_calculator)
        if item_processors is None:
            raise _parameter_error("nil item processor list")
        if len(item_processors) == 0:
            raise _parameter_error("empty item processor list")
        for index, processor in enumerate(item_processors):
            if processor is None:
                raise _parameter_error(f"nil item processor[{index}]")
        self._processors: list[ProcessItem] = list(item_processors)  # type: ignore[arg-type]
        self._fail_fast = False

    @property
    def item_processors(self) -> list[ProcessItem]:
        return list(self._processors)

    @property
    def fail_fast(self) -> bool:
        return self._fail_fast

    @fail_fast.setter
    def fail_fast(self, value: bool) -> None:
        self._fail_fast = value

    def send(self, item: Optional[Item]) -> list[Exception]:
        """Run an item through the processors and return the errors raised."""
        self.incr_handling_number()
        try:
            self.incr_called_count()
            if item is None:
                return [_parameter_error("nil item")]
            self.incr_accepted_count()
            logger.info("Process item %r...", item)
            errors: list[Exception] = []
            current = item
            for processor in self._processors:
                try:
                    processed = processor(current)
                except Exception as exc:  # noqa: BLE001
                    errors.append(exc)
                    if self._fail_fast:
                        break
                    continue
                if processed is not None:
                    current = processed
            if not errors:
                self.incr_completed_count()
            return errors
        finally:
            self.decr_handling_number()

    def summary(self) -> Summary:
        """Return the counters plus the fail-fast flag and processor count."""
        base = super().summary()
        return Summary(
            id=base.id,
            called=base.called,
            accepted=base.accepted,
            completed=base.completed,
            handling=base.handling,
            extra=_ExtraSummary(
                fail_fast=self._fail_fast,
                processor_number=len(self._processors),
            ),
        )