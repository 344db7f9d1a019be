"""Interfaces shared by all crawler components.

Implementations must be safe to use from several threads at once.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .data import Data, HTTPResponse, Item, Request, Response


@dataclass(frozen=True)
class Counts:
    """A snapshot of a component's call counters."""

    called_count: int = 0
    accepted_count: int = 0
    completed_count: int = 0
    handling_number: int = 0


CalculateScore = Callable[[Counts], int]
ParseResponse = Callable[[HTTPResponse, int], "tuple[list[Data], list[Exception]]"]
ProcessItem = Callable[[Item], Optional[Item]]


@dataclass(frozen=True)
class Summary:
    """A summary of a component's identity and counters."""

    id: str
    called: int
    accepted: int
    completed: int
    handling: int
    extra: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Return the summary as a plain dict; ``extra`` is left out when absent."""
        result: dict[str, Any] = {
            "id": self.id,
            "called": self.called,
            "accepted": self.accepted,
            "completed": self.completed,
            "handling": self.handling,
        }
        if self.extra is not None:
            extra = self.extra
            if dataclasses.is_dataclass(extra) and not isinstance(extra, type):
                extra = dataclasses.asdict(extra)
            result["extra"] = extra
        return result


class Module(ABC):
    """The base interface of every crawler component."""

    @property
    @abstractmethod
    def id(self) -> str:
        """The component ID."""

    @property
    @abstractmethod
    def addr(self) -> str:
        """The component's network address, or an empty string."""

    @property
    @abstractmethod
    def score(self) -> int:
        """The component's load score."""

    @score.setter
    @abstractmethod
    def score(self, value: int) -> None:
        """Set the component's load score."""

    @property
    @abstractmethod
    def score_calculator(self) -> Optional[CalculateScore]:
        """The function that computes the score, if any."""

    @property
    @abstractmethod
    def called_count(self) -> int:
        """How many times the component was called."""

    @property
    @abstractmethod
    def accepted_count(self) -> int:
        """How many calls the component accepted."""

    @property
    @abstractmethod
    def completed_count(self) -> int:
        """How many calls the component completed successfully."""

    @property
    @abstractmethod
    def handling_number(self) -> int:
        """How many calls the component is handling right now."""

    def counts(self) -> Counts:
        """Return all counters at once."""
        return Counts(
            called_count=self.called_count,
            accepted_count=self.accepted_count,
            completed_count=self.completed_count,
            handling_number=self.handling_number,
        )

    def summary(self) -> Summary:
        """Return a summary of the component."""
        counts = self.counts()
        return Summary(
            id=self.id,
            called=counts.called_count,
            accepted=counts.accepted_count,
            completed=counts.completed_count,
            handling=counts.handling_number,
        )


class Downloader(Module):
    """A component that fetches content for requests."""

    @abstractmethod
    def download(self, req: Request) -> Response:
        """Fetch the content for a request and return the response."""


class Analyzer(Module):
    """A component that extracts requests and items from responses."""

    @property
    @abstractmethod
    def resp_parsers(self) -> list[ParseResponse]:
        """A copy of the response parsers in use."""

    @abstractmethod
    def analyze(self, resp: Response) -> tuple[list[Data], list[Exception]]:
        """Run every parser on a response and merge their results."""


class Pipeline(Module):
    """A component that passes items through a chain of processors."""

    @property
    @abstractmethod
    def item_processors(self) -> list[ProcessItem]:
        """A copy of the item processors in use."""

    @abstractmethod
    def send(self, item: Item) -> list[Exception]:
        """Pass an item through the processors and return the errors."""

    @property
    @abstractmethod
    def fail_fast(self) -> bool:
        """Whether processing stops at the first error."""

    @fail_fast.setter
    @abstractmethod
    def fail_fast(self, value: bool) -> None:
        """Set whether processing stops at the first error."""