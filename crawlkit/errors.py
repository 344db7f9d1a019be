"""Exceptions raised by crawler components."""

from __future__ import annotations

from enum import Enum


class ErrorType(str, Enum):
    """The kind of component a crawler error comes from."""

    DOWNLOADER = "downloader"
    ANALYZER = "analyzer"
    PIPELINE = "pipeline"


class IllegalParameterError(ValueError):
    """Raised when an argument does not meet a component's requirements."""


class CrawlerError(Exception):
    """An error raised by one of the crawler components."""

    def __init__(self, error_type: ErrorType | str, message: str) -> None:
        self.error_type = ErrorType(error_type)
        self.message = message
        super().__init__(f"crawler error: {self.error_type.value} error: {message}")

    @classmethod
    def from_error(cls, error_type: ErrorType | str, error: BaseException) -> CrawlerError:
        """Wrap another exception, keeping it as the cause."""
        crawler_error = cls(error_type, str(error))
        crawler_error.__cause__ = error
        return crawler_error


class NotFoundModuleInstanceError(LookupError):
    """Raised when no registered component instance matches a request."""

    def __init__(self, message: str = "not found module instance") -> None:
        super().__init__(message)