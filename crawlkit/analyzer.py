"""An analyzer that runs responses through a list of response parsers."""

from __future__ import annotations

import io
import logging
from typing import Optional, Sequence

from .base import Analyzer, CalculateScore, ParseResponse
from .data import Data, Request, Response
from .errors import CrawlerError, ErrorType, IllegalParameterError
from .stub import ModuleInternal

logger = logging.getLogger(__name__)


def _error(message: str) -> CrawlerError:
    return CrawlerError(ErrorType.ANALYZER, message)


def _parameter_error(message: str) -> CrawlerError:
    return CrawlerError.from_error(ErrorType.ANALYZER, IllegalParameterError(message))


def _adjust_depth(datum: Data, resp_depth: int) -> Data:
    """Give a request found in a response the depth one below that response."""
    if not isinstance(datum, Request):
        return datum
    new_depth = resp_depth + 1
    if datum.depth != new_depth:
        return Request(datum.http_req, new_depth)
    return datum


class LocalAnalyzer(ModuleInternal, Analyzer):
    """Extracts requests and items from responses with a list of parsers.

    Each parser gets the HTTP response with a fresh copy of the body and the
    response depth, and returns a list of data and a list of errors.
    """

    def __init__(
        self,
        mid: str,
        resp_parsers: Optional[Sequence[Optional[ParseResponse]]],
        score_calculator: Optional[CalculateScore] = None,
    ) -> None:
        super().__init__(mid, score_calculator)
        if resp_parsers is None:
            raise _parameter_error("nil response parsers")
        if len(resp_parsers) == 0:
            raise _parameter_error("empty response parser list")
        for index, parser in enumerate(resp_parsers):
            if parser is None:
                raise _parameter_error(f"nil response parser[{index}]")
        self._parsers: list[ParseResponse] = list(resp_parsers)  # type: ignore[arg-type]

    @property
    def resp_parsers(self) -> list[ParseResponse]:
        return list(self._parsers)

    def analyze(
        self, resp: Optional[Response]
    ) -> tuple[list[Data], list[Exception]]:
        """Run every parser on a response and merge the data and errors."""
        self.incr_handling_number()
        try:
            return self._analyze(resp)
        finally:
            self.decr_handling_number()

    def _analyze(
        self, resp: Optional[Response]
    ) -> tuple[list[Data], list[Exception]]:
        self.incr_called_count()
        if resp is None:
            return [], [_parameter_error("nil response")]
        http_resp = resp.http_resp
        if http_resp is None:
            return [], [_parameter_error("nil HTTP response")]
        http_req = http_resp.request
        if http_req is None:
            return [], [_parameter_error("nil HTTP request")]
        url = getattr(http_req, "full_url", None)
        if url is None:
            return [], [_parameter_error("nil HTTP request URL")]
        self.incr_accepted_count()
        resp_depth = resp.depth
        logger.info("Parse the response (URL: %s, depth: %d)...", url, resp_depth)

        original_body = http_resp.body
        try:
            content = original_body.read() if original_body is not None else b""
        except Exception as exc:  # noqa: BLE001
            return [], [_error(str(exc))]
        finally:
            if original_body is not None:
                original_body.close()

        data_list: list[Data] = []
        error_list: list[Exception] = []
        for parser in self._parsers:
            http_resp.body = io.BytesIO(content)
            try:
                parsed_data, parsed_errors = parser(http_resp, resp_depth)
            except Exception as exc:  # noqa: BLE001
                error_list.append(exc)
                continue
            data_list.extend(
                _adjust_depth(datum, resp_depth)
                for datum in parsed_data or ()
                if datum is not None
            )
            error_list.extend(err for err in parsed_errors or () if err is not None)
        if not error_list:
            self.incr_completed_count()
        return data_list, error_list