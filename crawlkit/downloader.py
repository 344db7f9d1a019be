"""A downloader that fetches requests over HTTP."""

from __future__ import annotations

import logging
import urllib.error
import urllib.request
from typing import Any, Optional, Protocol

from .base import CalculateScore, Downloader
from .data import HTTPResponse, Request, Response
from .errors import CrawlerError, ErrorType, IllegalParameterError
from .stub import ModuleInternal

logger = logging.getLogger(__name__)


class HTTPClient(Protocol):
    """Anything that opens a urllib request, such as an OpenerDirector."""

    def open(self, fullurl: urllib.request.Request, *args: Any, **kwargs: Any) -> Any:
        ...


def _parameter_error(message: str) -> CrawlerError:
    return CrawlerError.from_error(ErrorType.DOWNLOADER, IllegalParameterError(message))


def _status_of(raw: Any) -> int:
    status = getattr(raw, "status", None)
    if status is None:
        status = raw.getcode()
    return int(status or 0)


class LocalDownloader(ModuleInternal, Downloader):
    """Fetches the content of requests with an HTTP client.

    Responses with error status codes are returned like any other; failures
    to reach the server are raised as the client raises them.
    """

    def __init__(
        self,
        mid: str,
        client: Optional[HTTPClient],
        score_calculator: Optional[CalculateScore] = None,
    ) -> None:
        super().__init__(mid, score_calculator)
        if client is None:
            raise _parameter_error("nil http client")
        self._client = client

    def download(self, req: Optional[Request]) -> Response:
        """Perform a request and return its response at the same depth."""
        self.incr_handling_number()
        try:
            self.incr_called_count()
            if req is None:
                raise _parameter_error("nil request")
            http_req = req.http_req
            if http_req is None:
                raise _parameter_error("nil HTTP request")
            self.incr_accepted_count()
            logger.info(
                "Do the request (URL: %s, depth: %d)...",
                getattr(http_req, "full_url", None),
                req.depth,
            )
            try:
                raw = self._client.open(http_req)
            except urllib.error.HTTPError as exc:
                raw = exc
            http_resp = HTTPResponse(
                request=http_req,
                body=raw,
                status=_status_of(raw),
                headers=dict(raw.headers.items()) if raw.headers is not None else {},
            )
            self.incr_completed_count()
            return Response(http_resp, req.depth)
        finally:
            self.decr_handling_number()