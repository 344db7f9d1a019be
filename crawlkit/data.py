"""Data passed between crawler components: requests, responses and items."""

from __future__ import annotations

import urllib.request
from dataclasses import dataclass, field
from typing import Any, BinaryIO, Optional, Union


@dataclass
class HTTPResponse:
    """An HTTP response as seen by the crawler."""

    request: Optional[urllib.request.Request] = None
    body: Optional[BinaryIO] = None
    status: int = 0
    headers: dict = field(default_factory=dict)

    def close(self) -> None:
        """Close the body, if there is one."""
        if self.body is not None:
            self.body.close()


@dataclass(frozen=True)
class Request:
    """A crawl request: an HTTP request and the depth it was found at."""

    http_req: Optional[urllib.request.Request]
    depth: int = 0

    def valid(self) -> bool:
        """Whether the request carries an HTTP request with a URL."""
        if self.http_req is None:
            return False
        return getattr(self.http_req, "full_url", None) is not None


@dataclass(frozen=True)
class Response:
    """A crawl response: an HTTP response and the depth of its request."""

    http_resp: Optional[HTTPResponse]
    depth: int = 0

    def valid(self) -> bool:
        """Whether the response carries an HTTP response with a body."""
        if self.http_resp is None:
            return False
        return self.http_resp.body is not None


class Item(dict):
    """A scraped item: a mapping of field names to values."""

    def valid(self) -> bool:
        """An item is always valid."""
        return True

    def __repr__(self) -> str:
        return f"Item({dict.__repr__(self)})"


Data = Union[Request, Response, Item]
ItemValue = Any