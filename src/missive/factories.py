"""Factories that wire URL parsing and body streams into messages.

Each factory takes its collaborators and an optional ``MessageConfig``,
so tests and callers can swap either without subclassing.
"""

from __future__ import annotations

import logging
from typing import Protocol

from missive.config import MessageConfig
from missive.errors import InvalidURL
from missive.http.request import Request
from missive.http.response import Response
from missive.http.status import RequestMethod
from missive.http.streams import StringStream
from missive.http.url import Url
from missive.http.urlparse import parse_url

logger = logging.getLogger("missive.factories")


class UrlFactoryLike(Protocol):
    """Anything that turns a URL string into a ``Url``."""

    def create_url(self, url: str) -> Url: ...


class StreamFactoryLike(Protocol):
    """Anything that turns a string into a body stream."""

    def create_stream(self, content: str = "") -> StringStream: ...


class UrlFactory:
    """Build ``Url`` values from strings."""

    def __init__(self, config: MessageConfig | None = None) -> None:
        self.config = config or MessageConfig()

    def create_url(self, url: str) -> Url:
        """Parse *url*.

        Raises:
            InvalidURL: If *url* cannot be parsed.
        """
        try:
            parsed = parse_url(url, max_length=self.config.max_url_length)
        except InvalidURL as exc:
            logger.debug("Rejected URL %r: %s", url, exc)
            raise
        logger.debug("Parsed URL %r", url)
        return parsed


class StreamFactory:
    """Build string-backed body streams."""

    def __init__(self, config: MessageConfig | None = None) -> None:
        self.config = config or MessageConfig()

    def create_stream(self, content: str = "") -> StringStream:
        return StringStream(content, encoding=self.config.encoding)


class RequestFactory:
    """Build requests from a method and a ``Url`` or URL string.

    The request gets the configured protocol version, no headers beyond
    the synthesized ``Host``, and an empty stream body.
    """

    def __init__(
        self,
        url_factory: UrlFactoryLike | None = None,
        stream_factory: StreamFactoryLike | None = None,
        config: MessageConfig | None = None,
    ) -> None:
        self.config = config or MessageConfig()
        self.url_factory = url_factory or UrlFactory(self.config)
        self.stream_factory = stream_factory or StreamFactory(self.config)

    def create_request(self, method: RequestMethod | str, url: Url | str) -> Request:
        if isinstance(url, str):
            url = self.url_factory.create_url(url)
        return Request(
            method=method,
            url=url,
            protocol_version=self.config.protocol_version,
            body=self.stream_factory.create_stream(""),
        )


class ResponseFactory:
    """Build responses with an empty stream body."""

    def __init__(
        self,
        stream_factory: StreamFactoryLike | None = None,
        config: MessageConfig | None = None,
    ) -> None:
        self.config = config or MessageConfig()
        self.stream_factory = stream_factory or StreamFactory(self.config)

    def create_response(self, status_code: int = 200, reason_phrase: str | None = None) -> Response:
        return Response(
            status_code=status_code,
            phrase=reason_phrase,
            protocol_version=self.config.protocol_version,
            body=self.stream_factory.create_stream(""),
        )
