"""Immutable HTTP request.

Method, URL, and an optional explicit request-target on top of the
shared ``Message`` fields. The ``Host`` header follows the URL: it is
filled in at construction and updated by ``with_url()`` unless the
caller asks to preserve it.
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass, replace
from typing import Any, Self

from missive.errors import InvalidMethod
from missive.http.message import Message
from missive.http.status import RequestMethod
from missive.http.url import Url


def _coerce_method(method: str) -> RequestMethod:
    try:
        return RequestMethod(method)
    except ValueError:
        raise InvalidMethod(method, tuple(RequestMethod)) from None


@dataclass(frozen=True, slots=True, kw_only=True)
class Request(Message):
    """An immutable HTTP request.

    Construct directly or through ``RequestFactory``, then chain
    ``.with_*()`` calls::

        request = Request(method="POST", url=Url("https", host="api.example.com"))
        request.header_line("Host")  # 'api.example.com'

    ``target`` holds an explicit request-target override; read
    ``request_target`` for the effective value.
    """

    method: RequestMethod = RequestMethod.GET
    url: Url | None = None
    target: str | None = None

    # Construction-time only: synthesize Host from the URL when missing
    add_host_header: InitVar[bool] = True

    def __post_init__(self, add_host_header: bool) -> None:
        Message.__post_init__(self)
        object.__setattr__(self, "method", _coerce_method(self.method))
        if self.url is not None and not isinstance(self.url, Url):
            msg = f"url must be a Url or None, got {type(self.url).__name__}"
            raise TypeError(msg)
        object.__setattr__(self, "target", self.target or None)

        host = self.url.host if self.url is not None else ""
        if add_host_header and host and not self.headers.has("Host"):
            headers = self.headers.copy()
            headers.set("Host", host)
            object.__setattr__(self, "headers", headers.freeze())

    # -- Computed properties --

    @property
    def request_target(self) -> str:
        """The explicit target, else the URL's origin form, else ``/``."""
        if self.target:
            return self.target
        if self.url is None:
            return "/"
        target = self.url.path
        query = self.url.query
        if query:
            target = f"{target}?{query}"
        return target or "/"

    # -- Chainable transformations --

    def with_method(self, method: str) -> Self:
        """Return a request with a different method."""
        new_method = _coerce_method(method)
        if new_method == self.method:
            return self
        return self._evolve(method=new_method)

    def with_url(self, url: Url, preserve_host: bool = False) -> Self:
        """Return a request for *url*.

        The ``Host`` header is set to the new URL's host whenever it
        differs from the current header line, unless *preserve_host*.
        """
        if not isinstance(url, Url):
            msg = f"url must be a Url, got {type(url).__name__}"
            raise TypeError(msg)
        should_update_host = url.host != self.header_line("Host") and not preserve_host
        if url is self.url and not should_update_host:
            return self
        headers = self.headers.copy()
        if should_update_host:
            headers.set("Host", url.host)
        return self._evolve(url=url, headers=headers.freeze())

    def with_request_target(self, request_target: str) -> Self:
        """Return a request with an explicit request-target (e.g. ``*``)."""
        new_target = request_target or None
        if new_target == self.target:
            return self
        return self._evolve(target=new_target)

    # -- Clone hook --

    def _evolve(self, **changes: Any) -> Self:
        return replace(self, add_host_header=False, **changes)
