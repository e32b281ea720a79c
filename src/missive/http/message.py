"""Immutable HTTP message base with chainable .with_*() transformations.

Each transformation returns a new message of the same type, or the
receiver itself when the requested value is already in place. Callers
may rely on that identity: ``m.with_body(m.body) is m``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Self

from missive._internal.types import Body, HeaderValue
from missive.http.headers import HeaderCollection, as_header_values


@dataclass(frozen=True, slots=True, kw_only=True)
class Message:
    """Protocol version, headers, and an opaque body stream.

    ``headers`` is a frozen copy owned by this message. Frozen
    collections are shared between snapshots; header transformations
    edit an unfrozen copy. The body is stored and forwarded, never
    read.
    """

    protocol_version: str = "1.1"
    headers: HeaderCollection = field(default_factory=HeaderCollection)
    body: Body = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", _owned_headers(self.headers))

    # -- Header access --

    def has_header(self, name: str) -> bool:
        """True if a header named *name* exists (case-insensitive)."""
        return self.headers.has(name)

    def header(self, name: str) -> list[str]:
        """All values for *name*, or an empty list."""
        return self.headers.get(name)

    def header_line(self, name: str) -> str:
        """Values for *name* joined with commas, or ``""``."""
        return ",".join(self.headers.get(name))

    # -- Chainable transformations --

    def with_protocol_version(self, protocol_version: str) -> Self:
        """Return a message with a different protocol version."""
        if protocol_version == self.protocol_version:
            return self
        return self._evolve(protocol_version=protocol_version)

    def with_header(self, name: str, value: HeaderValue) -> Self:
        """Return a message whose *name* header is replaced by *value*."""
        values = as_header_values(value)
        if self.headers.has(name) and values == self.headers.get(name):
            return self
        headers = self.headers.copy()
        headers.set(name, values)
        return self._evolve(headers=headers.freeze())

    def with_added_header(self, name: str, value: HeaderValue) -> Self:
        """Return a message with *value* appended to the *name* header."""
        values = as_header_values(value)
        if not values:
            return self
        headers = self.headers.copy()
        headers.add(name, values)
        return self._evolve(headers=headers.freeze())

    def without_header(self, name: str) -> Self:
        """Return a message without the *name* header."""
        if not self.headers.has(name):
            return self
        headers = self.headers.copy()
        headers.remove(name)
        return self._evolve(headers=headers.freeze())

    def with_body(self, body: Body) -> Self:
        """Return a message carrying *body*."""
        if body is self.body:
            return self
        return self._evolve(body=body)

    # -- Clone hook --

    def _evolve(self, **changes: Any) -> Self:
        """Build a sibling of the same type with *changes* applied.

        Subclasses override this to pass construction flags that only
        make sense for a fresh instance.
        """
        return replace(self, **changes)


def _owned_headers(headers: HeaderCollection | Mapping[str, HeaderValue] | None) -> HeaderCollection:
    if isinstance(headers, HeaderCollection):
        return headers if headers.frozen else headers.copy().freeze()
    if headers is None:
        return HeaderCollection().freeze()
    if not isinstance(headers, Mapping):
        msg = f"headers must be a HeaderCollection or a mapping, got {type(headers).__name__}"
        raise TypeError(msg)
    return HeaderCollection(headers).freeze()
