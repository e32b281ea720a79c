"""Immutable URL value.

Eight components (scheme, user, password, host, port, path, query,
fragment) normalized once at construction. Every ``with_*()`` returns a
new Url, or the same instance when nothing would change.
"""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import quote, unquote

import idna

from missive.errors import InvalidPort, InvalidURL

# Ports implied by a scheme, elided when read back through ``Url.port``
STANDARD_PORTS: dict[str, int] = {"http": 80, "https": 443}

# Marks left unescaped on top of quote()'s own "_.-~"
_COMPONENT_SAFE = "!*'()"

_LEADING_SLASHES = re.compile(r"^/+")


def _recode(component: str) -> str:
    """Decode then re-encode one component so existing escapes survive."""
    try:
        decoded = unquote(component, errors="strict")
    except UnicodeDecodeError as exc:
        msg = f"Malformed percent-encoding in {component!r}"
        raise InvalidURL(msg) from exc
    return quote(decoded, safe=_COMPONENT_SAFE)


def encode_path(path: str) -> str:
    """Percent-encode each ``/``-separated segment of *path*."""
    return "/".join(_recode(segment) for segment in path.split("/"))


def encode_query(query: str) -> str:
    """Percent-encode each key and value of *query*, keeping ``&`` and ``=``."""
    return "&".join(
        "=".join(_recode(part) for part in pair.split("=")) for pair in query.split("&")
    )


def encode_fragment(fragment: str) -> str:
    """Percent-encode the whole of *fragment*."""
    return _recode(fragment)


def normalize_host(host: str) -> str:
    """Lowercase *host*, IDNA-encoding it when it is not plain ASCII."""
    if host.isascii():
        return host.lower()
    try:
        return idna.encode(host.lower()).decode("ascii")
    except idna.IDNAError as exc:
        msg = f"Invalid IDNA hostname: {host!r}"
        raise InvalidURL(msg) from exc


def validate_port(port: Any) -> int | None:
    """Return *port* unchanged if it is ``None`` or a valid TCP port."""
    if port is None:
        return None
    if isinstance(port, bool) or not isinstance(port, int):
        msg = f"Port must be an int or None, got {type(port).__name__}"
        raise TypeError(msg)
    if not 1 <= port <= 65535:
        raise InvalidPort(port)
    return port


class Url:
    """An immutable URL.

    Scheme and host are lowercased; path, query and fragment are
    percent-encoded without double-encoding existing escapes. Absent
    components read back as ``""`` (``None`` for ``port``)::

        url = Url("HTTP", host="Example.com", path="/a b")
        str(url)  # 'http://example.com/a%20b'
        url.with_port(8080).authority  # 'example.com:8080'
    """

    __slots__ = ("_fragment", "_host", "_password", "_path", "_port", "_query", "_scheme", "_user")

    def __init__(
        self,
        scheme: str | None = None,
        user: str | None = None,
        password: str | None = None,
        host: str | None = None,
        port: int | None = None,
        path: str | None = None,
        query: str | None = None,
        fragment: str | None = None,
    ) -> None:
        user = user or None
        object.__setattr__(self, "_scheme", scheme.lower() if scheme else None)
        object.__setattr__(self, "_user", user)
        object.__setattr__(self, "_password", (password or None) if user else None)
        object.__setattr__(self, "_host", normalize_host(host) if host else None)
        object.__setattr__(self, "_port", validate_port(port))
        object.__setattr__(self, "_path", encode_path(path) if path else None)
        object.__setattr__(self, "_query", encode_query(query) if query else None)
        object.__setattr__(self, "_fragment", encode_fragment(fragment) if fragment else None)

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"{type(self).__name__} is immutable; use the with_*() methods"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    # -- Components --

    @property
    def scheme(self) -> str:
        return self._scheme or ""

    @property
    def user(self) -> str:
        return self._user or ""

    @property
    def password(self) -> str:
        return self._password or ""

    @property
    def user_info(self) -> str:
        """``user`` or ``user:password``; ``""`` without a user."""
        if not self._user:
            return ""
        if self._password:
            return f"{self._user}:{self._password}"
        return self._user

    @property
    def host(self) -> str:
        return self._host or ""

    @property
    def port(self) -> int | None:
        """The port, or ``None`` when absent or standard for the scheme."""
        if self._port is None or self._is_standard_port(self._port):
            return None
        return self._port

    @property
    def authority(self) -> str:
        """``[user_info@]host[:port]``; ``""`` without a host."""
        if not self._host:
            return ""
        authority = self._host
        user_info = self.user_info
        if user_info:
            authority = f"{user_info}@{authority}"
        port = self.port
        if port is not None:
            authority = f"{authority}:{port}"
        return authority

    @property
    def path(self) -> str:
        return self._path or ""

    @property
    def query(self) -> str:
        return self._query or ""

    @property
    def fragment(self) -> str:
        return self._fragment or ""

    # -- Chainable transformations --

    def with_scheme(self, scheme: str) -> Url:
        """Return a Url with *scheme* (lowercased); ``""`` removes it."""
        new_scheme = scheme.lower() or None
        if new_scheme == self._scheme:
            return self
        return self._evolve(scheme=new_scheme)

    def with_user_info(self, user: str, password: str | None = None) -> Url:
        """Return a Url with new user info; an empty *user* drops both parts."""
        new_user = user or None
        new_password = (password or None) if new_user else None
        if new_user == self._user and new_password == self._password:
            return self
        return self._evolve(user=new_user, password=new_password)

    def with_host(self, host: str) -> Url:
        """Return a Url with *host* (lowercased); ``""`` removes it."""
        new_host = normalize_host(host) if host else None
        if new_host == self._host:
            return self
        return self._evolve(host=new_host)

    def with_port(self, port: int | None) -> Url:
        """Return a Url with *port*; ``None`` removes it.

        The port is stored as given. Standard ports are only hidden when
        read back through ``port``.
        """
        new_port = validate_port(port)
        if new_port == self._port:
            return self
        return self._evolve(port=new_port)

    def with_path(self, path: str) -> Url:
        """Return a Url with *path* percent-encoded; ``""`` removes it."""
        new_path = encode_path(path) or None
        if new_path == self._path:
            return self
        return self._evolve(path=new_path)

    def with_query(self, query: str) -> Url:
        """Return a Url with *query* percent-encoded (no leading ``?``)."""
        new_query = encode_query(query) or None
        if new_query == self._query:
            return self
        return self._evolve(query=new_query)

    def with_fragment(self, fragment: str) -> Url:
        """Return a Url with *fragment* percent-encoded (no leading ``#``)."""
        new_fragment = encode_fragment(fragment) or None
        if new_fragment == self._fragment:
            return self
        return self._evolve(fragment=new_fragment)

    # -- Serialization --

    def __str__(self) -> str:
        parts: list[str] = []
        if self._scheme:
            parts.append(f"{self._scheme}:")
        authority = self.authority
        if authority:
            parts.append(f"//{authority}")
        path = self.path
        if path:
            if authority and not path.startswith("/"):
                path = f"/{path}"
            elif not authority and path.startswith("//"):
                path = _LEADING_SLASHES.sub("/", path)
        parts.append(path)
        if self._query:
            parts.append(f"?{self._query}")
        if self._fragment:
            parts.append(f"#{self._fragment}")
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Url({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Url):
            return NotImplemented
        return self._components() == other._components()

    def __hash__(self) -> int:
        return hash(self._components())

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), self._components())

    # -- Internals --

    def _components(self) -> tuple[Any, ...]:
        return (
            self._scheme,
            self._user,
            self._password,
            self._host,
            self._port,
            self._path,
            self._query,
            self._fragment,
        )

    def _is_standard_port(self, port: int) -> bool:
        return self._scheme is not None and STANDARD_PORTS.get(self._scheme) == port

    def _evolve(self, **changes: Any) -> Url:
        """Build a sibling Url carrying every component not in *changes*.

        Components are already normalized, so they bypass ``__init__``.
        """
        clone = object.__new__(type(self))
        for name in self.__slots__:
            object.__setattr__(clone, name, changes.get(name[1:], getattr(self, name)))
        return clone
