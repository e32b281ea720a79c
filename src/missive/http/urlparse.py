"""Split URL strings into ``Url`` components.

Uses the generic RFC 3986 regex, then validates the pieces that the
regex alone cannot judge: ports, IP literals, and non-printable input.
"""

from __future__ import annotations

import ipaddress
import re

from missive.errors import InvalidURL
from missive.http.url import Url, validate_port

# Default for ``parse_url`` and ``MessageConfig.max_url_length``
MAX_URL_LENGTH = 65536

PORT_DIGITS = re.compile(r"[0-9]+")

URL_REGEX = re.compile(
    r"(?:(?P<scheme>[a-zA-Z][a-zA-Z0-9+.-]*):)?"
    r"(?://(?P<authority>[^/?#]*))?"
    r"(?P<path>[^?#]*)"
    r"(?:\?(?P<query>[^#]*))?"
    r"(?:#(?P<fragment>.*))?",
    re.DOTALL,
)

AUTHORITY_REGEX = re.compile(
    r"(?:(?P<userinfo>.*)@)?(?P<host>(\[.*\]|[^:@]*)):?(?P<port>.*)?",
    re.DOTALL,
)

IPv4_STYLE_HOSTNAME = re.compile(r"^[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+$")
IPv6_STYLE_HOSTNAME = re.compile(r"^\[.*\]$")


def _validate_non_printable(value: str) -> None:
    for position, char in enumerate(value):
        if char.isascii() and not char.isprintable():
            msg = f"Invalid non-printable ASCII character in URL, {char!r} at position {position}."
            raise InvalidURL(msg)


def _parse_host(host: str) -> str:
    if IPv4_STYLE_HOSTNAME.match(host):
        try:
            ipaddress.IPv4Address(host)
        except ipaddress.AddressValueError as exc:
            msg = f"Invalid IPv4 address: {host!r}"
            raise InvalidURL(msg) from exc
        return host

    if IPv6_STYLE_HOSTNAME.match(host):
        try:
            ipaddress.IPv6Address(host[1:-1])
        except ipaddress.AddressValueError as exc:
            msg = f"Invalid IPv6 address: {host!r}"
            raise InvalidURL(msg) from exc
        return host

    return host


def _parse_port(port: str | None) -> int | None:
    if not port:
        return None
    if not PORT_DIGITS.fullmatch(port):
        msg = f"Invalid port: {port!r}"
        raise InvalidURL(msg)
    return validate_port(int(port))


def parse_url(text: str, *, max_length: int = MAX_URL_LENGTH) -> Url:
    """Parse *text* into a ``Url``.

    Relative references are accepted; absent components stay absent.
    User info is kept exactly as written (already percent-encoded).

    Raises:
        InvalidURL: If *text* is too long, holds control characters, or
            has a malformed port or IP literal.
        InvalidPort: If the port is outside 1-65535.
    """
    if len(text) > max_length:
        msg = "URL too long"
        raise InvalidURL(msg)

    _validate_non_printable(text)

    match = URL_REGEX.fullmatch(text)
    if match is None:  # pragma: no cover — every group is optional
        msg = f"Unparseable URL: {text!r}"
        raise InvalidURL(msg)
    parts = match.groupdict()

    user = password = host = None
    port: int | None = None
    authority = parts["authority"]
    if authority:
        authority_match = AUTHORITY_REGEX.fullmatch(authority)
        if authority_match is None:
            msg = f"Invalid URL authority: {authority!r}"
            raise InvalidURL(msg)
        userinfo = authority_match["userinfo"]
        if userinfo:
            user, _, password = userinfo.partition(":")
        host = _parse_host(authority_match["host"])
        port = _parse_port(authority_match["port"])

    return Url(
        scheme=parts["scheme"],
        user=user,
        password=password,
        host=host,
        port=port,
        path=parts["path"],
        query=parts["query"],
        fragment=parts["fragment"],
    )
