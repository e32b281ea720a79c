"""Shared type aliases used across missive modules."""

from collections.abc import Sequence
from typing import TypeAlias

from anyio.abc import AnyByteReceiveStream, AnyByteSendStream

# A header value as accepted by the with_* API: one string or several
HeaderValue: TypeAlias = str | Sequence[str]

# Message body — any anyio byte stream, or no body at all
Body: TypeAlias = AnyByteReceiveStream | AnyByteSendStream | None
