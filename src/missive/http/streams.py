"""In-memory duplex byte stream seeded from a string.

Messages treat bodies as opaque anyio byte streams. ``StringStream`` is
the stock implementation the factories hand out.
"""

from __future__ import annotations

import anyio
import anyio.lowlevel
from anyio.abc import ByteStream


class StringStream(ByteStream):
    """A buffer readable with ``receive()`` and appendable with ``send()``.

    Reads consume from the front of the buffer and raise
    ``anyio.EndOfStream`` once it is drained::

        stream = StringStream("hello")
        await stream.receive(2)  # b'he'
        await stream.send(b" world")
        stream.getvalue()  # 'llo world'
    """

    def __init__(self, content: str | bytes = "", encoding: str = "utf-8") -> None:
        self._encoding = encoding
        data = content.encode(encoding) if isinstance(content, str) else content
        self._buffer = bytearray(data)
        self._eof_sent = False
        self._closed = False

    async def receive(self, max_bytes: int = 65536) -> bytes:
        """Return up to *max_bytes* bytes from the front of the buffer."""
        if max_bytes < 1:
            msg = "max_bytes must be a positive integer"
            raise ValueError(msg)
        await anyio.lowlevel.checkpoint()
        if self._closed:
            raise anyio.ClosedResourceError
        if not self._buffer:
            raise anyio.EndOfStream
        chunk = bytes(self._buffer[:max_bytes])
        del self._buffer[:max_bytes]
        return chunk

    async def send(self, item: bytes) -> None:
        """Append *item* to the buffer."""
        await anyio.lowlevel.checkpoint()
        if self._closed or self._eof_sent:
            raise anyio.ClosedResourceError
        self._buffer.extend(item)

    async def send_eof(self) -> None:
        self._eof_sent = True

    async def aclose(self) -> None:
        self._closed = True
        self._buffer.clear()

    def getvalue(self) -> str:
        """Unread content decoded as text."""
        return self._buffer.decode(self._encoding)

    def __repr__(self) -> str:
        state = "closed" if self._closed else f"{len(self._buffer)} bytes"
        return f"StringStream({state})"
