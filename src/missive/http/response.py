"""Immutable HTTP response.

Status code plus an optional explicit reason phrase. Without one, the
phrase comes from the standard status table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from missive.errors import InvalidStatusCode
from missive.http.message import Message
from missive.http.status import REASON_PHRASES


def _validate_status(status_code: int) -> int:
    if isinstance(status_code, bool) or not isinstance(status_code, int):
        msg = f"Status code must be an int, got {type(status_code).__name__}"
        raise TypeError(msg)
    if not 100 <= status_code <= 599:
        raise InvalidStatusCode(status_code)
    return status_code


@dataclass(frozen=True, slots=True, kw_only=True)
class Response(Message):
    """An HTTP response built through immutable transformations.

    ``phrase`` is the explicit reason phrase, or ``None`` to use the
    default for ``status_code``::

        Response(status_code=404).reason_phrase  # 'Not Found'
        Response(status_code=299).reason_phrase  # ''
    """

    status_code: int = 200
    phrase: str | None = None

    def __post_init__(self) -> None:
        Message.__post_init__(self)
        _validate_status(self.status_code)

    @property
    def reason_phrase(self) -> str:
        """The explicit phrase, else the standard phrase, else ``""``."""
        if self.phrase is not None:
            return self.phrase
        return REASON_PHRASES.get(self.status_code, "")

    def with_status(self, code: int, reason_phrase: str | None = None) -> Self:
        """Return a response with *code* and *reason_phrase*.

        Omitting *reason_phrase* drops any explicit phrase so the
        standard phrase for *code* applies. An empty string is kept as
        an explicitly empty phrase.
        """
        _validate_status(code)
        if code == self.status_code and reason_phrase == self.phrase:
            return self
        return self._evolve(status_code=code, phrase=reason_phrase)
