"""Case-insensitive, case-preserving HTTP header store.

Each entry is keyed by the lowercased name and records the casing of the
first ``set``/``add`` for that name next to its values, so lookups never
scan every stored key.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from missive._internal.types import HeaderValue


def as_header_values(value: HeaderValue) -> list[str]:
    """Coerce a single value or a sequence of values to a list."""
    if isinstance(value, str):
        return [value]
    return list(value)


class HeaderCollection:
    """Multi-valued header store with case-insensitive names.

    Mutated in place by ``set``/``add``/``remove`` until ``freeze()``.
    A message freezes its own copy of the headers it is given, so a
    frozen collection can be shared between message snapshots; message
    ``with_*()`` calls edit an unfrozen ``copy()``.

    ``get`` returns every value for a name (an empty list when absent).
    ``all`` returns ``{original_name: [values]}``.
    """

    __slots__ = ("_entries", "_frozen")

    def __init__(
        self,
        headers: Mapping[str, HeaderValue] | Iterable[tuple[str, HeaderValue]] | None = None,
    ) -> None:
        self._entries: dict[str, tuple[str, list[str]]] = {}
        self._frozen = False
        if headers is None:
            return
        if isinstance(headers, HeaderCollection):
            self._entries = headers.copy()._entries
            return
        items = headers.items() if isinstance(headers, Mapping) else headers
        for name, value in items:
            self.add(name, value)

    def all(self) -> dict[str, list[str]]:
        """Every stored name (original casing) with a copy of its values."""
        return {name: list(values) for name, values in self._entries.values()}

    def has(self, name: str) -> bool:
        """True if a header matching *name* case-insensitively exists."""
        return name.lower() in self._entries

    def get(self, name: str) -> list[str]:
        """Return all values for *name*, or an empty list."""
        entry = self._entries.get(name.lower())
        if entry is None:
            return []
        return list(entry[1])

    def set(self, name: str, value: HeaderValue) -> None:
        """Replace the values for *name*.

        An existing entry keeps its stored casing; a new entry adopts
        the casing of *name*.
        """
        self._check_mutable()
        key = name.lower()
        existing = self._entries.get(key)
        stored_name = existing[0] if existing is not None else name
        self._entries[key] = (stored_name, as_header_values(value))

    def add(self, name: str, value: HeaderValue) -> None:
        """Append *value* to the values for *name*, creating the entry if needed."""
        self._check_mutable()
        key = name.lower()
        existing = self._entries.get(key)
        if existing is None:
            self._entries[key] = (name, as_header_values(value))
        else:
            existing[1].extend(as_header_values(value))

    def remove(self, name: str) -> None:
        """Delete the entry for *name*. No-op when absent."""
        self._check_mutable()
        self._entries.pop(name.lower(), None)

    def copy(self) -> HeaderCollection:
        """Return an independent, unfrozen collection with the same entries."""
        clone = HeaderCollection()
        clone._entries = {key: (name, list(values)) for key, (name, values) in self._entries.items()}
        return clone

    def freeze(self) -> HeaderCollection:
        """Reject any further mutation and return this collection."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            msg = "HeaderCollection is frozen; edit a copy() instead"
            raise TypeError(msg)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return self.has(name)

    def __iter__(self) -> Iterator[str]:
        for name, _ in self._entries.values():
            yield name

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HeaderCollection):
            return NotImplemented
        return self.all() == other.all()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        items = ", ".join(f"{name!r}: {values!r}" for name, values in self._entries.values())
        return f"HeaderCollection({{{items}}})"
