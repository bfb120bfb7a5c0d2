"""Single-byte encoding classification.

The default table is a closed, hand-maintained enumeration.  It is not a
canonical alias registry: names outside the table classify as "not single
byte" even if some real-world alias would qualify.  Deployments that need
more names extend the table through configuration
(``STRING_TOOLKIT_EXTRA_SINGLE_BYTE_ENCODINGS``) rather than by editing
the defaults.
"""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_SINGLE_BYTE_ENCODINGS: tuple[str, ...] = (
    "ASCII",
    "7BIT",
    "8BIT",
    "ISO-8859-1",
    "ISO-8859-2",
    "ISO-8859-3",
    "ISO-8859-4",
    "ISO-8859-5",
    "ISO-8859-6",
    "ISO-8859-7",
    "ISO-8859-8",
    "ISO-8859-9",
    "ISO-8859-10",
    "ISO-8859-11",
    "ISO-8859-13",
    "ISO-8859-14",
    "ISO-8859-15",
    "ISO-8859-16",
    "CP-1251",
    "CP-1252",
)


class SingleByteEncodingTable:
    """Immutable set of upper-case single-byte encoding names.

    Display order is preserved (defaults first, extras in the order given);
    duplicates are dropped.
    """

    __slots__ = ("_names", "_lookup")

    def __init__(self, extra: Iterable[str] = ()) -> None:
        names: list[str] = []
        for name in (*DEFAULT_SINGLE_BYTE_ENCODINGS, *extra):
            upper = name.upper()
            if upper not in names:
                names.append(upper)
        self._names: tuple[str, ...] = tuple(names)
        self._lookup: frozenset[str] = frozenset(names)

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def extend(self, extra: Iterable[str]) -> SingleByteEncodingTable:
        """Return a new table containing this table's names plus *extra*."""
        return SingleByteEncodingTable((*self._names, *extra))

    def is_single_byte(self, encoding: str) -> bool:
        return encoding.upper() in self._lookup

    def __contains__(self, encoding: object) -> bool:
        return isinstance(encoding, str) and self.is_single_byte(encoding)

    def __iter__(self):
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"SingleByteEncodingTable({len(self._names)} encodings)"


_DEFAULT_TABLE = SingleByteEncodingTable()


def default_table() -> SingleByteEncodingTable:
    """Return the shared table built from the built-in defaults."""
    return _DEFAULT_TABLE


def list_single_byte_encodings() -> tuple[str, ...]:
    """Return every known single-byte encoding name (upper-case)."""
    return _DEFAULT_TABLE.names


def is_single_byte_encoding(encoding: str) -> bool:
    """Check whether *encoding* is a known single-byte encoding.

    The lookup is case-insensitive.  Unknown names return ``False``.
    """
    return _DEFAULT_TABLE.is_single_byte(encoding)
