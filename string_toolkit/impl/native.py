"""Baseline backend that is always registered last.

Handles the single-byte encodings of its table plus UTF-8, the set a plain
byte-oriented implementation can process without any extension.
"""

from __future__ import annotations

from .._classifier import SingleByteEncodingTable, default_table
from .._types import DEFAULT_ENCODING


class NativeBackend:
    """Fallback backend requiring no optional runtime feature."""

    name = "native"

    def __init__(self, table: SingleByteEncodingTable | None = None) -> None:
        self._table = table if table is not None else default_table()

    @property
    def supported_encodings(self) -> tuple[str, ...]:
        return (*self._table.names, DEFAULT_ENCODING)

    def supports(self, encoding: str) -> bool:
        return encoding.upper() == DEFAULT_ENCODING or self._table.is_single_byte(encoding)

    def __repr__(self) -> str:
        return f"<NativeBackend encodings={len(self._table) + 1}>"
