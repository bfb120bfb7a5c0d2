"""String toolkit protocol definitions.

The registry depends on :class:`BackendCapability` only.  Transcoding
operations live in :class:`StringWrapper`, which backends may implement but
which nothing in this package calls.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class BackendCapability(Protocol):
    """Answer whether a backend can handle a given character encoding."""

    def supports(self, encoding: str) -> bool:
        """Return ``True`` if *encoding* is handled by this backend.

        Must be a pure, non-blocking query: no I/O and no side effects.
        Encoding names are case-insensitive.
        """
        ...


@runtime_checkable
class StringWrapper(BackendCapability, Protocol):
    """Encoding-aware string operations provided by a full backend.

    Extension point for third-party backends.  The bundled backends are
    capability-only and do not implement it; code holding a resolved backend
    checks ``isinstance(backend, StringWrapper)`` before calling these
    methods.  The registry itself never does.
    """

    def strlen(self, data: bytes, encoding: str) -> int:
        """Number of characters in *data* decoded as *encoding*."""
        ...

    def substr(
        self,
        data: bytes,
        offset: int,
        length: int | None = None,
        encoding: str = "UTF-8",
    ) -> bytes:
        """Slice *data* by character positions rather than bytes."""
        ...

    def strpos(self, haystack: bytes, needle: bytes, offset: int = 0, encoding: str = "UTF-8") -> int | None:
        """Character position of *needle* in *haystack*, or ``None``."""
        ...

    def convert(self, data: bytes, from_encoding: str, to_encoding: str) -> bytes:
        """Re-encode *data* from one encoding to another."""
        ...
