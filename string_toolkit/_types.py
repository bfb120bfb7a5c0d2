"""Shared constants and exceptions for the string toolkit."""

from __future__ import annotations

from collections.abc import Sequence

DEFAULT_ENCODING = "UTF-8"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class StringToolkitError(Exception):
    """Base exception for all string_toolkit errors."""


class NoCapableBackendError(StringToolkitError, LookupError):
    """No registered backend supports every requested encoding."""

    def __init__(self, encodings: Sequence[str]) -> None:
        self.encodings: tuple[str, ...] = tuple(encodings)
        super().__init__(f"No wrapper found supporting encoding(s) {', '.join(self.encodings)}")


class TypeMismatchError(StringToolkitError, TypeError):
    """Input was expected to be text or byte data."""

    def __init__(self, received_type: type) -> None:
        self.received_type = received_type
        super().__init__(f"Expected str or bytes-like input, got {received_type.__name__}")
