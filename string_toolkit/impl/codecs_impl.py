"""Backend backed by Python's codec registry.

Any *text* encoding the codec registry can look up is supported; bytes-to-bytes
transforms such as ``base64``, ``rot13`` or ``zlib`` are not character
encodings and are rejected.  The set is open-ended, so
:attr:`CodecsBackend.supported_encodings` is ``None``.
"""

from __future__ import annotations


class CodecsBackend:
    """Backend supporting every text encoding known to the codec registry."""

    name = "codecs"
    supported_encodings = None

    def supports(self, encoding: str) -> bool:
        if not encoding:
            return False
        # str.encode raises LookupError for unknown names and for
        # non-text codecs ("'base64' is not a text encoding").
        try:
            "".encode(encoding.lower())
        except LookupError:
            return False
        return True

    def __repr__(self) -> str:
        return "<CodecsBackend>"
