"""ICU-backed backend (PyICU).

This is the only module that imports ``icu``.  It is imported lazily, once
:data:`~string_toolkit.features.Feature.ICU` has been detected, so PyICU
stays an optional dependency.
"""

from __future__ import annotations

import icu

# Decoding a non-empty sample forces ICU to open a converter for the name.
_SAMPLE_BYTES = b"a"


class IcuBackend:
    """Backend supporting every charset ICU can open a converter for."""

    name = "icu"
    supported_encodings = None

    def supports(self, encoding: str) -> bool:
        if not encoding:
            return False
        try:
            icu.UnicodeString(_SAMPLE_BYTES, encoding)
        except icu.ICUError:
            return False
        return True

    def __repr__(self) -> str:
        return "<IcuBackend>"
