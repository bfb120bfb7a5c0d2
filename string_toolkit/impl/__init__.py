"""Capability backends shipped with the toolkit.

``IcuBackend`` is not re-exported here: importing it requires PyICU.  Use
``from string_toolkit.impl.icu_impl import IcuBackend`` where it is needed.
"""

from .codecs_impl import CodecsBackend
from .native import NativeBackend

__all__ = ["CodecsBackend", "NativeBackend"]
