"""UTF-8 well-formedness check."""

from __future__ import annotations

from ._types import TypeMismatchError


def is_valid_utf8(data: bytes | bytearray | memoryview | str) -> bool:
    """Return ``True`` if *data* is a well-formed UTF-8 sequence.

    Empty input is valid.  Python's strict UTF-8 codec rejects truncated
    multi-byte sequences, overlong forms, stray continuation bytes and
    encoded surrogates, which is exactly the structural check required.

    A ``str`` is already decoded text; it is valid when it can be encoded
    back to UTF-8 (i.e. it holds no lone surrogates).

    Raises:
        TypeMismatchError: If *data* is neither text nor bytes-like.
    """
    if isinstance(data, str):
        try:
            data.encode("utf-8")
        except UnicodeEncodeError:
            return False
        return True

    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeMismatchError(type(data))

    if not data:
        return True

    try:
        bytes(data).decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True
