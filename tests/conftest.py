"""Shared fixtures for string_toolkit tests."""

from __future__ import annotations

import importlib
import sys
import types

import pytest

from string_toolkit import reset_registry


class _FakeICUError(Exception):
    pass


class _FakeUnicodeString:
    known = {"utf-8", "utf-16", "iso-8859-1", "shift_jis"}

    def __init__(self, data: bytes, encoding: str) -> None:
        if encoding.lower() not in self.known:
            raise _FakeICUError(f"U_FILE_ACCESS_ERROR: {encoding}")


@pytest.fixture(autouse=True)
def _reset_singleton():
    """Ensure each test starts without a cached default registry."""
    reset_registry()
    yield
    reset_registry()


@pytest.fixture()
def icu_impl(monkeypatch: pytest.MonkeyPatch):
    """Import ``string_toolkit.impl.icu_impl`` against a stand-in ``icu`` module.

    The stand-in knows UTF-8, UTF-16, ISO-8859-1 and Shift_JIS.
    """
    fake = types.ModuleType("icu")
    fake.ICUError = _FakeICUError
    fake.UnicodeString = _FakeUnicodeString
    monkeypatch.setitem(sys.modules, "icu", fake)
    monkeypatch.delitem(sys.modules, "string_toolkit.impl.icu_impl", raising=False)
    module = importlib.import_module("string_toolkit.impl.icu_impl")
    yield module
    sys.modules.pop("string_toolkit.impl.icu_impl", None)
