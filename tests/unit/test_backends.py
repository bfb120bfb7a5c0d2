"""Unit tests for the bundled capability backends and protocols."""

from __future__ import annotations

import pytest

from string_toolkit import (
    BackendCapability,
    CodecsBackend,
    NativeBackend,
    SingleByteEncodingTable,
    StringWrapper,
    WrapperRegistry,
)


class TestNativeBackend:
    """Baseline backend: single-byte table plus UTF-8."""

    @pytest.mark.parametrize("name", ["UTF-8", "utf-8", "ASCII", "iso-8859-15", "CP-1252"])
    def test_supported(self, name: str) -> None:
        assert NativeBackend().supports(name) is True

    @pytest.mark.parametrize("name", ["UTF-16", "UTF8", "SHIFT_JIS", ""])
    def test_unsupported(self, name: str) -> None:
        assert NativeBackend().supports(name) is False

    def test_supported_encodings_end_with_utf8(self) -> None:
        encodings = NativeBackend().supported_encodings
        assert encodings[-1] == "UTF-8"
        assert len(encodings) == 21

    def test_custom_table(self) -> None:
        backend = NativeBackend(SingleByteEncodingTable(["KOI8-R"]))
        assert backend.supports("koi8-r") is True
        assert NativeBackend().supports("koi8-r") is False


class TestCodecsBackend:
    """Backend driven by Python's codec registry."""

    @pytest.mark.parametrize("name", ["UTF-8", "utf-16", "ISO-8859-1", "latin1", "Shift_JIS", "cp1252"])
    def test_supported(self, name: str) -> None:
        assert CodecsBackend().supports(name) is True

    @pytest.mark.parametrize("name", ["", "NOT-AN-ENCODING", "X-NO-SUCH-CHARSET"])
    def test_unsupported(self, name: str) -> None:
        assert CodecsBackend().supports(name) is False

    @pytest.mark.parametrize("name", ["base64", "rot13", "hex", "zlib", "bz2", "uu", "quopri", "BASE64"])
    def test_non_text_codecs_rejected(self, name: str) -> None:
        assert CodecsBackend().supports(name) is False

    def test_non_text_codec_does_not_resolve(self) -> None:
        registry = WrapperRegistry([CodecsBackend()])
        with pytest.raises(LookupError):
            registry.resolve(["base64"])

    def test_supported_encodings_open_ended(self) -> None:
        assert CodecsBackend().supported_encodings is None


class TestIcuBackend:
    """PyICU-backed backend, exercised against a stand-in ``icu`` module."""

    @pytest.mark.parametrize("name", ["UTF-8", "utf-16", "ISO-8859-1", "Shift_JIS"])
    def test_supported(self, icu_impl, name: str) -> None:
        assert icu_impl.IcuBackend().supports(name) is True

    @pytest.mark.parametrize("name", ["", "X-NO-SUCH-CHARSET"])
    def test_unsupported(self, icu_impl, name: str) -> None:
        assert icu_impl.IcuBackend().supports(name) is False

    def test_supported_encodings_open_ended(self, icu_impl) -> None:
        assert icu_impl.IcuBackend().supported_encodings is None

    def test_satisfies_capability(self, icu_impl) -> None:
        assert isinstance(icu_impl.IcuBackend(), BackendCapability)


class TestIcuBackendWithPyICU:
    """Same contract against the real PyICU, when it is installed."""

    def test_real_converters(self) -> None:
        pytest.importorskip("icu")
        from string_toolkit.impl.icu_impl import IcuBackend

        backend = IcuBackend()
        assert backend.supports("UTF-8") is True
        assert backend.supports("ISO-8859-1") is True
        assert backend.supports("X-NO-SUCH-CHARSET") is False


class _FullWrapper:
    def supports(self, encoding: str) -> bool:
        return encoding.upper() == "UTF-8"

    def strlen(self, data: bytes, encoding: str) -> int:
        return len(data.decode(encoding))

    def substr(self, data: bytes, offset: int, length: int | None = None, encoding: str = "UTF-8") -> bytes:
        text = data.decode(encoding)
        end = None if length is None else offset + length
        return text[offset:end].encode(encoding)

    def strpos(self, haystack: bytes, needle: bytes, offset: int = 0, encoding: str = "UTF-8") -> int | None:
        pos = haystack.decode(encoding).find(needle.decode(encoding), offset)
        return None if pos < 0 else pos

    def convert(self, data: bytes, from_encoding: str, to_encoding: str) -> bytes:
        return data.decode(from_encoding).encode(to_encoding)


class TestProtocols:
    """Runtime protocol checks for capability and transcoding interfaces."""

    def test_bundled_backends_satisfy_capability(self) -> None:
        assert isinstance(NativeBackend(), BackendCapability)
        assert isinstance(CodecsBackend(), BackendCapability)

    def test_capability_only_backend_is_not_wrapper(self) -> None:
        assert not isinstance(NativeBackend(), StringWrapper)
        assert not isinstance(CodecsBackend(), StringWrapper)

    def test_object_without_supports_is_not_capable(self) -> None:
        assert not isinstance(object(), BackendCapability)

    def test_full_wrapper(self) -> None:
        wrapper = _FullWrapper()
        assert isinstance(wrapper, StringWrapper)
        assert isinstance(wrapper, BackendCapability)

    def test_resolved_wrapper_used_for_transcoding(self) -> None:
        registry = WrapperRegistry([CodecsBackend()])
        registry.unregister(registry.list_registered()[0])
        registry.register(_FullWrapper())

        backend = registry.resolve(["UTF-8"])
        assert isinstance(backend, StringWrapper)
        data = "héllo".encode("utf-8")
        assert backend.strlen(data, "UTF-8") == 5
        assert backend.substr(data, 1, 3) == "éll".encode("utf-8")
        assert backend.strpos(data, b"l") == 2
