"""Default wrapper registry factory.

Provides :func:`get_wrapper_registry` — the process-wide registry used by
code that does not receive one explicitly.  Thread-safe singleton built from
:class:`~string_toolkit.config.Settings` unless a registry is configured.
"""

from __future__ import annotations

import threading

from ._classifier import default_table
from ._registry import WrapperRegistry
from .config import Settings, load_settings

_lock = threading.Lock()
_instance: WrapperRegistry | None = None


def _build_registry(settings: Settings) -> WrapperRegistry:
    table = default_table()
    if settings.extra_single_byte_encodings:
        table = table.extend(settings.extra_single_byte_encodings)
    return WrapperRegistry(
        default_encoding=settings.default_encoding,
        disabled_features=settings.disabled_features,
        table=table,
    )


def configure_registry(registry: WrapperRegistry) -> None:
    """Install *registry* as the process-wide default.

    Called once at application startup by code that builds its own registry
    (for example via :func:`~string_toolkit.initialize_registry`).
    """
    global _instance
    with _lock:
        _instance = registry


def get_wrapper_registry() -> WrapperRegistry:
    """Return the process-wide :class:`WrapperRegistry`.

    Thread-safe.  Created on first call from environment settings; its
    backends are populated lazily on first use.
    """
    global _instance
    if _instance is not None:
        return _instance

    with _lock:
        # Double-checked locking
        if _instance is not None:
            return _instance

        _instance = _build_registry(load_settings())
        return _instance


def reset_registry() -> None:
    """Reset the singleton.  **For testing only.**"""
    global _instance
    with _lock:
        _instance = None
