"""String toolkit — pick a string backend by the encodings it must handle.

Usage::

    from string_toolkit import get_wrapper_registry

    registry = get_wrapper_registry()
    backend = registry.resolve(["ISO-8859-1", "UTF-8"])

Applications that own their startup can build the registry explicitly::

    from string_toolkit import configure_registry, detect_features, initialize_registry

    configure_registry(initialize_registry(detect_features()))

Additional backends join with ``register()`` at the lowest priority.
"""

from ._classifier import (
    DEFAULT_SINGLE_BYTE_ENCODINGS,
    SingleByteEncodingTable,
    is_single_byte_encoding,
    list_single_byte_encodings,
)
from ._factory import configure_registry, get_wrapper_registry, reset_registry
from ._protocols import BackendCapability, StringWrapper
from ._registry import WrapperRegistry, build_default_backends, initialize_registry
from ._types import (
    DEFAULT_ENCODING,
    NoCapableBackendError,
    StringToolkitError,
    TypeMismatchError,
)
from ._utf8 import is_valid_utf8
from .config import Settings, load_settings
from .features import Feature, detect_features, is_feature_available
from .impl import CodecsBackend, NativeBackend

__all__ = [
    # Factory
    "get_wrapper_registry",
    "configure_registry",
    "reset_registry",
    # Registry
    "WrapperRegistry",
    "initialize_registry",
    "build_default_backends",
    # Protocols
    "BackendCapability",
    "StringWrapper",
    # Backends
    "CodecsBackend",
    "NativeBackend",
    # Features
    "Feature",
    "detect_features",
    "is_feature_available",
    # Classification
    "DEFAULT_SINGLE_BYTE_ENCODINGS",
    "SingleByteEncodingTable",
    "list_single_byte_encodings",
    "is_single_byte_encoding",
    # Validation
    "is_valid_utf8",
    # Config
    "Settings",
    "load_settings",
    # Constants
    "DEFAULT_ENCODING",
    # Exceptions
    "StringToolkitError",
    "NoCapableBackendError",
    "TypeMismatchError",
]
