"""Ordered backend registry with capability-matching lookup.

Registry order is preference order: :meth:`WrapperRegistry.resolve` returns
the *first* backend that supports every requested encoding, so more capable
backends must be registered before less capable ones.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Sequence

from ._classifier import SingleByteEncodingTable
from ._protocols import BackendCapability
from ._types import DEFAULT_ENCODING, NoCapableBackendError
from .features import Feature, detect_features
from .impl.codecs_impl import CodecsBackend
from .impl.native import NativeBackend

logger = logging.getLogger(__name__)


def _icu_backend() -> BackendCapability:
    from .impl.icu_impl import IcuBackend

    return IcuBackend()


# Optional backends, richest first.  The native backend is always appended.
_FEATURE_BACKENDS: tuple[tuple[Feature, Callable[[], BackendCapability]], ...] = (
    (Feature.ICU, _icu_backend),
    (Feature.CODECS, CodecsBackend),
)


def build_default_backends(
    features: Iterable[Feature],
    table: SingleByteEncodingTable | None = None,
) -> list[BackendCapability]:
    """Instantiate the default backends for the given available features.

    Parameters
    ----------
    features:
        Features available in the runtime environment.
    table:
        Single-byte table handed to the native fallback backend.

    Returns
    -------
    list[BackendCapability]
        Backends in priority order, always ending with :class:`NativeBackend`.
    """
    available = frozenset(features)
    backends: list[BackendCapability] = [factory() for feature, factory in _FEATURE_BACKENDS if feature in available]
    backends.append(NativeBackend(table))
    return backends


class WrapperRegistry:
    """Ordered, identity-deduplicated set of backends.

    When constructed without *backends*, the registry populates itself on
    first access from :func:`detect_features`.  Use
    :func:`initialize_registry` to build a populated registry up front.

    All access to the backend list goes through ``_lock``.  :meth:`resolve`
    scans a snapshot, so ``supports()`` is never called with the lock held.
    """

    def __init__(
        self,
        backends: Iterable[BackendCapability] | None = None,
        *,
        default_encoding: str = DEFAULT_ENCODING,
        disabled_features: Iterable[Feature] = (),
        table: SingleByteEncodingTable | None = None,
    ) -> None:
        self._lock = threading.Lock()
        # Keyed by id(); holding the reference keeps the id stable.
        self._backends: dict[int, BackendCapability] | None = None
        self._default_encoding = default_encoding
        self._disabled_features = frozenset(disabled_features)
        self._table = table

        if backends is not None:
            self._backends = {}
            for backend in backends:
                self._backends.setdefault(id(backend), backend)

    @property
    def default_encoding(self) -> str:
        return self._default_encoding

    def _ensure_initialized(self) -> dict[int, BackendCapability]:
        """Populate the default backends once.  Caller must hold ``_lock``."""
        if self._backends is None:
            features = detect_features(self._disabled_features)
            self._backends = {id(b): b for b in build_default_backends(features, self._table)}
            logger.debug(
                "Initialized wrapper registry: %s",
                [type(b).__name__ for b in self._backends.values()],
            )
        return self._backends

    def list_registered(self) -> list[BackendCapability]:
        """Return the registered backends in priority order."""
        with self._lock:
            return list(self._ensure_initialized().values())

    def register(self, backend: BackendCapability) -> None:
        """Append *backend* with the lowest priority.

        Registering an instance that is already present is a no-op.
        """
        with self._lock:
            backends = self._ensure_initialized()
            if id(backend) in backends:
                return
            backends[id(backend)] = backend
        logger.debug("Registered string backend: %r", backend)

    def unregister(self, backend: BackendCapability) -> None:
        """Remove *backend* from the registry.  No-op if it is absent."""
        with self._lock:
            removed = self._ensure_initialized().pop(id(backend), None)
        if removed is not None:
            logger.debug("Unregistered string backend: %r", backend)

    def resolve(self, encodings: str | Sequence[str] = ()) -> BackendCapability:
        """Return the first backend supporting every encoding in *encodings*.

        Parameters
        ----------
        encodings:
            Encoding names.  An empty sequence means the registry's default
            encoding; a bare string is a single encoding name.

        Returns
        -------
        BackendCapability
            The highest-priority backend for which ``supports()`` is true
            for all requested encodings.

        Raises
        ------
        NoCapableBackendError
            If no registered backend supports all of them.  The error's
            ``encodings`` attribute holds the request.
        """
        if isinstance(encodings, str):
            requested: tuple[str, ...] = (encodings,)
        else:
            requested = tuple(encodings) or (self._default_encoding,)

        for backend in self.list_registered():
            if all(backend.supports(encoding) for encoding in requested):
                return backend

        raise NoCapableBackendError(requested)

    def __len__(self) -> int:
        return len(self.list_registered())

    def __contains__(self, backend: object) -> bool:
        with self._lock:
            return id(backend) in self._ensure_initialized()


def initialize_registry(
    features: Iterable[Feature],
    *,
    default_encoding: str = DEFAULT_ENCODING,
    table: SingleByteEncodingTable | None = None,
) -> WrapperRegistry:
    """Build a registry populated for the given available features.

    Intended to be called once at application startup, typically with the
    result of :func:`detect_features`.
    """
    backends = build_default_backends(features, table)
    registry = WrapperRegistry(backends, default_encoding=default_encoding, table=table)
    logger.debug("Initialized wrapper registry: %s", [type(b).__name__ for b in backends])
    return registry
