"""Runtime feature detection for backend discovery.

Each optional backend is tied to a :class:`Feature` whose providing module
must be importable.  Detection runs once, when the default registry is
populated.
"""

from __future__ import annotations

import importlib.util
import logging
from enum import Enum

logger = logging.getLogger(__name__)


class Feature(str, Enum):
    """Optional runtime features that enable a backend."""

    ICU = "icu"
    CODECS = "codecs"


# Module that must be importable for each feature to count as available.
FEATURE_MODULES: dict[Feature, str] = {
    Feature.ICU: "icu",
    Feature.CODECS: "codecs",
}


def is_feature_available(feature: Feature) -> bool:
    """Check whether the module providing *feature* can be imported."""
    module_name = FEATURE_MODULES[feature]
    try:
        return importlib.util.find_spec(module_name) is not None
    except (ImportError, ValueError):
        return False


def detect_features(disabled: frozenset[Feature] | set[Feature] = frozenset()) -> frozenset[Feature]:
    """Return the set of available features, minus any in *disabled*.

    Parameters
    ----------
    disabled:
        Features to treat as unavailable regardless of the environment.

    Returns
    -------
    frozenset[Feature]
        Features whose providing module is importable.
    """
    available = frozenset(f for f in Feature if f not in disabled and is_feature_available(f))
    logger.debug("Detected string toolkit features: %s", sorted(f.value for f in available))
    return available
