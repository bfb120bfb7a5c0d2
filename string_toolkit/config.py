"""String toolkit configuration loaded from environment variables."""

from __future__ import annotations

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ._types import DEFAULT_ENCODING
from .features import Feature

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Toolkit settings loaded from environment variables with STRING_TOOLKIT_ prefix."""

    model_config = SettingsConfigDict(
        env_prefix="STRING_TOOLKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    debug: bool = False

    # Encoding used when resolve() is called without encodings
    default_encoding: str = DEFAULT_ENCODING

    # Backend discovery
    disabled_features: list[Feature] = []

    # Names added to the built-in single-byte table
    extra_single_byte_encodings: list[str] = []

    @field_validator("default_encoding")
    @classmethod
    def reject_blank_encoding(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("default_encoding must not be empty")
        return v.strip()

    @field_validator("extra_single_byte_encodings")
    @classmethod
    def uppercase_encodings(cls, v: list[str]) -> list[str]:
        return [name.strip().upper() for name in v if name.strip()]


def load_settings(**overrides: object) -> Settings:
    """Load settings from environment, with optional overrides for testing."""
    settings = Settings(**overrides)  # type: ignore[arg-type]

    if settings.debug:
        logger.info(
            "Loaded string toolkit settings: default_encoding=%s disabled_features=%s",
            settings.default_encoding,
            [f.value for f in settings.disabled_features],
        )

    return settings
