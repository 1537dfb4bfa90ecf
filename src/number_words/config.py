"""Application configuration via environment variables with NUMWORDS_ prefix."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.profile import OverflowPolicy


class Settings(BaseSettings):
    """Number-to-words service configuration.

    All settings are read from environment variables prefixed with ``NUMWORDS_``.
    The conversion defaults apply to the HTTP API; library callers pass their
    own ``ConversionOptions``.
    """

    model_config = SettingsConfigDict(env_prefix="NUMWORDS_")

    # ── Conversion defaults ──────────────────────────────────────────────
    default_lang: str = "en"
    # "raise" rejects numbers beyond a language's scale words; "drop" omits the word
    overflow_policy: OverflowPolicy = OverflowPolicy.RAISE

    # ── Logging ──────────────────────────────────────────────────────────
    log_level: str = "INFO"

    # ── API ──────────────────────────────────────────────────────────────
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = Field(default=["http://localhost:3000"])
    max_input_length: int = Field(default=4096, ge=1)
