"""Shared test fixtures."""
import pytest
from number_words.config import Settings


@pytest.fixture
def settings(monkeypatch):
    """Settings with defaults only, unaffected by NUMWORDS_* variables in the environment."""
    for name in ("DEFAULT_LANG", "OVERFLOW_POLICY", "LOG_LEVEL", "MAX_INPUT_LENGTH", "CORS_ORIGINS"):
        monkeypatch.delenv(f"NUMWORDS_{name}", raising=False)
    return Settings()
