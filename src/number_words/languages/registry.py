"""Language profile registry keyed by BCP-47 code."""
from __future__ import annotations

import structlog

from ..errors import UnsupportedLanguageError
from ..models.profile import LanguageProfile
from .austronesian import INDONESIAN
from .baltic import LATVIAN, LITHUANIAN
from .bantu import SWAHILI
from .east_asian import JAPANESE, KOREAN
from .germanic import DANISH, ENGLISH, GERMAN
from .romance import FRENCH, ITALIAN, PORTUGUESE
from .slavic import CZECH, POLISH, RUSSIAN, UKRAINIAN
from .turkic import TURKISH

logger = structlog.get_logger(__name__)

PROFILES: dict[str, LanguageProfile] = {
    profile.code: profile
    for profile in (
        ENGLISH, GERMAN, DANISH,
        FRENCH, ITALIAN, PORTUGUESE,
        RUSSIAN, UKRAINIAN, POLISH, CZECH,
        LITHUANIAN, LATVIAN,
        JAPANESE, KOREAN,
        TURKISH,
        INDONESIAN,
        SWAHILI,
    )
}

_BY_LOWER = {code.lower(): code for code in PROFILES}


def supported_languages() -> list[str]:
    """Sorted list of registered language codes."""
    return sorted(PROFILES)


def get_profile(code: str) -> LanguageProfile:
    """Look up the profile for *code*.

    Matching is case-insensitive and accepts "_" for "-". When the full tag
    is unknown, trailing subtags are dropped one at a time ("pt-PT" -> "pt",
    "zh-Hant-TW" -> "zh-Hant" -> "zh").

    Raises:
        UnsupportedLanguageError: nothing matches, even the primary subtag.
    """
    if code in PROFILES:
        return PROFILES[code]

    subtags = code.strip().replace("_", "-").lower().split("-")
    while subtags and subtags[0]:
        candidate = "-".join(subtags)
        if candidate in _BY_LOWER:
            resolved = _BY_LOWER[candidate]
            logger.debug("language_fallback", requested=code, resolved=resolved)
            return PROFILES[resolved]
        subtags.pop()

    raise UnsupportedLanguageError(code, supported_languages())
