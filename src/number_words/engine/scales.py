"""Scale word resolution.

Each ``ScaleMode`` has one resolver. All of them return an empty string when
the profile has no word for the requested index; the converter decides
whether that is an error (see ``OverflowPolicy``).
"""

from __future__ import annotations

from typing import Callable, Sequence

from ..models.profile import LanguageProfile, ScaleMode
from .plurals import pluralize


def _pick(words: Sequence[str], plurals: Sequence[str], position: int, plural: bool) -> str:
    if position < 0 or position >= len(words):
        return ""
    if plural and plurals:
        return plurals[position]
    return words[position]


def _simple(scale_index: int, value: int, profile: LanguageProfile) -> str:
    return _pick(profile.scale_words, (), scale_index - 1, plural=False)


def _thousand_separated(scale_index: int, value: int, profile: LanguageProfile) -> str:
    if scale_index == 1:
        return profile.thousand_word
    return _pick(profile.scale_words, profile.scale_plural_words, scale_index - 2, plural=value > 1)


def _compound(scale_index: int, value: int, profile: LanguageProfile) -> str:
    """Long scale: odd indexes above 1 read as "thousand" + the named scale below."""
    if scale_index == 1:
        return profile.thousand_word
    if scale_index % 2 == 0:
        return _pick(profile.scale_words, profile.scale_plural_words, scale_index // 2 - 1, plural=value > 1)
    named = _pick(profile.scale_words, profile.scale_plural_words, (scale_index - 1) // 2 - 1, plural=True)
    if not named:
        return ""
    return f"{profile.thousand_word} {named}"


def _inflected(scale_index: int, value: int, profile: LanguageProfile) -> str:
    forms = profile.plural_forms.get(scale_index)
    if not forms:
        return ""
    return pluralize(value, forms, profile.plural_rule)


def _myriad(scale_index: int, value: int, profile: LanguageProfile) -> str:
    return _pick(profile.scale_words, (), scale_index - 1, plural=False)


_RESOLVERS: dict[ScaleMode, Callable[[int, int, LanguageProfile], str]] = {
    ScaleMode.SIMPLE: _simple,
    ScaleMode.THOUSAND_SEPARATED: _thousand_separated,
    ScaleMode.COMPOUND: _compound,
    ScaleMode.INFLECTED: _inflected,
    ScaleMode.MYRIAD: _myriad,
}


def resolve_scale_word(scale_index: int, value: int, profile: LanguageProfile) -> str:
    """Return the scale word for *scale_index*, agreeing with the segment *value*."""
    if scale_index < 1:
        raise ValueError(f"Scale words start at index 1, got {scale_index}")
    return _RESOLVERS[profile.scale_mode](scale_index, value, profile)


def max_scale_index(profile: LanguageProfile) -> int:
    """Largest scale index the profile can name."""
    mode = profile.scale_mode
    if mode is ScaleMode.INFLECTED:
        return max(profile.plural_forms, default=0)
    if mode is ScaleMode.THOUSAND_SEPARATED:
        return len(profile.scale_words) + 1
    if mode is ScaleMode.COMPOUND:
        # each named scale also covers the "thousand <scale>" index above it
        return 2 * len(profile.scale_words) + 1
    return len(profile.scale_words)


def is_thousand_index(scale_index: int, profile: LanguageProfile) -> bool:
    """True when *scale_index* is the plain thousand level of a 3-digit profile."""
    return scale_index == 1 and profile.scale_mode is not ScaleMode.MYRIAD
