"""Rendering of a single digit group into words.

Two strategies exist, picked by the profile's scale mode:

- positional groups of three digits (hundreds, tens, ones) for every
  thousand-based language, driven by the profile's tables and joiners;
- myriad groups of four digits (thousands, hundreds, tens, ones) where each
  sub-digit is followed by its own sub-scale word.
"""

from __future__ import annotations

from ..models.profile import HundredPlural, LanguageProfile, ScaleMode


def render_segment(
    value: int,
    profile: LanguageProfile,
    *,
    feminine: bool = False,
    before_scale: bool = False,
    before_thousand: bool = False,
) -> str:
    """Render *value* (one segment) as words, or ``""`` for zero.

    *before_scale* and *before_thousand* describe what follows the segment, so
    languages whose digit forms change in front of a scale word can pick them.
    """
    if value == 0:
        return ""
    if profile.scale_mode is ScaleMode.MYRIAD:
        return _render_myriad(value, profile)
    return _render_positional(value, profile, feminine, before_scale, before_thousand)


def fuse(left: str, right: str, rules: tuple[tuple[str, str], ...]) -> str:
    """Concatenate two words, contracting the junction with the first matching rule.

    Rules are tried in order; a rule matches when its pattern straddles the
    boundary (for "io" -> "o": *left* ends in "i" and *right* starts with "o").
    Letters away from the junction are never rewritten, so "diciotto" keeps
    its own "io".
    """
    for pattern, replacement in rules:
        for split in range(1, len(pattern)):
            head, tail = pattern[:split], pattern[split:]
            if left.endswith(head) and right.startswith(tail):
                return left[:-split] + replacement + right[len(tail):]
    return left + right


# ---------------------------------------------------------------------------
# Positional (3-digit) groups
# ---------------------------------------------------------------------------


def _render_positional(
    value: int,
    profile: LanguageProfile,
    feminine: bool,
    before_scale: bool,
    before_thousand: bool,
) -> str:
    if value >= 1000:
        raise ValueError(f"Segment value out of range for {profile.code}: {value}")

    hundreds, rest = divmod(value, 100)
    parts: list[str] = []
    if hundreds:
        parts.append(_hundreds(hundreds, rest, profile, before_thousand))
    if rest:
        parts.append(_below_hundred(rest, profile, feminine, before_scale, before_thousand))

    if len(parts) < 2:
        return "".join(parts)
    if profile.concatenate_segments:
        return fuse(parts[0], parts[1], profile.phonetic_rules)
    joiner = profile.hundred_remainder_joiner
    if rest < 10 and profile.hundred_units_joiner:
        joiner = profile.hundred_units_joiner
    return joiner.join(parts)


def _hundreds(hundreds: int, rest: int, profile: LanguageProfile, before_thousand: bool) -> str:
    if hundreds == 1 and rest == 0 and profile.hundred_exact_word:
        return profile.hundred_exact_word
    if hundreds == 1 and 0 < rest < 10 and profile.one_hundred_before_units_word:
        return profile.one_hundred_before_units_word
    if profile.hundreds_words:
        return profile.hundreds_words[hundreds]

    noun = profile.hundred_word
    if hundreds > 1 and profile.hundred_plural_word:
        if profile.hundred_plural is HundredPlural.ALWAYS:
            noun = profile.hundred_plural_word
        elif profile.hundred_plural is HundredPlural.ROUND and rest == 0:
            if not (before_thousand and profile.hundred_invariable_before_thousand):
                noun = profile.hundred_plural_word

    if hundreds == 1 and profile.omit_one_before_hundred:
        return noun
    multiplier = profile.multiplier_words.get(hundreds, profile.ones_words[hundreds])
    if profile.hundred_noun_first:
        return f"{noun}{profile.hundred_joiner}{multiplier}"
    return f"{multiplier}{profile.hundred_joiner}{noun}"


def _below_hundred(
    rest: int,
    profile: LanguageProfile,
    feminine: bool,
    before_scale: bool,
    before_thousand: bool,
) -> str:
    if before_thousand and rest in profile.compound_words_before_thousand:
        return profile.compound_words_before_thousand[rest]
    if rest in profile.compound_words:
        return profile.compound_words[rest]

    tens, ones = divmod(rest, 10)
    if tens == 0:
        return _ones(ones, profile, feminine, before_scale)
    if tens == 1:
        return profile.teens_words[ones]
    if ones == 0:
        return profile.tens_words[tens]
    if profile.units_before_tens:
        unit = profile.units_before_tens_words.get(ones, profile.ones_words[ones])
        return f"{unit}{profile.tens_connector}{profile.tens_words[tens]}"
    unit = _ones(ones, profile, feminine, before_scale)
    if profile.concatenate_segments:
        return fuse(profile.tens_words[tens], unit, profile.phonetic_rules)
    return f"{profile.tens_words[tens]}{profile.tens_ones_joiner}{unit}"


def _ones(digit: int, profile: LanguageProfile, feminine: bool, before_scale: bool) -> str:
    if before_scale and digit in profile.ones_before_scale_words:
        return profile.ones_before_scale_words[digit]
    if feminine and digit in profile.ones_feminine_words:
        return profile.ones_feminine_words[digit]
    return profile.ones_words[digit]


# ---------------------------------------------------------------------------
# Myriad (4-digit) groups
# ---------------------------------------------------------------------------


def _render_myriad(value: int, profile: LanguageProfile) -> str:
    if value >= 10_000:
        raise ValueError(f"Myriad segment value out of range for {profile.code}: {value}")

    thousands, remainder = divmod(value, 1000)
    hundreds, remainder = divmod(remainder, 100)
    tens, ones = divmod(remainder, 10)

    parts: list[str] = []
    for digit, word in ((thousands, profile.thousand_word), (hundreds, profile.hundred_word), (tens, profile.ten_word)):
        if not digit:
            continue
        if digit == 1 and profile.myriad_silent_one:
            parts.append(word)
        else:
            parts.append(profile.ones_words[digit] + word)
    if ones:
        parts.append(profile.ones_words[ones])
    return "".join(parts)
