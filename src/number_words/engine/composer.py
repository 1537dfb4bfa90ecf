"""Assembly of rendered segments and scale words into the final phrase.

Rules run in a fixed order over the ordered part list:

a. a lone "one" before the thousand word or a higher scale word is elided,
   fused ("mille", "seribu") or swapped for a scale-specific form ("eine");
b. compound-thousand languages glue the segment onto the thousand word and
   absorb the units remainder into the same word;
c. a connector ("and", "e") goes before a qualifying trailing phrase;
d. phrases are otherwise separated by a single space;
e. myriad languages glue digits to scale words and separate groups with the
   profile's group separator; post-process hooks run last.
"""

from __future__ import annotations

import re
from typing import Callable

from ..models.profile import ConnectorRule, LanguageProfile, ScaleMode
from ..models.value import PartRole, RenderedPart


def compose(parts: list[RenderedPart], profile: LanguageProfile) -> str:
    """Join *parts* (segment words interleaved with scale words) into words."""
    phrases = _segment_phrases(parts, profile)
    if profile.thousand_compound:
        phrases = _absorb_units_into_thousand(phrases, profile)

    if profile.scale_mode is ScaleMode.MYRIAD:
        text = profile.group_separator.join(p.text for p in phrases)
    else:
        text = _join_with_connector(phrases, profile)

    if profile.post_process:
        text = POST_PROCESS_HOOKS[profile.post_process](text)
    return text


# ---------------------------------------------------------------------------
# (a) segment phrases and elision
# ---------------------------------------------------------------------------


def _segment_phrases(parts: list[RenderedPart], profile: LanguageProfile) -> list[RenderedPart]:
    phrases: list[RenderedPart] = []
    i = 0
    while i < len(parts):
        digit = parts[i]
        scale = None
        if i + 1 < len(parts) and parts[i + 1].role is PartRole.SCALE_WORD:
            scale = parts[i + 1]
            i += 1
        i += 1
        phrases.append(digit if scale is None else _attach_scale(digit, scale, profile))
    return phrases


def _attach_scale(digit: RenderedPart, scale: RenderedPart, profile: LanguageProfile) -> RenderedPart:
    index = scale.scale_index
    is_thousand = index == 1
    # Long-scale "thousand million" phrases behave like the thousand word
    thousand_led = is_thousand or (
        profile.scale_mode is ScaleMode.COMPOUND and index % 2 == 1
    )
    digit_text = digit.text

    if digit.value == 1:
        if is_thousand and profile.one_thousand_word:
            return _phrase(profile.one_thousand_word, PartRole.THOUSAND_COMPOUND, digit)
        if (thousand_led and profile.omit_one_before_thousand) or (
            not thousand_led and profile.omit_one_before_scale
        ):
            return _phrase(scale.text, PartRole.SCALE_WORD, digit)
        if not is_thousand and profile.one_before_scale_word:
            digit_text = profile.one_before_scale_word
        elif is_thousand and profile.thousand_compound:
            digit_text = profile.multiplier_words.get(1, digit_text)

    if is_thousand and profile.thousand_compound:
        return _phrase(digit_text + scale.text, PartRole.THOUSAND_COMPOUND, digit)
    joiner = "" if profile.scale_mode is ScaleMode.MYRIAD else " "
    if profile.scale_word_first:
        return _phrase(f"{scale.text}{joiner}{digit_text}", PartRole.SCALE_WORD, digit)
    return _phrase(f"{digit_text}{joiner}{scale.text}", PartRole.SCALE_WORD, digit)


def _phrase(text: str, role: PartRole, digit: RenderedPart) -> RenderedPart:
    return RenderedPart(text=text, role=role, value=digit.value, scale_index=digit.scale_index)


# ---------------------------------------------------------------------------
# (b) compound thousands
# ---------------------------------------------------------------------------


def _absorb_units_into_thousand(phrases: list[RenderedPart], profile: LanguageProfile) -> list[RenderedPart]:
    if len(phrases) < 2:
        return phrases
    thousand, units = phrases[-2], phrases[-1]
    if thousand.role is not PartRole.THOUSAND_COMPOUND or units.scale_index != 0:
        return phrases
    merged = RenderedPart(
        text=f"{thousand.text}{profile.thousand_compound_suffix}{profile.thousand_compound_joiner}{units.text}",
        role=PartRole.THOUSAND_COMPOUND,
        value=thousand.value,
        scale_index=thousand.scale_index,
    )
    return phrases[:-2] + [merged]


# ---------------------------------------------------------------------------
# (c)/(d) connectors and spacing
# ---------------------------------------------------------------------------


def _join_with_connector(phrases: list[RenderedPart], profile: LanguageProfile) -> str:
    texts = [p.text for p in phrases]
    if len(phrases) > 1 and _wants_connector(phrases[-1], profile):
        head = " ".join(texts[:-1])
        return f"{head} {profile.scale_connector} {texts[-1]}"
    return " ".join(texts)


def _wants_connector(last: RenderedPart, profile: LanguageProfile) -> bool:
    rule = profile.connector_rule
    if rule is ConnectorRule.NONE or not profile.scale_connector:
        return False
    if profile.connector_units_only and last.scale_index != 0:
        return False
    if rule is ConnectorRule.BELOW_TEN:
        return last.value < 10
    if rule is ConnectorRule.BELOW_HUNDRED:
        return last.value < 100
    if rule is ConnectorRule.BELOW_HUNDRED_OR_ROUND_HUNDRED:
        return last.value < 100 or last.value % 100 == 0
    if rule is ConnectorRule.SINGLE_WORD:
        return " " not in last.text
    return False


# ---------------------------------------------------------------------------
# (e) post-process hooks
# ---------------------------------------------------------------------------

_FINAL_TRE = re.compile(r"(\w+)tre\b")


def italian_accent(text: str) -> str:
    """Restore the written accent on a final "tre" inside a longer word (ventitré)."""
    return _FINAL_TRE.sub(r"\1tré", text)


POST_PROCESS_HOOKS: dict[str, Callable[[str], str]] = {
    "italian_accent": italian_accent,
}
