"""Number-to-words conversion entry point.

Flow per call:
  parse value -> segment integer digits -> render each segment and resolve
  its scale word -> compose -> add sign and decimal words
"""
from __future__ import annotations

import structlog

from .engine.composer import compose
from .engine.scales import is_thousand_index, max_scale_index, resolve_scale_word
from .engine.segmenter import segment
from .engine.segments import render_segment
from .errors import MagnitudeOverflowError
from .languages.registry import get_profile
from .models.profile import (
    ConversionOptions,
    DecimalMode,
    Gender,
    LanguageProfile,
    OverflowPolicy,
)
from .models.value import NumericValue, PartRole, RenderedPart
from .parsing.numeric import parse

logger = structlog.get_logger(__name__)

DEFAULT_LANG = "en"


def to_words(value, options: ConversionOptions | None = None, **overrides) -> str:
    """Convert *value* to words.

    Args:
        value: int, float, Decimal or numeric string.
        options: Conversion options; keyword arguments (``lang``, ``gender``,
            ``drop_spaces``, ``overflow``) build or override them.

    Raises:
        InvalidNumberError: *value* is not a finite number.
        UnsupportedLanguageError: no profile for the requested language.
        MagnitudeOverflowError: the number needs a scale word the language
            lacks and the overflow policy is ``raise``.
    """
    if options is None:
        options = ConversionOptions(**overrides)
    elif overrides:
        options = ConversionOptions(**{**options.model_dump(), **overrides})

    profile = get_profile(options.lang or DEFAULT_LANG)
    number = parse(value)
    words = number_to_words(number, profile, options)

    if options.drop_spaces:
        if profile.allows_drop_spaces:
            words = "".join(words.split())
        else:
            logger.debug("drop_spaces_ignored", lang=profile.code)

    logger.debug(
        "conversion_complete",
        lang=profile.code,
        integer_digits=len(number.integer_digits),
        decimal_digits=len(number.decimal_digits),
    )
    return words


def number_to_words(number: NumericValue, profile: LanguageProfile, options: ConversionOptions) -> str:
    """Render a parsed number, including its sign and decimal part."""
    sep = profile.word_separator
    words = integer_to_words(number.integer_digits, profile, options)

    if number.is_negative and not number.is_zero:
        words = f"{profile.negative_word}{sep}{words}"

    if number.decimal_digits:
        separator_word = _decimal_separator(number.integer_digits, profile)
        decimals = decimal_to_words(number.decimal_digits, profile, options)
        words = f"{words}{sep}{separator_word}{sep}{decimals}"

    return words


def integer_to_words(digits: str, profile: LanguageProfile, options: ConversionOptions) -> str:
    """Render a non-negative integer digit string."""
    digits = digits.lstrip("0")
    if not digits:
        return profile.zero_word

    # fail before rendering anything when the top group has no scale word
    top_index = -(-len(digits) // profile.group_size) - 1
    if options.overflow is OverflowPolicy.RAISE and top_index > max_scale_index(profile):
        raise MagnitudeOverflowError(profile.code, top_index, max_scale_index(profile))

    below_thousand = len(digits) <= 3
    parts: list[RenderedPart] = []

    for seg in segment(digits, profile.group_size):
        if seg.value == 0:
            continue

        scale_word = ""
        if seg.scale_index:
            scale_word = resolve_scale_word(seg.scale_index, seg.value, profile)
            if not scale_word:
                _handle_overflow(seg.scale_index, profile, options.overflow)

        text = render_segment(
            seg.value,
            profile,
            feminine=_is_feminine(seg.scale_index, profile, options, below_thousand),
            before_scale=bool(scale_word),
            before_thousand=bool(scale_word) and is_thousand_index(seg.scale_index, profile),
        )
        role = PartRole.HUNDRED_COMPOUND if seg.value % 100 == 0 else PartRole.DIGIT_WORD
        parts.append(RenderedPart(text=text, role=role, value=seg.value, scale_index=seg.scale_index))
        if scale_word:
            parts.append(
                RenderedPart(text=scale_word, role=PartRole.SCALE_WORD, value=seg.value, scale_index=seg.scale_index)
            )

    return compose(parts, profile)


def decimal_to_words(digits: str, profile: LanguageProfile, options: ConversionOptions) -> str:
    """Render the digits after the decimal point.

    Grouped mode reads each leading zero as the zero word and the rest as one
    integer ("0.0042" -> "zero zero forty-two"); per-digit mode reads every
    digit on its own.
    """
    sep = profile.word_separator
    if profile.decimal_mode is DecimalMode.PER_DIGIT:
        return sep.join(profile.zero_word if d == "0" else profile.ones_words[int(d)] for d in digits)

    significant = digits.lstrip("0")
    words = [profile.zero_word] * (len(digits) - len(significant))
    if significant:
        words.append(integer_to_words(significant, profile, options))
    return sep.join(words)


def _decimal_separator(integer_digits: str, profile: LanguageProfile) -> str:
    """Separator word, which some languages inflect by the integer part (Czech "celá" / "celé" / "celých")."""
    table = profile.decimal_separator_words
    if not table:
        return profile.decimal_separator_word
    digits = integer_digits.lstrip("0") or "0"
    # keys are small counts; anything longer cannot match
    if len(digits) > len(str(max(table))):
        return profile.decimal_separator_word
    return table.get(int(digits), profile.decimal_separator_word)


def _is_feminine(scale_index: int, profile: LanguageProfile, options: ConversionOptions, below_thousand: bool) -> bool:
    if profile.scale_genders.get(scale_index):
        return True
    if scale_index != 0 or options.gender is not Gender.FEMININE:
        return False
    return below_thousand or not profile.gender_below_thousand_only


def _handle_overflow(scale_index: int, profile: LanguageProfile, policy: OverflowPolicy) -> None:
    limit = max_scale_index(profile)
    if policy is OverflowPolicy.RAISE:
        raise MagnitudeOverflowError(profile.code, scale_index, limit)
    logger.warning("scale_word_missing", lang=profile.code, scale_index=scale_index, max_scale_index=limit)
