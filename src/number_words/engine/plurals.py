"""Plural form selection by numeric congruence.

Every rule is a pure function of ``(n, forms)``. Form lists hold complete
words; nothing here builds a form by trimming or appending suffixes.
"""

from __future__ import annotations

from typing import Callable, Sequence

from ..models.profile import PluralRule


def slavic_form(n: int, forms: Sequence[str]) -> str:
    """Russian/Ukrainian: one / few (2-4) / many, teens always many."""
    d1 = n % 10
    d2 = n % 100
    if 11 <= d2 <= 19:
        return forms[2]
    if d1 == 1:
        return forms[0]
    if 2 <= d1 <= 4:
        return forms[1]
    return forms[2]


def baltic_form(n: int, forms: Sequence[str]) -> str:
    """Latvian: dedicated genitive for zero, singular for ...1 except 11."""
    if n == 0:
        return forms[2]
    if n % 10 == 1 and n % 100 != 11:
        return forms[0]
    return forms[1]


def west_slavic_form(n: int, forms: Sequence[str]) -> str:
    """Polish/Czech: singular only for exactly one; 21 takes the many form."""
    if n == 1:
        return forms[0]
    d1 = n % 10
    d2 = n % 100
    if 2 <= d1 <= 4 and not 10 <= d2 <= 20:
        return forms[1]
    return forms[2]


def lithuanian_form(n: int, forms: Sequence[str]) -> str:
    d1 = n % 10
    d2 = n % 100
    if 10 <= d2 <= 19 or d1 == 0:
        return forms[2]
    if d1 == 1:
        return forms[0]
    return forms[1]


def binary_form(n: int, forms: Sequence[str]) -> str:
    return forms[0] if n == 1 else forms[1]


_RULES: dict[PluralRule, Callable[[int, Sequence[str]], str]] = {
    PluralRule.SLAVIC: slavic_form,
    PluralRule.BALTIC: baltic_form,
    PluralRule.WEST_SLAVIC: west_slavic_form,
    PluralRule.LITHUANIAN: lithuanian_form,
    PluralRule.BINARY: binary_form,
}


def pluralize(n: int, forms: Sequence[str], rule: PluralRule = PluralRule.SLAVIC) -> str:
    """Pick the form of *forms* that agrees with the count *n*."""
    if n < 0:
        raise ValueError(f"Cannot pluralize a negative count: {n}")
    if len(forms) == 1:
        return forms[0]
    if rule is not PluralRule.BINARY and len(forms) < 3:
        raise ValueError(f"{rule.value} rule needs three forms, got {forms!r}")
    return _RULES[rule](n, forms)
