"""Swahili profile.

Nouns come before their numerals: hundreds read "mia tatu" (hundred three)
and scale phrases "elfu mbili" (thousand two). "na" links a trailing unit to
whatever precedes it ("mia tatu na tano", "elfu moja na tano").
"""
from __future__ import annotations

from ..models.profile import ConnectorRule, LanguageProfile, ScaleMode

_ONES = {1: "moja", 2: "mbili", 3: "tatu", 4: "nne", 5: "tano", 6: "sita", 7: "saba", 8: "nane", 9: "tisa"}

SWAHILI = LanguageProfile(
    code="sw",
    name="Kiswahili",
    zero_word="sifuri",
    negative_word="minus",
    decimal_separator_word="nukta",
    ones_words=_ONES,
    teens_words={0: "kumi", **{d: f"kumi na {word}" for d, word in _ONES.items()}},
    tens_words={
        2: "ishirini", 3: "thelathini", 4: "arobaini", 5: "hamsini",
        6: "sitini", 7: "sabini", 8: "themanini", 9: "tisini",
    },
    tens_ones_joiner=" na ",
    hundred_word="mia",
    hundred_noun_first=True,
    hundred_units_joiner=" na ",
    scale_mode=ScaleMode.SIMPLE,
    thousand_word="elfu",
    scale_words=["elfu", "milioni", "bilioni", "trilioni"],
    scale_word_first=True,
    scale_connector="na",
    connector_rule=ConnectorRule.BELOW_TEN,
    connector_units_only=True,
)
