"""Turkish profile."""
from __future__ import annotations

from ..models.profile import LanguageProfile, ScaleMode

# Turkish is written both spaced ("bin iki yüz") and solid ("binikiyüz") on
# cheques, so it accepts the drop_spaces option.
TURKISH = LanguageProfile(
    code="tr",
    name="Türkçe",
    zero_word="sıfır",
    negative_word="eksi",
    decimal_separator_word="virgül",
    ones_words={1: "bir", 2: "iki", 3: "üç", 4: "dört", 5: "beş", 6: "altı", 7: "yedi", 8: "sekiz", 9: "dokuz"},
    teens_words={
        0: "on", 1: "on bir", 2: "on iki", 3: "on üç", 4: "on dört",
        5: "on beş", 6: "on altı", 7: "on yedi", 8: "on sekiz", 9: "on dokuz",
    },
    tens_words={2: "yirmi", 3: "otuz", 4: "kırk", 5: "elli", 6: "altmış", 7: "yetmiş", 8: "seksen", 9: "doksan"},
    hundred_word="yüz",
    omit_one_before_hundred=True,
    scale_mode=ScaleMode.SIMPLE,
    thousand_word="bin",
    scale_words=[
        "bin", "milyon", "milyar", "trilyon", "katrilyon", "kentilyon",
        "seksilyon", "septilyon", "oktilyon", "nonilyon", "desilyon",
    ],
    omit_one_before_thousand=True,
    allows_drop_spaces=True,
)
