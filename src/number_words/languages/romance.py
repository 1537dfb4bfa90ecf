"""Romance language profiles: French, Italian, European Portuguese."""
from __future__ import annotations

from ..models.profile import ConnectorRule, HundredPlural, LanguageProfile, ScaleMode

# ── French ───────────────────────────────────────────────────────────────

_FR_ONES = {1: "un", 2: "deux", 3: "trois", 4: "quatre", 5: "cinq", 6: "six", 7: "sept", 8: "huit", 9: "neuf"}
_FR_TEENS = {
    0: "dix", 1: "onze", 2: "douze", 3: "treize", 4: "quatorze",
    5: "quinze", 6: "seize", 7: "dix-sept", 8: "dix-huit", 9: "dix-neuf",
}

# Vigesimal 70-99 plus the "et un" forms; everything else is regular tens-units
_FR_COMPOUNDS: dict[int, str] = {
    21: "vingt et un",
    31: "trente et un",
    41: "quarante et un",
    51: "cinquante et un",
    61: "soixante et un",
    71: "soixante et onze",
}
for _digit in range(2, 10):
    _FR_COMPOUNDS[70 + _digit] = f"soixante-{_FR_TEENS[_digit]}"
for _digit in range(1, 10):
    _FR_COMPOUNDS[80 + _digit] = f"quatre-vingt-{_FR_ONES[_digit]}"
    _FR_COMPOUNDS[90 + _digit] = f"quatre-vingt-{_FR_TEENS[_digit]}"

FRENCH = LanguageProfile(
    code="fr",
    name="Français",
    zero_word="zéro",
    negative_word="moins",
    decimal_separator_word="virgule",
    ones_words=_FR_ONES,
    teens_words=_FR_TEENS,
    tens_words={
        2: "vingt", 3: "trente", 4: "quarante", 5: "cinquante",
        6: "soixante", 7: "soixante-dix", 8: "quatre-vingts", 9: "quatre-vingt-dix",
    },
    compound_words=_FR_COMPOUNDS,
    compound_words_before_thousand={80: "quatre-vingt"},
    tens_ones_joiner="-",
    hundred_word="cent",
    hundred_plural_word="cents",
    hundred_plural=HundredPlural.ROUND,
    hundred_invariable_before_thousand=True,
    omit_one_before_hundred=True,
    scale_mode=ScaleMode.THOUSAND_SEPARATED,
    thousand_word="mille",
    scale_words=[
        "million", "milliard", "billion", "billiard",
        "trillion", "trilliard", "quadrillion", "quadrilliard",
    ],
    scale_plural_words=[
        "millions", "milliards", "billions", "billiards",
        "trillions", "trilliards", "quadrillions", "quadrilliards",
    ],
    omit_one_before_thousand=True,
)

# ── Italian ──────────────────────────────────────────────────────────────

# A tens or hundreds word loses its final vowel before "uno" and "otto"
# (ventuno, trentotto, centottanta).
_IT_ELISIONS = (("io", "o"), ("ao", "o"), ("oo", "o"), ("iu", "u"), ("au", "u"))

ITALIAN = LanguageProfile(
    code="it",
    name="Italiano",
    zero_word="zero",
    negative_word="meno",
    decimal_separator_word="virgola",
    ones_words={1: "uno", 2: "due", 3: "tre", 4: "quattro", 5: "cinque", 6: "sei", 7: "sette", 8: "otto", 9: "nove"},
    teens_words={
        0: "dieci", 1: "undici", 2: "dodici", 3: "tredici", 4: "quattordici",
        5: "quindici", 6: "sedici", 7: "diciassette", 8: "diciotto", 9: "diciannove",
    },
    tens_words={
        2: "venti", 3: "trenta", 4: "quaranta", 5: "cinquanta",
        6: "sessanta", 7: "settanta", 8: "ottanta", 9: "novanta",
    },
    tens_ones_joiner="",
    hundred_word="cento",
    hundred_joiner="",
    hundred_remainder_joiner="",
    omit_one_before_hundred=True,
    scale_mode=ScaleMode.THOUSAND_SEPARATED,
    thousand_word="mila",
    scale_words=[
        "milione", "miliardo", "bilione", "biliardo",
        "trilione", "triliardo", "quadrilione", "quadriliardo",
    ],
    scale_plural_words=[
        "milioni", "miliardi", "bilioni", "biliardi",
        "trilioni", "triliardi", "quadrilioni", "quadriliardi",
    ],
    one_thousand_word="mille",
    one_before_scale_word="un",
    thousand_compound=True,
    scale_connector="e",
    connector_rule=ConnectorRule.SINGLE_WORD,
    concatenate_segments=True,
    phonetic_rules=_IT_ELISIONS,
    post_process="italian_accent",
)

# ── Portuguese (European) ────────────────────────────────────────────────

PORTUGUESE = LanguageProfile(
    code="pt",
    name="Português",
    zero_word="zero",
    negative_word="menos",
    decimal_separator_word="vírgula",
    ones_words={1: "um", 2: "dois", 3: "três", 4: "quatro", 5: "cinco", 6: "seis", 7: "sete", 8: "oito", 9: "nove"},
    teens_words={
        0: "dez", 1: "onze", 2: "doze", 3: "treze", 4: "catorze",
        5: "quinze", 6: "dezasseis", 7: "dezassete", 8: "dezoito", 9: "dezanove",
    },
    tens_words={
        2: "vinte", 3: "trinta", 4: "quarenta", 5: "cinquenta",
        6: "sessenta", 7: "setenta", 8: "oitenta", 9: "noventa",
    },
    tens_ones_joiner=" e ",
    hundreds_words={
        1: "cento", 2: "duzentos", 3: "trezentos", 4: "quatrocentos", 5: "quinhentos",
        6: "seiscentos", 7: "setecentos", 8: "oitocentos", 9: "novecentos",
    },
    hundred_exact_word="cem",
    hundred_remainder_joiner=" e ",
    scale_mode=ScaleMode.COMPOUND,
    thousand_word="mil",
    scale_words=["milhão", "bilião", "trilião", "quatrilião", "quintilião"],
    scale_plural_words=["milhões", "biliões", "triliões", "quatriliões", "quintiliões"],
    omit_one_before_thousand=True,
    scale_connector="e",
    connector_rule=ConnectorRule.BELOW_HUNDRED_OR_ROUND_HUNDRED,
    connector_units_only=False,
)
