"""Germanic language profiles: English, German, Danish."""
from __future__ import annotations

from ..models.profile import ConnectorRule, LanguageProfile, ScaleMode

ENGLISH = LanguageProfile(
    code="en",
    name="English",
    zero_word="zero",
    negative_word="minus",
    decimal_separator_word="point",
    ones_words={1: "one", 2: "two", 3: "three", 4: "four", 5: "five", 6: "six", 7: "seven", 8: "eight", 9: "nine"},
    teens_words={
        0: "ten", 1: "eleven", 2: "twelve", 3: "thirteen", 4: "fourteen",
        5: "fifteen", 6: "sixteen", 7: "seventeen", 8: "eighteen", 9: "nineteen",
    },
    tens_words={2: "twenty", 3: "thirty", 4: "forty", 5: "fifty", 6: "sixty", 7: "seventy", 8: "eighty", 9: "ninety"},
    tens_ones_joiner="-",
    hundred_word="hundred",
    hundred_remainder_joiner=" and ",
    scale_mode=ScaleMode.SIMPLE,
    thousand_word="thousand",
    scale_words=[
        "thousand", "million", "billion", "trillion", "quadrillion", "quintillion", "sextillion",
        "septillion", "octillion", "nonillion", "decillion", "undecillion", "duodecillion",
        "tredecillion", "quattuordecillion", "quindecillion", "sexdecillion", "septendecillion",
        "octodecillion", "novemdecillion", "vigintillion",
    ],
    scale_connector="and",
    connector_rule=ConnectorRule.BELOW_HUNDRED,
)

# German glues everything below a million into one word and puts units before
# tens ("zweiunddreißig"); million and above are separate, capitalised nouns.
GERMAN = LanguageProfile(
    code="de",
    name="Deutsch",
    zero_word="null",
    negative_word="minus",
    decimal_separator_word="komma",
    ones_words={1: "eins", 2: "zwei", 3: "drei", 4: "vier", 5: "fünf", 6: "sechs", 7: "sieben", 8: "acht", 9: "neun"},
    teens_words={
        0: "zehn", 1: "elf", 2: "zwölf", 3: "dreizehn", 4: "vierzehn",
        5: "fünfzehn", 6: "sechzehn", 7: "siebzehn", 8: "achtzehn", 9: "neunzehn",
    },
    tens_words={
        2: "zwanzig", 3: "dreißig", 4: "vierzig", 5: "fünfzig",
        6: "sechzig", 7: "siebzig", 8: "achtzig", 9: "neunzig",
    },
    units_before_tens=True,
    tens_connector="und",
    units_before_tens_words={1: "ein"},
    ones_before_scale_words={1: "ein"},
    hundred_word="hundert",
    hundred_joiner="",
    hundred_remainder_joiner="",
    multiplier_words={1: "ein"},
    scale_mode=ScaleMode.THOUSAND_SEPARATED,
    thousand_word="tausend",
    scale_words=[
        "Million", "Milliarde", "Billion", "Billiarde",
        "Trillion", "Trilliarde", "Quadrillion", "Quadrilliarde",
    ],
    scale_plural_words=[
        "Millionen", "Milliarden", "Billionen", "Billiarden",
        "Trillionen", "Trilliarden", "Quadrillionen", "Quadrilliarden",
    ],
    one_before_scale_word="eine",
    thousand_compound=True,
)

DANISH = LanguageProfile(
    code="da",
    name="Dansk",
    zero_word="nul",
    negative_word="minus",
    decimal_separator_word="komma",
    ones_words={1: "et", 2: "to", 3: "tre", 4: "fire", 5: "fem", 6: "seks", 7: "syv", 8: "otte", 9: "ni"},
    teens_words={
        0: "ti", 1: "elleve", 2: "tolv", 3: "tretten", 4: "fjorten",
        5: "femten", 6: "seksten", 7: "sytten", 8: "atten", 9: "nitten",
    },
    tens_words={
        2: "tyve", 3: "tredive", 4: "fyrre", 5: "halvtreds",
        6: "treds", 7: "halvfjerds", 8: "firs", 9: "halvfems",
    },
    units_before_tens=True,
    tens_connector="og",
    units_before_tens_words={1: "en"},
    hundred_word="hundrede",
    hundred_joiner="",
    hundred_remainder_joiner=" og ",
    multiplier_words={1: "et"},
    scale_mode=ScaleMode.THOUSAND_SEPARATED,
    thousand_word="tusind",
    scale_words=[
        "million", "milliard", "billion", "billiard",
        "trillion", "trilliard", "quadrillion", "quadrilliard",
    ],
    scale_plural_words=[
        "millioner", "milliarder", "billioner", "billiarder",
        "trillioner", "trilliarder", "quadrillioner", "quadrilliarder",
    ],
    one_before_scale_word="en",
    thousand_compound=True,
    thousand_compound_suffix="e",
    thousand_compound_joiner=" og ",
)
