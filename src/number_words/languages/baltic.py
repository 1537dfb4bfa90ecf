"""Baltic language profiles: Lithuanian, Latvian."""
from __future__ import annotations

from ..models.profile import HundredPlural, LanguageProfile, PluralRule, ScaleMode

LITHUANIAN = LanguageProfile(
    code="lt",
    name="Lietuvių",
    zero_word="nulis",
    negative_word="minus",
    decimal_separator_word="kablelis",
    ones_words={
        1: "vienas", 2: "du", 3: "trys", 4: "keturi", 5: "penki",
        6: "šeši", 7: "septyni", 8: "aštuoni", 9: "devyni",
    },
    ones_feminine_words={
        1: "viena", 2: "dvi", 3: "trys", 4: "keturios", 5: "penkios",
        6: "šešios", 7: "septynios", 8: "aštuonios", 9: "devynios",
    },
    teens_words={
        0: "dešimt", 1: "vienuolika", 2: "dvylika", 3: "trylika", 4: "keturiolika",
        5: "penkiolika", 6: "šešiolika", 7: "septyniolika", 8: "aštuoniolika", 9: "devyniolika",
    },
    tens_words={
        2: "dvidešimt", 3: "trisdešimt", 4: "keturiasdešimt", 5: "penkiasdešimt",
        6: "šešiasdešimt", 7: "septyniasdešimt", 8: "aštuoniasdešimt", 9: "devyniasdešimt",
    },
    hundred_word="šimtas",
    hundred_plural_word="šimtai",
    hundred_plural=HundredPlural.ALWAYS,
    scale_mode=ScaleMode.INFLECTED,
    plural_rule=PluralRule.LITHUANIAN,
    plural_forms={
        1: ["tūkstantis", "tūkstančiai", "tūkstančių"],
        2: ["milijonas", "milijonai", "milijonų"],
        3: ["milijardas", "milijardai", "milijardų"],
        4: ["trilijonas", "trilijonai", "trilijonų"],
        5: ["kvadrilijonas", "kvadrilijonai", "kvadrilijonų"],
        6: ["kvintilijonas", "kvintilijonai", "kvintilijonų"],
        7: ["sekstilijonas", "sekstilijonai", "sekstilijonų"],
        8: ["septilijonas", "septilijonai", "septilijonų"],
        9: ["oktilijonas", "oktilijonai", "oktilijonų"],
        10: ["naintilijonas", "naintilijonai", "naintilijonų"],
    },
    gender_below_thousand_only=True,
)

# Latvian reads a bare hundred as "simts" but "simtu" when only units follow
# ("simtu četri"), and drops "one" before every scale word.
LATVIAN = LanguageProfile(
    code="lv",
    name="Latviešu",
    zero_word="nulle",
    negative_word="mīnus",
    decimal_separator_word="komats",
    ones_words={
        1: "viens", 2: "divi", 3: "trīs", 4: "četri", 5: "pieci",
        6: "seši", 7: "septiņi", 8: "astoņi", 9: "deviņi",
    },
    ones_feminine_words={
        1: "viena", 2: "divas", 3: "trīs", 4: "četras", 5: "piecas",
        6: "sešas", 7: "septiņas", 8: "astoņas", 9: "deviņas",
    },
    teens_words={
        0: "desmit", 1: "vienpadsmit", 2: "divpadsmit", 3: "trīspadsmit", 4: "četrpadsmit",
        5: "piecpadsmit", 6: "sešpadsmit", 7: "septiņpadsmit", 8: "astoņpadsmit", 9: "deviņpadsmit",
    },
    tens_words={
        2: "divdesmit", 3: "trīsdesmit", 4: "četrdesmit", 5: "piecdesmit",
        6: "sešdesmit", 7: "septiņdesmit", 8: "astoņdesmit", 9: "deviņdesmit",
    },
    hundred_word="simts",
    hundred_plural_word="simti",
    hundred_plural=HundredPlural.ALWAYS,
    one_hundred_before_units_word="simtu",
    omit_one_before_hundred=True,
    scale_mode=ScaleMode.INFLECTED,
    plural_rule=PluralRule.BALTIC,
    plural_forms={
        1: ["tūkstotis", "tūkstoši", "tūkstošu"],
        2: ["miljons", "miljoni", "miljonu"],
        3: ["miljards", "miljardi", "miljardu"],
        4: ["triljons", "triljoni", "triljonu"],
        5: ["kvadriljons", "kvadriljoni", "kvadriljonu"],
        6: ["kvintiljons", "kvintiljoni", "kvintiljonu"],
        7: ["sekstiljons", "sekstiljoni", "sekstiljonu"],
        8: ["septiljons", "septiljoni", "septiljonu"],
        9: ["oktiljons", "oktiljoni", "oktiljonu"],
        10: ["noniljons", "noniljoni", "noniljonu"],
    },
    omit_one_before_thousand=True,
    omit_one_before_scale=True,
    gender_below_thousand_only=True,
)
