"""Slavic language profiles: Russian, Ukrainian, Polish, Czech.

All four inflect scale words by the value of the segment in front of them
(one/few/many). Russian and Ukrainian treat "thousand" as feminine, so the
digit before it agrees ("одна тысяча", "дві тисячі").
"""
from __future__ import annotations

from ..models.profile import LanguageProfile, PluralRule, ScaleMode

RUSSIAN = LanguageProfile(
    code="ru",
    name="Русский",
    zero_word="ноль",
    negative_word="минус",
    decimal_separator_word="запятая",
    ones_words={
        1: "один", 2: "два", 3: "три", 4: "четыре", 5: "пять",
        6: "шесть", 7: "семь", 8: "восемь", 9: "девять",
    },
    ones_feminine_words={1: "одна", 2: "две"},
    teens_words={
        0: "десять", 1: "одиннадцать", 2: "двенадцать", 3: "тринадцать", 4: "четырнадцать",
        5: "пятнадцать", 6: "шестнадцать", 7: "семнадцать", 8: "восемнадцать", 9: "девятнадцать",
    },
    tens_words={
        2: "двадцать", 3: "тридцать", 4: "сорок", 5: "пятьдесят",
        6: "шестьдесят", 7: "семьдесят", 8: "восемьдесят", 9: "девяносто",
    },
    hundreds_words={
        1: "сто", 2: "двести", 3: "триста", 4: "четыреста", 5: "пятьсот",
        6: "шестьсот", 7: "семьсот", 8: "восемьсот", 9: "девятьсот",
    },
    scale_mode=ScaleMode.INFLECTED,
    plural_rule=PluralRule.SLAVIC,
    plural_forms={
        1: ["тысяча", "тысячи", "тысяч"],
        2: ["миллион", "миллиона", "миллионов"],
        3: ["миллиард", "миллиарда", "миллиардов"],
        4: ["триллион", "триллиона", "триллионов"],
        5: ["квадриллион", "квадриллиона", "квадриллионов"],
        6: ["квинтиллион", "квинтиллиона", "квинтиллионов"],
        7: ["секстиллион", "секстиллиона", "секстиллионов"],
        8: ["септиллион", "септиллиона", "септиллионов"],
        9: ["октиллион", "октиллиона", "октиллионов"],
        10: ["нониллион", "нониллиона", "нониллионов"],
    },
    scale_genders={1: True},
)

UKRAINIAN = LanguageProfile(
    code="uk",
    name="Українська",
    zero_word="нуль",
    negative_word="мінус",
    decimal_separator_word="кома",
    ones_words={
        1: "один", 2: "два", 3: "три", 4: "чотири", 5: "п'ять",
        6: "шість", 7: "сім", 8: "вісім", 9: "дев'ять",
    },
    ones_feminine_words={1: "одна", 2: "дві"},
    teens_words={
        0: "десять", 1: "одинадцять", 2: "дванадцять", 3: "тринадцять", 4: "чотирнадцять",
        5: "п'ятнадцять", 6: "шістнадцять", 7: "сімнадцять", 8: "вісімнадцять", 9: "дев'ятнадцять",
    },
    tens_words={
        2: "двадцять", 3: "тридцять", 4: "сорок", 5: "п'ятдесят",
        6: "шістдесят", 7: "сімдесят", 8: "вісімдесят", 9: "дев'яносто",
    },
    hundreds_words={
        1: "сто", 2: "двісті", 3: "триста", 4: "чотириста", 5: "п'ятсот",
        6: "шістсот", 7: "сімсот", 8: "вісімсот", 9: "дев'ятсот",
    },
    scale_mode=ScaleMode.INFLECTED,
    plural_rule=PluralRule.SLAVIC,
    plural_forms={
        1: ["тисяча", "тисячі", "тисяч"],
        2: ["мільйон", "мільйони", "мільйонів"],
        3: ["мільярд", "мільярди", "мільярдів"],
        4: ["трильйон", "трильйони", "трильйонів"],
        5: ["квадрильйон", "квадрильйони", "квадрильйонів"],
        6: ["квінтильйон", "квінтильйони", "квінтильйонів"],
        7: ["секстильйон", "секстильйони", "секстильйонів"],
        8: ["септильйон", "септильйони", "септильйонів"],
        9: ["октильйон", "октильйони", "октильйонів"],
        10: ["нонільйон", "нонільйони", "нонільйонів"],
    },
    scale_genders={1: True},
)

# Polish and Czech drop "one" before every scale word ("tysiąc", "milion").
POLISH = LanguageProfile(
    code="pl",
    name="Polski",
    zero_word="zero",
    negative_word="minus",
    decimal_separator_word="przecinek",
    ones_words={
        1: "jeden", 2: "dwa", 3: "trzy", 4: "cztery", 5: "pięć",
        6: "sześć", 7: "siedem", 8: "osiem", 9: "dziewięć",
    },
    ones_feminine_words={1: "jedna", 2: "dwie"},
    teens_words={
        0: "dziesięć", 1: "jedenaście", 2: "dwanaście", 3: "trzynaście", 4: "czternaście",
        5: "piętnaście", 6: "szesnaście", 7: "siedemnaście", 8: "osiemnaście", 9: "dziewiętnaście",
    },
    tens_words={
        2: "dwadzieścia", 3: "trzydzieści", 4: "czterdzieści", 5: "pięćdziesiąt",
        6: "sześćdziesiąt", 7: "siedemdziesiąt", 8: "osiemdziesiąt", 9: "dziewięćdziesiąt",
    },
    hundreds_words={
        1: "sto", 2: "dwieście", 3: "trzysta", 4: "czterysta", 5: "pięćset",
        6: "sześćset", 7: "siedemset", 8: "osiemset", 9: "dziewięćset",
    },
    scale_mode=ScaleMode.INFLECTED,
    plural_rule=PluralRule.WEST_SLAVIC,
    plural_forms={
        1: ["tysiąc", "tysiące", "tysięcy"],
        2: ["milion", "miliony", "milionów"],
        3: ["miliard", "miliardy", "miliardów"],
        4: ["bilion", "biliony", "bilionów"],
        5: ["biliard", "biliardy", "biliardów"],
        6: ["trylion", "tryliony", "trylionów"],
        7: ["tryliard", "tryliardy", "tryliardów"],
        8: ["kwadrylion", "kwadryliony", "kwadrylionów"],
        9: ["kwadryliard", "kwadryliardy", "kwadryliardów"],
        10: ["kwintylion", "kwintyliony", "kwintylionów"],
    },
    omit_one_before_thousand=True,
    omit_one_before_scale=True,
)

CZECH = LanguageProfile(
    code="cs",
    name="Čeština",
    zero_word="nula",
    negative_word="mínus",
    decimal_separator_word="celých",
    decimal_separator_words={0: "celá", 1: "celá", 2: "celé", 3: "celé", 4: "celé"},
    ones_words={
        1: "jedna", 2: "dva", 3: "tři", 4: "čtyři", 5: "pět",
        6: "šest", 7: "sedm", 8: "osm", 9: "devět",
    },
    teens_words={
        0: "deset", 1: "jedenáct", 2: "dvanáct", 3: "třináct", 4: "čtrnáct",
        5: "patnáct", 6: "šestnáct", 7: "sedmnáct", 8: "osmnáct", 9: "devatenáct",
    },
    tens_words={
        2: "dvacet", 3: "třicet", 4: "čtyřicet", 5: "padesát",
        6: "šedesát", 7: "sedmdesát", 8: "osmdesát", 9: "devadesát",
    },
    hundreds_words={
        1: "sto", 2: "dvě stě", 3: "tři sta", 4: "čtyři sta", 5: "pět set",
        6: "šest set", 7: "sedm set", 8: "osm set", 9: "devět set",
    },
    scale_mode=ScaleMode.INFLECTED,
    plural_rule=PluralRule.WEST_SLAVIC,
    plural_forms={
        1: ["tisíc", "tisíce", "tisíc"],
        2: ["milion", "miliony", "milionů"],
        3: ["miliarda", "miliardy", "miliard"],
        4: ["bilion", "biliony", "bilionů"],
        5: ["biliarda", "biliardy", "biliard"],
        6: ["trilion", "triliony", "trilionů"],
        7: ["triliarda", "triliardy", "triliard"],
        8: ["kvadrilion", "kvadriliony", "kvadrilionů"],
        9: ["kvadriliarda", "kvadriliardy", "kvadriliard"],
        10: ["kvintilion", "kvintiliony", "kvintilionů"],
    },
    omit_one_before_thousand=True,
    omit_one_before_scale=True,
)
