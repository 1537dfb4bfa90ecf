"""Indonesian profile."""
from __future__ import annotations

from ..models.profile import LanguageProfile, ScaleMode

INDONESIAN = LanguageProfile(
    code="id",
    name="Bahasa Indonesia",
    zero_word="nol",
    negative_word="min",
    decimal_separator_word="koma",
    ones_words={
        1: "satu", 2: "dua", 3: "tiga", 4: "empat", 5: "lima",
        6: "enam", 7: "tujuh", 8: "delapan", 9: "sembilan",
    },
    teens_words={
        0: "sepuluh", 1: "sebelas", 2: "dua belas", 3: "tiga belas", 4: "empat belas",
        5: "lima belas", 6: "enam belas", 7: "tujuh belas", 8: "delapan belas", 9: "sembilan belas",
    },
    tens_words={
        2: "dua puluh", 3: "tiga puluh", 4: "empat puluh", 5: "lima puluh",
        6: "enam puluh", 7: "tujuh puluh", 8: "delapan puluh", 9: "sembilan puluh",
    },
    # "se-" replaces "satu" before ratus and ribu
    hundreds_words={
        1: "seratus", 2: "dua ratus", 3: "tiga ratus", 4: "empat ratus", 5: "lima ratus",
        6: "enam ratus", 7: "tujuh ratus", 8: "delapan ratus", 9: "sembilan ratus",
    },
    scale_mode=ScaleMode.SIMPLE,
    thousand_word="ribu",
    scale_words=[
        "ribu", "juta", "miliar", "triliun", "kuadriliun", "kuintiliun",
        "sekstiliun", "septiliun", "oktiliun", "noniliun", "desiliun",
    ],
    one_thousand_word="seribu",
)
