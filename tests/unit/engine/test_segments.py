"""Test single-segment rendering."""
import pytest
from number_words.engine.segments import fuse, render_segment
from number_words.languages.baltic import LATVIAN, LITHUANIAN
from number_words.languages.bantu import SWAHILI
from number_words.languages.east_asian import JAPANESE
from number_words.languages.germanic import DANISH, ENGLISH, GERMAN
from number_words.languages.romance import FRENCH, ITALIAN, PORTUGUESE
from number_words.languages.slavic import RUSSIAN


class TestPositional:
    @pytest.mark.parametrize("value,expected", [
        (1, "one"),
        (13, "thirteen"),
        (21, "twenty-one"),
        (40, "forty"),
        (100, "one hundred"),
        (305, "three hundred and five"),
        (999, "nine hundred and ninety-nine"),
    ])
    def test_english(self, value, expected):
        assert render_segment(value, ENGLISH) == expected

    def test_zero_is_empty(self):
        assert render_segment(0, ENGLISH) == ""

    def test_out_of_range_raises(self):
        with pytest.raises(ValueError):
            render_segment(1000, ENGLISH)


class TestHundreds:
    def test_omit_one_before_hundred(self):
        assert render_segment(100, FRENCH) == "cent"

    def test_round_hundreds_take_plural(self):
        assert render_segment(200, FRENCH) == "deux cents"

    def test_plural_dropped_when_digits_follow(self):
        assert render_segment(201, FRENCH) == "deux cent un"

    def test_plural_dropped_before_thousand(self):
        assert render_segment(300, FRENCH, before_scale=True, before_thousand=True) == "trois cent"

    def test_plural_kept_before_million(self):
        assert render_segment(300, FRENCH, before_scale=True) == "trois cents"

    def test_always_plural(self):
        assert render_segment(200, LITHUANIAN) == "du šimtai"
        assert render_segment(100, LITHUANIAN) == "vienas šimtas"

    def test_exact_hundred_word(self):
        assert render_segment(100, PORTUGUESE) == "cem"
        assert render_segment(101, PORTUGUESE) == "cento e um"

    def test_irregular_hundreds(self):
        assert render_segment(500, RUSSIAN) == "пятьсот"

    def test_hundred_before_units(self):
        assert render_segment(104, LATVIAN) == "simtu četri"
        assert render_segment(110, LATVIAN) == "simts desmit"

    def test_multiplier_form(self):
        assert render_segment(100, GERMAN) == "einhundert"
        assert render_segment(100, DANISH) == "ethundrede"


class TestBelowHundred:
    def test_units_before_tens(self):
        assert render_segment(32, GERMAN) == "zweiunddreißig"
        assert render_segment(21, GERMAN) == "einundzwanzig"
        assert render_segment(96, DANISH) == "seksoghalvfems"

    def test_compound_table(self):
        assert render_segment(71, FRENCH) == "soixante et onze"
        assert render_segment(97, FRENCH) == "quatre-vingt-dix-sept"

    def test_compound_table_before_thousand(self):
        assert render_segment(80, FRENCH) == "quatre-vingts"
        assert render_segment(80, FRENCH, before_scale=True, before_thousand=True) == "quatre-vingt"

    def test_feminine_units(self):
        assert render_segment(2, RUSSIAN, feminine=True) == "две"
        assert render_segment(22, RUSSIAN, feminine=True) == "двадцать две"
        assert render_segment(5, RUSSIAN, feminine=True) == "пять"

    def test_one_before_scale(self):
        assert render_segment(1, GERMAN) == "eins"
        assert render_segment(1, GERMAN, before_scale=True) == "ein"


class TestConcatenation:
    @pytest.mark.parametrize("value,expected", [
        (21, "ventuno"),
        (28, "ventotto"),
        (38, "trentotto"),
        (18, "diciotto"),
        (101, "centouno"),
        (180, "centottanta"),
        (123, "centoventitre"),
    ])
    def test_italian_elision(self, value, expected):
        assert render_segment(value, ITALIAN) == expected

    def test_fuse_only_touches_the_junction(self):
        rules = (("io", "o"),)
        assert fuse("dic", "iotto", rules) == "diciotto"
        assert fuse("venti", "otto", rules) == "ventotto"

    def test_fuse_without_match(self):
        assert fuse("cento", "uno", (("iu", "u"),)) == "centouno"


class TestMyriad:
    @pytest.mark.parametrize("value,expected", [
        (1, "一"),
        (10, "十"),
        (11, "十一"),
        (20, "二十"),
        (100, "百"),
        (1000, "千"),
        (1234, "千二百三十四"),
        (9999, "九千九百九十九"),
        (2005, "二千五"),
    ])
    def test_japanese(self, value, expected):
        assert render_segment(value, JAPANESE) == expected

    def test_out_of_range_raises(self):
        with pytest.raises(ValueError):
            render_segment(10_000, JAPANESE)


class TestNounFirstHundreds:
    def test_noun_before_multiplier(self):
        assert render_segment(300, SWAHILI) == "mia tatu"

    def test_one_is_spoken(self):
        assert render_segment(100, SWAHILI) == "mia moja"

    def test_units_joiner_after_hundreds(self):
        assert render_segment(307, SWAHILI) == "mia tatu na saba"

    def test_plain_joiner_before_tens(self):
        assert render_segment(320, SWAHILI) == "mia tatu ishirini"
