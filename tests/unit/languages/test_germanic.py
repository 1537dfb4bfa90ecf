"""Test English, German and Danish renderings."""
import pytest
from number_words.converter import to_words


class TestEnglish:
    @pytest.mark.parametrize("value,expected", [
        (0, "zero"),
        (21, "twenty-one"),
        (999, "nine hundred and ninety-nine"),
        (100_000, "one hundred thousand"),
        (1001, "one thousand and one"),
        (1104, "one thousand one hundred and four"),
        (1_000_000, "one million"),
        (1_000_001, "one million and one"),
        (2_500_000, "two million five hundred thousand"),
        (10**63, "one vigintillion"),
        (-5, "minus five"),
        ("0.01", "zero point zero one"),
        ("27.312", "twenty-seven point three hundred and twelve"),
    ])
    def test_renderings(self, value, expected):
        assert to_words(value, lang="en") == expected


class TestGerman:
    @pytest.mark.parametrize("value,expected", [
        (0, "null"),
        (1, "eins"),
        (21, "einundzwanzig"),
        (100, "einhundert"),
        (101, "einhunderteins"),
        (1000, "eintausend"),
        (1001, "eintausendeins"),
        (7232, "siebentausendzweihundertzweiunddreißig"),
        (21_000, "einundzwanzigtausend"),
        (1_000_000, "eine Million"),
        (1_000_001, "eine Million eins"),
        (2_000_000, "zwei Millionen"),
        (
            4_500_072_900_000_111,
            "vier Billiarden fünfhundert Billionen zweiundsiebzig Milliarden neunhundert Millionen einhundertelf",
        ),
        ("1.5", "eins komma fünf"),
        ("0.01", "null komma null eins"),
    ])
    def test_renderings(self, value, expected):
        assert to_words(value, lang="de") == expected


class TestDanish:
    @pytest.mark.parametrize("value,expected", [
        (0, "nul"),
        (1, "et"),
        (21, "enogtyve"),
        (100, "ethundrede"),
        (1000, "ettusind"),
        (1001, "ettusinde og et"),
        (4196, "firetusinde og ethundrede og seksoghalvfems"),
        (1_000_000, "en million"),
        (2_000_000, "to millioner"),
        (10**14, "ethundrede billioner"),
        (-7, "minus syv"),
    ])
    def test_renderings(self, value, expected):
        assert to_words(value, lang="da") == expected
