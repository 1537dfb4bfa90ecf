"""Test Turkish renderings."""
import pytest
from number_words.converter import to_words


class TestTurkish:
    @pytest.mark.parametrize("value,expected", [
        (0, "sıfır"),
        (11, "on bir"),
        (100, "yüz"),
        (1000, "bin"),
        (1200, "bin iki yüz"),
        (2000, "iki bin"),
        (1_000_000, "bir milyon"),
        (-3, "eksi üç"),
    ])
    def test_renderings(self, value, expected):
        assert to_words(value, lang="tr") == expected

    def test_drop_spaces(self):
        assert to_words(1200, lang="tr", drop_spaces=True) == "binikiyüz"
