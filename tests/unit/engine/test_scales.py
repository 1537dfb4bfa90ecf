"""Test scale word resolution for every scale mode."""
import pytest
from number_words.converter import to_words
from number_words.engine.scales import is_thousand_index, max_scale_index, resolve_scale_word
from number_words.languages.austronesian import INDONESIAN
from number_words.languages.east_asian import JAPANESE
from number_words.languages.germanic import ENGLISH, GERMAN
from number_words.languages.romance import FRENCH, PORTUGUESE
from number_words.languages.slavic import RUSSIAN
from number_words.languages.turkic import TURKISH


class TestSimpleScale:
    def test_thousand(self):
        assert resolve_scale_word(1, 5, ENGLISH) == "thousand"

    def test_never_pluralized(self):
        assert resolve_scale_word(2, 300, ENGLISH) == "million"

    def test_last_word(self):
        assert resolve_scale_word(21, 1, ENGLISH) == "vigintillion"

    def test_past_vocabulary_is_empty(self):
        assert resolve_scale_word(22, 1, ENGLISH) == ""

    def test_max_scale_index(self):
        assert max_scale_index(ENGLISH) == 21


class TestThousandSeparatedScale:
    def test_thousand_word_is_invariable(self):
        assert resolve_scale_word(1, 300, FRENCH) == "mille"

    def test_singular_for_one(self):
        assert resolve_scale_word(2, 1, FRENCH) == "million"

    def test_plural_above_one(self):
        assert resolve_scale_word(3, 4, FRENCH) == "milliards"

    def test_german_capitalised_plural(self):
        assert resolve_scale_word(5, 4, GERMAN) == "Billiarden"

    def test_max_scale_index(self):
        assert max_scale_index(FRENCH) == 9


class TestCompoundScale:
    def test_even_index_names_a_scale(self):
        assert resolve_scale_word(2, 1, PORTUGUESE) == "milhão"
        assert resolve_scale_word(2, 2, PORTUGUESE) == "milhões"
        assert resolve_scale_word(4, 1, PORTUGUESE) == "bilião"

    def test_odd_index_is_thousand_of_the_scale_below(self):
        assert resolve_scale_word(3, 1, PORTUGUESE) == "mil milhões"
        assert resolve_scale_word(5, 7, PORTUGUESE) == "mil biliões"

    def test_max_scale_index(self):
        assert max_scale_index(PORTUGUESE) == 11
        assert resolve_scale_word(11, 1, PORTUGUESE) == "mil quintiliões"
        assert resolve_scale_word(12, 1, PORTUGUESE) == ""


class TestInflectedScale:
    def test_agrees_with_segment_value(self):
        assert resolve_scale_word(1, 1, RUSSIAN) == "тысяча"
        assert resolve_scale_word(1, 3, RUSSIAN) == "тысячи"
        assert resolve_scale_word(2, 15, RUSSIAN) == "миллионов"

    def test_missing_index_is_empty(self):
        assert resolve_scale_word(11, 1, RUSSIAN) == ""

    def test_max_scale_index(self):
        assert max_scale_index(RUSSIAN) == 10


class TestMyriadScale:
    def test_words(self):
        assert resolve_scale_word(1, 5, JAPANESE) == "万"
        assert resolve_scale_word(2, 1234, JAPANESE) == "億"

    def test_max_scale_index(self):
        assert max_scale_index(JAPANESE) == 17


class TestValidation:
    def test_index_zero_raises(self):
        with pytest.raises(ValueError):
            resolve_scale_word(0, 1, ENGLISH)


class TestIsThousandIndex:
    def test_three_digit_profiles(self):
        assert is_thousand_index(1, ENGLISH)
        assert not is_thousand_index(2, ENGLISH)

    def test_myriad_has_no_thousand_level(self):
        assert not is_thousand_index(1, JAPANESE)


def _simple_scale_cases():
    for profile in (ENGLISH, TURKISH, INDONESIAN):
        for k in range(1, max_scale_index(profile) + 1):
            yield pytest.param(profile, k, id=f"{profile.code}-{k}")


class TestPowersOfThousand:
    @pytest.mark.parametrize("profile,k", list(_simple_scale_cases()))
    def test_single_scale_word_for_power(self, profile, k):
        tokens = to_words(1000**k, lang=profile.code).split()
        # "seribu" carries the thousand word fused with its multiplier
        assert tokens[-1].endswith(profile.scale_words[k - 1])
        assert sum(token in profile.scale_words for token in tokens) <= 1

    @pytest.mark.parametrize("profile,k", list(_simple_scale_cases()))
    def test_multiplier_does_not_change_scale_word(self, profile, k):
        tokens = to_words(7 * 1000**k, lang=profile.code).split()
        assert tokens[-1] == profile.scale_words[k - 1]
        assert [t for t in tokens if t in profile.scale_words] == [profile.scale_words[k - 1]]
