"""Test language profile lookup."""
import pytest
from number_words.errors import UnsupportedLanguageError
from number_words.languages.registry import PROFILES, get_profile, supported_languages


class TestGetProfile:
    def test_exact_match(self):
        assert get_profile("de").code == "de"

    def test_case_insensitive(self):
        assert get_profile("EN").code == "en"

    def test_region_fallback(self):
        assert get_profile("pt-PT").code == "pt"
        assert get_profile("de-AT").code == "de"

    def test_underscore_separator(self):
        assert get_profile("fr_CA").code == "fr"

    def test_several_subtags_dropped(self):
        assert get_profile("ru-Cyrl-RU").code == "ru"

    def test_unknown_language(self):
        with pytest.raises(UnsupportedLanguageError) as exc_info:
            get_profile("zh")
        assert exc_info.value.code == "zh"
        assert "en" in exc_info.value.supported
        assert "Supported languages: cs, da, de" in str(exc_info.value)

    def test_empty_code(self):
        with pytest.raises(UnsupportedLanguageError):
            get_profile("")

    def test_lookup_error_subclass(self):
        with pytest.raises(LookupError):
            get_profile("xx")

    def test_same_instance_every_time(self):
        assert get_profile("ja") is get_profile("ja-JP")


class TestSupportedLanguages:
    def test_sorted(self):
        codes = supported_languages()
        assert codes == sorted(codes)

    def test_catalogue(self):
        assert set(supported_languages()) == {
            "en", "fr", "it", "pt", "de", "da", "ru", "uk",
            "pl", "cs", "lt", "lv", "ja", "ko", "tr", "id", "sw",
        }

    def test_keys_match_profile_codes(self):
        for code, profile in PROFILES.items():
            assert profile.code == code
