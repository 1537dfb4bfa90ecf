"""Exception hierarchy for number-to-words conversion."""

from __future__ import annotations


class NumberWordsError(Exception):
    """Base exception for conversion problems."""


class InvalidNumberError(NumberWordsError, ValueError):
    """Raised when a value cannot be read as a decimal number."""


class UnsupportedLanguageError(NumberWordsError, LookupError):
    """Raised when no language profile is registered for a code.

    The message lists every supported code so callers can correct the request.
    """

    def __init__(self, code: str, supported: list[str]):
        self.code = code
        self.supported = list(supported)
        super().__init__(
            f"Unsupported language: {code!r}. Supported languages: {', '.join(self.supported)}"
        )


class MagnitudeOverflowError(NumberWordsError, OverflowError):
    """Raised when a number needs a scale word the language does not define."""

    def __init__(self, lang: str, scale_index: int, max_scale_index: int):
        self.lang = lang
        self.scale_index = scale_index
        self.max_scale_index = max_scale_index
        super().__init__(
            f"Number too large for {lang!r}: scale index {scale_index} "
            f"exceeds the largest supported index {max_scale_index}"
        )
