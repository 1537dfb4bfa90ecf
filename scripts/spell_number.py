#!/usr/bin/env python3
"""Print a number spelled out in words."""
import sys

from dotenv import load_dotenv
load_dotenv()

from number_words.config import Settings
from number_words.converter import to_words
from number_words.errors import NumberWordsError
from number_words.utils.logging import setup_logging


def main(value: str, lang: str | None = None) -> None:
    """Convert one value with the configured defaults and print the words."""
    settings = Settings()
    setup_logging(settings.log_level)

    try:
        words = to_words(value, lang=lang or settings.default_lang, overflow=settings.overflow_policy)
    except NumberWordsError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(words)


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/spell_number.py <value> [lang]")
        sys.exit(1)

    main(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else None)
