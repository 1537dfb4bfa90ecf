"""Language profiles and per-call conversion options.

A ``LanguageProfile`` is passive configuration: vocabulary tables plus the
selectors that pick which rendering, scale and joining strategies the engine
applies. Profiles are frozen after construction and shared by every
conversion; anything that varies per call lives in ``ConversionOptions``.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Annotated, Mapping

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer, model_validator


class Gender(str, Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"


class ScaleMode(str, Enum):
    """How scale indexes map onto scale words."""

    SIMPLE = "simple"
    THOUSAND_SEPARATED = "thousand_separated"
    COMPOUND = "compound"
    INFLECTED = "inflected"
    MYRIAD = "myriad"


class PluralRule(str, Enum):
    """Congruence rule used to pick an inflected form."""

    SLAVIC = "slavic"
    BALTIC = "baltic"
    WEST_SLAVIC = "west_slavic"
    LITHUANIAN = "lithuanian"
    BINARY = "binary"


class HundredPlural(str, Enum):
    """When the plural hundred noun replaces the singular one."""

    NEVER = "never"
    ALWAYS = "always"
    ROUND = "round"  # only when nothing follows in the segment


class ConnectorRule(str, Enum):
    """Which trailing phrases receive the scale connector."""

    NONE = "none"
    BELOW_TEN = "below_ten"
    BELOW_HUNDRED = "below_hundred"
    BELOW_HUNDRED_OR_ROUND_HUNDRED = "below_hundred_or_round_hundred"
    SINGLE_WORD = "single_word"


class DecimalMode(str, Enum):
    GROUPED = "grouped"
    PER_DIGIT = "per_digit"


class OverflowPolicy(str, Enum):
    """What to do when a scale index has no word in the profile."""

    RAISE = "raise"
    DROP = "drop"


# Read-only views so a shared profile cannot be edited through its tables;
# they dump back to plain dicts.
WordTable = Annotated[Mapping[int, str], AfterValidator(MappingProxyType), PlainSerializer(dict)]
FormTable = Annotated[
    Mapping[int, tuple[str, ...]], AfterValidator(MappingProxyType), PlainSerializer(dict)
]
FlagTable = Annotated[Mapping[int, bool], AfterValidator(MappingProxyType), PlainSerializer(dict)]


class LanguageProfile(BaseModel):
    """Vocabulary and grammar switches for one language."""

    model_config = ConfigDict(frozen=True, validate_default=True)

    code: str
    name: str

    # ── Sign and separators ──────────────────────────────────────────────
    zero_word: str
    negative_word: str
    decimal_separator_word: str
    # Joins sign, integer and decimal words; empty for scripts written without spaces
    word_separator: str = " "
    # Exact whole-number value -> separator word (e.g. Czech "celá")
    decimal_separator_words: WordTable = Field(default_factory=dict)
    decimal_mode: DecimalMode = DecimalMode.GROUPED

    # ── Digits ───────────────────────────────────────────────────────────
    ones_words: WordTable
    ones_feminine_words: WordTable = Field(default_factory=dict)
    teens_words: WordTable = Field(default_factory=dict)
    tens_words: WordTable = Field(default_factory=dict)
    compound_words: WordTable = Field(default_factory=dict)
    compound_words_before_thousand: WordTable = Field(default_factory=dict)
    tens_ones_joiner: str = " "
    units_before_tens: bool = False
    tens_connector: str = ""
    units_before_tens_words: WordTable = Field(default_factory=dict)
    ones_before_scale_words: WordTable = Field(default_factory=dict)

    # ── Hundreds ─────────────────────────────────────────────────────────
    hundred_word: str = ""
    hundreds_words: WordTable = Field(default_factory=dict)
    hundred_plural_word: str = ""
    hundred_plural: HundredPlural = HundredPlural.NEVER
    hundred_invariable_before_thousand: bool = False
    hundred_exact_word: str = ""
    one_hundred_before_units_word: str = ""
    hundred_joiner: str = " "
    hundred_remainder_joiner: str = " "
    # Used instead of hundred_remainder_joiner when only units follow ("mia tatu na tano")
    hundred_units_joiner: str = ""
    # Noun before its multiplier ("mia tatu" rather than "tatu mia")
    hundred_noun_first: bool = False
    multiplier_words: WordTable = Field(default_factory=dict)
    omit_one_before_hundred: bool = False

    # ── Scales ───────────────────────────────────────────────────────────
    scale_mode: ScaleMode = ScaleMode.SIMPLE
    thousand_word: str = ""
    scale_words: tuple[str, ...] = ()
    scale_plural_words: tuple[str, ...] = ()
    plural_forms: FormTable = Field(default_factory=dict)
    plural_rule: PluralRule = PluralRule.SLAVIC
    scale_genders: FlagTable = Field(default_factory=dict)
    ten_word: str = ""
    myriad_silent_one: bool = False
    # Scale word before its multiplier ("elfu mbili", "milioni moja")
    scale_word_first: bool = False

    # ── Elision of "one" ─────────────────────────────────────────────────
    omit_one_before_thousand: bool = False
    omit_one_before_scale: bool = False
    one_thousand_word: str = ""
    one_before_scale_word: str = ""

    # ── Thousand compounds ───────────────────────────────────────────────
    thousand_compound: bool = False
    thousand_compound_suffix: str = ""
    thousand_compound_joiner: str = ""

    # ── Connectors ───────────────────────────────────────────────────────
    scale_connector: str = ""
    connector_rule: ConnectorRule = ConnectorRule.NONE
    connector_units_only: bool = True

    # ── Concatenation ────────────────────────────────────────────────────
    concatenate_segments: bool = False
    phonetic_rules: tuple[tuple[str, str], ...] = ()
    post_process: str | None = None
    group_separator: str = " "

    # ── Option support ───────────────────────────────────────────────────
    gender_below_thousand_only: bool = False
    allows_drop_spaces: bool = False

    @model_validator(mode="after")
    def _check_tables(self) -> "LanguageProfile":
        missing = [d for d in range(1, 10) if d not in self.ones_words]
        if missing:
            raise ValueError(f"{self.code}: ones_words missing digits {missing}")
        if self.scale_mode is ScaleMode.MYRIAD:
            if not (self.ten_word and self.hundred_word and self.thousand_word):
                raise ValueError(f"{self.code}: myriad profiles need ten, hundred and thousand words")
            return self
        if set(self.teens_words) != set(range(10)):
            raise ValueError(f"{self.code}: teens_words must cover 0..9")
        if set(self.tens_words) != set(range(2, 10)):
            raise ValueError(f"{self.code}: tens_words must cover 2..9")
        if not self.hundreds_words and not self.hundred_word:
            raise ValueError(f"{self.code}: either hundred_word or hundreds_words is required")
        if self.scale_mode is ScaleMode.INFLECTED:
            if not self.plural_forms:
                raise ValueError(f"{self.code}: inflected profiles need plural_forms")
        elif self.scale_mode is not ScaleMode.SIMPLE and not self.thousand_word:
            raise ValueError(f"{self.code}: {self.scale_mode.value} profiles need thousand_word")
        if self.scale_plural_words and len(self.scale_plural_words) != len(self.scale_words):
            raise ValueError(f"{self.code}: scale_plural_words must parallel scale_words")
        return self

    @property
    def group_size(self) -> int:
        return 4 if self.scale_mode is ScaleMode.MYRIAD else 3


class ConversionOptions(BaseModel):
    """Per-call options for ``to_words``."""

    model_config = ConfigDict(frozen=True)

    lang: str | None = None
    gender: Gender = Gender.MASCULINE
    drop_spaces: bool = False
    overflow: OverflowPolicy = OverflowPolicy.RAISE
