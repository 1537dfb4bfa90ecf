"""Value types that flow through a single conversion.

A ``NumericValue`` is produced by the parser, split into ``Segment`` groups by
the segmenter, and rendered into ``RenderedPart`` items that the composer
joins into the final string. None of these outlive one ``to_words`` call.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NumericValue(BaseModel):
    """Sign, integer digits and decimal digits of a parsed number."""

    model_config = ConfigDict(frozen=True)

    is_negative: bool = False
    integer_digits: str = "0"
    decimal_digits: str = ""

    @field_validator("integer_digits")
    @classmethod
    def _integer_digits_only(cls, v: str) -> str:
        if not v or not v.isascii() or not v.isdigit():
            raise ValueError(f"integer_digits must be a non-empty digit string, got {v!r}")
        return v

    @field_validator("decimal_digits")
    @classmethod
    def _decimal_digits_only(cls, v: str) -> str:
        if v and (not v.isascii() or not v.isdigit()):
            raise ValueError(f"decimal_digits must contain digits only, got {v!r}")
        return v

    @property
    def is_zero(self) -> bool:
        return self.integer_digits.strip("0") == "" and self.decimal_digits.strip("0") == ""


class Segment(BaseModel):
    """One digit group of the integer part, tagged with its magnitude level."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(ge=0, lt=10_000)
    scale_index: int = Field(ge=0)


class PartRole(str, Enum):
    DIGIT_WORD = "digit_word"
    SCALE_WORD = "scale_word"
    THOUSAND_COMPOUND = "thousand_compound"
    HUNDRED_COMPOUND = "hundred_compound"


class RenderedPart(BaseModel):
    """A rendered piece of text plus the context the composer needs."""

    text: str
    role: PartRole
    value: int = 0
    scale_index: int = 0
