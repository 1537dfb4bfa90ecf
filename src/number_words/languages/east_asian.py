"""Myriad-based profiles: Japanese and Korean.

Digits group by four (10^4 per scale step) and each sub-digit carries its own
sub-scale character; a 1 before 十, 百 and 千 is not spoken.
"""
from __future__ import annotations

from ..models.profile import DecimalMode, LanguageProfile, ScaleMode

JAPANESE = LanguageProfile(
    code="ja",
    name="日本語",
    zero_word="零",
    negative_word="マイナス",
    decimal_separator_word="点",
    word_separator="",
    decimal_mode=DecimalMode.PER_DIGIT,
    ones_words={1: "一", 2: "二", 3: "三", 4: "四", 5: "五", 6: "六", 7: "七", 8: "八", 9: "九"},
    ten_word="十",
    hundred_word="百",
    thousand_word="千",
    myriad_silent_one=True,
    scale_mode=ScaleMode.MYRIAD,
    scale_words=[
        "万", "億", "兆", "京", "垓", "秭", "穣", "溝", "澗",
        "正", "載", "極", "恒河沙", "阿僧祇", "那由他", "不可思議", "無量大数",
    ],
    group_separator="",
)

# Korean writes groups apart ("천이백삼십사만 오천육백칠십팔") and reads a
# lone 10^4 as "만" rather than "일만".
KOREAN = LanguageProfile(
    code="ko",
    name="한국어",
    zero_word="영",
    negative_word="마이너스",
    decimal_separator_word="점",
    ones_words={1: "일", 2: "이", 3: "삼", 4: "사", 5: "오", 6: "육", 7: "칠", 8: "팔", 9: "구"},
    ten_word="십",
    hundred_word="백",
    thousand_word="천",
    myriad_silent_one=True,
    scale_mode=ScaleMode.MYRIAD,
    scale_words=["만", "억", "조", "경", "해", "자", "양", "구", "간", "정", "재", "극"],
    omit_one_before_thousand=True,
    group_separator=" ",
)
