"""Split an integer digit string into scale-tagged groups."""

from __future__ import annotations

from ..models.value import Segment


def segment(digits: str, group_size: int = 3) -> list[Segment]:
    """Split *digits* into groups of *group_size*, most significant first.

    A short leading group takes ``len(digits) % group_size`` digits; every
    other group is full width. Each group is tagged with its scale index
    (0 for the units group).
    """
    if not digits or not digits.isdigit():
        raise ValueError(f"Expected a digit string, got {digits!r}")

    groups: list[str] = []
    lead = len(digits) % group_size
    if lead:
        groups.append(digits[:lead])
    for start in range(lead, len(digits), group_size):
        groups.append(digits[start:start + group_size])

    count = len(groups)
    return [
        Segment(value=int(group), scale_index=count - 1 - position)
        for position, group in enumerate(groups)
    ]


def reconstruct(segments: list[Segment], group_size: int = 3) -> int:
    """Rebuild the integer from its segments."""
    base = 10 ** group_size
    return sum(s.value * base ** s.scale_index for s in segments)
