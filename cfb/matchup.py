"""Order-independent matchup classes built from team tiers."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Union

from .tiers import Tier, parse_tier

TierLike = Union[Tier, str]


class MatchupClass(str, Enum):
    P5_P5 = "P5_P5"
    P5_G5 = "P5_G5"
    P5_FCS = "P5_FCS"
    G5_G5 = "G5_G5"
    G5_FCS = "G5_FCS"


# P5_P5 is the baseline category and has no indicator column.
INDICATOR_CLASSES = (
    MatchupClass.P5_G5,
    MatchupClass.P5_FCS,
    MatchupClass.G5_G5,
    MatchupClass.G5_FCS,
)


def ordered_tiers(tier_a: TierLike, tier_b: TierLike) -> tuple[Tier, Tier]:
    """Return ``(higher, lower)``; equal tiers keep their input order."""

    first = parse_tier(tier_a)
    second = parse_tier(tier_b)
    if first.rank >= second.rank:
        return first, second
    return second, first


def get_matchup_class(tier_a: TierLike, tier_b: TierLike) -> Optional[MatchupClass]:
    """Classify a pairing of tiers, higher tier first.

    The result does not depend on which side is home. Two FCS teams have
    no matchup class and yield ``None``.
    """

    higher, lower = ordered_tiers(tier_a, tier_b)
    try:
        return MatchupClass(f"{higher.value}_{lower.value}")
    except ValueError:
        return None


def is_supported_matchup(tier_a: TierLike, tier_b: TierLike) -> bool:
    return get_matchup_class(tier_a, tier_b) is not None


def indicator_name(matchup_class: MatchupClass) -> str:
    return f"is_{matchup_class.value}"


def matchup_indicators(matchup_class: Optional[Union[MatchupClass, str]]) -> Dict[str, int]:
    """One-hot indicator flags for regression features."""

    current = MatchupClass(matchup_class) if matchup_class is not None else None
    return {indicator_name(cls): int(cls is current) for cls in INDICATOR_CLASSES}


__all__ = [
    "MatchupClass",
    "INDICATOR_CLASSES",
    "ordered_tiers",
    "get_matchup_class",
    "is_supported_matchup",
    "indicator_name",
    "matchup_indicators",
]
