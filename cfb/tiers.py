"""Competitive tier classification for college football teams."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, FrozenSet, Iterable, Mapping, Optional


class Tier(str, Enum):
    P5 = "P5"
    G5 = "G5"
    FCS = "FCS"

    @property
    def rank(self) -> int:
        return TIER_RANK[self]


TIER_RANK = {Tier.P5: 3, Tier.G5: 2, Tier.FCS: 1}

MEMBERSHIP_LEVELS = ("fbs", "fcs")

DEFAULT_P5_CONFERENCES = frozenset(
    {"ACC", "Big Ten", "B1G", "Big 12", "SEC", "Pac-12", "Pac-10"}
)
DEFAULT_G5_CONFERENCES = frozenset(
    {
        "American Athletic",
        "AAC",
        "Mountain West",
        "MWC",
        "Sun Belt",
        "Mid-American",
        "MAC",
        "Conference USA",
        "C-USA",
    }
)
DEFAULT_OVERRIDES = {"notre-dame": Tier.P5}


@dataclass(frozen=True)
class Membership:
    """Division membership of a team for one season."""

    level: str

    def __post_init__(self) -> None:
        if self.level not in MEMBERSHIP_LEVELS:
            raise ValueError(f"Unknown membership level: {self.level!r}")


@dataclass(frozen=True)
class ConferenceAlignment:
    """Conference names belonging to the P5 and G5 tiers."""

    p5: FrozenSet[str] = DEFAULT_P5_CONFERENCES
    g5: FrozenSet[str] = DEFAULT_G5_CONFERENCES

    @classmethod
    def from_lists(cls, p5: Iterable[str], g5: Iterable[str]) -> "ConferenceAlignment":
        return cls(p5=frozenset(p5), g5=frozenset(g5))

    def tier_for(self, conference: Optional[str]) -> Optional[Tier]:
        if not conference:
            return None
        if conference in self.p5:
            return Tier.P5
        if conference in self.g5:
            return Tier.G5
        return None


@dataclass(frozen=True)
class TierRules:
    """Season-keyed conference alignments plus per-team tier overrides.

    ``seasons`` maps a season year to the alignment in force that year.
    Seasons without an entry inherit the most recent earlier season's
    alignment, falling back to ``default``.
    """

    default: ConferenceAlignment = field(default_factory=ConferenceAlignment)
    seasons: Mapping[int, ConferenceAlignment] = field(default_factory=dict)
    overrides: Mapping[str, Tier] = field(default_factory=lambda: dict(DEFAULT_OVERRIDES))

    def __post_init__(self) -> None:
        object.__setattr__(self, "seasons", MappingProxyType(dict(self.seasons)))
        object.__setattr__(self, "overrides", MappingProxyType(dict(self.overrides)))

    def alignment_for(self, season: Optional[int] = None) -> ConferenceAlignment:
        if season is None or not self.seasons:
            return self.default
        if season in self.seasons:
            return self.seasons[season]
        earlier = [year for year in self.seasons if year < season]
        if earlier:
            return self.seasons[max(earlier)]
        return self.default

    def override_for(self, team_id: str) -> Optional[Tier]:
        return self.overrides.get(team_id)


DEFAULT_TIER_RULES = TierRules()


def membership_level(membership: Any) -> Optional[str]:
    """Return ``"fbs"``/``"fcs"`` from a membership record, or ``None``.

    Accepts a :class:`Membership`, a mapping with a ``level`` key, or
    ``None``. Unrecognised levels are treated as missing.
    """

    if membership is None:
        return None
    if isinstance(membership, Mapping):
        level = membership.get("level")
    else:
        level = getattr(membership, "level", None)
    if level in MEMBERSHIP_LEVELS:
        return level
    return None


def classify_team_tier(
    team_id: str,
    membership: Any,
    conference: Optional[str],
    *,
    season: Optional[int] = None,
    rules: TierRules = DEFAULT_TIER_RULES,
) -> Tier:
    """Classify a team into P5, G5 or FCS for a single season.

    Rules are evaluated in order and the first match wins:

    1. FCS membership always yields ``FCS``.
    2. A team listed in ``rules.overrides`` gets its forced tier.
    3. A P5 conference yields ``P5``.
    4. A G5 conference yields ``G5``.
    5. Any other FBS team (independents, unknown conferences) is ``G5``.
    6. Everything else is ``FCS``.
    """

    level = membership_level(membership)
    if level == "fcs":
        return Tier.FCS

    forced = rules.override_for(team_id)
    if forced is not None:
        return forced

    conference_tier = rules.alignment_for(season).tier_for(conference)
    if conference_tier is not None:
        return conference_tier

    if level == "fbs":
        return Tier.G5
    return Tier.FCS


def parse_tier(value: Any) -> Tier:
    """Coerce a tier name (``"p5"``, ``"G5"``...) or :class:`Tier` into a :class:`Tier`."""

    if isinstance(value, Tier):
        return value
    try:
        return Tier(str(value).strip().upper())
    except ValueError:
        raise ValueError(f"Unknown tier: {value!r}") from None


__all__ = [
    "Tier",
    "TIER_RANK",
    "Membership",
    "ConferenceAlignment",
    "TierRules",
    "DEFAULT_TIER_RULES",
    "DEFAULT_P5_CONFERENCES",
    "DEFAULT_G5_CONFERENCES",
    "DEFAULT_OVERRIDES",
    "membership_level",
    "classify_team_tier",
    "parse_tier",
]
