"""Matchup-class features for games, shared by calibration and diagnostics."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import AbstractSet, Any, Dict, Optional

import pandas as pd

from .io.teams import TeamDirectory
from .matchup import INDICATOR_CLASSES, MatchupClass, get_matchup_class, indicator_name, matchup_indicators
from .names import team_slug
from .tiers import DEFAULT_TIER_RULES, Tier, TierRules

logger = logging.getLogger(__name__)

DEFAULT_TRANSITIONAL_TEAMS = frozenset({"kennesaw-state"})
UNSUPPORTED_LABEL = "unsupported"


def is_transitional_matchup(
    home_team_id: str,
    away_team_id: str,
    transitional: AbstractSet[str] = DEFAULT_TRANSITIONAL_TEAMS,
) -> bool:
    """True when either side is a team still transitioning between divisions."""

    return team_slug(home_team_id) in transitional or team_slug(away_team_id) in transitional


@dataclass(frozen=True)
class MatchupFeature:
    season: int
    home_team_id: str
    away_team_id: str
    home_tier: Tier
    away_tier: Tier
    matchup_class: Optional[MatchupClass]
    transitional: bool = False

    @property
    def supported(self) -> bool:
        return self.matchup_class is not None

    def to_dict(self) -> Dict[str, Any]:
        class_value = self.matchup_class.value if self.matchup_class is not None else None
        return {
            "matchup_class": {
                "class": class_value,
                "home_tier": self.home_tier.value,
                "away_tier": self.away_tier.value,
                "season": self.season,
            },
            "matchup_class_source": {
                "home": {"team_id": self.home_team_id, "season": self.season, "tier": self.home_tier.value},
                "away": {"team_id": self.away_team_id, "season": self.season, "tier": self.away_tier.value},
            },
            "indicators": matchup_indicators(self.matchup_class),
            "transitional": self.transitional,
        }


def _season_value(value: Any, column: str, index: Any) -> int:
    if pd.isna(value):
        raise ValueError(f"Games frame column {column!r} is blank at row {index!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"Games frame column {column!r} has invalid season {value!r} at row {index!r}") from None
    if not number.is_integer():
        raise ValueError(f"Games frame column {column!r} has non-integer season {value!r} at row {index!r}")
    return int(number)


def build_matchup_feature(
    season: int,
    home_team_id: str,
    away_team_id: str,
    directory: TeamDirectory,
    *,
    rules: TierRules = DEFAULT_TIER_RULES,
    transitional: AbstractSet[str] = DEFAULT_TRANSITIONAL_TEAMS,
) -> MatchupFeature:
    home_id = team_slug(home_team_id)
    away_id = team_slug(away_team_id)
    home_tier = directory.tier(season, home_id, rules)
    away_tier = directory.tier(season, away_id, rules)
    return MatchupFeature(
        season=int(season),
        home_team_id=home_id,
        away_team_id=away_id,
        home_tier=home_tier,
        away_tier=away_tier,
        matchup_class=get_matchup_class(home_tier, away_tier),
        transitional=is_transitional_matchup(home_id, away_id, transitional),
    )


def annotate_matchup_classes(
    df: pd.DataFrame,
    directory: TeamDirectory,
    *,
    season_col: str = "season",
    home_team_col: str = "home_team_id",
    away_team_col: str = "away_team_id",
    rules: TierRules = DEFAULT_TIER_RULES,
    transitional: AbstractSet[str] = DEFAULT_TRANSITIONAL_TEAMS,
) -> pd.DataFrame:
    """Return a copy of ``df`` with tier and matchup-class columns.

    Adds ``home_tier``, ``away_tier``, ``matchup_class`` (``None`` for
    FCS-vs-FCS games), one ``is_<CLASS>`` indicator per non-baseline class
    and ``transitional_matchup``.
    """

    frame = df.copy()
    if frame.empty:
        return frame

    missing = [column for column in (season_col, home_team_col, away_team_col) if column not in frame.columns]
    if missing:
        raise ValueError(f"Games frame is missing required columns: {', '.join(missing)}")

    features = [
        build_matchup_feature(
            _season_value(season, season_col, index),
            str(home),
            str(away),
            directory,
            rules=rules,
            transitional=transitional,
        )
        for index, season, home, away in zip(
            frame.index, frame[season_col], frame[home_team_col], frame[away_team_col]
        )
    ]

    frame["home_tier"] = [feature.home_tier.value for feature in features]
    frame["away_tier"] = [feature.away_tier.value for feature in features]
    frame["matchup_class"] = pd.Series(
        [feature.matchup_class.value if feature.matchup_class is not None else None for feature in features],
        index=frame.index,
        dtype=object,
    )
    for cls in INDICATOR_CLASSES:
        frame[indicator_name(cls)] = [int(feature.matchup_class is cls) for feature in features]
    frame["transitional_matchup"] = [feature.transitional for feature in features]

    unsupported = sum(1 for feature in features if not feature.supported)
    if unsupported:
        logger.warning("%d of %d games are FCS vs FCS and have no matchup class", unsupported, len(features))
    return frame


def matchup_class_summary(df: pd.DataFrame, *, class_col: str = "matchup_class") -> pd.Series:
    """Count games per matchup class, with unclassified games under ``unsupported``."""

    labels = [cls.value for cls in MatchupClass] + [UNSUPPORTED_LABEL]
    if df.empty or class_col not in df.columns:
        return pd.Series(0, index=labels, dtype=int, name="games")
    counts = df[class_col].fillna(UNSUPPORTED_LABEL).value_counts()
    return counts.reindex(labels, fill_value=0).astype(int).rename("games")


__all__ = [
    "DEFAULT_TRANSITIONAL_TEAMS",
    "MatchupFeature",
    "annotate_matchup_classes",
    "build_matchup_feature",
    "is_transitional_matchup",
    "matchup_class_summary",
]
