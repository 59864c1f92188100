"""Per-season membership and conference lookups loaded from CSV exports."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

import pandas as pd

from cfb.names import normalize_conference, team_slug
from cfb.tiers import DEFAULT_TIER_RULES, MEMBERSHIP_LEVELS, Membership, Tier, TierRules, classify_team_tier

logger = logging.getLogger(__name__)

MEMBERSHIP_COLUMNS = ("season", "team_id", "level")
CONFERENCE_COLUMNS = ("team_id", "conference")


def _read_csv(path: Path | str, required: Iterable[str]) -> pd.DataFrame:
    csv_path = Path(path).expanduser()
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {csv_path}")
    frame = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
    missing = [column for column in required if column not in frame.columns]
    if missing:
        raise ValueError(f"{csv_path} is missing required columns: {', '.join(missing)}")
    return frame


def _parse_season(value: str, source: Path | str) -> Optional[int]:
    value = str(value).strip()
    if not value:
        return None
    try:
        number = float(value)
    except ValueError:
        raise ValueError(f"{source}: invalid season value {value!r}") from None
    if not number.is_integer():
        raise ValueError(f"{source}: season must be a whole year; got {value!r}")
    return int(number)


def load_memberships(path: Path | str) -> Dict[Tuple[int, str], Membership]:
    """
    Load division memberships keyed by ``(season, team_id)``.

    Parameters
    ----------
    path:
        CSV with ``season``, ``team_id`` and ``level`` columns. ``level``
        is case-insensitive; rows with anything other than ``fbs``/``fcs``
        are skipped.
    """

    frame = _read_csv(path, MEMBERSHIP_COLUMNS)
    memberships: Dict[Tuple[int, str], Membership] = {}
    skipped = 0
    for row in frame.itertuples(index=False):
        season = _parse_season(row.season, path)
        team_id = team_slug(row.team_id)
        level = str(row.level).strip().lower()
        if season is None or not team_id or level not in MEMBERSHIP_LEVELS:
            skipped += 1
            continue
        memberships[(season, team_id)] = Membership(level=level)
    if skipped:
        logger.warning("Skipped %d membership rows with missing season/team or unknown level in %s", skipped, path)
    return memberships


def load_conferences(path: Path | str) -> Tuple[Dict[str, Optional[str]], Dict[Tuple[int, str], Optional[str]]]:
    """
    Load team conferences.

    Returns ``(current, by_season)``: rows without a ``season`` value land
    in ``current`` and apply to every season; seasonal rows take precedence
    for their season. Blank conferences are stored as ``None`` (independent).
    """

    frame = _read_csv(path, CONFERENCE_COLUMNS)
    has_season = "season" in frame.columns
    current: Dict[str, Optional[str]] = {}
    by_season: Dict[Tuple[int, str], Optional[str]] = {}
    for row in frame.itertuples(index=False):
        team_id = team_slug(row.team_id)
        if not team_id:
            continue
        conference = normalize_conference(row.conference)
        season = _parse_season(row.season, path) if has_season else None
        if season is None:
            current[team_id] = conference
        else:
            by_season[(season, team_id)] = conference
    return current, by_season


@dataclass
class TeamDirectory:
    """Season-aware lookup of team membership and conference."""

    memberships: Dict[Tuple[int, str], Membership] = field(default_factory=dict)
    conferences: Dict[str, Optional[str]] = field(default_factory=dict)
    season_conferences: Dict[Tuple[int, str], Optional[str]] = field(default_factory=dict)

    @classmethod
    def from_csv(cls, memberships_path: Path | str, conferences_path: Optional[Path | str] = None) -> "TeamDirectory":
        memberships = load_memberships(memberships_path)
        current: Dict[str, Optional[str]] = {}
        by_season: Dict[Tuple[int, str], Optional[str]] = {}
        if conferences_path is not None:
            current, by_season = load_conferences(conferences_path)
        logger.info(
            "Loaded %d memberships and %d conference rows",
            len(memberships),
            len(current) + len(by_season),
        )
        return cls(memberships=memberships, conferences=current, season_conferences=by_season)

    def membership(self, season: int, team_id: str) -> Optional[Membership]:
        return self.memberships.get((int(season), team_slug(team_id)))

    def conference(self, season: int, team_id: str) -> Optional[str]:
        key = (int(season), team_slug(team_id))
        if key in self.season_conferences:
            return self.season_conferences[key]
        return self.conferences.get(key[1])

    def tier(self, season: int, team_id: str, rules: TierRules = DEFAULT_TIER_RULES) -> Tier:
        return classify_team_tier(
            team_slug(team_id),
            self.membership(season, team_id),
            self.conference(season, team_id),
            season=int(season),
            rules=rules,
        )
