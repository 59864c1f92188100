"""Configuration helpers for tier classification."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, FrozenSet, Mapping, Optional

import yaml

from .tiers import ConferenceAlignment, Tier, TierRules, parse_tier

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[1] / "config" / "defaults.yaml"


def load_config(path: Optional[str | Path] = None, *, env_var: str = "CFB_CONFIG") -> Dict[str, Any]:
    """Load configuration from YAML.

    Parameters
    ----------
    path :
        Optional explicit configuration file path. When omitted, the
        function looks for ``env_var`` (default ``CFB_CONFIG``) and
        finally falls back to ``config/defaults.yaml`` bundled with the
        repository.
    env_var :
        Environment variable that can override the configuration path.

    Returns
    -------
    dict
        Parsed configuration dictionary (empty when the file is blank).
    """

    candidate = path or os.environ.get(env_var)
    if candidate:
        config_path = Path(candidate).expanduser()
    else:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    logger.debug("Loading configuration from %s", config_path)
    with config_path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration root must be a mapping; got {type(data).__name__}")
    return data


def _conference_set(section: Mapping[str, Any], key: str, where: str) -> FrozenSet[str]:
    values = section.get(key) or []
    if not isinstance(values, list):
        raise ValueError(f"{where}.{key} must be a list of conference names")
    return frozenset(str(value) for value in values)


def _alignment(section: Any, where: str) -> ConferenceAlignment:
    if not isinstance(section, Mapping):
        raise ValueError(f"{where} must be a mapping with P5/G5 lists")
    return ConferenceAlignment(
        p5=_conference_set(section, "P5", where),
        g5=_conference_set(section, "G5", where),
    )


def tier_rules_from_config(config: Mapping[str, Any]) -> TierRules:
    """Build :class:`TierRules` from the ``tiers`` section of a config mapping.

    Missing pieces fall back to the built-in defaults.
    """

    section = config.get("tiers") or {}
    if not isinstance(section, Mapping):
        raise ValueError("tiers must be a mapping")

    defaults = TierRules()
    conferences = section.get("conferences") or {}
    if not isinstance(conferences, Mapping):
        raise ValueError("tiers.conferences must be a mapping")

    default = (
        _alignment(conferences["default"], "tiers.conferences.default")
        if "default" in conferences
        else defaults.default
    )

    seasons: Dict[int, ConferenceAlignment] = {}
    raw_seasons = conferences.get("seasons") or {}
    if not isinstance(raw_seasons, Mapping):
        raise ValueError("tiers.conferences.seasons must map season years to P5/G5 lists")
    for raw_season, alignment in raw_seasons.items():
        try:
            season = int(raw_season)
        except (TypeError, ValueError):
            raise ValueError(f"tiers.conferences.seasons key must be a season year; got {raw_season!r}") from None
        seasons[season] = _alignment(alignment, f"tiers.conferences.seasons.{season}")

    overrides: Dict[str, Tier] = dict(defaults.overrides)
    if "overrides" in section:
        raw_overrides = section.get("overrides") or {}
        if not isinstance(raw_overrides, Mapping):
            raise ValueError("tiers.overrides must map team ids to tiers")
        overrides = {}
        for team_id, tier in raw_overrides.items():
            try:
                overrides[str(team_id)] = parse_tier(tier)
            except ValueError:
                raise ValueError(f"tiers.overrides.{team_id}: unknown tier {tier!r}") from None

    return TierRules(default=default, seasons=seasons, overrides=overrides)


def transitional_teams_from_config(config: Mapping[str, Any]) -> FrozenSet[str]:
    section = config.get("tiers") or {}
    if not isinstance(section, Mapping):
        raise ValueError("tiers must be a mapping")
    teams = section.get("transitional_teams") or []
    if not isinstance(teams, list):
        raise ValueError("tiers.transitional_teams must be a list of team ids")
    return frozenset(str(team) for team in teams)


def load_tier_rules(path: Optional[str | Path] = None, *, env_var: str = "CFB_CONFIG") -> TierRules:
    """Load :class:`TierRules` from YAML (see :func:`load_config` for path resolution)."""

    rules = tier_rules_from_config(load_config(path, env_var=env_var))
    logger.debug(
        "Loaded tier rules: %d season alignments, %d overrides",
        len(rules.seasons),
        len(rules.overrides),
    )
    return rules
