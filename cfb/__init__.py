"""Team tier and matchup-class classification for College Football modelling."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from .matchup import MatchupClass, get_matchup_class, matchup_indicators
from .tiers import DEFAULT_TIER_RULES, ConferenceAlignment, Membership, Tier, TierRules, classify_team_tier


def load_config(path: Optional[str | Path] = None, *, env_var: str = "CFB_CONFIG") -> Dict[str, Any]:
    """Proxy to :func:`cfb.config.load_config` with a lazy import.

    The classifiers themselves are plain Python; only configuration loading
    needs PyYAML, so ``cfb.config`` is imported on first use.
    """

    from .config import load_config as _load_config

    return _load_config(path, env_var=env_var)


def load_tier_rules(path: Optional[str | Path] = None, *, env_var: str = "CFB_CONFIG") -> TierRules:
    """Proxy to :func:`cfb.config.load_tier_rules` with a lazy import."""

    from .config import load_tier_rules as _load_tier_rules

    return _load_tier_rules(path, env_var=env_var)


__all__ = [
    "Tier",
    "MatchupClass",
    "Membership",
    "ConferenceAlignment",
    "TierRules",
    "DEFAULT_TIER_RULES",
    "classify_team_tier",
    "get_matchup_class",
    "matchup_indicators",
    "load_config",
    "load_tier_rules",
]
