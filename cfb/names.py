"""Utility helpers for normalising team identifiers across data sources."""

from __future__ import annotations

import re
import unicodedata

_NON_SLUG = re.compile(r"[^a-z0-9]+")


def normalize_ascii(text: str | None) -> str:
    """Return an ASCII string with collapsed whitespace (empty string if input is falsy)."""

    if not text:
        return ""
    normalized = (
        unicodedata.normalize("NFKD", str(text))
        .encode("ascii", "ignore")
        .decode("ascii")
        .strip()
    )
    return " ".join(normalized.split())


def team_slug(text: str | None) -> str:
    """Return the lower-case hyphenated team id (``"Notre Dame"`` -> ``"notre-dame"``)."""

    lowered = normalize_ascii(text).lower().replace("&", " and ").replace("'", "")
    return _NON_SLUG.sub("-", lowered).strip("-")


def normalize_conference(text: str | None) -> str | None:
    """Trim a conference label; blank values mean the team is independent."""

    cleaned = normalize_ascii(text)
    return cleaned or None
