"""League code to canonical sport id mapping."""

from __future__ import annotations

SPORT_CODES: dict[str, str] = {
    "NBA": "NBA",
    "CBB": "CBB",
    "CBB1H": "CBB",
    "WCBB": "WCBB",
    "NHL": "NHL",
    "NFL": "NFL",
    "NFLSZN": "NFL",
    "MLB": "MLB",
    "MLBSZN": "MLB",
    "PGA": "PGA",
    "MMA": "MMA",
    "SOCCER": "SOCCER",
    "TENNIS": "TENNIS",
    "OLYMPICS": "OLYMPICS",
    "UNR": "UNRIVALED",
}


def normalize_sport(league_code: str) -> str:
    """Map a provider league code to a sport id; unknown codes pass through."""
    return SPORT_CODES.get(league_code, league_code)
