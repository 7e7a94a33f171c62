# ecoviz/mapper.py — maps form phrases to canonical calculation values
from typing import Iterable, Optional

from .factors import (
    DEFAULT_DIET, DEFAULT_RECYCLING, DEFAULT_SHOPPING, DEFAULT_WASTE,
    DIET_FACTORS, SHOPPING_FACTORS, WASTE_FACTORS,
)

DIET_PHRASES = {
    "meat in most meals": "meat-heavy",
    "meat a few times a week": "average",
    "vegetarian (no meat)": "vegetarian",
    "vegan (no animal products)": "vegan",
}

SHOPPING_PHRASES = {
    "i buy new things frequently.": "frequent",
    "i buy new things every now and then.": "average",
    "i rarely buy new things and prefer second-hand.": "minimal",
}

# weekly miles for the errands dropdown
ERRANDS_WEEKLY_MILES = {
    "0-25": 12.5,
    "25-50": 37.5,
    "50-100": 75,
    "100+": 125,
}
ERRANDS_DEFAULT_WEEKLY_MILES = 37.5

NONE_OF_THESE = "none of these"


def _canon(text: Optional[str]) -> str:
    return " ".join((text or "").split()).lower()


def _map(text: Optional[str], phrases: dict, canonical, default: str) -> str:
    n = _canon(text)
    if n in phrases:
        return phrases[n]
    if n in canonical:
        return n
    return default


def map_diet(description: Optional[str]) -> str:
    return _map(description, DIET_PHRASES, DIET_FACTORS, DEFAULT_DIET)


def map_shopping(description: Optional[str]) -> str:
    return _map(description, SHOPPING_PHRASES, SHOPPING_FACTORS, DEFAULT_SHOPPING)


def map_waste(level: Optional[str]) -> str:
    return _map(level, {}, WASTE_FACTORS, DEFAULT_WASTE)


def map_recycling(materials: Optional[Iterable[str]]) -> str:
    """
    'None of these' anywhere → none; 3+ distinct materials → all;
    1-2 → some; empty selection → none. A missing answer (None) is
    treated as no data and gets the neutral default.
    """
    if materials is None:
        return DEFAULT_RECYCLING
    picked = {_canon(m) for m in materials if _canon(m)}
    if NONE_OF_THESE in picked:
        return "none"
    if len(picked) >= 3:
        return "all"
    if picked:
        return "some"
    return "none"


def errands_weekly_miles(range_label: Optional[str]) -> float:
    if not range_label:
        return 0.0
    return ERRANDS_WEEKLY_MILES.get(range_label.strip(), ERRANDS_DEFAULT_WEEKLY_MILES)
