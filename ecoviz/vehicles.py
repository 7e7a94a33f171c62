# ecoviz/vehicles.py — rough fuel-efficiency estimates from make/model/year
import re
from typing import Optional

DEFAULT_MPG = 25
ELECTRIC_EQUIVALENT_MPG = 100

# (2020+, 2010-2019, older)
HYBRID_MPG = (52, 45, 40)
LUXURY_LARGE_MPG = (22, 18, 15)
COMPACT_ECONOMY_MPG = (32, 28, 25)

# year floor → mpg, checked top-down
GENERAL_MPG_BY_YEAR = ((2020, 28), (2015, 26), (2010, 24))
GENERAL_MPG_FALLBACK = 20

HYBRID_PATTERNS = ("PRIUS", "HYBRID")
ELECTRIC_PATTERNS = ("TESLA", "ELECTRIC")
# "EV" must start a word: matches EV6, BOLT EV, not CHEVROLET/LEVANTE
_EV_RE = re.compile(r"\bEV")
LUXURY_MAKES = {"BMW", "MERCEDES", "AUDI", "LEXUS"}
LARGE_PATTERNS = ("SUV", "TRUCK")
ECONOMY_MAKES = {"HONDA", "TOYOTA", "NISSAN", "HYUNDAI"}
ECONOMY_MODELS = ("CIVIC", "COROLLA", "SENTRA", "ELANTRA")


def _banded(year: int, bands) -> float:
    recent, modern, older = bands
    if year >= 2020:
        return recent
    if year >= 2010:
        return modern
    return older


def is_hybrid(make: str, model: str) -> bool:
    return any(p in model for p in HYBRID_PATTERNS)


def is_electric(make: str, model: str) -> bool:
    if any(p in make or p in model for p in ELECTRIC_PATTERNS):
        return True
    return bool(_EV_RE.search(make) or _EV_RE.search(model))


def is_luxury_or_large(make: str, model: str) -> bool:
    return make in LUXURY_MAKES or any(p in model for p in LARGE_PATTERNS)


def is_compact_economy(make: str, model: str) -> bool:
    return make in ECONOMY_MAKES and any(p in model for p in ECONOMY_MODELS)


def classify(make: str, model: str) -> Optional[str]:
    """First match wins: hybrid → electric → luxury/large → compact/economy."""
    make = (make or "").strip().upper()
    model = (model or "").strip().upper()
    if is_hybrid(make, model):
        return "hybrid"
    if is_electric(make, model):
        return "electric"
    if is_luxury_or_large(make, model):
        return "luxury-or-large"
    if is_compact_economy(make, model):
        return "compact-economy"
    return None


def general_mpg(year: int) -> float:
    for floor, mpg in GENERAL_MPG_BY_YEAR:
        if year >= floor:
            return mpg
    return GENERAL_MPG_FALLBACK


def estimate_fuel_efficiency(make: Optional[str], model: Optional[str], year: Optional[int]) -> float:
    """
    Estimated MPG for a vehicle. Needs all of make, model and year,
    otherwise DEFAULT_MPG. Electric vehicles get an MPG-equivalent.
    """
    if not (make and model and year):
        return DEFAULT_MPG
    kind = classify(make, model)
    if kind == "hybrid":
        return _banded(year, HYBRID_MPG)
    if kind == "electric":
        return ELECTRIC_EQUIVALENT_MPG
    if kind == "luxury-or-large":
        return _banded(year, LUXURY_LARGE_MPG)
    if kind == "compact-economy":
        return _banded(year, COMPACT_ECONOMY_MPG)
    return general_mpg(year)
