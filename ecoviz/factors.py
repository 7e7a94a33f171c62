# ecoviz/factors.py — static emission factors, multipliers and reference averages
import math
from types import MappingProxyType

# ------------------ Categories ------------------
CATEGORIES = ("housing", "transportation", "food", "consumption")

# ------------------ Housing (kg CO2 per unit) ------------------
ELECTRICITY_KG_PER_KWH = 0.42
NATURAL_GAS_KG_PER_THERM = 5.3
HEATING_OIL_KG_PER_GALLON = 10.15

# ------------------ Transportation ------------------
GASOLINE_KG_PER_GALLON = 8.89
BUS_KG_PER_MILE = 0.059
TRAIN_KG_PER_MILE = 0.041
SHORT_HAUL_FLIGHT_KG = 1100   # per flight, ~1500 km
LONG_HAUL_FLIGHT_KG = 4400    # per flight, ~6000 km

# ------------------ Food (kg CO2 per day) ------------------
DAYS_PER_YEAR = 365
DIET_FACTORS = MappingProxyType({
    "meat-heavy": 3.3,
    "average": 2.5,
    "vegetarian": 1.7,
    "vegan": 1.5,
})
WASTE_FACTORS = MappingProxyType({
    "low": 0.9,
    "average": 1.0,
    "high": 1.1,
})

# ------------------ Consumption ------------------
BASE_CONSUMPTION_KG = 1000
SHOPPING_FACTORS = MappingProxyType({
    "minimal": 0.5,
    "average": 1.0,
    "frequent": 1.5,
})
RECYCLING_FACTORS = MappingProxyType({
    "none": 1.2,
    "some": 1.0,
    "most": 0.8,
    "all": 0.6,
})

DEFAULT_DIET = "average"
DEFAULT_WASTE = "average"
DEFAULT_SHOPPING = "average"
DEFAULT_RECYCLING = "some"   # neutral 1.0 multiplier

# ------------------ Reference averages (kg CO2 / year) ------------------
GLOBAL_AVERAGE_KG = 4000
US_AVERAGE_KG = 16000

# ------------------ Bill → consumption ------------------
ELECTRICITY_USD_PER_KWH = 0.16
NATURAL_GAS_USD_PER_THERM = 1.20
MONTHS_PER_YEAR = 12
WEEKS_PER_YEAR = 52


def _lookup(table, key, default_key: str) -> float:
    if isinstance(key, str) and key in table:
        return table[key]
    return table[default_key]


def diet_factor(diet_type) -> float:
    return _lookup(DIET_FACTORS, diet_type, DEFAULT_DIET)


def waste_factor(waste_level) -> float:
    return _lookup(WASTE_FACTORS, waste_level, DEFAULT_WASTE)


def shopping_factor(shopping_habits) -> float:
    return _lookup(SHOPPING_FACTORS, shopping_habits, DEFAULT_SHOPPING)


def recycling_factor(recycling_habits) -> float:
    return _lookup(RECYCLING_FACTORS, recycling_habits, DEFAULT_RECYCLING)


def annual_electricity_kwh(monthly_bill: float, rate: float = ELECTRICITY_USD_PER_KWH) -> float:
    return monthly_bill * MONTHS_PER_YEAR / rate


def annual_natural_gas_therms(monthly_bill: float, rate: float = NATURAL_GAS_USD_PER_THERM) -> float:
    return monthly_bill * MONTHS_PER_YEAR / rate


def round_half_up(x: float) -> int:
    """Whole-number rounding with .5 going up (Python's round() goes to even)."""
    return int(math.floor(x + 0.5))
