# ecoviz/normalizer.py — form input → canonical calculation data
import logging
from typing import Union

from . import factors
from .mapper import errands_weekly_miles, map_diet, map_recycling, map_shopping, map_waste
from .schemas import (
    CalculationData, Car, CarInput, Consumption, ConsumptionInput, Energy, Flights,
    FlightsInput, Food, FoodInput, Housing, HousingInput, PublicTransit,
    PublicTransitInput, RawUserInput, Transportation, TransportationInput,
)
from .vehicles import estimate_fuel_efficiency

log = logging.getLogger(__name__)


def _num(v) -> float:
    return float(v) if v else 0.0


def normalize_housing(housing: HousingInput) -> Housing:
    electricity = (
        factors.annual_electricity_kwh(housing.monthly_electricity_bill)
        if housing.monthly_electricity_bill else 0.0
    )
    natural_gas = (
        factors.annual_natural_gas_therms(housing.monthly_natural_gas_bill)
        if housing.uses_natural_gas and housing.monthly_natural_gas_bill else 0.0
    )
    heating_oil = (
        _num(housing.heating_oil_fills_per_year) * _num(housing.heating_oil_tank_size_gallons)
        if housing.uses_heating_oil else 0.0
    )
    extra = {}
    if housing.type and housing.type.strip():
        extra["type"] = housing.type.strip().lower()
    if housing.size:
        extra["size"] = housing.size
    return Housing(
        energy=Energy(electricity=electricity, natural_gas=natural_gas, heating_oil=heating_oil),
        **extra,
    )


def normalize_transportation(transportation: TransportationInput) -> Transportation:
    car = transportation.car or CarInput()
    commute = _num(car.commute_miles_one_way) * 2 * _num(car.commute_days_per_week) * factors.WEEKS_PER_YEAR
    errands = errands_weekly_miles(car.weekly_errands_miles_range) * factors.WEEKS_PER_YEAR
    mpg = estimate_fuel_efficiency(car.make, car.model, car.year)

    transit = transportation.public_transit or PublicTransitInput()
    flights = transportation.flights or FlightsInput()

    return Transportation(
        car=Car(miles_driven=commute + errands, fuel_efficiency=mpg),
        public_transit=PublicTransit(
            bus_miles=_num(transit.weekly_bus_miles) * factors.WEEKS_PER_YEAR,
            train_miles=_num(transit.weekly_train_miles) * factors.WEEKS_PER_YEAR,
        ),
        flights=Flights(
            short_haul=flights.under_3_hours or 0,
            long_haul=(flights.between_3_and_6_hours or 0) + (flights.over_6_hours or 0),
        ),
    )


def normalize_food(food: FoodInput) -> Food:
    return Food(
        diet_type=map_diet(food.diet_description),
        waste_level=map_waste(food.waste_level),
    )


def normalize_consumption(consumption: ConsumptionInput) -> Consumption:
    return Consumption(
        shopping_habits=map_shopping(consumption.shopping_frequency_description),
        recycling_habits=map_recycling(consumption.recycled_materials),
    )


def normalize(raw: Union[RawUserInput, dict, None]) -> CalculationData:
    """
    Turn loosely filled form input into kWh / therms / gallons / miles / counts.
    Missing groups and fields count as "no data" and become zeros or the
    neutral category; nothing here raises for absent values.
    """
    if raw is None:
        raw = RawUserInput()
    elif isinstance(raw, dict):
        raw = RawUserInput.model_validate(raw)

    data = CalculationData(
        housing=normalize_housing(raw.housing or HousingInput()),
        transportation=normalize_transportation(raw.transportation or TransportationInput()),
        food=normalize_food(raw.food or FoodInput()),
        consumption=normalize_consumption(raw.consumption or ConsumptionInput()),
    )
    log.debug("[normalize] %s", data.model_dump(by_alias=True))
    return data
