# ecoviz/calculator.py
from __future__ import annotations

from . import factors
from .schemas import CalculationData, Consumption, EmissionsByCategory, Food, Housing, Transportation


def housing_emissions(housing: Housing) -> float:
    energy = housing.energy
    return (
        energy.electricity * factors.ELECTRICITY_KG_PER_KWH
        + energy.natural_gas * factors.NATURAL_GAS_KG_PER_THERM
        + energy.heating_oil * factors.HEATING_OIL_KG_PER_GALLON
    )


def transportation_emissions(transportation: Transportation) -> float:
    # fuel_efficiency > 0 is guaranteed by the Car model
    car = transportation.car
    transit = transportation.public_transit
    flights = transportation.flights
    return (
        car.miles_driven / car.fuel_efficiency * factors.GASOLINE_KG_PER_GALLON
        + transit.bus_miles * factors.BUS_KG_PER_MILE
        + transit.train_miles * factors.TRAIN_KG_PER_MILE
        + flights.short_haul * factors.SHORT_HAUL_FLIGHT_KG
        + flights.long_haul * factors.LONG_HAUL_FLIGHT_KG
    )


def food_emissions(food: Food) -> float:
    return factors.DAYS_PER_YEAR * factors.diet_factor(food.diet_type) * factors.waste_factor(food.waste_level)


def consumption_emissions(consumption: Consumption) -> float:
    return (
        factors.BASE_CONSUMPTION_KG
        * factors.shopping_factor(consumption.shopping_habits)
        * factors.recycling_factor(consumption.recycling_habits)
    )


def calculate_by_category(data: CalculationData) -> EmissionsByCategory:
    """Annual kg CO2 per category."""
    return EmissionsByCategory(
        housing=housing_emissions(data.housing),
        transportation=transportation_emissions(data.transportation),
        food=food_emissions(data.food),
        consumption=consumption_emissions(data.consumption),
    )


def calculate_total(data: CalculationData) -> float:
    return calculate_by_category(data).total()
