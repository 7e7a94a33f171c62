import pytest
from pydantic import ValidationError

from ecoviz.normalizer import normalize
from ecoviz.schemas import RawUserInput


@pytest.mark.parametrize("raw", [None, {}, RawUserInput()])
def test_empty_input_normalizes_to_defaults(raw):
    data = normalize(raw)

    assert data.housing.type == "apartment"
    assert data.housing.size == 1000
    assert data.housing.energy.electricity == 0
    assert data.housing.energy.natural_gas == 0
    assert data.housing.energy.heating_oil == 0
    assert data.transportation.car.miles_driven == 0
    assert data.transportation.car.fuel_efficiency == 25
    assert data.transportation.public_transit.bus_miles == 0
    assert data.transportation.flights.short_haul == 0
    assert data.transportation.flights.long_haul == 0
    assert data.food.diet_type == "average"
    assert data.food.waste_level == "average"
    assert data.consumption.shopping_habits == "average"
    assert data.consumption.recycling_habits == "some"


def test_bills_convert_to_annual_usage():
    data = normalize({
        "housing": {
            "monthlyElectricityBill": 120,
            "usesNaturalGas": True,
            "monthlyNaturalGasBill": 60,
        }
    })
    assert data.housing.energy.electricity == pytest.approx(9000)
    assert data.housing.energy.natural_gas == pytest.approx(600)


def test_gas_bill_ignored_without_gas_flag():
    data = normalize({"housing": {"monthlyNaturalGasBill": 60}})
    assert data.housing.energy.natural_gas == 0


def test_heating_oil_needs_flag():
    raw = {"housing": {"heatingOilFillsPerYear": 3, "heatingOilTankSizeGallons": 275}}
    assert normalize(raw).housing.energy.heating_oil == 0

    raw["housing"]["usesHeatingOil"] = True
    assert normalize(raw).housing.energy.heating_oil == 825

    del raw["housing"]["heatingOilTankSizeGallons"]
    assert normalize(raw).housing.energy.heating_oil == 0


def test_housing_type_and_size_pass_through():
    data = normalize({"housing": {"type": "House", "size": 1800}})
    assert data.housing.type == "house"
    assert data.housing.size == 1800


def test_driving_miles_and_vehicle():
    data = normalize({
        "transportation": {
            "car": {
                "make": "Toyota",
                "model": "Corolla",
                "year": 2020,
                "commuteMilesOneWay": 10,
                "commuteDaysPerWeek": 5,
                "weeklyErrandsMilesRange": "25-50",
            }
        }
    })
    # 10 * 2 * 5 * 52 + 37.5 * 52
    assert data.transportation.car.miles_driven == 5200 + 1950
    assert data.transportation.car.fuel_efficiency == 32


def test_unknown_errands_range_uses_middle_band():
    data = normalize({"transportation": {"car": {"weeklyErrandsMilesRange": "lots"}}})
    assert data.transportation.car.miles_driven == 37.5 * 52


def test_transit_and_flights():
    data = normalize({
        "transportation": {
            "publicTransit": {"weeklyBusMiles": 20, "weeklyTrainMiles": 10},
            "flights": {"under3Hours": 2, "between3And6Hours": 1, "over6Hours": 2},
        }
    })
    assert data.transportation.public_transit.bus_miles == 1040
    assert data.transportation.public_transit.train_miles == 520
    assert data.transportation.flights.short_haul == 2
    assert data.transportation.flights.long_haul == 3


def test_food_and_consumption_phrases():
    data = normalize({
        "food": {"dietDescription": "Vegan (no animal products)", "wasteLevel": "low"},
        "consumption": {
            "shoppingFrequencyDescription": "I buy new things frequently.",
            "recycledMaterials": ["Paper", "Plastic"],
        },
    })
    assert data.food.diet_type == "vegan"
    assert data.food.waste_level == "low"
    assert data.consumption.shopping_habits == "frequent"
    assert data.consumption.recycling_habits == "some"


def test_location_is_accepted_but_unused():
    data = normalize({"location": {"zipCode": "94110", "country": "US"}})
    assert data == normalize({})


def test_normalize_is_deterministic():
    raw = {"housing": {"monthlyElectricityBill": 80}, "food": {"dietDescription": "Vegetarian (no meat)"}}
    assert normalize(raw) == normalize(raw)


def test_negative_numbers_are_rejected():
    with pytest.raises(ValidationError):
        normalize({"housing": {"monthlyElectricityBill": -5}})
