"""Pytest configuration and shared fixtures."""

import json
import os
from types import SimpleNamespace

import pytest

# Force the deterministic analysis path for anything importing ecoviz.main
os.environ["APP_ENV"] = "test"
os.environ.pop("OPENAI_API_KEY", None)

from ecoviz.schemas import (  # noqa: E402
    CalculationData, Car, Consumption, Energy, EmissionsByCategory, Flights,
    Food, Housing, PublicTransit, Transportation,
)


class FakeCompletions:
    """Stands in for AsyncOpenAI().chat.completions."""

    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_client(content=None, error=None):
    completions = FakeCompletions(content=content, error=error)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


@pytest.fixture
def make_fake_client():
    return fake_client


@pytest.fixture
def calculation_data():
    return CalculationData(
        housing=Housing(energy=Energy(electricity=1000, natural_gas=100, heating_oil=0)),
        transportation=Transportation(
            car=Car(miles_driven=12000, fuel_efficiency=25),
            public_transit=PublicTransit(bus_miles=500, train_miles=200),
            flights=Flights(short_haul=2, long_haul=1),
        ),
        food=Food(diet_type="average", waste_level="average"),
        consumption=Consumption(shopping_habits="frequent", recycling_habits="some"),
    )


@pytest.fixture
def breakdown():
    return EmissionsByCategory(housing=950, transportation=5000, food=912.5, consumption=1500)


@pytest.fixture
def total(breakdown):
    return 8362.5


@pytest.fixture
def valid_ai_payload():
    return {
        "summary": {
            "totalEmissions": 8362.5,
            "comparisonToAverages": {"global": 2.09, "us": 0.52},
            "topContributors": [
                {"category": "transportation", "percentage": 59.8, "emissions": 5000},
                {"category": "consumption", "percentage": 17.9, "emissions": 1500},
                {"category": "housing", "percentage": 11.4, "emissions": 950},
            ],
        },
        "recommendations": [
            {
                "title": "Drive less",
                "description": "Combine errands into fewer trips.",
                "dataReference": "12000 miles driven",
                "potentialImpact": {"co2Reduction": 800, "unit": "kg/year"},
                "goal": "Cut driving by 2000 miles",
                "priority": "high",
                "category": "transportation",
            },
            {
                "title": "Buy second-hand",
                "description": "Prefer used goods.",
                "dataReference": "frequent shopping",
                "potentialImpact": {"co2Reduction": 300, "unit": "kg/year"},
                "goal": "Halve new purchases",
                "priority": "medium",
                "category": "consumption",
            },
            {
                "title": "Switch to LED",
                "description": "Replace remaining bulbs.",
                "dataReference": "1000 kWh",
                "potentialImpact": {"co2Reduction": 40, "unit": "kg/year"},
                "goal": "All LED by spring",
                "priority": "low",
                "category": "housing",
            },
        ],
        "disclaimer": "AI-generated general advice.",
    }


@pytest.fixture
def valid_ai_text(valid_ai_payload):
    return json.dumps(valid_ai_payload)
