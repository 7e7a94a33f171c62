from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Category = Literal["housing", "transportation", "food", "consumption"]
Priority = Literal["high", "medium", "low"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---- Raw form input (every field optional) ---------------------------------
class HousingInput(CamelModel):
    monthly_electricity_bill: Optional[float] = Field(None, ge=0)
    uses_natural_gas: bool = False
    monthly_natural_gas_bill: Optional[float] = Field(None, ge=0)
    uses_heating_oil: bool = False
    heating_oil_fills_per_year: Optional[float] = Field(None, ge=0)
    heating_oil_tank_size_gallons: Optional[float] = Field(None, ge=0)
    type: Optional[str] = None
    size: Optional[float] = Field(None, gt=0)


class CarInput(CamelModel):
    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = None
    commute_miles_one_way: Optional[float] = Field(None, ge=0)
    commute_days_per_week: Optional[float] = Field(None, ge=0, le=7)
    weekly_errands_miles_range: Optional[str] = None


class PublicTransitInput(CamelModel):
    weekly_bus_miles: Optional[float] = Field(None, ge=0)
    weekly_train_miles: Optional[float] = Field(None, ge=0)


class FlightsInput(CamelModel):
    under_3_hours: Optional[int] = Field(None, ge=0, alias="under3Hours")
    between_3_and_6_hours: Optional[int] = Field(None, ge=0, alias="between3And6Hours")
    over_6_hours: Optional[int] = Field(None, ge=0, alias="over6Hours")


class TransportationInput(CamelModel):
    car: Optional[CarInput] = None
    public_transit: Optional[PublicTransitInput] = None
    flights: Optional[FlightsInput] = None


class FoodInput(CamelModel):
    diet_description: Optional[str] = None
    waste_level: Optional[str] = None


class ConsumptionInput(CamelModel):
    shopping_frequency_description: Optional[str] = None
    recycled_materials: Optional[List[str]] = None


class LocationInput(CamelModel):
    zip_code: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None


class RawUserInput(CamelModel):
    housing: Optional[HousingInput] = None
    transportation: Optional[TransportationInput] = None
    food: Optional[FoodInput] = None
    consumption: Optional[ConsumptionInput] = None
    location: Optional[LocationInput] = None


# ---- Canonical calculation data --------------------------------------------
class Energy(CamelModel):
    electricity: float = Field(0.0, ge=0)     # kWh / year
    natural_gas: float = Field(0.0, ge=0)     # therms / year
    heating_oil: float = Field(0.0, ge=0)     # gallons / year


class Housing(CamelModel):
    type: str = "apartment"
    size: float = Field(1000, gt=0)
    energy: Energy = Field(default_factory=Energy)


class Car(CamelModel):
    miles_driven: float = Field(0.0, ge=0)
    fuel_efficiency: float = Field(25, gt=0)   # mpg


class PublicTransit(CamelModel):
    bus_miles: float = Field(0.0, ge=0)
    train_miles: float = Field(0.0, ge=0)


class Flights(CamelModel):
    short_haul: int = Field(0, ge=0)
    long_haul: int = Field(0, ge=0)


class Transportation(CamelModel):
    car: Car = Field(default_factory=Car)
    public_transit: PublicTransit = Field(default_factory=PublicTransit)
    flights: Flights = Field(default_factory=Flights)


class Food(CamelModel):
    diet_type: str = "average"
    waste_level: str = "average"


class Consumption(CamelModel):
    shopping_habits: str = "average"
    recycling_habits: str = "some"


class CalculationData(CamelModel):
    housing: Housing
    transportation: Transportation
    food: Food
    consumption: Consumption


# ---- Results ----------------------------------------------------------------
class EmissionsByCategory(CamelModel):
    housing: float = 0.0
    transportation: float = 0.0
    food: float = 0.0
    consumption: float = 0.0

    def total(self) -> float:
        return self.housing + self.transportation + self.food + self.consumption


class Contributor(CamelModel):
    category: Category
    percentage: float
    emissions: float


class ComparisonToAverages(CamelModel):
    global_: float = Field(alias="global")
    us: float


class AnalysisSummary(CamelModel):
    total_emissions: float
    comparison_to_averages: ComparisonToAverages
    top_contributors: List[Contributor] = Field(min_length=3, max_length=3)


class PotentialImpact(CamelModel):
    co2_reduction: float
    unit: Literal["kg/year"] = "kg/year"


class Recommendation(CamelModel):
    title: str
    description: str
    data_reference: str
    potential_impact: PotentialImpact
    goal: str
    priority: Priority
    category: Category


class AIAnalysisResponse(CamelModel):
    summary: AnalysisSummary
    recommendations: List[Recommendation] = Field(min_length=2)
    disclaimer: str


class Averages(CamelModel):
    global_: float = Field(alias="global")
    us: float


class ResultEnvelope(CamelModel):
    user_id: str
    calculation_id: str
    carbon_footprint: float
    emissions_by_category: EmissionsByCategory
    ai_analysis: AIAnalysisResponse
    averages: Averages
    message: str


class CalculateRequest(CamelModel):
    user_id: str = Field(min_length=1)
    user_input: RawUserInput
