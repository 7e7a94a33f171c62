# ecoviz/ai_router.py — prompt contract + single chat call for the footprint analysis
from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, Optional

from openai import AsyncOpenAI
from pydantic import ValidationError

from .config import DEFAULT_MODEL, Settings
from .factors import CATEGORIES, GLOBAL_AVERAGE_KG, US_AVERAGE_KG, round_half_up
from .schemas import AIAnalysisResponse, CalculationData, EmissionsByCategory

log = logging.getLogger(__name__)


class InvalidAnalysisResponse(ValueError):
    """Model output could not be parsed or did not match AIAnalysisResponse."""


FORMAT_INSTRUCTIONS = """You must respond with a JSON object that matches this exact structure:
{
  "summary": {
    "totalEmissions": number,
    "comparisonToAverages": {
      "global": number,
      "us": number
    },
    "topContributors": [
      {
        "category": "housing" | "transportation" | "food" | "consumption",
        "percentage": number,
        "emissions": number
      }
    ]
  },
  "recommendations": [
    {
      "title": string,
      "description": string,
      "dataReference": string,
      "potentialImpact": {
        "co2Reduction": number,
        "unit": "kg/year"
      },
      "goal": string,
      "priority": "high" | "medium" | "low",
      "category": "housing" | "transportation" | "food" | "consumption"
    }
  ],
  "disclaimer": string
}"""

SYSTEM_PROMPT = (
    "You are a precise environmental sustainability expert. Analyze carbon footprint data "
    "and provide structured recommendations.\n\n"
    "IMPORTANT: Respond with ONLY pure JSON - no markdown code blocks, no ```json tags, "
    "no additional text. Just the raw JSON object.\n\n" + FORMAT_INSTRUCTIONS
)

USER_TEMPLATE = """Analyze this user's carbon footprint ({total} kg CO2e/year):

Emissions by category:
- Housing: {housing} kg CO2e/year ({housing_pct:.1f}%) - {housing_type}, {electricity} kWh electricity, {natural_gas} therms gas, {heating_oil} gallons heating oil
- Transportation: {transportation} kg CO2e/year ({transportation_pct:.1f}%) - {miles_driven} miles driven at {mpg:g} mpg, {transit_miles} transit miles, {flights} flights/year
- Food: {food} kg CO2e/year ({food_pct:.1f}%) - {diet_type} diet, {waste_level} waste level
- Consumption: {consumption} kg CO2e/year ({consumption_pct:.1f}%) - {shopping_habits} shopping, {recycling_habits} recycling

Global average: {global_avg} kg CO2e/year
US average: {us_avg} kg CO2e/year

Provide a structured analysis with:
1. Summary with emissions comparison and top 3 contributors
2. 3 specific, actionable recommendations focusing on the highest impact categories
3. Include potential CO2 reduction estimates and realistic goals for each recommendation
4. Set appropriate priority levels (high/medium/low) based on impact potential
5. Include a standard disclaimer about AI-generated advice

IMPORTANT: Use exact lowercase values for category fields: "housing", "transportation", "food", "consumption".

Respond with ONLY the JSON object, no markdown formatting."""


def make_client(settings: Settings) -> Optional[AsyncOpenAI]:
    if not settings.openai_api_key:
        return None
    return AsyncOpenAI(api_key=settings.openai_api_key)


def build_user_prompt(
    total: float,
    data: CalculationData,
    breakdown: EmissionsByCategory,
    percentages: Dict[str, float],
) -> str:
    transport = data.transportation
    energy = data.housing.energy
    whole = round_half_up
    return USER_TEMPLATE.format(
        total=whole(total),
        housing=whole(breakdown.housing),
        transportation=whole(breakdown.transportation),
        food=whole(breakdown.food),
        consumption=whole(breakdown.consumption),
        housing_pct=percentages["housing"],
        transportation_pct=percentages["transportation"],
        food_pct=percentages["food"],
        consumption_pct=percentages["consumption"],
        housing_type=data.housing.type,
        electricity=whole(energy.electricity),
        natural_gas=whole(energy.natural_gas),
        heating_oil=whole(energy.heating_oil),
        miles_driven=whole(transport.car.miles_driven),
        mpg=transport.car.fuel_efficiency,
        transit_miles=whole(transport.public_transit.bus_miles + transport.public_transit.train_miles),
        flights=transport.flights.short_haul + transport.flights.long_haul,
        diet_type=data.food.diet_type,
        waste_level=data.food.waste_level,
        shopping_habits=data.consumption.shopping_habits,
        recycling_habits=data.consumption.recycling_habits,
        global_avg=GLOBAL_AVERAGE_KG,
        us_avg=US_AVERAGE_KG,
    )


# ---------- Response cleanup ----------
_FENCE_OPEN_RE = re.compile(r"^```(?:json)?\s*\n?", re.IGNORECASE)
_FENCE_CLOSE_RE = re.compile(r"\n?\s*```\s*$")
_CATEGORY_RE = re.compile(r'("category"\s*:\s*)"([^"]*)"')


def _lower_category(m: re.Match) -> str:
    value = m.group(2).strip().lower()
    if value in CATEGORIES:
        return f'{m.group(1)}"{value}"'
    return m.group(0)


def sanitize(text: str) -> str:
    """Strip ```json fences and lowercase known category names ("Housing" → "housing")."""
    cleaned = (text or "").strip()
    cleaned = _FENCE_OPEN_RE.sub("", cleaned)
    cleaned = _FENCE_CLOSE_RE.sub("", cleaned).strip()
    return _CATEGORY_RE.sub(_lower_category, cleaned)


def parse_analysis(text: str) -> AIAnalysisResponse:
    cleaned = sanitize(text)
    try:
        data: Any = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise InvalidAnalysisResponse(f"not JSON: {e}") from e
    try:
        return AIAnalysisResponse.model_validate(data)
    except ValidationError as e:
        raise InvalidAnalysisResponse(f"schema mismatch: {e.error_count()} error(s)") from e


async def request_analysis(
    client: AsyncOpenAI,
    user_prompt: str,
    model: str = DEFAULT_MODEL,
    temperature: float = 0.7,
    max_tokens: int = 1500,
) -> AIAnalysisResponse:
    """One chat-completions call, no retries. Raises on any failure."""
    log.debug("[ai] prompt: %s", user_prompt)
    rsp = await client.chat.completions.create(
        model=model,
        temperature=temperature,
        max_tokens=max_tokens,
        response_format={"type": "json_object"},
        messages=[
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": user_prompt},
        ],
    )
    raw = rsp.choices[0].message.content or ""
    return parse_analysis(raw)
