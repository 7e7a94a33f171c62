# ecoviz/analysis.py — ranks categories and builds the recommendation set
import logging
from typing import Dict, List, Optional, Tuple

from openai import AsyncOpenAI

from . import ai_router
from .config import DEFAULT_MODEL, Settings
from .factors import CATEGORIES, GLOBAL_AVERAGE_KG, US_AVERAGE_KG, round_half_up
from .schemas import (
    AIAnalysisResponse, AnalysisSummary, CalculationData, ComparisonToAverages,
    Contributor, EmissionsByCategory, PotentialImpact, Recommendation,
)

log = logging.getLogger(__name__)

# terminal states of one generate() call
FALLBACK_ONLY = "fallback_only"
VALIDATED = "validated"
FALLBACK_ON_SUBSTITUTION = "fallback_on_substitution"

DISCLAIMER = (
    "These recommendations are generated based on your emission profile and should be "
    "considered as general advice. Consult environmental experts for personalized strategies."
)

# (reduction fraction, priority) for the top two contributors
FALLBACK_TARGETS = ((0.20, "high"), (0.15, "medium"))


def calculate_percentages(total: float, breakdown: EmissionsByCategory) -> Dict[str, float]:
    """Share of total per category; all zeros when total is 0."""
    values = breakdown.model_dump()
    if not total:
        return {c: 0.0 for c in CATEGORIES}
    return {c: values[c] / total * 100 for c in CATEGORIES}


def rank_contributors(breakdown: EmissionsByCategory, percentages: Dict[str, float]) -> List[Contributor]:
    values = breakdown.model_dump()
    contributors = [
        Contributor(category=c, percentage=percentages[c], emissions=values[c])
        for c in CATEGORIES
    ]
    # sorted() is stable, ties keep category order
    return sorted(contributors, key=lambda x: x.percentage, reverse=True)


def _fallback_recommendation(rank: int, contributor: Contributor) -> Recommendation:
    fraction, priority = FALLBACK_TARGETS[rank]
    name = contributor.category
    if rank == 0:
        title = f"Reduce {name.capitalize()} Emissions"
        description = (
            f"Your largest contributor is {name} at {contributor.percentage:.1f}% "
            f"of your total emissions."
        )
    else:
        title = f"Optimize {name.capitalize()}"
        description = (
            f"Your second largest contributor is {name} at {contributor.percentage:.1f}% of emissions."
        )
    return Recommendation(
        title=title,
        description=description,
        data_reference=f"Based on your {name} data",
        potential_impact=PotentialImpact(co2_reduction=round_half_up(contributor.emissions * fraction)),
        goal=f"Reduce {name} emissions by {round(fraction * 100)}%",
        priority=priority,
        category=name,
    )


def build_fallback(total: float, contributors: List[Contributor]) -> AIAnalysisResponse:
    return AIAnalysisResponse(
        summary=AnalysisSummary(
            total_emissions=total,
            comparison_to_averages=ComparisonToAverages(
                global_=total / GLOBAL_AVERAGE_KG,
                us=total / US_AVERAGE_KG,
            ),
            top_contributors=contributors[:3],
        ),
        recommendations=[_fallback_recommendation(i, c) for i, c in enumerate(contributors[:2])],
        disclaimer=DISCLAIMER,
    )


class AnalysisGenerator:
    """
    Narrative analysis for a computed footprint.

    The deterministic fallback is always built first. When
    `use_external_generator` is set and a client is available, one chat
    call is attempted; any failure (network, bad JSON, schema mismatch)
    is logged and the fallback is returned instead.
    """

    def __init__(
        self,
        use_external_generator: bool,
        client: Optional[AsyncOpenAI] = None,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.7,
        max_tokens: int = 1500,
    ):
        self.use_external_generator = use_external_generator
        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    @classmethod
    def from_settings(cls, settings: Settings, client: Optional[AsyncOpenAI] = None) -> "AnalysisGenerator":
        if client is None and settings.use_external_generator:
            client = ai_router.make_client(settings)
        return cls(
            use_external_generator=settings.use_external_generator,
            client=client,
            model=settings.model,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
        )

    async def generate_with_source(
        self,
        total: float,
        data: CalculationData,
        breakdown: EmissionsByCategory,
    ) -> Tuple[AIAnalysisResponse, str]:
        percentages = calculate_percentages(total, breakdown)
        contributors = rank_contributors(breakdown, percentages)
        fallback = build_fallback(total, contributors)

        if not (self.use_external_generator and self.client is not None):
            return fallback, FALLBACK_ONLY

        try:
            prompt = ai_router.build_user_prompt(total, data, breakdown, percentages)
            analysis = await ai_router.request_analysis(
                self.client,
                prompt,
                model=self.model,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except Exception as e:
            log.warning("[ai] analysis failed, using fallback: %r", e)
            return fallback, FALLBACK_ON_SUBSTITUTION
        return analysis, VALIDATED

    async def generate(
        self,
        total: float,
        data: CalculationData,
        breakdown: EmissionsByCategory,
    ) -> AIAnalysisResponse:
        analysis, _ = await self.generate_with_source(total, data, breakdown)
        return analysis
