# ecoviz/pipeline.py — normalize → calculate → analyze → envelope
import logging
import time
import uuid
from typing import Optional, Union

from .analysis import AnalysisGenerator
from .calculator import calculate_by_category
from .config import Settings, load_settings
from .factors import GLOBAL_AVERAGE_KG, US_AVERAGE_KG
from .normalizer import normalize
from .schemas import Averages, RawUserInput, ResultEnvelope

log = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Carbon footprint calculation and AI analysis completed successfully"


def new_calculation_id(user_id: str) -> str:
    # millis alone collide on fast repeat calls; the uuid part keeps ids distinct
    return f"{user_id}-{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"


class FootprintPipeline:
    def __init__(self, generator: AnalysisGenerator):
        self.generator = generator

    async def run(self, user_id: str, raw_input: Union[RawUserInput, dict, None]) -> ResultEnvelope:
        data = normalize(raw_input)
        breakdown = calculate_by_category(data)
        total = breakdown.total()

        analysis, source = await self.generator.generate_with_source(total, data, breakdown)
        log.info("[pipeline] user=%s total=%.1f kg analysis=%s", user_id, total, source)

        return ResultEnvelope(
            user_id=user_id,
            calculation_id=new_calculation_id(user_id),
            carbon_footprint=total,
            emissions_by_category=breakdown,
            ai_analysis=analysis,
            averages=Averages(global_=GLOBAL_AVERAGE_KG, us=US_AVERAGE_KG),
            message=SUCCESS_MESSAGE,
        )


def build_pipeline(settings: Optional[Settings] = None) -> FootprintPipeline:
    settings = settings or load_settings()
    return FootprintPipeline(AnalysisGenerator.from_settings(settings))
