# ecoviz/main.py
import logging
from functools import lru_cache

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import load_settings
from .pipeline import FootprintPipeline, build_pipeline
from .schemas import CalculateRequest, ResultEnvelope

settings = load_settings()
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger(__name__)

if not settings.use_external_generator:
    log.info("[ai] external analysis disabled (no OPENAI_API_KEY or APP_ENV=test); using fallback")


# ---- FastAPI app ------------------------------------------------------------
app = FastAPI(title="EcoViz carbon footprint calculator")
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
    max_age=86400,
)


@lru_cache(maxsize=1)
def get_pipeline() -> FootprintPipeline:
    return build_pipeline(settings)


@app.get("/health")
def health():
    return {"ok": True}


@app.post("/calculate", response_model=ResultEnvelope)
async def calculate(req: CalculateRequest, pipeline: FootprintPipeline = Depends(get_pipeline)):
    try:
        result = await pipeline.run(req.user_id, req.user_input)
    except Exception:
        log.exception("[calculate] failed for user=%s", req.user_id)
        return JSONResponse({"message": "some error happened"}, status_code=500)
    return result
