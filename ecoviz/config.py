# ecoviz/config.py — environment-driven settings (read once, then passed around)
import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_CORS_ORIGINS = ("https://ecoviz-frontend.vercel.app",)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    openai_api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    temperature: float = 0.7
    max_tokens: int = 1500
    environment: str = "production"
    cors_origins: Tuple[str, ...] = DEFAULT_CORS_ORIGINS
    log_level: str = "INFO"

    @property
    def is_test(self) -> bool:
        return self.environment == "test"

    @property
    def use_external_generator(self) -> bool:
        # no key, or running under tests → deterministic fallback only
        return bool(self.openai_api_key) and not self.is_test


def load_settings(env_file: Optional[str] = None) -> Settings:
    # the single .env load for the process; values already in the environment win
    load_dotenv(env_file)
    origins = tuple(o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip())
    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        model=os.getenv("MODEL", DEFAULT_MODEL),
        temperature=_env_float("OPENAI_TEMPERATURE", 0.7),
        max_tokens=_env_int("OPENAI_MAX_TOKENS", 1500),
        environment=(os.getenv("APP_ENV") or "production").strip().lower(),
        cors_origins=origins or DEFAULT_CORS_ORIGINS,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
