"""Environment configuration.

Read once at process start into a :class:`Settings` instance that the
app factory hands to every service. Missing provider credentials are not
errors: the place-search provider degrades to empty POI data and the
language model to curated content.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:5000",
    "http://localhost:5173",
    "capacitor://localhost",
)


def _as_float(val: str | None, default: float) -> float:
    if val is None or not val.strip():
        return default
    try:
        return float(val)
    except ValueError:
        logger.warning(f"[CONFIG] Ignoring non-numeric value {val!r}, using {default}")
        return default


def _first_env(*names: str) -> str | None:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return None


@dataclass
class Settings:
    google_places_api_key: str | None = None
    openai_api_key: str | None = None
    openai_base_url: str | None = None
    openai_model: str = "gpt-4o-mini"
    groq_api_key: str | None = None
    groq_model: str = "llama-3.1-8b-instant"
    gemini_api_key: str | None = None
    gemini_model: str = "gemma-3-4b-it"
    llm_timeout_seconds: float = 20.0
    places_timeout_seconds: float = 5.0
    redis_url: str | None = None
    database_url: str = "sqlite:///./braintrip.db"
    cors_origins: list[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))

    @property
    def has_places_credential(self) -> bool:
        return bool(self.google_places_api_key)

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        origins = os.getenv("CORS_ORIGINS")
        return cls(
            google_places_api_key=os.getenv("GOOGLE_PLACES_API_KEY") or None,
            openai_api_key=_first_env("AI_INTEGRATIONS_OPENAI_API_KEY", "OPENAI_API_KEY"),
            openai_base_url=_first_env("AI_INTEGRATIONS_OPENAI_BASE_URL", "OPENAI_BASE_URL"),
            openai_model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
            groq_api_key=os.getenv("GROQ_API_KEY") or None,
            groq_model=os.getenv("GROQ_MODEL", "llama-3.1-8b-instant"),
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            gemini_model=os.getenv("GEMINI_MODEL", "gemma-3-4b-it"),
            llm_timeout_seconds=_as_float(os.getenv("LLM_TIMEOUT_SECONDS"), 20.0),
            places_timeout_seconds=_as_float(os.getenv("PLACES_TIMEOUT_SECONDS"), 5.0),
            redis_url=os.getenv("REDIS_URL") or None,
            database_url=os.getenv("DATABASE_URL", "sqlite:///./braintrip.db"),
            cors_origins=(
                [o.strip() for o in origins.split(",") if o.strip()]
                if origins
                else list(DEFAULT_CORS_ORIGINS)
            ),
        )
