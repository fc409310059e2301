"""Application configuration helpers."""

from dataclasses import dataclass
import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


@dataclass
class Settings:
    """Holds runtime configuration loaded from the environment."""

    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4.1-mini"
    temperature: float = 0.7
    max_output_tokens: int = 4000
    request_timeout: float = 60.0
    currency: str = "INR"
    frontend_url: str = "http://localhost:3000"
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache settings so every module shares the same values.

    A missing OpenAI key is not an error here: the planner degrades to the
    rule-based fallback plan when the model gateway cannot be used.
    """

    api_key = os.getenv("OPENAI_API_KEY")
    if api_key == "your_openai_api_key_here":
        api_key = None

    return Settings(
        openai_api_key=api_key or None,
        openai_model=os.getenv("OPENAI_MODEL", "gpt-4.1-mini"),
        temperature=float(os.getenv("OPENAI_TEMPERATURE", "0.7")),
        max_output_tokens=int(os.getenv("OPENAI_MAX_OUTPUT_TOKENS", "4000")),
        request_timeout=float(os.getenv("OPENAI_TIMEOUT_SECONDS", "60")),
        currency=os.getenv("TRIP_PLANNER_CURRENCY", "INR"),
        frontend_url=os.getenv("FRONTEND_URL", "http://localhost:3000"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
