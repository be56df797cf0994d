import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError

from quizbot.exceptions import ConfigError


DEFAULT_GROQ_MODEL = "llama-3.3-70b-versatile"
DEFAULT_INTERVAL_MINUTES = 5

REQUIRED_VARS = ("TELEGRAM_BOT_TOKEN", "GROQ_API_KEY", "CHAT_ID")


class Settings(BaseModel):
    telegram_token: str = Field(..., min_length=1)
    groq_api_key: str = Field(..., min_length=1)
    chat_id: str = Field(..., min_length=1)
    groq_model: str = DEFAULT_GROQ_MODEL
    quiz_interval_minutes: int = Field(DEFAULT_INTERVAL_MINUTES, gt=0)


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from environment variables.

    Raises ConfigError if TELEGRAM_BOT_TOKEN, GROQ_API_KEY or CHAT_ID is
    missing or blank, or if QUIZ_INTERVAL_MINUTES is not a positive integer.
    """
    env = os.environ if environ is None else environ

    missing = [name for name in REQUIRED_VARS if not (env.get(name) or "").strip()]
    if missing:
        raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

    try:
        return Settings(
            telegram_token=env["TELEGRAM_BOT_TOKEN"].strip(),
            groq_api_key=env["GROQ_API_KEY"].strip(),
            chat_id=env["CHAT_ID"].strip(),
            groq_model=(env.get("GROQ_MODEL") or DEFAULT_GROQ_MODEL).strip(),
            quiz_interval_minutes=env.get("QUIZ_INTERVAL_MINUTES") or DEFAULT_INTERVAL_MINUTES,
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
