import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_MODEL = "llama-3.1-8b-instant"
DEFAULT_TIMEOUT_SECONDS = 30.0

logger = logging.getLogger(__name__)


@dataclass
class SuggestionConfig:
    """Settings for the OpenAI-compatible advisory service."""

    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    model: str = DEFAULT_MODEL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


@dataclass
class AppConfig:
    suggestions: SuggestionConfig
    log_level: str = "INFO"


_config_instance: Optional[AppConfig] = None


def _timeout_from_env() -> float:
    raw = os.getenv("INSIGHTPLAN_TIMEOUT")
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT_SECONDS
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring INSIGHTPLAN_TIMEOUT=%r; using %.0f seconds", raw, DEFAULT_TIMEOUT_SECONDS)
        return DEFAULT_TIMEOUT_SECONDS


def get_config() -> AppConfig:
    """Load configuration from the environment / .env file.

    Returns the same instance on repeated calls; use ``reset_config`` to reload.
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    env_path = Path(__file__).resolve().parents[2] / ".env"
    load_dotenv(dotenv_path=env_path)

    suggestions = SuggestionConfig(
        api_key=os.getenv("GROQ_API_KEY") or os.getenv("INSIGHTPLAN_API_KEY") or None,
        base_url=os.getenv("INSIGHTPLAN_BASE_URL", DEFAULT_BASE_URL),
        model=os.getenv("INSIGHTPLAN_MODEL", DEFAULT_MODEL),
        timeout_seconds=_timeout_from_env(),
    )

    _config_instance = AppConfig(
        suggestions=suggestions,
        log_level=os.getenv("INSIGHTPLAN_LOG_LEVEL", "INFO").upper(),
    )
    return _config_instance


def reset_config() -> None:
    global _config_instance
    _config_instance = None


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a basic stderr handler; safe to call on every Streamlit rerun."""
    resolved = (level or get_config().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, resolved, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
