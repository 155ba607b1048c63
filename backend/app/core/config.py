from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

DEFAULT_RECIPES_PATH = Path(__file__).resolve().parent.parent / "data" / "recipes.json"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    gemini_api_key: str = ""
    gemini_default_model: str = "gemini-2.5-flash"
    recipes_path: Path = DEFAULT_RECIPES_PATH
    generation_timeout_sec: float = 30.0
    generation_max_retries: int = 1
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_prefix": "",
        "extra": "ignore",
    }

@lru_cache()
def get_settings() -> Settings:
    """Return cached Settings instance."""
    return Settings()
