from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

from codecritic.constants import GEMINI_API_BASE, GEMINI_MODEL


class Settings(BaseSettings):
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = GEMINI_MODEL
    GEMINI_API_BASE: str = GEMINI_API_BASE
    REQUEST_TIMEOUT: float = 60.0

    # When set, the front end talks to the proxy instead of calling Gemini directly
    REVIEW_PROXY_URL: str = ""

    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:8000",
        "http://127.0.0.1:8000",
    ]
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env")
