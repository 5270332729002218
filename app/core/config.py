from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from dotenv import load_dotenv


# Path to the .env file in the project root (two levels up from app/core)
CONFIG_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = CONFIG_DIR.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / '.env'

load_dotenv(ENV_FILE_PATH)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH),
        env_file_encoding='utf-8',
        extra='ignore'
    )

    DEBUG_MODE: bool = False
    LOG_JSON: bool = False  # Structured JSON lines in logs/app.log

    HUGGINGFACE_API_KEY: str = ""
    GEMINI_API_KEY: str = ""

    # "huggingface" (chat completions) or "gemini" (generate content)
    LLM_PROVIDER: str = "huggingface"
    CHAT_COMPLETIONS_URL: str = "https://router.huggingface.co/v1/chat/completions"
    CHAT_MODEL: str = "HuggingFaceTB/SmolLM3-3B"
    GEMINI_MODEL: str = "gemini-2.5-flash"
    LLM_MAX_TOKENS: int = 500
    LLM_TIMEOUT_SECONDS: float = 60.0

    # "array" returns the bare question list, "wrapped" returns {"result": "<json>"}
    RESPONSE_MODE: str = "array"

    # Lowercase substrings that disqualify a generated question (model reasoning leakage)
    QUESTION_DENYLIST: List[str] = [
        "<think>",
        "</think>",
        "okay",
        "let me",
        "first",
        "second",
        "third",
        "behavioral questions",
        "technical questions",
        "example response",
        "generate",
        "instructions",
    ]

    DATABASE_URL: str = "sqlite+aiosqlite:///./interviews.db"


settings = Settings()
