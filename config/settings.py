# config/settings.py
import os
import sys
from typing import Optional
from dotenv import load_dotenv
from pydantic import ValidationError, Field
from pydantic_settings import BaseSettings
from util.enums import Environment
import logging


if os.getenv("APP_ENV", Environment.DEV) == Environment.DEV:
    load_dotenv()

_log = logging.getLogger("config.settings")


class Settings(BaseSettings):
    # App
    APP_ENV: str = Field(default=Environment.DEV.value, validation_alias="APP_ENV")

    # CORS & Limits
    ALLOWED_ORIGIN: str = Field(
        default="http://localhost:3000", validation_alias="ALLOWED_ORIGIN"
    )
    MAX_FILE_MB: int = Field(default=50, validation_alias="MAX_FILE_MB")

    # Refinement model (OpenAI-compatible chat completions)
    OPENAI_API_KEY: Optional[str] = Field(default=None, validation_alias="OPENAI_API_KEY")
    OPENAI_API_URL: str = Field(
        default="https://api.openai.com/v1/chat/completions",
        validation_alias="OPENAI_API_URL",
    )
    OPENAI_MODEL: str = Field(default="gpt-3.5-turbo", validation_alias="OPENAI_MODEL")
    OPENAI_TIMEOUT_SECONDS: float = Field(
        default=60.0, validation_alias="OPENAI_TIMEOUT_SECONDS"
    )
    REFINE_MAX_PAGES: int = Field(default=10, validation_alias="REFINE_MAX_PAGES")
    REFINE_MAX_CHARS: int = Field(default=3000, validation_alias="REFINE_MAX_CHARS")

    # Logging knobs
    LOGGER_NAME: str = "ravi-scan"
    LOG_LEVEL: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    LOG_TO_FILE: bool = Field(default=False, validation_alias="LOG_TO_FILE")
    LOG_DIR: str = Field(default="logs", validation_alias="LOG_DIR")
    LOG_FILE_NAME: str = Field(default="app.log", validation_alias="LOG_FILE_NAME")
    LOG_MAX_BYTES: int = Field(
        default=50 * 1024 * 1024, validation_alias="LOG_MAX_BYTES"
    )
    LOG_BACKUP_COUNT: int = Field(default=5, validation_alias="LOG_BACKUP_COUNT")

    # Prompts
    REFINE_PROMPT: str = (
        'Analyze this text from page {page_number} of the book "{book_name}".\n'
        "\n"
        "Text:\n"
        "{page_text}\n"
        "\n"
        'Task: Find any reference to "Ravi" (narrator/transmitter) and determine their '
        "status in Islamic hadith science:\n"
        '- Is the narrator described as "Thiqah" (trustworthy/reliable)?\n'
        '- Is the narrator described as "Zaeef/Daeef" (weak/unreliable)?\n'
        "- Look for Arabic terms: ثقة (thiqah), ضعيف (daeef), صدوق (truthful), "
        "متروك (abandoned), etc.\n"
        "\n"
        "Respond in JSON format:\n"
        "{{\n"
        '  "found": true/false,\n'
        '  "status": "Thiqah" or "Zaeef" or "Unknown",\n'
        '  "context": "relevant excerpt mentioning Ravi and their status"\n'
        "}}"
    )

    @property
    def refinement_enabled(self) -> bool:
        return bool((self.OPENAI_API_KEY or "").strip())


try:
    settings = Settings()
except ValidationError as e:
    print("❌ Missing/invalid environment variables:", file=sys.stderr)
    for err in e.errors():
        loc = ".".join(str(x) for x in err.get("loc", []))
        msg = err.get("msg", "")
        print(f" - {loc}: {msg}", file=sys.stderr)
    sys.exit(1)
except Exception as e:
    print(f"❌ Settings initialization failed: {e}", file=sys.stderr)
    sys.exit(1)
