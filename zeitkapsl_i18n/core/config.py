from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file explicitly
ENV_FILE_NAME = ".env"
env_path = Path(__file__).parent.parent.parent / ENV_FILE_NAME
load_dotenv(env_path)

MISSING_KEY_POLICIES = ("key", "placeholder")


class Settings(BaseSettings):
    DEFAULT_LOCALE: str = "en-US"
    MISSING_KEY_POLICY: str = "key"
    LOCALE_DIR: str = ""  # Optional, overrides the packaged locale resources
    OPENAI_API_KEY: str = ""  # Optional, for auto-translate
    OPENAI_MODEL: str = "gpt-4o-mini"

    @field_validator("MISSING_KEY_POLICY", mode="before")
    @classmethod
    def parse_policy(cls, v):  # type: ignore
        if v in (None, ""):
            return "key"
        v = str(v).strip().lower()
        if v not in MISSING_KEY_POLICIES:
            raise ValueError(f"MISSING_KEY_POLICY must be one of {', '.join(MISSING_KEY_POLICIES)}")
        return v

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_NAME,
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
