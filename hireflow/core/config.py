"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.

A missing provider API key is a valid state: the parser runs in mock mode.
"""

from functools import lru_cache
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Which provider structures resumes ("gemini" or "deepseek")
    resume_provider: str = "gemini"

    # Google Gemini
    gemini_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("gemini_api_key", "google_gemini_api_key"),
    )
    gemini_model: str = Field(
        default="gemini-2.0-flash",
        validation_alias=AliasChoices("gemini_model", "google_gemini_model"),
    )
    gemini_fallback_model: str = "gemini-1.5-flash"
    gemini_timeout_seconds: float = 30.0
    gemini_max_input_chars: int = 15000
    gemini_max_output_tokens: int = 4000

    # DeepSeek AI (OpenAI-compatible)
    deepseek_api_key: str = ""
    deepseek_base_url: str = "https://api.deepseek.com/v1"
    deepseek_model: str = "deepseek-chat"
    deepseek_fallback_model: str = "deepseek-reasoner"
    deepseek_timeout_seconds: float = 45.0
    deepseek_max_input_chars: int = 15000
    deepseek_max_output_tokens: int = 2000

    # Low temp for consistent structured output
    llm_temperature: float = 0.1

    # Text extraction
    binary_salvage_max_bytes: int = 500_000
    extracted_text_max_chars: int = 20_000

    # Uploads
    max_upload_size_mb: int = 10

    # App
    log_level: str = "INFO"
    debug: bool = False

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
