"""
Build the configured resume structuring provider.
"""

import logging
from typing import List, Optional

from hireflow.core.config import Settings, get_settings
from hireflow.services.providers.base import ResumeStructuringProvider
from hireflow.services.providers.deepseek import DeepSeekProvider
from hireflow.services.providers.gemini import GeminiProvider

logger = logging.getLogger(__name__)

PROVIDERS = ("gemini", "deepseek")


def available_providers() -> List[str]:
    return list(PROVIDERS)


def provider_api_key(settings: Settings, name: str) -> str:
    if name == "gemini":
        return settings.gemini_api_key
    if name == "deepseek":
        return settings.deepseek_api_key
    raise ValueError(f"Unknown resume provider '{name}'. Choose one of: {', '.join(PROVIDERS)}")


def create_provider(
    settings: Optional[Settings] = None,
    name: Optional[str] = None,
) -> Optional[ResumeStructuringProvider]:
    """
    Create a provider from settings.

    Returns None when the provider has no API key (mock mode).

    Raises:
        ValueError for an unknown provider name
    """
    settings = settings or get_settings()
    name = (name or settings.resume_provider).strip().lower()

    api_key = provider_api_key(settings, name)
    if not api_key:
        logger.info("No API key configured for %s, resume parsing runs in mock mode", name)
        return None

    if name == "gemini":
        return GeminiProvider(
            api_key=api_key,
            model=settings.gemini_model,
            fallback_model=settings.gemini_fallback_model,
            timeout_seconds=settings.gemini_timeout_seconds,
            max_input_chars=settings.gemini_max_input_chars,
            max_output_tokens=settings.gemini_max_output_tokens,
            temperature=settings.llm_temperature,
        )

    return DeepSeekProvider(
        api_key=api_key,
        base_url=settings.deepseek_base_url,
        model=settings.deepseek_model,
        fallback_model=settings.deepseek_fallback_model,
        timeout_seconds=settings.deepseek_timeout_seconds,
        max_input_chars=settings.deepseek_max_input_chars,
        max_output_tokens=settings.deepseek_max_output_tokens,
        temperature=settings.llm_temperature,
    )
