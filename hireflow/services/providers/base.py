"""
Resume structuring provider interface.

Each LLM vendor implements _complete(); prompt building, truncation,
the model-not-found retry and JSON recovery live here once.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from hireflow.core.errors import EmptyDocumentError, ProviderError
from hireflow.services.providers.prompts import (
    RESUME_SYSTEM_PROMPT,
    build_resume_prompt,
    truncate_resume_text,
)
from hireflow.services.providers.response_parser import parse_model_json

logger = logging.getLogger(__name__)


class ResumeStructuringProvider(ABC):
    """
    Turns resume text into a raw (unsanitized) resume dict.

    All configuration is passed in; nothing is read from globals, so a
    provider can be built with fake credentials in tests.
    """

    name: str = "provider"

    def __init__(
        self,
        api_key: str,
        model: str,
        fallback_model: Optional[str] = None,
        timeout_seconds: float = 30.0,
        max_input_chars: int = 15000,
        max_output_tokens: int = 2000,
        temperature: float = 0.1,
    ):
        self.api_key = api_key
        self.model = model
        self.fallback_model = fallback_model
        self.timeout_seconds = timeout_seconds
        self.max_input_chars = max_input_chars
        self.max_output_tokens = max_output_tokens
        self.temperature = temperature

    @abstractmethod
    async def _complete(self, system_prompt: str, prompt: str, model: str) -> str:
        """
        Send one completion request and return the raw reply text.
        Must translate every SDK/transport error into ProviderError.
        """

    async def aclose(self) -> None:
        """Release the underlying HTTP client."""

    def prepare_text(self, text: str):
        """Truncate text to this provider's input limit. Returns (text, truncated)."""
        return truncate_resume_text(text, self.max_input_chars)

    async def complete_with_fallback(self, prompt: str) -> str:
        """
        Call the primary model; if it doesn't exist, retry once on the
        fallback model. Other provider errors are raised as is.
        """
        try:
            return await self._complete(RESUME_SYSTEM_PROMPT, prompt, self.model)
        except ProviderError as e:
            if not e.is_model_not_found:
                raise
            if not self.fallback_model or self.fallback_model == self.model:
                raise
            logger.warning(
                "%s model '%s' not available, retrying with '%s'",
                self.name, self.model, self.fallback_model,
            )
        return await self._complete(RESUME_SYSTEM_PROMPT, prompt, self.fallback_model)

    async def structure(self, text: str) -> dict:
        """
        Structure resume text into a raw dict.

        Raises:
            EmptyDocumentError: text is blank (no network call made)
            ProviderError: upstream call failed
            MalformedResponseError: reply held no JSON object
        """
        if not text or not text.strip():
            raise EmptyDocumentError()

        resume_text, truncated = self.prepare_text(text.strip())
        if truncated:
            logger.warning(
                "Resume text truncated from %d to %d characters for %s",
                len(text.strip()), self.max_input_chars, self.name,
            )

        logger.info("Calling %s with model %s", self.name, self.model)
        reply = await self.complete_with_fallback(build_resume_prompt(resume_text))
        return parse_model_json(reply)
