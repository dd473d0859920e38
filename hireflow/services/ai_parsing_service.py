"""
AI Parsing Service - uploaded resume file -> StructuredResume.

PIPELINE (one sequential async flow per upload):
1. No API key configured  -> fixed mock record, nothing else runs
2. Extract text from the file (PDF / TXT / binary salvage)
3. Send text to the LLM provider, recover JSON from its reply
4. Sanitize into the canonical StructuredResume shape

FAILURE HANDLING:
- Extraction, provider or malformed-reply failures fall back to regex
  scraping of email, phone and known skills
- A blank document, or a file with no salvageable text at all, raises
  ResumeParsingError; that is the only error callers ever see

Every result carries `source` (ai / fallback / mock) so callers can tell
a full parse from degraded data.
"""

import logging
from typing import Optional

from hireflow.core.config import Settings, get_settings
from hireflow.core.errors import (
    EmptyDocumentError,
    ExtractionError,
    MalformedResponseError,
    ProviderError,
    ResumeParsingError,
    ResumePipelineError,
)
from hireflow.schemas.schemas import ParseSource, ResumeParseResult, StructuredResume
from hireflow.services.fallback import build_mock_result, extract_fallback_resume
from hireflow.services.providers.base import ResumeStructuringProvider
from hireflow.services.providers.factory import create_provider
from hireflow.services.sanitizer import sanitize_resume
from hireflow.services.text_extraction import (
    EXTRACTION_FAILED_TEXT,
    extract_text_async,
    is_usable_text,
    salvage_binary_text,
)

logger = logging.getLogger(__name__)

_USE_SETTINGS = object()


class ResumeParsingService:
    """
    Complete resume parsing workflow for a single provider.

    The provider is injected or built from settings. Passing provider=None
    explicitly forces mock mode.
    """

    def __init__(self, settings: Optional[Settings] = None, provider=_USE_SETTINGS):
        self.settings = settings or get_settings()
        if provider is _USE_SETTINGS:
            provider = create_provider(self.settings)
        self.provider: Optional[ResumeStructuringProvider] = provider

    @property
    def provider_name(self) -> Optional[str]:
        return self.provider.name if self.provider else None

    @property
    def mock_mode(self) -> bool:
        return self.provider is None

    async def aclose(self) -> None:
        if self.provider:
            await self.provider.aclose()

    async def structure_resume(self, text: str, file_name: str = "") -> StructuredResume:
        """
        Structure already-extracted text with the AI provider.

        Raises:
            EmptyDocumentError, ProviderError, MalformedResponseError
            ProviderError(kind="auth") as well when no provider is configured
        """
        if self.provider is None:
            raise ProviderError("none", ProviderError.KIND_AUTH, "No AI provider API key configured")

        logger.info("Structuring resume %s with %s", file_name or "<text>", self.provider.name)
        raw = await self.provider.structure(text)
        return sanitize_resume(raw)

    async def parse(self, content: bytes, file_name: str) -> ResumeParseResult:
        """
        Full parsing pipeline for an uploaded resume.

        Args:
            content: Raw file bytes
            file_name: Original file name (format is inferred from its extension)

        Returns:
            ResumeParseResult with source ai, fallback or mock

        Raises:
            ResumeParsingError if no usable data can be produced at all
        """
        if self.provider is None:
            logger.info("Mock mode: returning sample resume for %s", file_name)
            return build_mock_result(file_name)

        text: Optional[str] = None
        try:
            text = await extract_text_async(content, file_name)
            if text == EXTRACTION_FAILED_TEXT:
                raise ExtractionError(file_name, "No readable text found")
            structured = await self.structure_resume(text, file_name)
        except EmptyDocumentError as e:
            logger.error("Resume %s has no text", file_name)
            raise ResumeParsingError(file_name, e) from e
        except (ExtractionError, ProviderError, MalformedResponseError) as e:
            return self._fallback(content, file_name, text, e)

        _, truncated = self.provider.prepare_text(text.strip())
        return ResumeParseResult(
            extracted_text=text,
            structured_data=structured,
            source=ParseSource.ai,
            provider=self.provider.name,
            truncated=truncated,
        )

    def _fallback(
        self,
        content: bytes,
        file_name: str,
        text: Optional[str],
        cause: ResumePipelineError,
    ) -> ResumeParseResult:
        logger.warning("AI parsing failed for %s, using keyword fallback: %s", file_name, cause)

        if text is None:
            text = salvage_binary_text(content)

        if not is_usable_text(text):
            logger.error("No usable text in %s, giving up", file_name)
            raise ResumeParsingError(file_name, cause) from cause

        return ResumeParseResult(
            extracted_text=text,
            structured_data=extract_fallback_resume(text),
            source=ParseSource.fallback,
            provider=self.provider_name,
            error=str(cause),
        )


# ============================================================
# CONVENIENCE FUNCTIONS
# ============================================================

def get_resume_parser(settings: Optional[Settings] = None) -> ResumeParsingService:
    """Get resume parsing service instance."""
    return ResumeParsingService(settings)
