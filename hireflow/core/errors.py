"""
Error taxonomy for the resume parsing pipeline.

Everything raised inside the pipeline derives from ResumePipelineError.
Callers of ResumeParsingService.parse() only ever see ResumeParsingError;
the other types are absorbed into fallback data before they get that far.
"""

from typing import Optional


class ResumePipelineError(Exception):
    """Base class for all pipeline errors."""


class ExtractionError(ResumePipelineError):
    """The declared file format could not yield usable text."""

    def __init__(self, file_name: str, reason: str):
        self.file_name = file_name
        self.reason = reason
        super().__init__(f"Could not extract text from '{file_name}': {reason}")


class EmptyDocumentError(ResumePipelineError):
    """Extracted text is blank. Raised before any provider call."""

    def __init__(self, message: str = "Resume text is empty"):
        super().__init__(message)


class ProviderError(ResumePipelineError):
    """
    The upstream LLM call failed.

    kind is one of the KIND_* constants. Only KIND_MODEL_NOT_FOUND is
    retried, once, against the provider's fallback model.
    """

    KIND_AUTH = "auth"
    KIND_TIMEOUT = "timeout"
    KIND_RATE_LIMIT = "rate_limit"
    KIND_MODEL_NOT_FOUND = "model_not_found"
    KIND_UPSTREAM = "upstream"

    def __init__(self, provider: str, kind: str, message: str, model: Optional[str] = None):
        self.provider = provider
        self.kind = kind
        self.model = model
        super().__init__(f"{provider} error ({kind}): {message}")

    @property
    def is_model_not_found(self) -> bool:
        return self.kind == self.KIND_MODEL_NOT_FOUND


class MalformedResponseError(ResumePipelineError):
    """The provider replied, but no JSON object could be recovered from it."""


class ResumeParsingError(ResumePipelineError):
    """
    Terminal error surfaced to callers when even fallback extraction
    is impossible. Always raised with the original cause chained.
    """

    def __init__(self, file_name: str, cause: Optional[BaseException] = None):
        self.file_name = file_name
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Failed to parse resume '{file_name}'{detail}")
