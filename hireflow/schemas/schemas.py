"""
Pydantic Schemas - Parsed resume records and API responses.

All schemas in one file for simplicity. Python attributes are snake_case;
the wire format uses camelCase aliases (startDate, fieldOfStudy, ...).
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model: camelCase on the wire, either name accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================
# ENUMS
# ============================================================

class ParseSource(str, Enum):
    ai = "ai"
    fallback = "fallback"
    mock = "mock"


# ============================================================
# STRUCTURED RESUME
# ============================================================

class ExperienceEntry(CamelModel):
    title: str = ""
    company: str = ""
    start_date: str = ""
    end_date: Optional[str] = None  # None means ongoing
    current: bool = False
    description: str = ""


class EducationEntry(CamelModel):
    degree: str = ""
    institution: str = ""
    field_of_study: str = ""
    start_date: str = ""
    end_date: Optional[str] = None
    current: bool = False


class CertificationEntry(CamelModel):
    name: str = ""
    issuer: str = ""
    date: str = ""


class LanguageEntry(CamelModel):
    language: str = ""
    proficiency: str = ""


class StructuredResume(CamelModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    summary: str = ""
    skills: List[str] = Field(default_factory=list)
    experience: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    certifications: List[CertificationEntry] = Field(default_factory=list)
    languages: List[LanguageEntry] = Field(default_factory=list)


class ResumeParseResult(CamelModel):
    """Output of one parse call plus where it came from."""

    extracted_text: str
    structured_data: StructuredResume
    source: ParseSource
    provider: Optional[str] = None
    truncated: bool = False
    error: Optional[str] = None


# ============================================================
# API SCHEMAS
# ============================================================

class ResumeUploadResponse(CamelModel):
    success: bool
    message: str
    file_name: str
    file_size: int
    result: ResumeParseResult


class SupportedFormat(CamelModel):
    extension: str
    name: str
    parsed: bool


class SupportedFormatsResponse(CamelModel):
    supported_formats: List[SupportedFormat]
    max_size_mb: int


class ErrorResponse(BaseModel):
    detail: str
