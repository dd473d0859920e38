"""
Schemas module - parsed resume records and API contract.
"""
from hireflow.schemas.schemas import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    ParseSource,
    ResumeParseResult,
    StructuredResume,
)

__all__ = [
    "CertificationEntry",
    "EducationEntry",
    "ExperienceEntry",
    "LanguageEntry",
    "ParseSource",
    "ResumeParseResult",
    "StructuredResume",
]
