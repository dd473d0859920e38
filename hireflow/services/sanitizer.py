"""
Sanitization - coerce whatever the model returned into a StructuredResume.

sanitize_resume() is total: it never raises. Missing or wrongly typed
fields fall back to their defaults, one field at a time, so a single bad
entry can't poison the rest of the record.
"""

from typing import Any, List, Optional

from hireflow.schemas.schemas import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    StructuredResume,
)


# ============================================================
# FIELD COERCION HELPERS
# ============================================================

def _get(data: dict, key: str, alias: Optional[str] = None) -> Any:
    """Look up key, falling back to its snake_case alias."""
    value = data.get(key)
    if value is None and alias:
        value = data.get(alias)
    return value


def coerce_str(value: Any) -> str:
    """Strings pass through, numbers are stringified, anything else is ''."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def coerce_end_date(value: Any) -> Optional[str]:
    """None (ongoing) unless there is a non-empty date string."""
    return coerce_str(value) or None


def coerce_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _as_dict(item: Any) -> dict:
    return item if isinstance(item, dict) else {}


# ============================================================
# ENTRY SANITIZERS
# ============================================================

def sanitize_skills(value: Any) -> List[str]:
    skills = (coerce_str(s).strip() for s in coerce_list(value) if s)
    return [s for s in skills if s]


def sanitize_experience(item: Any) -> ExperienceEntry:
    exp = _as_dict(item)
    return ExperienceEntry(
        title=coerce_str(exp.get("title")),
        company=coerce_str(exp.get("company")),
        start_date=coerce_str(_get(exp, "startDate", "start_date")),
        end_date=coerce_end_date(_get(exp, "endDate", "end_date")),
        current=bool(exp.get("current")),
        description=coerce_str(exp.get("description")),
    )


def sanitize_education(item: Any) -> EducationEntry:
    edu = _as_dict(item)
    return EducationEntry(
        degree=coerce_str(edu.get("degree")),
        institution=coerce_str(edu.get("institution")),
        field_of_study=coerce_str(_get(edu, "fieldOfStudy", "field_of_study")),
        start_date=coerce_str(_get(edu, "startDate", "start_date")),
        end_date=coerce_end_date(_get(edu, "endDate", "end_date")),
        current=bool(edu.get("current")),
    )


def sanitize_certification(item: Any) -> CertificationEntry:
    cert = _as_dict(item)
    return CertificationEntry(
        name=coerce_str(cert.get("name")),
        issuer=coerce_str(cert.get("issuer")),
        date=coerce_str(cert.get("date")),
    )


def sanitize_language(item: Any) -> LanguageEntry:
    lang = _as_dict(item)
    return LanguageEntry(
        language=coerce_str(lang.get("language")),
        proficiency=coerce_str(lang.get("proficiency")),
    )


def sanitize_resume(data: Any) -> StructuredResume:
    """
    Validate and sanitize parsed resume data.
    Ensures all required fields exist with correct types.

    Accepts a StructuredResume too, which makes sanitizing idempotent.
    """
    if isinstance(data, StructuredResume):
        data = data.model_dump(by_alias=True)
    data = _as_dict(data)

    return StructuredResume(
        name=coerce_str(data.get("name")),
        email=coerce_str(data.get("email")),
        phone=coerce_str(data.get("phone")),
        summary=coerce_str(data.get("summary")),
        skills=sanitize_skills(data.get("skills")),
        experience=[sanitize_experience(e) for e in coerce_list(data.get("experience"))],
        education=[sanitize_education(e) for e in coerce_list(data.get("education"))],
        certifications=[sanitize_certification(c) for c in coerce_list(data.get("certifications"))],
        languages=[sanitize_language(lang) for lang in coerce_list(data.get("languages"))],
    )
