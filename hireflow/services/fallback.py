"""
Degraded parsing paths.

- Mock data: returned when no provider API key is configured. It ignores
  the uploaded file entirely (only the file name shows up, in the
  extracted text) so it can never be mistaken for a real parse.
- Keyword fallback: regex scraping of email, phone and known skills when
  the AI path fails. Narrative sections (experience, education, ...) are
  never recovered here.
"""

import re
from typing import List, Optional

from hireflow.schemas.schemas import (
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    ParseSource,
    ResumeParseResult,
    StructuredResume,
)

EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
PHONE_PATTERN = re.compile(r"(?:\+?\d{1,3}[\s.-]?)?\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}")

# Matched as case-insensitive substrings. Very short names (go, r, c)
# are left out since they match inside ordinary words.
SKILL_VOCABULARY = (
    "javascript", "typescript", "react", "angular", "vue", "node.js", "next.js",
    "express.js", "python", "django", "flask", "fastapi", "java", "spring boot",
    "kotlin", "swift", "c++", "c#", ".net", "ruby", "ruby on rails", "php",
    "golang", "html", "css", "tailwind", "sql", "mysql", "postgresql",
    "mongodb", "redis", "graphql", "rest api", "aws", "azure", "gcp", "docker",
    "kubernetes", "terraform", "linux", "github", "gitlab", "ci/cd", "jenkins",
    "machine learning", "deep learning", "tensorflow", "pytorch", "pandas",
    "data analysis", "tableau", "figma", "agile", "scrum", "jira",
    "project management", "communication", "leadership",
)


# ============================================================
# MOCK DATA
# ============================================================

MOCK_RESUME = StructuredResume(
    name="Sample Candidate",
    email="sample.candidate@example.com",
    phone="+1 555 010 0000",
    summary="Sample profile returned because no AI provider is configured.",
    skills=["JavaScript", "React", "Node.js", "Python", "SQL"],
    experience=[
        ExperienceEntry(
            title="Software Engineer",
            company="Example Corp",
            start_date="2021-01",
            end_date=None,
            current=True,
            description="Builds web applications.",
        )
    ],
    education=[
        EducationEntry(
            degree="Bachelor of Science",
            institution="Example University",
            field_of_study="Computer Science",
            start_date="2016",
            end_date="2020",
            current=False,
        )
    ],
    certifications=[],
    languages=[LanguageEntry(language="English", proficiency="Fluent")],
)


def build_mock_result(file_name: str, provider: Optional[str] = None) -> ResumeParseResult:
    return ResumeParseResult(
        extracted_text=f"Mock extracted text for {file_name}",
        structured_data=MOCK_RESUME.model_copy(deep=True),
        source=ParseSource.mock,
        provider=provider,
    )


# ============================================================
# KEYWORD / REGEX FALLBACK
# ============================================================

def find_email(text: str) -> str:
    match = EMAIL_PATTERN.search(text or "")
    return match.group(0) if match else ""


def find_phone(text: str) -> str:
    match = PHONE_PATTERN.search(text or "")
    return match.group(0).strip() if match else ""


def detect_skills(text: str) -> List[str]:
    """Vocabulary terms found in text, in vocabulary order."""
    lowered = (text or "").lower()
    return [skill for skill in SKILL_VOCABULARY if skill in lowered]


def extract_fallback_resume(text: str) -> StructuredResume:
    return StructuredResume(
        email=find_email(text),
        phone=find_phone(text),
        skills=detect_skills(text),
    )
