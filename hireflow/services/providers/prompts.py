"""
Resume extraction prompt shared by every provider.

The resume text is cut to the provider's input limit before it is embedded.
The cut is lossy: very long resumes are structured from their first part only.
"""

from typing import Tuple

RESUME_SYSTEM_PROMPT = (
    "You are a professional resume parser. "
    "Extract structured information from resumes and return ONLY valid JSON."
)

RESUME_JSON_SCHEMA = """{
  "name": "Full name if found",
  "email": "Email address if found",
  "phone": "Phone number if found",
  "summary": "Professional summary or objective",
  "skills": ["list", "of", "skills", "mentioned"],
  "experience": [
    {
      "title": "Job title",
      "company": "Company name",
      "startDate": "YYYY-MM or YYYY",
      "endDate": "YYYY-MM or YYYY or null if current",
      "current": true,
      "description": "Job description"
    }
  ],
  "education": [
    {
      "degree": "Degree name",
      "institution": "School/University name",
      "fieldOfStudy": "Field of study",
      "startDate": "YYYY-MM or YYYY",
      "endDate": "YYYY-MM or YYYY or null if current",
      "current": false
    }
  ],
  "certifications": [
    {
      "name": "Certification name",
      "issuer": "Issuing organization",
      "date": "YYYY-MM or YYYY"
    }
  ],
  "languages": [
    {
      "language": "Language name",
      "proficiency": "Proficiency level"
    }
  ]
}"""

RESUME_PROMPT_TEMPLATE = """Extract structured information from this resume.

RESUME CONTENT:
{resume_text}

Return ONLY valid JSON with this exact structure:
{schema}

IMPORTANT:
- Return ONLY the JSON object, no other text.
- If a field is not found, use an empty string for strings, an empty array for arrays, or null for endDate.
- Standardize all dates to YYYY-MM or YYYY."""


def truncate_resume_text(text: str, limit: int) -> Tuple[str, bool]:
    """Cut text to at most `limit` characters. Returns (text, was_truncated)."""
    if limit <= 0 or len(text) <= limit:
        return text, False
    return text[:limit], True


def build_resume_prompt(resume_text: str) -> str:
    return RESUME_PROMPT_TEMPLATE.format(resume_text=resume_text, schema=RESUME_JSON_SCHEMA)
