"""Tests for resume sanitization."""

import pytest

from hireflow.schemas.schemas import StructuredResume
from hireflow.services.sanitizer import coerce_str, sanitize_resume
from tests.helpers import SAMPLE_RESUME_JSON

MESSY_INPUTS = [
    {},
    None,
    "not a dict",
    [1, 2, 3],
    42,
    {"name": None, "email": None, "skills": None, "experience": None},
    {"skills": "Python, React", "experience": {"title": "Dev"}, "education": "MIT", "languages": 3},
    {"name": 123, "phone": 5550100, "summary": ["a", "b"], "email": {"x": 1}},
    {"skills": ["Python", "", None, 0, "  ", "React", "Python", {"name": "Go"}, 7]},
    {"experience": [None, "Engineer", 5, {"title": "Dev", "current": "false", "endDate": ""}]},
    {"education": [{"degree": "BSc", "fieldOfStudy": None, "current": 1, "endDate": 2020}]},
    {"certifications": [{"name": "AWS"}, []], "languages": [{"language": "French"}, None]},
    SAMPLE_RESUME_JSON,
]


@pytest.mark.parametrize("raw", MESSY_INPUTS)
def test_sanitize_is_total(raw):
    result = sanitize_resume(raw)

    assert isinstance(result, StructuredResume)
    for field in ("name", "email", "phone", "summary"):
        assert isinstance(getattr(result, field), str)
    for field in ("skills", "experience", "education", "certifications", "languages"):
        assert isinstance(getattr(result, field), list)


@pytest.mark.parametrize("raw", MESSY_INPUTS)
def test_sanitize_is_idempotent(raw):
    once = sanitize_resume(raw)

    assert sanitize_resume(once) == once
    assert sanitize_resume(once.model_dump(by_alias=True)) == once
    assert sanitize_resume(once.model_dump()) == once


def test_empty_dict_gives_defaults():
    assert sanitize_resume({}) == StructuredResume()


def test_valid_record_is_preserved():
    result = sanitize_resume(SAMPLE_RESUME_JSON)

    assert result.name == "Priya Sharma"
    assert result.skills == ["Python", "React", "PostgreSQL"]
    assert result.experience[0].company == "TechCorp Solutions"
    assert result.experience[0].end_date is None
    assert result.experience[0].current is True
    assert result.education[0].field_of_study == "Computer Science"
    assert result.education[0].end_date == "2022"
    assert result.certifications[0].issuer == "Amazon"
    assert result.languages[0].proficiency == "Fluent"


def test_serializes_with_camel_case_keys():
    dumped = sanitize_resume(SAMPLE_RESUME_JSON).model_dump(by_alias=True)

    assert dumped["experience"][0]["startDate"] == "2022-06"
    assert dumped["experience"][0]["endDate"] is None
    assert dumped["education"][0]["fieldOfStudy"] == "Computer Science"


def test_non_list_fields_become_empty_lists():
    result = sanitize_resume({"skills": "Python, React", "experience": {"title": "Dev"}})
    assert result.skills == []
    assert result.experience == []


def test_skills_drop_falsy_but_keep_duplicates():
    result = sanitize_resume({"skills": ["Python", "", None, 0, "  ", "React", "Python", 7]})
    assert result.skills == ["Python", "React", "Python", "7"]


def test_malformed_entry_degrades_without_poisoning_list():
    result = sanitize_resume({
        "experience": [
            None,
            {"title": "Dev", "company": None, "current": "false", "endDate": ""},
        ]
    })

    assert len(result.experience) == 2
    assert result.experience[0].title == ""
    assert result.experience[0].current is False
    assert result.experience[1].title == "Dev"
    assert result.experience[1].company == ""
    # truthiness, not strict booleans
    assert result.experience[1].current is True
    assert result.experience[1].end_date is None


def test_numeric_scalars_are_stringified():
    result = sanitize_resume({"phone": 5550100, "education": [{"endDate": 2020, "current": 0}]})
    assert result.phone == "5550100"
    assert result.education[0].end_date == "2020"
    assert result.education[0].current is False


@pytest.mark.parametrize("value, expected", [
    ("text", "text"),
    (3, "3"),
    (2.5, "2.5"),
    (True, ""),
    (None, ""),
    ([], ""),
    ({"a": 1}, ""),
])
def test_coerce_str(value, expected):
    assert coerce_str(value) == expected
