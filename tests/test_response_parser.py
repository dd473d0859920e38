"""Tests for recovering JSON from model replies."""

import pytest

from hireflow.core.errors import MalformedResponseError
from hireflow.services.providers.response_parser import clean_model_output, parse_model_json


def test_plain_json():
    assert parse_model_json('{"name": "Jane Doe"}') == {"name": "Jane Doe"}


def test_json_code_fence():
    reply = '```json\n{"name": "Jane Doe", "skills": ["React"]}\n```'
    assert parse_model_json(reply) == {"name": "Jane Doe", "skills": ["React"]}


def test_bare_code_fence():
    assert parse_model_json('```\n{"email": "jane@x.com"}\n```') == {"email": "jane@x.com"}


def test_json_embedded_in_prose():
    reply = 'Sure! Here is the parsed resume:\n{"name": "Jane Doe", "experience": [{"title": "Dev"}]}\nLet me know if you need more.'
    assert parse_model_json(reply) == {"name": "Jane Doe", "experience": [{"title": "Dev"}]}


def test_fenced_json_embedded_in_prose():
    reply = 'Here you go:\n```json\n{"name": "Jane Doe"}\n```\nThanks'
    assert parse_model_json(reply) == {"name": "Jane Doe"}


@pytest.mark.parametrize("reply", [
    "I could not find a resume in the text.",
    "",
    "{not json at all}",
    '["a", "list", "is", "not", "a", "resume"]',
])
def test_unrecoverable_reply_raises(reply):
    with pytest.raises(MalformedResponseError):
        parse_model_json(reply)


def test_clean_model_output_strips_fences_and_whitespace():
    assert clean_model_output("  ```JSON\n{}\n```  ") == "{}"
    assert clean_model_output(None) == ""


def test_fence_preceded_by_whitespace_parses_directly():
    reply = '\n\n  ```json\n{"name": "Jane Doe"}\n```\n'
    assert clean_model_output(reply) == '{"name": "Jane Doe"}'
    assert parse_model_json(reply) == {"name": "Jane Doe"}


def test_backticks_inside_values_are_kept():
    reply = '```json\n{"summary": "Writes ```python``` snippets"}\n```'
    assert parse_model_json(reply) == {"summary": "Writes ```python``` snippets"}


def test_unclosed_fence():
    assert parse_model_json('```json\n{"name": "Jane Doe"}') == {"name": "Jane Doe"}
