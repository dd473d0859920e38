"""Shared fixtures for the resume parsing tests."""

import json

import pytest

from hireflow.core.config import Settings
from tests.helpers import SAMPLE_RESUME_JSON


@pytest.fixture
def settings() -> Settings:
    """Settings with no API keys, independent of the environment and .env."""
    return Settings(
        _env_file=None,
        resume_provider="gemini",
        gemini_api_key="",
        deepseek_api_key="",
    )


@pytest.fixture
def sample_reply() -> str:
    return json.dumps(SAMPLE_RESUME_JSON)
