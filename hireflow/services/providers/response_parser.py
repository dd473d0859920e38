"""
Recover a JSON object from an LLM reply.

Models don't always follow "return ONLY JSON". We try, in order:
1. strip markdown code fences and parse the rest
2. parse the largest {...} span in the reply
and give up with MalformedResponseError after that.
"""

import json
import logging
import re
from typing import Any, Optional

from hireflow.core.errors import MalformedResponseError

logger = logging.getLogger(__name__)

_OPENING_FENCE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_CLOSING_FENCE = re.compile(r"\s*```$")
_BRACE_SPAN = re.compile(r"\{[\s\S]*\}")


def clean_model_output(text: str) -> str:
    """Removes markdown-style ```json and ``` wrappers."""
    text = (text or "").strip()
    text = _OPENING_FENCE.sub("", text)
    return _CLOSING_FENCE.sub("", text).strip()


def _loads_object(text: str) -> Optional[dict]:
    try:
        data: Any = json.loads(text)
    except (json.JSONDecodeError, ValueError):
        return None
    return data if isinstance(data, dict) else None


def parse_model_json(reply: str) -> dict:
    """
    Parse a model reply into a dict.

    Raises:
        MalformedResponseError if no JSON object can be recovered
    """
    cleaned = clean_model_output(reply)

    data = _loads_object(cleaned)
    if data is not None:
        return data

    logger.debug("Reply is not bare JSON, first 200 chars: %r", cleaned[:200])

    match = _BRACE_SPAN.search(cleaned)
    if match:
        data = _loads_object(match.group(0))
        if data is not None:
            logger.info("Recovered JSON object embedded in model reply")
            return data

    raise MalformedResponseError("No valid JSON object found in model response")
