"""
Google Gemini provider (google-genai SDK).
"""

import logging

import httpx
from google import genai
from google.genai import errors, types

from hireflow.core.errors import MalformedResponseError, ProviderError
from hireflow.services.providers.base import ResumeStructuringProvider

logger = logging.getLogger(__name__)

_KIND_BY_STATUS = {
    401: ProviderError.KIND_AUTH,
    403: ProviderError.KIND_AUTH,
    404: ProviderError.KIND_MODEL_NOT_FOUND,
    408: ProviderError.KIND_TIMEOUT,
    429: ProviderError.KIND_RATE_LIMIT,
    504: ProviderError.KIND_TIMEOUT,
}


class GeminiProvider(ResumeStructuringProvider):
    name = "gemini"

    def __init__(self, api_key: str, **kwargs):
        super().__init__(api_key, **kwargs)
        self.client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=int(self.timeout_seconds * 1000)),
        )

    async def aclose(self) -> None:
        await self.client.aio.aclose()
        self.client.close()

    async def _complete(self, system_prompt: str, prompt: str, model: str) -> str:
        try:
            response = await self.client.aio.models.generate_content(
                model=model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    system_instruction=system_prompt,
                    temperature=self.temperature,
                    max_output_tokens=self.max_output_tokens,
                ),
            )
        except errors.APIError as e:
            kind = _KIND_BY_STATUS.get(e.code, ProviderError.KIND_UPSTREAM)
            raise ProviderError(self.name, kind, e.message or str(e), model) from e
        except httpx.TimeoutException as e:
            raise ProviderError(self.name, ProviderError.KIND_TIMEOUT, str(e) or "request timed out", model) from e
        except httpx.HTTPError as e:
            raise ProviderError(self.name, ProviderError.KIND_UPSTREAM, str(e), model) from e

        text = response.text
        if not text:
            raise MalformedResponseError("No content received from Gemini API")

        logger.debug("Gemini reply (first 500 chars): %s", text[:500])
        return text
