"""
DeepSeek provider.

DeepSeek uses OpenAI-compatible API, so we use the openai library.
SDK retries are disabled: the only retry we allow is the
model-not-found fallback in the base class.
"""

import logging

import openai
from openai import AsyncOpenAI

from hireflow.core.errors import MalformedResponseError, ProviderError
from hireflow.services.providers.base import ResumeStructuringProvider

logger = logging.getLogger(__name__)


def _is_missing_model(message: str) -> bool:
    message = message.lower()
    return "model" in message and ("not exist" in message or "not found" in message)


class DeepSeekProvider(ResumeStructuringProvider):
    name = "deepseek"

    def __init__(self, api_key: str, base_url: str = "https://api.deepseek.com/v1", **kwargs):
        super().__init__(api_key, **kwargs)
        self.base_url = base_url
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            timeout=self.timeout_seconds,
            max_retries=0,
        )

    async def aclose(self) -> None:
        await self.client.close()

    async def _complete(self, system_prompt: str, prompt: str, model: str) -> str:
        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": prompt},
                ],
                max_tokens=self.max_output_tokens,
                temperature=self.temperature,
            )
        except openai.APITimeoutError as e:
            raise ProviderError(self.name, ProviderError.KIND_TIMEOUT, str(e), model) from e
        except (openai.AuthenticationError, openai.PermissionDeniedError) as e:
            raise ProviderError(self.name, ProviderError.KIND_AUTH, str(e), model) from e
        except openai.RateLimitError as e:
            raise ProviderError(self.name, ProviderError.KIND_RATE_LIMIT, str(e), model) from e
        except openai.NotFoundError as e:
            raise ProviderError(self.name, ProviderError.KIND_MODEL_NOT_FOUND, str(e), model) from e
        except openai.BadRequestError as e:
            kind = ProviderError.KIND_MODEL_NOT_FOUND if _is_missing_model(str(e)) else ProviderError.KIND_UPSTREAM
            raise ProviderError(self.name, kind, str(e), model) from e
        except openai.APIError as e:
            raise ProviderError(self.name, ProviderError.KIND_UPSTREAM, str(e), model) from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise MalformedResponseError("No content received from DeepSeek API")

        logger.debug("DeepSeek reply (first 500 chars): %s", content[:500])
        return content
