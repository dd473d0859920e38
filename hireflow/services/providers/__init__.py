"""
LLM providers for resume structuring.
"""
from hireflow.services.providers.base import ResumeStructuringProvider
from hireflow.services.providers.deepseek import DeepSeekProvider
from hireflow.services.providers.factory import available_providers, create_provider
from hireflow.services.providers.gemini import GeminiProvider

__all__ = [
    "ResumeStructuringProvider",
    "DeepSeekProvider",
    "GeminiProvider",
    "available_providers",
    "create_provider",
]
