"""
Generative Model Integration

- client.py: Gemini client, error classification, client factory
- errors.py: User-facing error taxonomy
"""

from .errors import (
    ModelClientError,
    ModelNotConfiguredError,
    SafetyBlockedError,
    InvalidApiKeyError,
    UpstreamNetworkError,
    EmptyResponseError,
)
from .client import ModelClient, GeminiClient, classify_error, create_model_client

__all__ = [
    "ModelClient",
    "GeminiClient",
    "classify_error",
    "create_model_client",
    "ModelClientError",
    "ModelNotConfiguredError",
    "SafetyBlockedError",
    "InvalidApiKeyError",
    "UpstreamNetworkError",
    "EmptyResponseError",
]
