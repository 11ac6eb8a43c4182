"""
Generative Model Client
=======================
Single request/response call to Google Gemini via google-generativeai.

The rest of the app only depends on the ModelClient protocol
(`send(prompt) -> str`), so tests and alternative providers can be
injected without touching the SDK.

No retries, no streaming: one prompt in, one text blob (or a
ModelClientError) out.
"""

import logging
from typing import Optional, Protocol

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions
from google.generativeai.types import (
    BlockedPromptException,
    HarmBlockThreshold,
    HarmCategory,
    StopCandidateException,
)

from app.config import Settings
from .errors import (
    ModelClientError,
    SafetyBlockedError,
    InvalidApiKeyError,
    UpstreamNetworkError,
    EmptyResponseError,
)

logger = logging.getLogger(__name__)


SAFETY_SETTINGS = {
    HarmCategory.HARM_CATEGORY_HARASSMENT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
    HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
    HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
    HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
}

NETWORK_EXCEPTIONS = (
    google_exceptions.ServiceUnavailable,
    google_exceptions.DeadlineExceeded,
    google_exceptions.RetryError,
    ConnectionError,
    TimeoutError,
)

AUTH_EXCEPTIONS = (
    google_exceptions.Unauthenticated,
    google_exceptions.PermissionDenied,
)


class ModelClient(Protocol):
    """Anything that can turn a prompt into text."""

    def send(self, prompt: str) -> str:
        ...


def classify_error(exc: Exception) -> ModelClientError:
    """
    Map an SDK / transport exception to the user-facing error taxonomy.

    Typed exceptions are checked first; message sniffing covers errors the
    SDK only reports as text (e.g. "API key not valid").
    """
    if isinstance(exc, ModelClientError):
        return exc

    detail = f"{type(exc).__name__}: {exc}"

    if isinstance(exc, (BlockedPromptException, StopCandidateException)):
        return SafetyBlockedError(detail)
    if isinstance(exc, AUTH_EXCEPTIONS):
        return InvalidApiKeyError(detail)
    if isinstance(exc, NETWORK_EXCEPTIONS):
        return UpstreamNetworkError(detail)

    message = str(exc)
    if "SAFETY" in message:
        return SafetyBlockedError(detail)
    if "API key" in message or "API_KEY_INVALID" in message:
        return InvalidApiKeyError(detail)
    if "fetch failed" in message:
        return UpstreamNetworkError(detail)

    return ModelClientError(detail)


def extract_text(response) -> str:
    """
    Join the text parts of the first candidate.

    Raises:
        SafetyBlockedError: prompt or candidate stopped for safety
        EmptyResponseError: no candidate / no content
    """
    feedback = getattr(response, "prompt_feedback", None)
    block_reason = getattr(feedback, "block_reason", None)
    if block_reason:
        raise SafetyBlockedError(f"Prompt blocked: {getattr(block_reason, 'name', block_reason)}")

    candidates = getattr(response, "candidates", None)
    if not candidates:
        raise EmptyResponseError("No candidates in model response")

    candidate = candidates[0]
    finish_reason = getattr(candidate, "finish_reason", None)
    if getattr(finish_reason, "name", finish_reason) == "SAFETY":
        raise SafetyBlockedError("Candidate stopped: SAFETY")

    content = getattr(candidate, "content", None)
    parts = getattr(content, "parts", None) if content is not None else None
    if not parts:
        raise EmptyResponseError("Model candidate has no content")

    text = "".join(getattr(part, "text", "") or "" for part in parts)
    if not text.strip():
        raise EmptyResponseError("Model candidate text is empty")
    return text


class GeminiClient:
    """ModelClient backed by google-generativeai."""

    def __init__(self, api_key: str, model_name: str, timeout: float = 60.0):
        genai.configure(api_key=api_key)
        self.model_name = model_name
        self.timeout = timeout
        self._model = genai.GenerativeModel(model_name, safety_settings=SAFETY_SETTINGS)

    def send(self, prompt: str) -> str:
        logger.info(f"Calling Gemini model {self.model_name}...")
        try:
            response = self._model.generate_content(
                prompt,
                request_options={"timeout": self.timeout},
            )
            text = extract_text(response)
        except Exception as e:
            error = classify_error(e)
            logger.error(f"Gemini call failed ({type(error).__name__}): {error.detail}")
            raise error from e

        logger.info(f"Received response from Gemini ({len(text)} characters).")
        return text


def create_model_client(settings: Settings) -> Optional[GeminiClient]:
    """
    Build the Gemini client, or None when no usable API key is configured.

    A missing key must not stop the server from starting; plan requests
    then fail with ModelNotConfiguredError.
    """
    if not settings.has_api_key:
        logger.error(
            "GOOGLE_API_KEY is not set or is still the placeholder. API calls will fail."
        )
        return None

    try:
        client = GeminiClient(settings.google_api_key, settings.model_name, settings.model_timeout)
    except Exception as e:
        logger.error(f"Error initializing Google AI SDK: {e}")
        return None

    logger.info("Google AI SDK initialized successfully.")
    return client
