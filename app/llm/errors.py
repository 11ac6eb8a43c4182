"""
Model Client Errors

Every failure of the generative-model call surfaces as a ModelClientError
subclass. `user_message` is what the browser shows; `detail` is for logs.
"""

from typing import Optional


class ModelClientError(Exception):
    """Generic failure talking to the generative model."""
    user_message = "Failed to generate fitness plan due to an internal server issue."

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail or self.user_message
        super().__init__(self.detail)


class ModelNotConfiguredError(ModelClientError):
    """No usable API key, so no client was created."""
    user_message = "API configuration error. Cannot generate plan."


class SafetyBlockedError(ModelClientError):
    """Prompt or response was blocked by the model's safety filters."""
    user_message = (
        "Content generation blocked due to safety settings. "
        "Please adjust your input or contact support."
    )


class InvalidApiKeyError(ModelClientError):
    """API key rejected upstream."""
    user_message = "Server configuration error: Invalid or expired API Key."


class UpstreamNetworkError(ModelClientError):
    """Connection, timeout or availability failure."""
    user_message = (
        "Network error communicating with AI service. "
        "Please check connection or try again later."
    )


class EmptyResponseError(ModelClientError):
    """The model answered without any usable text."""
    user_message = "Received an invalid or empty response from the AI service."
