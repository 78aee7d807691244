"""Classified failures surfaced by audio synthesis."""

import openai

BILLING_URL = "https://platform.openai.com/account/billing"


class MissingAPIKeyError(RuntimeError):
    """OPENAI_API_KEY is not configured."""


class AudioGenerationError(Exception):
    """Audio synthesis failed. Subclasses name the specific cause."""

    default_message = "Failed to generate audio. Please try again later."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class QuotaExceededError(AudioGenerationError):
    default_message = (
        "OpenAI API quota exceeded. Please check your plan and billing details at "
        f"{BILLING_URL}"
    )


class InvalidAPIKeyError(AudioGenerationError):
    default_message = "Invalid OpenAI API key. Please check your API key configuration."


class AccessDeniedError(AudioGenerationError):
    default_message = "Access denied. Please check your OpenAI API permissions."


def is_rate_limit(exc: BaseException) -> bool:
    """True for upstream quota or rate-limit failures."""
    if isinstance(exc, openai.RateLimitError):
        return True
    if getattr(exc, "status_code", None) == 429:
        return True
    text = str(exc).lower()
    return "429" in text or "quota" in text


def classify_error(exc: BaseException) -> AudioGenerationError:
    """Map any synthesis failure onto one of the AudioGenerationError kinds."""
    if isinstance(exc, AudioGenerationError):
        return exc
    if is_rate_limit(exc):
        return QuotaExceededError()
    status = getattr(exc, "status_code", None)
    if isinstance(exc, (openai.AuthenticationError, MissingAPIKeyError)) or status == 401:
        return InvalidAPIKeyError()
    if isinstance(exc, openai.PermissionDeniedError) or status == 403:
        return AccessDeniedError()
    return AudioGenerationError()


def is_fatal(exc: BaseException) -> bool:
    """Quota, credential and permission failures are never worth retrying."""
    return isinstance(classify_error(exc), (QuotaExceededError, InvalidAPIKeyError, AccessDeniedError))


def is_retryable(exc: BaseException) -> bool:
    """True for transient failures: connection drops, timeouts and 5xx.

    Other 4xx responses (bad request, not found, unprocessable input) fail
    the same way on every attempt. Errors raised outside the openai client,
    such as edge-tts transport errors, count as transient.
    """
    if is_fatal(exc):
        return False
    if isinstance(exc, openai.APIStatusError):
        return exc.status_code >= 500
    return True
