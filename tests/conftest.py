"""Shared fixtures for podcast producer tests."""

import io
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest
from pydub import AudioSegment

from podcast_producer.models import GenerationRequest

API_URL = "https://api.openai.com/v1/chat/completions"


def chat_response(content):
    """Shape of a chat completion response, as far as the code reads it."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def api_error(cls, status: int, message: str = "upstream error"):
    """Build an openai status error with a real httpx response."""
    response = httpx.Response(status, request=httpx.Request("POST", API_URL))
    return cls(message, response=response, body=None)


def make_chat_client(transcript="[Joe Rogan]: Hello.\n\n[Speaker 2]: Hi.", title="A Title", description="A description."):
    """Mock AsyncOpenAI whose replies depend on which prompt was sent.

    Any reply may be an exception instance, which is raised instead.
    """
    def reply(**kwargs):
        prompt = kwargs["messages"][-1]["content"]
        if prompt.startswith("Generate a compelling podcast episode title"):
            value = title
        elif prompt.startswith("Generate a compelling 1-2 sentence"):
            value = description
        else:
            value = transcript
        if isinstance(value, BaseException):
            raise value
        return chat_response(value)

    client = MagicMock()
    client.chat.completions.create = AsyncMock(side_effect=reply)
    client.close = AsyncMock()
    return client


@pytest.fixture
def sample_request():
    return GenerationRequest(
        topic="Quantum Computing Revolution",
        context="How qubits change cryptography.",
        personalities=(
            "Joe Rogan style - Deep, conversational with curious questioning and casual exploration",
            "Subject matter expert with deep knowledge",
        ),
        duration="10",
        style="NPR Style",
    )


@pytest.fixture
def wav_bytes():
    """Factory for silent WAV payloads (decodable without ffmpeg)."""
    def factory(duration_ms=100):
        buf = io.BytesIO()
        AudioSegment.silent(duration=duration_ms).export(buf, format="wav")
        return buf.getvalue()
    return factory


@pytest.fixture
def rate_limit_error():
    return api_error(openai.RateLimitError, 429, "Error code: 429 - insufficient_quota")
