"""Environment-driven settings and service client construction."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv
from openai import AsyncOpenAI

from podcast_producer.constants import CHAT_MODEL, OUTPUT_DIR, REQUEST_TIMEOUT, TTS_MODEL
from podcast_producer.errors import MissingAPIKeyError


@dataclass(frozen=True)
class Settings:
    api_key: str | None = None
    chat_model: str = CHAT_MODEL
    tts_model: str = TTS_MODEL
    request_timeout: float = REQUEST_TIMEOUT
    output_dir: str = OUTPUT_DIR

    @classmethod
    def from_env(cls) -> "Settings":
        """Read settings from the environment, after loading any .env file."""
        load_dotenv()
        return cls(
            api_key=os.getenv("OPENAI_API_KEY") or None,
            chat_model=os.getenv("PODCAST_CHAT_MODEL", CHAT_MODEL),
            tts_model=os.getenv("PODCAST_TTS_MODEL", TTS_MODEL),
            request_timeout=float(os.getenv("PODCAST_REQUEST_TIMEOUT", REQUEST_TIMEOUT)),
            output_dir=os.getenv("PODCAST_OUTPUT_DIR", OUTPUT_DIR),
        )


def make_client(settings: Settings | None = None) -> AsyncOpenAI:
    """Build the async OpenAI client.

    Retries are disabled at the client level; the synthesizer owns retry
    policy and script generation falls back instead of retrying.
    """
    if settings is None:
        settings = Settings.from_env()
    if not settings.api_key:
        raise MissingAPIKeyError("OPENAI_API_KEY is not set. Add it to your environment or .env file.")
    return AsyncOpenAI(
        api_key=settings.api_key,
        timeout=settings.request_timeout,
        max_retries=0,
    )
