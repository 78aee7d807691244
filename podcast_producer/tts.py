"""Speech synthesis of transcripts, chunked and retried per chunk."""

import asyncio
import logging

import edge_tts

from podcast_producer.chunker import split_text
from podcast_producer.config import Settings, make_client
from podcast_producer.constants import (
    AUDIO_MEDIA_TYPE,
    MAX_TTS_CHARS,
    TTS_FORMAT,
    TTS_RETRY_BASE_DELAY,
    TTS_RETRY_COUNT,
)
from podcast_producer.errors import classify_error, is_retryable
from podcast_producer.models import AudioAsset, VoiceConfig
from podcast_producer.voices import DEFAULT_VOICE_CONFIG, edge_voice, select_voice, speed_to_rate

logger = logging.getLogger(__name__)


class OpenAISpeech:
    """OpenAI speech endpoint."""

    name = "openai"

    def __init__(self, client=None, settings: Settings | None = None):
        self.settings = settings or Settings.from_env()
        self.client = client or make_client(self.settings)

    async def synthesize_chunk(self, text: str, voice: VoiceConfig) -> bytes:
        response = await self.client.audio.speech.create(
            model=self.settings.tts_model,
            voice=voice.voice,
            input=text,
            response_format=TTS_FORMAT,
            speed=voice.speed,
        )
        return response.content

    async def close(self) -> None:
        await self.client.close()


class EdgeSpeech:
    """Edge read-aloud voices via edge-tts. Needs no API key."""

    name = "edge"

    async def synthesize_chunk(self, text: str, voice: VoiceConfig) -> bytes:
        communicate = edge_tts.Communicate(text, edge_voice(voice.voice), rate=speed_to_rate(voice.speed))
        audio = []
        async for message in communicate.stream():
            if message["type"] == "audio":
                audio.append(message["data"])
        return b"".join(audio)

    async def close(self) -> None:
        pass


BACKENDS = {
    OpenAISpeech.name: OpenAISpeech,
    EdgeSpeech.name: EdgeSpeech,
}


def make_backend(name: str = OpenAISpeech.name, settings: Settings | None = None):
    """Construct a speech backend by name."""
    if name == OpenAISpeech.name:
        return OpenAISpeech(settings=settings)
    if name == EdgeSpeech.name:
        return EdgeSpeech()
    raise ValueError(f"Unknown speech backend: {name} (choose from {', '.join(BACKENDS)})")


async def synthesize_chunk(backend, text: str, voice: VoiceConfig, index: int = 0, total: int = 1) -> bytes:
    """Synthesize one chunk with retry logic.

    Retries connection errors, timeouts, server errors and empty audio with
    exponential backoff. Quota, credential and permission errors, and any
    other 4xx response, are raised immediately.
    """
    last_error = None
    for attempt in range(TTS_RETRY_COUNT):
        try:
            data = await backend.synthesize_chunk(text, voice)
            if data:
                return data
            # Empty audio counts as failure
            last_error = ValueError(f"Speech service returned no audio for chunk {index + 1}/{total}")
        except Exception as e:
            if not is_retryable(e):
                raise
            last_error = e

        if attempt < TTS_RETRY_COUNT - 1:
            delay = TTS_RETRY_BASE_DELAY * (2 ** attempt)
            logger.warning(
                "Chunk %d/%d failed (%s), retrying in %.1fs", index + 1, total, last_error, delay,
            )
            await asyncio.sleep(delay)

    raise last_error


async def _synthesize_chunks(backend, chunks: list[str], voice: VoiceConfig, concurrency: int) -> list[bytes]:
    """Synthesize every chunk and return the audio in chunk order."""
    total = len(chunks)

    if concurrency <= 1:
        parts = []
        for i, chunk in enumerate(chunks):
            logger.info("Synthesizing chunk %d/%d (%d chars)", i + 1, total, len(chunk))
            parts.append(await synthesize_chunk(backend, chunk, voice, i, total))
        return parts

    semaphore = asyncio.Semaphore(concurrency)

    async def run(i, chunk):
        async with semaphore:
            logger.info("Synthesizing chunk %d/%d (%d chars)", i + 1, total, len(chunk))
            return await synthesize_chunk(backend, chunk, voice, i, total)

    tasks = [asyncio.ensure_future(run(i, chunk)) for i, chunk in enumerate(chunks)]
    try:
        # gather returns results in argument order, whatever order they finish in
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        raise


async def synthesize(
    transcript: str,
    personality: str | None = None,
    backend=None,
    concurrency: int = 1,
) -> AudioAsset:
    """Render a transcript to a single audio asset.

    The transcript is split into MAX_TTS_CHARS chunks, each chunk is
    synthesized with the personality's voice, and the audio is concatenated
    in chunk order. Any service failure raises a classified
    AudioGenerationError; no partial asset is returned. Cancelling the
    awaiting task cancels outstanding chunk requests.

    A transcript that is blank after trimming is rejected with ValueError
    before any backend is created or called, like the other input checks
    in GenerationRequest.
    """
    voice = select_voice(personality) if personality else DEFAULT_VOICE_CONFIG
    chunks = split_text(transcript, MAX_TTS_CHARS)
    if not chunks:
        raise ValueError("Transcript is empty; nothing to synthesize")

    owns_backend = backend is None
    try:
        if owns_backend:
            backend = OpenAISpeech()
        parts = await _synthesize_chunks(backend, chunks, voice, concurrency)
    except Exception as e:
        logger.error("Error generating audio: %s", e)
        error = classify_error(e)
        if error is e:
            raise
        raise error from e
    finally:
        if owns_backend and backend is not None:
            await backend.close()

    logger.info("Synthesized %d chunks with voice %s at %.2fx", len(parts), voice.voice, voice.speed)
    return AudioAsset(b"".join(parts), AUDIO_MEDIA_TYPE, chunk_count=len(parts))


def synthesize_sync(transcript: str, personality: str | None = None, backend=None, concurrency: int = 1) -> AudioAsset:
    """Sync wrapper around synthesize()."""
    return asyncio.run(synthesize(transcript, personality, backend=backend, concurrency=concurrency))
