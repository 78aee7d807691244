"""Script generation via the chat completions API, with template fallback."""

import asyncio
import logging
import random

from podcast_producer.config import Settings, make_client
from podcast_producer.constants import (
    AUX_TEMPERATURE,
    DESCRIPTION_MAX_TOKENS,
    MAX_SCRIPT_TOKENS,
    SCRIPT_TEMPERATURE,
    TITLE_MAX_TOKENS,
    TOKENS_PER_MINUTE,
)
from podcast_producer.errors import is_rate_limit
from podcast_producer.fallback import build_fallback_record
from podcast_producer.models import GenerationRequest, ScriptRecord
from podcast_producer.prompts import (
    SYSTEM_PROMPT,
    build_prompt,
    derive_speaker_names,
    description_prompt,
    title_prompt,
)

logger = logging.getLogger(__name__)


def transcript_token_budget(minutes: int) -> int:
    return min(MAX_SCRIPT_TOKENS, minutes * TOKENS_PER_MINUTE)


async def _complete(client, model: str, messages: list[dict], max_tokens: int, temperature: float) -> str:
    """Run one chat completion and return its stripped text ("" if none)."""
    response = await client.chat.completions.create(
        model=model,
        messages=messages,
        max_tokens=max_tokens,
        temperature=temperature,
    )
    if not response.choices:
        return ""
    return (response.choices[0].message.content or "").strip()


async def _generate(
    client,
    model: str,
    request: GenerationRequest,
    speakers: list[str],
) -> ScriptRecord:
    prompt = build_prompt(request, speakers)

    results = await asyncio.gather(
        _complete(
            client, model,
            [{"role": "system", "content": SYSTEM_PROMPT}, {"role": "user", "content": prompt}],
            max_tokens=transcript_token_budget(request.minutes),
            temperature=SCRIPT_TEMPERATURE,
        ),
        _complete(
            client, model,
            [{"role": "user", "content": title_prompt(request)}],
            max_tokens=TITLE_MAX_TOKENS,
            temperature=AUX_TEMPERATURE,
        ),
        _complete(
            client, model,
            [{"role": "user", "content": description_prompt(request)}],
            max_tokens=DESCRIPTION_MAX_TOKENS,
            temperature=AUX_TEMPERATURE,
        ),
        return_exceptions=True,
    )
    # Wait for all three, then fail as a unit
    for result in results:
        if isinstance(result, BaseException):
            raise result
    transcript, title, description = results

    if not transcript:
        raise ValueError("Generative service returned an empty transcript")

    return ScriptRecord(
        title=title or f"{request.topic}: Expert Discussion",
        description=description or (
            f"An engaging discussion about {request.topic.lower()} with expert insights and analysis."
        ),
        duration=f"{request.duration} minutes",
        transcript=transcript,
        speakers=tuple(speakers),
        topic=request.topic,
        context=request.context,
        personalities=request.personalities,
    )


async def generate_script(
    request: GenerationRequest,
    client=None,
    settings: Settings | None = None,
    rng=random,
) -> ScriptRecord:
    """Generate a podcast script for a request.

    Transcript, title and description are requested concurrently. Never
    raises for service failures: any error (missing key, rate limit, network,
    empty transcript) yields a template-built record of the same shape.
    """
    speakers = derive_speaker_names(request.personalities)
    if settings is None:
        settings = Settings.from_env()

    owns_client = client is None
    try:
        if owns_client:
            client = make_client(settings)
        record = await _generate(client, settings.chat_model, request, speakers)
        logger.info("Generated script %s (%d chars)", record.id, len(record.transcript))
        return record
    except Exception as e:
        if is_rate_limit(e):
            logger.warning("OpenAI API quota exceeded. Using fallback script instead.")
        else:
            logger.error("Error generating podcast script: %s", e)
        return build_fallback_record(request, speakers, rng)
    finally:
        if owns_client and client is not None:
            await client.close()


def generate_script_sync(request: GenerationRequest, client=None, settings: Settings | None = None) -> ScriptRecord:
    """Sync wrapper around generate_script()."""
    return asyncio.run(generate_script(request, client=client, settings=settings))
