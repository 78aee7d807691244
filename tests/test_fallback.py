"""Tests for template fallback records."""

import random

from podcast_producer.fallback import (
    DESCRIPTION_TEMPLATES,
    TITLE_TEMPLATES,
    build_fallback_record,
    fallback_description,
    fallback_title,
    fallback_transcript,
)
from podcast_producer.models import GenerationRequest


def _request(style="Joe Rogan Style", personalities=("Joe Rogan style - x", "Expert scientist")):
    return GenerationRequest(
        topic="Renewable Energy",
        context="Solar is getting cheap.",
        personalities=personalities,
        duration="5",
        style=style,
    )


def test_fallback_title_from_templates():
    title = fallback_title("Renewable Energy", random.Random(1))
    assert title in [t.format(topic="Renewable Energy") for t in TITLE_TEMPLATES]


def test_fallback_description_lowercases_topic():
    description = fallback_description("Renewable Energy", random.Random(1))
    assert description in [d.format(topic="renewable energy") for d in DESCRIPTION_TEMPLATES]


def test_transcript_uses_style_skeleton():
    transcript = fallback_transcript(_request("NPR Style"), ["Terry Gross", "Speaker 2"])
    assert transcript.startswith("[Terry Gross]: I'm Terry, and this is our discussion on Renewable Energy.")
    assert "Solar is getting cheap." in transcript


def test_transcript_unknown_style_uses_default_skeleton():
    transcript = fallback_transcript(_request("Debate Style"), ["Joe Rogan", "Speaker 2"])
    assert transcript.startswith("[Joe Rogan]: Alright, we're live!")


def test_transcript_has_fixed_exchange_and_closing():
    transcript = fallback_transcript(_request("TED Talk Style"), ["A", "B"])
    lines = transcript.split("\n\n")
    assert lines[4] == "[A]: That's fascinating. How do you see this evolving over the next few years?"
    assert lines[-2] == "[A]: The future starts with understanding. Thank you for joining us on this journey."
    assert lines[-1] == "[B]: Thanks for having me. This was a great conversation."
    assert all(line.startswith(("[A]:", "[B]:")) for line in lines)


def test_transcript_single_speaker():
    request = _request(personalities=("Lex Fridman style - calm",))
    transcript = fallback_transcript(request, ["Lex Fridman"])
    assert all(line.startswith("[Lex Fridman]:") for line in transcript.split("\n\n"))


def test_fallback_record_shape():
    request = _request(personalities=("Joe Rogan style - x", "Expert", "Journalist"))
    speakers = ["Joe Rogan", "Speaker 2", "Speaker 3"]
    record = build_fallback_record(request, speakers, random.Random(7))
    assert record.id
    assert record.title and record.description and record.transcript
    assert record.speakers == tuple(speakers)
    assert len(record.speakers) == len(request.personalities)
    assert record.duration == "5 minutes"
    assert record.topic == request.topic
    assert record.context == request.context
    assert record.personalities == request.personalities


def test_fallback_with_empty_context_has_no_trailing_space():
    request = GenerationRequest(topic="AI", context="", personalities=("Host",), style="NPR Style")
    transcript = fallback_transcript(request, ["Speaker 1"])
    assert transcript.split("\n\n")[0] == "[Speaker 1]: I'm Speaker, and this is our discussion on AI."
