"""Template-built script records used when the generative service fails."""

import random

from podcast_producer.constants import DEFAULT_STYLE
from podcast_producer.models import GenerationRequest, ScriptRecord

TITLE_TEMPLATES = [
    "Deep Dive: {topic}",
    "Understanding {topic}: Expert Insights",
    "The Future of {topic}",
    "{topic}: What You Need to Know",
    "Exploring {topic} with Industry Leaders",
    "{topic} Unpacked: A Comprehensive Discussion",
]

# Filled with the lowercased topic
DESCRIPTION_TEMPLATES = [
    "Join our expert panel as they dive deep into {topic}, exploring its implications "
    "and future potential.",
    "An insightful discussion about {topic} featuring industry experts and thought leaders.",
    "Discover the latest trends and developments in {topic} through engaging expert "
    "conversation.",
    "Our hosts break down the complexities of {topic} in this comprehensive discussion.",
]

# style → opening, response, followup, insight, conclusion.
# Placeholders: {a} first speaker, {a_first} their first name, {b} second
# speaker, {topic}, {context}.
DIALOGUE_SKELETONS = {
    "Joe Rogan Style": (
        "[{a}]: Alright, we're live! Today we're diving into {topic}, and man, this is "
        "something I've been thinking about a lot lately. {context}",
        "[{b}]: Dude, absolutely! You know what's crazy about this? Most people don't realize "
        "how deep this rabbit hole goes.",
        "[{a}]: That's exactly what I'm talking about! It's like, when you really start looking "
        "into it, everything connects, you know?",
        "[{b}]: One hundred percent. And here's the thing that blows my mind...",
        "[{a}]: This has been incredible, man. Where can people learn more about this?",
    ),
    "NPR Style": (
        "[{a}]: I'm {a_first}, and this is our discussion on {topic}. {context}",
        "[{b}]: Thank you for having me. This is indeed a critical issue that deserves our "
        "attention.",
        "[{a}]: Can you help our listeners understand why this matters right now?",
        "[{b}]: Certainly. The research shows several key factors at play here...",
        "[{a}]: Thank you for this enlightening conversation about {topic}.",
    ),
    "TED Talk Style": (
        "[{a}]: Welcome to today's exploration of {topic}. {context} What if I told you this "
        "could change everything?",
        "[{b}]: That's exactly the mindset we need. This isn't just theory - it's actionable "
        "insight that can transform how we approach this challenge.",
        "[{a}]: What's the first step people can take today?",
        "[{b}]: Here's what I've learned from working with hundreds of organizations...",
        "[{a}]: The future starts with understanding. Thank you for joining us on this journey.",
    ),
}

EXCHANGE_LINES = (
    "[{a}]: That's fascinating. How do you see this evolving over the next few years?",
    "[{b}]: Well, based on current trends and what we're seeing in the research, I think we're "
    "at a pivotal moment. The next 2-3 years will be crucial.",
    "[{a}]: What should people be watching for?",
    "[{b}]: The key indicators are going to be adoption rates, regulatory responses, and how "
    "quickly the technology matures. These will tell us everything we need to know about the "
    "trajectory.",
    "[{a}]: Any final thoughts for our listeners?",
    "[{b}]: Stay curious, stay informed, and don't be afraid to engage with these concepts. "
    "The future belongs to those who understand and adapt.",
)

CLOSING_LINE = "[{b}]: Thanks for having me. This was a great conversation."


def fallback_title(topic: str, rng=random) -> str:
    return rng.choice(TITLE_TEMPLATES).format(topic=topic)


def fallback_description(topic: str, rng=random) -> str:
    return rng.choice(DESCRIPTION_TEMPLATES).format(topic=topic.lower())


def fallback_transcript(request: GenerationRequest, speakers: list[str]) -> str:
    """Fill the style's dialogue skeleton with the first two speakers.

    A single-speaker roster has that speaker take both parts.
    """
    opening, response, followup, insight, conclusion = DIALOGUE_SKELETONS.get(
        request.style, DIALOGUE_SKELETONS[DEFAULT_STYLE]
    )
    a = speakers[0]
    b = speakers[1] if len(speakers) > 1 else speakers[0]
    values = {
        "a": a,
        "a_first": a.split(" ")[0],
        "b": b,
        "topic": request.topic,
        "context": request.context,
    }
    lines = [opening, response, followup, insight, *EXCHANGE_LINES, conclusion, CLOSING_LINE]
    return "\n\n".join(line.format(**values).rstrip() for line in lines)


def build_fallback_record(
    request: GenerationRequest,
    speakers: list[str],
    rng=random,
) -> ScriptRecord:
    """Build a complete ScriptRecord without calling any service."""
    return ScriptRecord(
        title=fallback_title(request.topic, rng),
        description=fallback_description(request.topic, rng),
        duration=f"{request.duration} minutes",
        transcript=fallback_transcript(request, speakers),
        speakers=tuple(speakers),
        topic=request.topic,
        context=request.context,
        personalities=request.personalities,
    )
