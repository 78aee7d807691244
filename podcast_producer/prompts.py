"""Prompt construction for script, title and description requests."""

from podcast_producer.constants import DEFAULT_STYLE, WORDS_PER_MINUTE
from podcast_producer.models import GenerationRequest

# Marks a host template such as "Joe Rogan style - Deep, conversational..."
STYLE_DELIMITER = " style"

SYSTEM_PROMPT = (
    "You are an expert podcast script writer who creates engaging, natural-sounding "
    "conversations between multiple speakers. Your transcripts should feel authentic "
    "and capture the essence of real podcast discussions."
)

# Ordered (style name, tone directive) pairs
STYLE_INSTRUCTIONS = (
    ("Joe Rogan Style",
     "Create a conversational, long-form discussion with curious questioning, philosophical "
     "tangents, and casual but deep exploration of topics. Use \"dude\", \"man\", and casual "
     "language. Include moments of wonder and genuine curiosity."),
    ("NPR Style",
     "Create a professional, well-researched discussion with balanced perspectives, structured "
     "storytelling, and authoritative but accessible language. Focus on informative content "
     "with clear explanations."),
    ("TED Talk Style",
     "Create an educational, inspiring discussion with expert insights, actionable takeaways, "
     "and motivational language. Focus on solutions and positive outcomes."),
    ("Comedy Podcast Style",
     "Create a light-hearted discussion with humor, entertaining banter, and funny observations "
     "while still being informative. Include jokes and casual commentary."),
    ("Interview Style",
     "Create a structured Q&A format with focused questions, expert responses, and professional "
     "dialogue. Maintain clear interviewer-interviewee dynamics."),
    ("Debate Style",
     "Create a discussion with multiple perspectives, constructive disagreement, and balanced "
     "arguments. Include challenging questions and different viewpoints."),
)

STYLE_NAMES = tuple(name for name, _ in STYLE_INSTRUCTIONS)


def derive_speaker_names(personalities) -> list[str]:
    """Name each speaker from its personality.

    "Joe Rogan style - Deep, conversational..." → "Joe Rogan"; anything
    without the style marker gets a positional "Speaker N".
    """
    names = []
    for i, personality in enumerate(personalities):
        if STYLE_DELIMITER in personality:
            names.append(personality.split(STYLE_DELIMITER)[0].strip())
        else:
            names.append(f"Speaker {i + 1}")
    return names


def style_instruction(style: str) -> str:
    """Tone directive for a style, falling back to the default style's."""
    default = None
    for name, instruction in STYLE_INSTRUCTIONS:
        if name == style:
            return instruction
        if name == DEFAULT_STYLE:
            default = instruction
    return default


def target_word_count(minutes: int) -> int:
    return round(minutes * WORDS_PER_MINUTE)


def build_prompt(request: GenerationRequest, speaker_names: list[str]) -> str:
    """Assemble the transcript instruction for a request."""
    roster = "\n".join(
        f"- {name}: {personality}"
        for name, personality in zip(speaker_names, request.personalities)
    )
    return f"""Generate a {request.duration}-minute podcast transcript in the style of "{request.style}".

TOPIC: {request.topic}

CONTEXT: {request.context}

SPEAKERS:
{roster}

STYLE INSTRUCTIONS: {style_instruction(request.style)}

REQUIREMENTS:
1. Create natural, engaging dialogue between the speakers
2. Include speaker names in brackets like [Speaker Name]:
3. Make the conversation feel authentic and spontaneous
4. Include appropriate reactions, questions, and follow-ups
5. Ensure the content is informative and engaging
6. Target approximately {target_word_count(request.minutes)} words ({WORDS_PER_MINUTE} words per minute)
7. Include natural conversation elements like "um", "you know", laughter, etc.
8. Make sure each speaker has a distinct voice and perspective
9. Cover the topic comprehensively within the time limit
10. End with a natural conclusion

Generate the complete transcript now:"""


def title_prompt(request: GenerationRequest) -> str:
    return (
        f"Generate a compelling podcast episode title for a {request.style} discussion about "
        f"\"{request.topic}\". Make it engaging and clickable. Return only the title, no quotes."
    )


def description_prompt(request: GenerationRequest) -> str:
    return (
        f"Generate a compelling 1-2 sentence podcast episode description for a discussion about "
        f"\"{request.topic}\" in {request.style}. Make it engaging and informative. "
        f"Return only the description."
    )
