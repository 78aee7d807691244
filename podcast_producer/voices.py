"""Voice selection from free-text speaker personalities."""

import logging

from podcast_producer.constants import DEFAULT_SPEED, DEFAULT_VOICE
from podcast_producer.models import VoiceConfig

logger = logging.getLogger(__name__)

# Voices offered by the speech service
VOICE_IDS = ("alloy", "echo", "fable", "onyx", "nova", "shimmer")

DEFAULT_VOICE_CONFIG = VoiceConfig(DEFAULT_VOICE, DEFAULT_SPEED)

# Ordered (patterns, config) pairs. First match wins, so named hosts come
# before the generic role words they might also contain.
VOICE_TABLE = (
    # Popular podcast hosts
    (("joe rogan",), VoiceConfig("onyx", 1.1)),       # deep, conversational
    (("lex fridman",), VoiceConfig("onyx", 0.9)),     # thoughtful, measured
    (("tim ferriss",), VoiceConfig("echo", 1.0)),     # clear, analytical
    (("sam harris",), VoiceConfig("fable", 0.95)),    # calm, philosophical
    (("alex cooper",), VoiceConfig("nova", 1.1)),     # energetic, engaging
    (("dax shepard",), VoiceConfig("echo", 1.15)),    # energetic, casual
    (("marc maron",), VoiceConfig("echo", 1.2)),      # fast-paced, intense
    (("terry gross",), VoiceConfig("nova", 0.95)),    # professional, warm
    (("guy raz",), VoiceConfig("fable", 1.0)),        # storytelling
    (("ezra klein",), VoiceConfig("echo", 1.05)),     # analytical, clear
    # Expert roles
    (("scientist", "researcher"), VoiceConfig("echo", 0.95)),
    (("journalist",), VoiceConfig("fable", 1.0)),
    (("expert", "executive"), VoiceConfig("onyx", 1.0)),
    (("interviewer",), VoiceConfig("echo", 1.0)),
    (("host",), VoiceConfig("fable", 1.0)),
)

# OpenAI voice id → Edge neural voice, for the keyless backend
EDGE_VOICE_MAP = {
    "alloy": "en-US-AriaNeural",
    "echo": "en-US-GuyNeural",
    "fable": "en-GB-RyanNeural",
    "onyx": "en-US-DavisNeural",
    "nova": "en-US-JennyNeural",
    "shimmer": "en-US-SaraNeural",
}


def select_voice(personality: str | None) -> VoiceConfig:
    """Pick the voice and speaking rate for a personality description.

    Case-insensitive substring match against VOICE_TABLE in order. Never
    raises; anything unmatched gets the default voice at normal speed.
    """
    if not personality:
        return DEFAULT_VOICE_CONFIG
    lowered = personality.lower()
    for patterns, config in VOICE_TABLE:
        if any(pattern in lowered for pattern in patterns):
            return config
    logger.debug("No voice pattern matched %r, using default", personality)
    return DEFAULT_VOICE_CONFIG


def edge_voice(voice: str) -> str:
    """Map a speech service voice id to its Edge equivalent."""
    return EDGE_VOICE_MAP.get(voice, EDGE_VOICE_MAP[DEFAULT_VOICE])


def speed_to_rate(speed: float) -> str:
    """Convert a speed multiplier to a relative rate string.

    1.1 → "+10%", 0.95 → "-5%", 1.0 → "+0%".
    """
    percent = round((speed - 1.0) * 100)
    return f"{percent:+d}%"
