"""Data models for podcast production."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from podcast_producer.constants import (
    AUDIO_MEDIA_TYPE,
    DEFAULT_DURATION,
    DEFAULT_SPEED,
    DEFAULT_STYLE,
    DEFAULT_VOICE,
    MAX_SPEAKERS,
)

_EXTENSIONS = {
    "audio/mpeg": "mp3",
    "audio/wav": "wav",
    "audio/x-wav": "wav",
    "audio/ogg": "ogg",
}


@dataclass(frozen=True)
class GenerationRequest:
    """Inputs to script generation.

    Blank personalities are dropped and the rest stripped. Raises ValueError
    for an empty topic, a roster outside 1..MAX_SPEAKERS, or a duration that
    is not a positive whole number of minutes.
    """
    topic: str
    context: str
    personalities: tuple[str, ...]
    duration: str = DEFAULT_DURATION
    style: str = DEFAULT_STYLE

    def __post_init__(self):
        topic = self.topic.strip()
        if not topic:
            raise ValueError("Topic must not be empty")
        personalities = tuple(p.strip() for p in self.personalities if p and p.strip())
        if not personalities:
            raise ValueError("At least one personality is required")
        if len(personalities) > MAX_SPEAKERS:
            raise ValueError(f"At most {MAX_SPEAKERS} personalities are supported")
        duration = str(self.duration).strip()
        if not duration.isdigit() or int(duration) < 1:
            raise ValueError(f"Duration must be a positive number of minutes, got {self.duration!r}")

        object.__setattr__(self, "topic", topic)
        object.__setattr__(self, "context", self.context.strip())
        object.__setattr__(self, "personalities", personalities)
        object.__setattr__(self, "duration", duration)
        object.__setattr__(self, "style", self.style.strip() or DEFAULT_STYLE)

    @property
    def minutes(self) -> int:
        return int(self.duration)

    def to_dict(self) -> dict:
        return {
            "topic": self.topic,
            "context": self.context,
            "personalities": list(self.personalities),
            "duration": self.duration,
            "style": self.style,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "GenerationRequest":
        return cls(
            topic=data["topic"],
            context=data.get("context", ""),
            personalities=tuple(data.get("personalities", [])),
            duration=data.get("duration", DEFAULT_DURATION),
            style=data.get("style", DEFAULT_STYLE),
        )


@dataclass(frozen=True)
class ScriptRecord:
    """A generated (or fallback) podcast script."""
    title: str
    description: str
    duration: str           # human readable, e.g. "15 minutes"
    transcript: str         # "[Name]: ..." lines
    speakers: tuple[str, ...]
    topic: str
    context: str
    personalities: tuple[str, ...]
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    generated_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "duration": self.duration,
            "transcript": self.transcript,
            "speakers": list(self.speakers),
            "topic": self.topic,
            "context": self.context,
            "personalities": list(self.personalities),
            "generated_at": self.generated_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ScriptRecord":
        return cls(
            id=data["id"],
            title=data["title"],
            description=data["description"],
            duration=data["duration"],
            transcript=data["transcript"],
            speakers=tuple(data["speakers"]),
            topic=data["topic"],
            context=data.get("context", ""),
            personalities=tuple(data.get("personalities", [])),
            generated_at=data["generated_at"],
        )


@dataclass(frozen=True)
class VoiceConfig:
    voice: str = DEFAULT_VOICE  # alloy, echo, fable, onyx, nova or shimmer
    speed: float = DEFAULT_SPEED


@dataclass(frozen=True)
class AudioAsset:
    data: bytes
    media_type: str = AUDIO_MEDIA_TYPE
    chunk_count: int = 1

    @property
    def extension(self) -> str:
        return _EXTENSIONS.get(self.media_type, "bin")
