"""Export transcripts and synthesized audio with a provenance manifest."""

import io
import json
import os
from datetime import datetime, timezone

from pydub import AudioSegment

from podcast_producer.constants import PREVIEW_DURATION_MS, VERSION
from podcast_producer.models import AudioAsset, ScriptRecord


def export_transcript(project_dir: str, record: ScriptRecord) -> str:
    """Write the plain-text transcript. Returns its path."""
    path = os.path.join(project_dir, "transcript.txt")
    with open(path, "w") as f:
        f.write(record.transcript)
        if not record.transcript.endswith("\n"):
            f.write("\n")
    return path


def decode_asset(asset: AudioAsset) -> AudioSegment:
    """Decode an asset for inspection (duration, preview)."""
    return AudioSegment.from_file(io.BytesIO(asset.data), format=asset.extension)


def generate_preview(
    project_dir: str,
    audio: AudioSegment,
    fmt: str = "mp3",
    duration_ms: int = PREVIEW_DURATION_MS,
) -> str:
    """Trim audio to its first duration_ms and save under samples/.

    Returns path to the preview file.
    """
    samples_dir = os.path.join(project_dir, "samples")
    os.makedirs(samples_dir, exist_ok=True)

    preview = audio[:duration_ms]
    path = os.path.join(samples_dir, f"preview_60s.{fmt}")
    preview.export(path, format=fmt)
    return path


def export_audio(
    asset: AudioAsset,
    project_dir: str,
    slug: str,
    record: ScriptRecord,
    settings: dict,
    audio: AudioSegment | None = None,
) -> str:
    """Write the assembled audio bytes and a provenance manifest.

    Creates:
      - <project_dir>/final/<slug>_podcast.<ext> (the asset, byte for byte)
      - <project_dir>/final/output.json (provenance manifest)

    Nothing here decodes the asset: duration_seconds comes from the
    decoded `audio` when given and is null otherwise.

    Returns path to the audio file.
    """
    final_dir = os.path.join(project_dir, "final")
    os.makedirs(final_dir, exist_ok=True)

    output_path = os.path.join(final_dir, f"{slug}_podcast.{asset.extension}")
    with open(output_path, "wb") as f:
        f.write(asset.data)

    manifest = {
        "project": slug,
        "script_id": record.id,
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "producer_version": VERSION,
        "metadata": {
            "title": record.title,
            "description": record.description,
            "topic": record.topic,
            "speakers": list(record.speakers),
        },
        "settings": settings,
        "stats": {
            "chunks": asset.chunk_count,
            "bytes": len(asset.data),
            "media_type": asset.media_type,
            "duration_seconds": round(len(audio) / 1000, 1) if audio is not None else None,
        },
    }

    manifest_path = os.path.join(final_dir, "output.json")
    with open(manifest_path, "w") as f:
        json.dump(manifest, f, indent=2)

    return output_path
