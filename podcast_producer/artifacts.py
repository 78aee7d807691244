"""Project directories, JSON artifacts and project status."""

import json
import os
import re

from podcast_producer.constants import OUTPUT_DIR
from podcast_producer.models import ScriptRecord

SUBDIRS = ["final", "samples"]


def slugify(title: str) -> str:
    """Convert an episode title to an output directory slug.

    "The Future of AI" → "the_future_of_ai"
    "Deep Dive: Quantum Computing!" → "deep_dive_quantum_computing"
    """
    slug = re.sub(r"[^a-zA-Z0-9]+", "_", title).strip("_").lower()
    return slug or "podcast"


def init_output_dir(slug: str, output_base: str = OUTPUT_DIR) -> str:
    """Create output/<slug>/ and its subdirectories.

    Returns the project directory path.
    """
    project_dir = os.path.join(output_base, slug)
    for subdir in SUBDIRS:
        os.makedirs(os.path.join(project_dir, subdir), exist_ok=True)
    return project_dir


def unique_slug(title: str, output_base: str = OUTPUT_DIR) -> str:
    """Slug for a title, suffixed _2, _3, ... if a project already uses it."""
    base = slugify(title)
    slug = base
    n = 2
    while os.path.exists(os.path.join(output_base, slug, "script.json")):
        slug = f"{base}_{n}"
        n += 1
    return slug


def write_artifact(project_dir: str, filename: str, data: dict) -> str:
    """Write a JSON artifact (UTF-8, newline-terminated) into the project.

    Returns path to the written file.
    """
    os.makedirs(project_dir, exist_ok=True)
    path = os.path.join(project_dir, filename)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
        f.write("\n")
    return path


def load_artifact(project_dir: str, filename: str) -> dict | None:
    try:
        with open(os.path.join(project_dir, filename), encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        return None


def load_record(project_dir: str) -> ScriptRecord | None:
    data = load_artifact(project_dir, "script.json")
    if data is None:
        return None
    return ScriptRecord.from_dict(data)


def get_project_status(project_dir: str) -> dict:
    """Return dict describing current state of each production step."""
    status = {}

    data = load_artifact(project_dir, "script.json")
    if data is not None:
        status["script"] = {
            "state": "done",
            "speakers": len(data.get("speakers", [])),
            "words": len(data.get("transcript", "").split()),
        }
    else:
        status["script"] = {"state": "pending"}

    transcript = os.path.join(project_dir, "transcript.txt")
    status["transcript"] = {"state": "done" if os.path.exists(transcript) else "pending"}

    final_dir = os.path.join(project_dir, "final")
    audio = []
    if os.path.isdir(final_dir):
        audio = [f for f in os.listdir(final_dir) if f.endswith(("_podcast.mp3", "_podcast.wav", "_podcast.ogg"))]
    status["audio"] = {"state": "done", "files": len(audio)} if audio else {"state": "pending"}

    samples_dir = os.path.join(project_dir, "samples")
    previews = []
    if os.path.isdir(samples_dir):
        previews = [f for f in os.listdir(samples_dir) if f.startswith("preview_")]
    status["preview"] = {"state": "done" if previews else "pending"}

    return status


def list_projects(output_base: str = OUTPUT_DIR) -> list[tuple[str, ScriptRecord]]:
    """(slug, record) for every project with a script, sorted by slug."""
    if not os.path.isdir(output_base):
        return []
    projects = []
    for entry in os.scandir(output_base):
        if not entry.is_dir():
            continue
        record = load_record(entry.path)
        if record is not None:
            projects.append((entry.name, record))
    return sorted(projects, key=lambda item: item[0])
