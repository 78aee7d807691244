"""CLI interface with subcommand routing and production orchestration."""

import argparse
import asyncio
import logging
import os
import shutil
import sys

from pydub.exceptions import CouldntDecodeError, CouldntEncodeError

from podcast_producer.artifacts import (
    get_project_status,
    init_output_dir,
    list_projects,
    load_record,
    unique_slug,
    write_artifact,
)
from podcast_producer.catalog import (
    DEFAULT_PERSONALITIES,
    DURATION_CHOICES,
    EXPERT_PERSONALITIES,
    HOST_TEMPLATES,
    STYLE_DESCRIPTIONS,
    TOPIC_CATEGORIES,
    suggest_context,
)
from podcast_producer.config import Settings
from podcast_producer.constants import DEFAULT_DURATION, DEFAULT_STYLE, MAX_SPEAKERS, VERSION
from podcast_producer.errors import AudioGenerationError, MissingAPIKeyError
from podcast_producer.exporter import decode_asset, export_audio, export_transcript, generate_preview
from podcast_producer.models import GenerationRequest
from podcast_producer.script import generate_script
from podcast_producer.tts import BACKENDS, make_backend, synthesize
from podcast_producer.voices import DEFAULT_VOICE_CONFIG, VOICE_TABLE, select_voice


def _fail(message: str, hint: str | None = None):
    print(f"Error: {message}", file=sys.stderr)
    if hint:
        print(hint, file=sys.stderr)
    raise SystemExit(1)


def _check_ffmpeg():
    """Verify ffmpeg is installed."""
    if not shutil.which("ffmpeg"):
        _fail("ffmpeg is required but not found.", "Install with: brew install ffmpeg")


def _get_project_dir(slug: str, output_base: str) -> str:
    """Get project directory path, verify it exists."""
    project_dir = os.path.join(output_base, slug)
    if not os.path.isdir(project_dir):
        _fail(f"Project '{slug}' not found.", "Run 'podcast-producer new --topic ...' to create a project.")
    if not os.path.exists(os.path.join(project_dir, "script.json")):
        _fail(f"Project '{slug}' is incomplete (no script.json).")
    return project_dir


def cmd_new(args):
    """Generate a script and create a project for it."""
    settings = Settings.from_env()

    context = args.context or ""
    if not context.strip():
        if not args.suggest_context:
            _fail("Please provide context for the podcast.", "Use --context TEXT or --suggest-context.")
        context = suggest_context(args.topic)
        print(f"Context: {context}")

    personalities = args.personality or list(DEFAULT_PERSONALITIES)
    try:
        request = GenerationRequest(
            topic=args.topic,
            context=context,
            personalities=tuple(personalities),
            duration=args.duration,
            style=args.style,
        )
    except ValueError as e:
        _fail(str(e))

    if request.style not in STYLE_DESCRIPTIONS:
        print(f"Warning: Unknown style '{request.style}', using {DEFAULT_STYLE} instructions.", file=sys.stderr)

    print(f"Generating {request.duration}-minute script: {request.topic}")
    record = asyncio.run(generate_script(request, settings=settings))

    slug = unique_slug(record.title, output_base=settings.output_dir)
    project_dir = init_output_dir(slug, output_base=settings.output_dir)
    write_artifact(project_dir, "request.json", request.to_dict())
    write_artifact(project_dir, "script.json", record.to_dict())
    export_transcript(project_dir, record)

    print(f"Created project: {slug}")
    print(f"Title: {record.title}")
    print(f"Speakers: {', '.join(record.speakers)}")
    print(f"Transcript written to {project_dir}/transcript.txt")
    print(f"Run 'podcast-producer speak {slug}' to generate audio.")


async def _synthesize_with_backend(transcript: str, personality: str | None, backend_name: str, concurrency: int, settings: Settings):
    backend = make_backend(backend_name, settings=settings)
    try:
        return await synthesize(transcript, personality, backend=backend, concurrency=concurrency)
    finally:
        await backend.close()


def cmd_speak(args):
    """Synthesize a project's transcript to audio."""
    _check_ffmpeg()
    settings = Settings.from_env()

    slug = args.slug
    project_dir = _get_project_dir(slug, settings.output_dir)
    record = load_record(project_dir)

    status = get_project_status(project_dir)
    if status["audio"]["state"] == "done" and not args.force:
        print(f"[skip] Audio: {slug} already has audio (use --force to regenerate)")
        return

    personality = args.personality
    if args.speaker is not None:
        if not 1 <= args.speaker <= len(record.personalities):
            _fail(f"Speaker must be between 1 and {len(record.personalities)}")
        personality = record.personalities[args.speaker - 1]

    voice = select_voice(personality) if personality else DEFAULT_VOICE_CONFIG
    print(f"Generating audio with voice {voice.voice} at {voice.speed}x ({args.backend})...")

    try:
        asset = asyncio.run(_synthesize_with_backend(
            record.transcript, personality, args.backend, args.concurrency, settings,
        ))
    except (AudioGenerationError, MissingAPIKeyError, ValueError) as e:
        _fail(str(e))

    try:
        audio = decode_asset(asset)
    except (CouldntDecodeError, OSError) as e:
        audio = None
        print(f"Warning: Could not decode audio ({e}); skipping duration and preview.", file=sys.stderr)

    output_path = export_audio(
        asset, project_dir, slug, record,
        {
            "backend": args.backend,
            "voice": voice.voice,
            "speed": voice.speed,
            "personality": personality,
            "concurrency": args.concurrency,
        },
        audio=audio,
    )
    if audio is not None:
        try:
            generate_preview(project_dir, audio, fmt=asset.extension)
        except (CouldntEncodeError, OSError) as e:
            print(f"Warning: Could not write preview ({e}).", file=sys.stderr)

    print(f"Synthesized {asset.chunk_count} chunk(s), {len(asset.data)} bytes")
    print(f"Done: {output_path}")


def cmd_status(args):
    """Show project status."""
    settings = Settings.from_env()
    slug = args.slug
    project_dir = _get_project_dir(slug, settings.output_dir)
    record = load_record(project_dir)
    status = get_project_status(project_dir)

    print(f"Project: {slug}")
    print(f"Title:   {record.title}")
    print(f"Topic:   {record.topic}")
    print(f"Length:  {record.duration}")
    print("Speakers:")
    for name, personality in zip(record.speakers, record.personalities):
        voice = select_voice(personality)
        print(f"  {name:<15} → {voice.voice} ({voice.speed}x)")

    print("Steps:")
    for step in ["script", "transcript", "audio", "preview"]:
        info = status.get(step, {"state": "pending"})
        marker = "[done]" if info["state"] == "done" else "[----]"
        details = ""
        if step == "script" and info["state"] == "done":
            details = f" ({info['words']} words)"
        print(f"  {marker} {step:<12}{details}")


def cmd_list(args):
    """List all projects."""
    settings = Settings.from_env()
    projects = list_projects(output_base=settings.output_dir)
    if not projects:
        print("No projects found.")
        return
    print("Projects:")
    for name, record in projects:
        status = get_project_status(os.path.join(settings.output_dir, name))
        marker = "[done]" if status["audio"]["state"] == "done" else "[----]"
        print(f"  {marker} {name:<30} {record.title}")


def cmd_voices(args):
    """List personality → voice rules."""
    filter_str = args.filter.lower() if args.filter else None
    rows = []
    for patterns, config in VOICE_TABLE:
        label = " / ".join(patterns)
        if filter_str and filter_str not in label and filter_str not in config.voice:
            continue
        rows.append((label, config))
    if not rows:
        print("No matching voices found.")
        return
    print("Voice rules (first match wins):")
    for label, config in rows:
        print(f"  {label:<24} → {config.voice} ({config.speed}x)")
    print(f"  {'(default)':<24} → {DEFAULT_VOICE_CONFIG.voice} ({DEFAULT_VOICE_CONFIG.speed}x)")


def cmd_styles(args):
    """List podcast styles and personality templates."""
    print("Styles:")
    for name, (description, characteristics) in STYLE_DESCRIPTIONS.items():
        print(f"  {name}")
        print(f"    {description}")
        print(f"    {characteristics}")
    print("Host templates:")
    for template in HOST_TEMPLATES:
        print(f"  {template}")
    print("Expert personalities:")
    for personality in EXPERT_PERSONALITIES:
        print(f"  {personality}")


def cmd_topics(args):
    """List suggested topics by category."""
    for category, topics in TOPIC_CATEGORIES.items():
        print(f"{category}:")
        for topic in topics:
            print(f"  {topic}")


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="podcast-producer",
        description="Podcast Producer: generate podcast scripts and audio with AI",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show progress logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # new
    new_parser = subparsers.add_parser("new", help="Generate a script and create a project")
    new_parser.add_argument("--topic", required=True, help="What the episode is about")
    new_parser.add_argument("--context", help="What the conversation should cover")
    new_parser.add_argument("--suggest-context", action="store_true", help="Generate a context suggestion if --context is missing")
    new_parser.add_argument(
        "-p", "--personality", action="append",
        help=f"Speaker personality (repeat, up to {MAX_SPEAKERS})",
    )
    new_parser.add_argument("--duration", default=DEFAULT_DURATION, help=f"Minutes ({', '.join(DURATION_CHOICES)})")
    new_parser.add_argument("--style", default=DEFAULT_STYLE, help="Podcast style (see 'styles')")
    new_parser.set_defaults(func=cmd_new)

    # speak
    speak_parser = subparsers.add_parser("speak", help="Generate audio for a project")
    speak_parser.add_argument("slug", help="Project slug")
    voice_group = speak_parser.add_mutually_exclusive_group()
    voice_group.add_argument("--personality", help="Personality text used to pick the voice")
    voice_group.add_argument("--speaker", type=int, help="Use the Nth speaker's personality to pick the voice")
    speak_parser.add_argument("--backend", choices=sorted(BACKENDS), default="openai", help="Speech service")
    speak_parser.add_argument("--concurrency", type=int, default=1, help="Chunk requests in flight at once")
    speak_parser.add_argument("--force", action="store_true", help="Regenerate existing audio")
    speak_parser.set_defaults(func=cmd_speak)

    # status
    status_parser = subparsers.add_parser("status", help="Show project status")
    status_parser.add_argument("slug", help="Project slug")
    status_parser.set_defaults(func=cmd_status)

    # list
    list_parser = subparsers.add_parser("list", help="List all projects")
    list_parser.set_defaults(func=cmd_list)

    # voices
    voices_parser = subparsers.add_parser("voices", help="List personality voice rules")
    voices_parser.add_argument("--filter", help="Filter rules by substring")
    voices_parser.set_defaults(func=cmd_voices)

    # styles
    styles_parser = subparsers.add_parser("styles", help="List podcast styles and personality templates")
    styles_parser.set_defaults(func=cmd_styles)

    # topics
    topics_parser = subparsers.add_parser("topics", help="List suggested topics")
    topics_parser.set_defaults(func=cmd_topics)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return

    args.func(args)
