"""Tests for prompt construction and the preset catalog."""

import random

from podcast_producer.catalog import (
    CONTEXT_SUGGESTIONS,
    DEFAULT_PERSONALITIES,
    STYLE_DESCRIPTIONS,
    TOPIC_CATEGORIES,
    suggest_context,
)
from podcast_producer.models import GenerationRequest
from podcast_producer.prompts import (
    STYLE_INSTRUCTIONS,
    STYLE_NAMES,
    build_prompt,
    derive_speaker_names,
    description_prompt,
    style_instruction,
    target_word_count,
    title_prompt,
)


# --- Speaker names ---

def test_speaker_name_from_style_template():
    names = derive_speaker_names(["Joe Rogan style - Deep, conversational..."])
    assert names == ["Joe Rogan"]


def test_speaker_name_positional_placeholder():
    names = derive_speaker_names([
        "Joe Rogan style - Deep, conversational...",
        "Subject matter expert with deep knowledge",
    ])
    assert names == ["Joe Rogan", "Speaker 2"]


def test_speaker_names_keep_positions():
    personalities = ["Curious interviewer", "Lex Fridman style - Thoughtful", "Young innovator", "Guy Raz style - x"]
    assert derive_speaker_names(personalities) == ["Speaker 1", "Lex Fridman", "Speaker 3", "Guy Raz"]


# --- Style directives ---

def test_style_instruction_known_style():
    assert "Q&A format" in style_instruction("Interview Style")


def test_style_instruction_unknown_falls_back():
    assert style_instruction("Shouting Style") == style_instruction("Joe Rogan Style")
    assert style_instruction("") == dict(STYLE_INSTRUCTIONS)["Joe Rogan Style"]


def test_style_tables_agree():
    assert set(STYLE_NAMES) == set(STYLE_DESCRIPTIONS)


def test_target_word_count():
    assert target_word_count(15) == 2250
    assert target_word_count(1) == 150


# --- Prompt assembly ---

def test_build_prompt_contents(sample_request):
    names = derive_speaker_names(sample_request.personalities)
    prompt = build_prompt(sample_request, names)
    assert 'Generate a 10-minute podcast transcript in the style of "NPR Style".' in prompt
    assert "TOPIC: Quantum Computing Revolution" in prompt
    assert "CONTEXT: How qubits change cryptography." in prompt
    assert f"- Joe Rogan: {sample_request.personalities[0]}" in prompt
    assert f"- Speaker 2: {sample_request.personalities[1]}" in prompt
    assert f"STYLE INSTRUCTIONS: {style_instruction('NPR Style')}" in prompt
    assert "Target approximately 1500 words (150 words per minute)" in prompt
    assert "[Speaker Name]:" in prompt
    assert prompt.rstrip().endswith("Generate the complete transcript now:")


def test_build_prompt_unknown_style_uses_default_directive():
    request = GenerationRequest(topic="AI", context="c", personalities=("Host",), duration="5", style="Mystery Style")
    prompt = build_prompt(request, ["Speaker 1"])
    assert '"Mystery Style"' in prompt
    assert style_instruction("Joe Rogan Style") in prompt


def test_build_prompt_is_deterministic(sample_request):
    names = derive_speaker_names(sample_request.personalities)
    assert build_prompt(sample_request, names) == build_prompt(sample_request, names)


def test_title_and_description_prompts(sample_request):
    assert '"Quantum Computing Revolution"' in title_prompt(sample_request)
    assert "NPR Style" in title_prompt(sample_request)
    assert "1-2 sentence" in description_prompt(sample_request)
    assert '"Quantum Computing Revolution"' in description_prompt(sample_request)


# --- Catalog ---

def test_topic_categories():
    assert list(TOPIC_CATEGORIES) == ["Technology", "Science", "Economics & Business", "Society & Culture"]
    assert all(len(topics) == 6 for topics in TOPIC_CATEGORIES.values())


def test_default_personalities_name_one_speaker():
    assert derive_speaker_names(DEFAULT_PERSONALITIES) == ["Joe Rogan", "Speaker 2"]


def test_suggest_context_uses_lowercase_topic():
    context = suggest_context("Space Exploration", rng=random.Random(3))
    assert "space exploration" in context
    assert context in [s.format(topic="space exploration") for s in CONTEXT_SUGGESTIONS]
