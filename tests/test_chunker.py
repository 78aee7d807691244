"""Tests for the transcript chunker."""

import pytest

from podcast_producer.chunker import split_text


def _prose(length):
    """Sentences of varied length until at least `length` characters."""
    sentences = []
    total = 0
    i = 0
    while total < length:
        sentence = f"[Host]: Point number {i} is that " + "quite " * (i % 7) + "everything connects."
        sentences.append(sentence)
        total += len(sentence) + 1
        i += 1
    return " ".join(sentences)[:length].rstrip() + "."


def test_short_text_single_chunk():
    assert split_text("Hello there. How are you?", 100) == ["Hello there. How are you?"]


def test_short_text_is_trimmed():
    assert split_text("  Hello there.  \n", 100) == ["Hello there."]


def test_exact_limit_single_chunk():
    text = "a" * 50
    assert split_text(text, 50) == [text]


@pytest.mark.parametrize("text", ["", "   ", "\n\t "])
def test_empty_input_no_chunks(text):
    assert split_text(text, 10) == []


def test_invalid_max_length():
    with pytest.raises(ValueError):
        split_text("Hello.", 0)


def test_sentence_boundaries_preserved():
    """Chunks break between sentences, never inside one that fits."""
    text = "One two three. Four five six! Seven eight nine? Ten eleven twelve."
    chunks = split_text(text, 30)
    assert chunks == ["One two three. Four five six!", "Seven eight nine?", "Ten eleven twelve."]


def test_rejoined_chunks_reproduce_sentences():
    text = "Alpha beta.  Gamma delta!\nEpsilon zeta? Eta theta iota kappa. Lambda."
    chunks = split_text(text, 25)
    assert all(len(c) <= 25 for c in chunks)
    assert " ".join(chunks) == "Alpha beta. Gamma delta! Epsilon zeta? Eta theta iota kappa. Lambda."


def test_5000_chars_of_prose():
    text = _prose(5000)
    assert len(text) >= 5000
    chunks = split_text(text, 4096)
    assert len(chunks) >= 2
    assert all(len(c) <= 4096 for c in chunks)
    assert chunks[-1].strip() != ""
    assert " ".join(chunks).split() == text.split()


def test_oversized_sentence_split_by_words():
    long_sentence = " ".join(f"word{i}" for i in range(40)) + "."
    text = f"Intro here. {long_sentence} Outro here."
    chunks = split_text(text, 50)
    assert chunks[0] == "Intro here."
    assert all(len(c) <= 50 for c in chunks)
    assert " ".join(chunks).split() == text.split()


def test_word_packed_remainder_keeps_accumulating():
    """The tail of a word-packed sentence absorbs the following sentence."""
    text = "aaaa bbbb cccc dddd eeee ffff. Next."
    chunks = split_text(text, 20)
    assert chunks == ["aaaa bbbb cccc dddd", "eeee ffff. Next."]


def test_single_word_longer_than_limit_kept_whole():
    """Words are never cut: an oversized word becomes its own oversized chunk."""
    giant = "x" * 30
    text = f"Short one. {giant} tail."
    chunks = split_text(text, 12)
    assert giant in chunks
    assert all(len(c) <= 12 for c in chunks if c != giant)
    assert " ".join(chunks).split() == text.split()
