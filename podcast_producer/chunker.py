"""Split long transcripts into chunks that fit the speech service input limit."""

import re

from podcast_producer.constants import MAX_TTS_CHARS

_SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+")


def _pack(pieces: list[str], max_length: int, chunks: list[str], current: str = "") -> str:
    """Greedily pack pieces into chunks joined by single spaces.

    Completed chunks are appended to `chunks`; the unfinished tail is returned.
    """
    for piece in pieces:
        if current and len(current) + 1 + len(piece) > max_length:
            chunks.append(current.strip())
            current = piece
        else:
            current = f"{current} {piece}" if current else piece
    return current


def split_text(text: str, max_length: int = MAX_TTS_CHARS) -> list[str]:
    """Split text into chunks of at most max_length characters.

    Sentences (ending in . ! or ? followed by whitespace) are kept whole when
    they fit. A sentence longer than max_length is packed word by word, and
    whatever is left of it keeps accumulating following sentences.

    A single word longer than max_length is emitted as its own oversized chunk;
    words are never cut.
    """
    if max_length <= 0:
        raise ValueError("max_length must be positive")

    text = text.strip()
    if not text:
        return []
    if len(text) <= max_length:
        return [text]

    chunks = []
    current = ""

    for sentence in _SENTENCE_BOUNDARY_RE.split(text):
        if len(sentence) > max_length:
            if current.strip():
                chunks.append(current.strip())
            current = _pack(sentence.split(), max_length, chunks)
        else:
            current = _pack([sentence], max_length, chunks, current)

    if current.strip():
        chunks.append(current.strip())

    return chunks
