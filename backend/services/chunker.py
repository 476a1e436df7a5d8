import re

DEFAULT_MAX_CHUNK_SIZE = 12000

_SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
_SEPARATOR = ". "


def split_sentences(text: str) -> list[str]:
    """Split on runs of '.', '!' and '?', dropping blank pieces."""
    return [s.strip() for s in _SENTENCE_BOUNDARY.split(text) if s.strip()]


def chunk_text(text: str, max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE) -> list[str]:
    """
    Groups whole sentences into chunks of at most max_chunk_size characters.

    Sentences inside a chunk are joined with '. '. A sentence that would push
    a non-empty chunk past the limit starts a new chunk instead; a single
    sentence longer than the limit becomes its own oversized chunk. Sentences
    are never split and their order is preserved.
    """
    chunks: list[str] = []
    current = ""

    for sentence in split_sentences(text):
        candidate = f"{current}{_SEPARATOR}{sentence}" if current else sentence
        if len(candidate) > max_chunk_size and current:
            chunks.append(current)
            current = sentence
        else:
            current = candidate

    if current:
        chunks.append(current)

    return chunks
