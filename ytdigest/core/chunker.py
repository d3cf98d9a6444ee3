"""
Module for splitting transcripts into bounded, overlapping chunks.
"""

from typing import List

from ytdigest.config import config
from ytdigest.models.schemas import Chunk


def split_transcript(
    text: str,
    chunk_size: int = config.CHUNK_SIZE,
    overlap: int = config.CHUNK_OVERLAP,
) -> List[Chunk]:
    """
    Split transcript text into chunks of at most ``chunk_size`` characters.

    Words are accumulated greedily. When a chunk is closed, the next one is
    seeded with the trailing ``overlap // 10`` words of it so neighbouring
    chunks share some context. A single word longer than ``chunk_size`` is
    kept whole in a chunk of its own.

    Args:
        text: Transcript text
        chunk_size: Maximum chunk length in characters
        overlap: Approximate overlap in characters (converted to words)

    Returns:
        Ordered list of Chunk objects, empty for empty input
    """
    words = text.split()
    overlap_count = max(overlap // 10, 0)

    chunks: List[Chunk] = []
    current: List[str] = []
    seeded = 0
    # Length of " ".join(current) plus one trailing separator
    current_length = 0

    for word in words:
        if current and current_length + len(word) > chunk_size:
            chunks.append(Chunk(index=len(chunks), text=" ".join(current), overlap_words=seeded))

            # Only words this chunk added itself are carried forward
            fresh = current[seeded:]
            current = fresh[-overlap_count:] if overlap_count else []
            current_length = sum(len(w) + 1 for w in current)

            while current and current_length + len(word) > chunk_size:
                current_length -= len(current.pop(0)) + 1
            seeded = len(current)

        current.append(word)
        current_length += len(word) + 1

    if current:
        chunks.append(Chunk(index=len(chunks), text=" ".join(current), overlap_words=seeded))

    return chunks
