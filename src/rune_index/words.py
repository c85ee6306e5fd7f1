from __future__ import annotations

from typing import Iterable, List

from .codec import BytesLike, as_bytes
from .models import Word
from .sequence import WordRange

# Longest word, in codepoints, the segmentation layer will consider.
MAX_WORD_LENGTH = 512


def get_word_from_runes(data: BytesLike, word_range: WordRange) -> Word:
    """Materialize the inclusive range as a Word copied verbatim from data."""
    buf = as_bytes(data)
    left = word_range.left_rune
    right = word_range.right_rune
    if right.byte_offset < left.byte_offset:
        raise ValueError("Range right byte offset precedes left byte offset.")
    byte_length = right.byte_offset - left.byte_offset + right.byte_length
    codepoint_length = (
        right.codepoint_index - left.codepoint_index + right.codepoint_span
    )
    end = left.byte_offset + byte_length
    if end > len(buf):
        raise ValueError(
            f"Range ends at byte {end} but the buffer holds only {len(buf)} bytes."
        )
    text = buf[left.byte_offset : end].decode("utf-8", errors="surrogateescape")
    return Word(text, left.byte_offset, left.codepoint_index, codepoint_length)


def get_words_from_ranges(
    data: BytesLike, ranges: Iterable[WordRange]
) -> List[Word]:
    """Materialize each range in order."""
    buf = as_bytes(data)
    return [get_word_from_runes(buf, word_range) for word_range in ranges]


def words_to_strings(words: Iterable[Word]) -> List[str]:
    return [word.text for word in words]
