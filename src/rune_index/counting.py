from __future__ import annotations

import logging

from .codec import BytesLike, EncodingError, iter_decode

LOGGER = logging.getLogger(__name__)


def count_codepoints(data: BytesLike, *, strict: bool = False) -> int:
    """
    Count the codepoints in data without building a rune sequence.

    Invalid input counts as 0, the same as empty input. Pass ``strict=True``
    to get the EncodingError instead.
    """
    count = 0
    try:
        for _ in iter_decode(data):
            count += 1
    except EncodingError as exc:
        if strict:
            raise
        LOGGER.debug("Counting invalid UTF-8 as zero codepoints: %s", exc)
        return 0
    return count


def is_single_codepoint(data: BytesLike) -> bool:
    """Return True when data decodes to exactly one codepoint."""
    return count_codepoints(data) == 1
