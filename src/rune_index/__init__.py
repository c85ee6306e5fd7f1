"""
rune_index package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .codec import EncodingError, decode_runes, encode_runes, iter_decode, utf8_length
from .config import RuneIndexConfig, config_from_dict, config_from_yaml, load_config
from .counting import count_codepoints, is_single_codepoint
from .models import IndexedRune, Word
from .sequence import RuneSequence, WordRange, decode_runes_in_string
from .words import (
    MAX_WORD_LENGTH,
    get_word_from_runes,
    get_words_from_ranges,
    words_to_strings,
)

__all__ = [
    "EncodingError",
    "decode_runes",
    "encode_runes",
    "iter_decode",
    "utf8_length",
    "RuneIndexConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "count_codepoints",
    "is_single_codepoint",
    "IndexedRune",
    "Word",
    "RuneSequence",
    "WordRange",
    "decode_runes_in_string",
    "MAX_WORD_LENGTH",
    "get_word_from_runes",
    "get_words_from_ranges",
    "words_to_strings",
]

__version__ = "0.1.0"
