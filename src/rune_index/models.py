from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class IndexedRune:
    """A decoded codepoint with its byte and codepoint coordinates."""

    rune: int
    byte_offset: int
    byte_length: int
    codepoint_index: int = 0
    codepoint_span: int = 1

    @property
    def is_ascii(self) -> bool:
        return self.rune < 0x80

    def to_dict(self) -> dict[str, Any]:
        return {
            "rune": self.rune,
            "offset": self.byte_offset,
            "len": self.byte_length,
            "unicode_offset": self.codepoint_index,
            "unicode_length": self.codepoint_span,
        }


@dataclass(frozen=True, slots=True)
class Word:
    """A materialized substring plus its byte and codepoint offsets."""

    text: str
    byte_offset: int
    codepoint_offset: int = 0
    codepoint_length: int = 0

    @property
    def byte_length(self) -> int:
        """Length of text in UTF-8 bytes, as it appeared in the source buffer."""
        return len(self.text.encode("utf-8", errors="surrogateescape"))

    def to_dict(self) -> dict[str, Any]:
        return {
            "word": self.text,
            "offset": self.byte_offset,
            "unicode_offset": self.codepoint_offset,
            "unicode_length": self.codepoint_length,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def __str__(self) -> str:
        return self.to_json()
