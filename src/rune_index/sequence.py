from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator, List, overload

from .codec import BytesLike, encode_runes, iter_decode
from .models import IndexedRune

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RuneSequence:
    """Immutable, randomly addressable view of decoded text."""

    runes: tuple[IndexedRune, ...] = ()

    @classmethod
    def from_bytes(cls, data: BytesLike) -> "RuneSequence":
        return decode_runes_in_string(data)

    def __len__(self) -> int:
        return len(self.runes)

    def __iter__(self) -> Iterator[IndexedRune]:
        return iter(self.runes)

    @overload
    def __getitem__(self, index: int) -> IndexedRune: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[IndexedRune, ...]: ...

    def __getitem__(self, index: int | slice) -> IndexedRune | tuple[IndexedRune, ...]:
        return self.runes[index]

    def scalars(self, start: int = 0, stop: int | None = None) -> Iterator[int]:
        """Lazily yield scalar values for positions ``[start, stop)``."""
        end = len(self.runes) if stop is None else min(stop, len(self.runes))
        for idx in range(max(0, start), end):
            yield self.runes[idx].rune

    def encode(self, start: int = 0, stop: int | None = None) -> bytes:
        """Re-encode positions ``[start, stop)`` without touching the source buffer."""
        return encode_runes(self.scalars(start, stop))

    def range(self, left: int, right: int) -> "WordRange":
        """Return the inclusive range ``[left, right]`` over this sequence."""
        return WordRange(self, left, right)

    def full_range(self) -> "WordRange":
        return WordRange(self, 0, len(self.runes) - 1)

    def to_dicts(self) -> List[dict[str, Any]]:
        return [rune.to_dict() for rune in self.runes]


@dataclass(frozen=True, slots=True)
class WordRange:
    """
    Inclusive window ``[left, right]`` into one RuneSequence.

    Positions index the sequence; both ends must be in bounds and ``left``
    must not come after ``right`` in codepoint order. Violations raise
    ValueError when the range is built.
    """

    sequence: RuneSequence
    left: int
    right: int

    def __post_init__(self) -> None:
        size = len(self.sequence)
        if size == 0:
            raise ValueError("Cannot build a range over an empty sequence.")
        for name, pos in (("left", self.left), ("right", self.right)):
            if not 0 <= pos < size:
                raise ValueError(
                    f"Range {name} position {pos} outside sequence of length {size}."
                )
        if (
            self.sequence[self.left].codepoint_index
            > self.sequence[self.right].codepoint_index
        ):
            raise ValueError(
                f"Range left position {self.left} comes after right position {self.right}."
            )

    @property
    def left_rune(self) -> IndexedRune:
        return self.sequence[self.left]

    @property
    def right_rune(self) -> IndexedRune:
        return self.sequence[self.right]

    def __iter__(self) -> Iterator[IndexedRune]:
        for idx in range(self.left, self.right + 1):
            yield self.sequence[idx]

    def length(self) -> int:
        """Number of codepoints covered, counting both ends."""
        return self.right_rune.codepoint_index - self.left_rune.codepoint_index + 1

    def is_all_ascii(self) -> bool:
        return all(rune.is_ascii for rune in self)

    def scalars(self) -> Iterator[int]:
        return self.sequence.scalars(self.left, self.right + 1)

    def encode(self) -> bytes:
        return self.sequence.encode(self.left, self.right + 1)


def decode_runes_in_string(data: BytesLike) -> RuneSequence:
    """
    Decode data into a RuneSequence carrying byte and codepoint coordinates.

    Raises EncodingError on malformed input; no partial sequence is produced.
    """
    runes: List[IndexedRune] = []
    offset = 0
    for index, (scalar, length) in enumerate(iter_decode(data)):
        runes.append(IndexedRune(scalar, offset, length, index, 1))
        offset += length
    LOGGER.debug("Decoded %d runes from %d bytes", len(runes), offset)
    return RuneSequence(tuple(runes))
