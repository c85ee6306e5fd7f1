from __future__ import annotations

from typing import Iterable, Iterator, Union

BytesLike = Union[bytes, bytearray, memoryview, str]


class EncodingError(ValueError):
    """Raised when a byte buffer is not well-formed UTF-8."""

    def __init__(self, reason: str, offset: int) -> None:
        super().__init__(f"Invalid UTF-8 at byte {offset}: {reason}")
        self.reason = reason
        self.offset = offset


def as_bytes(data: BytesLike) -> bytes:
    """Return the UTF-8 bytes for data, encoding str input first."""
    if isinstance(data, str):
        try:
            return data.encode("utf-8", errors="surrogateescape")
        except UnicodeEncodeError as exc:
            # Lone surrogates outside the escape range have no UTF-8 form.
            offset = len(data[: exc.start].encode("utf-8", errors="surrogateescape"))
            raise EncodingError(exc.reason, offset) from exc
    return bytes(data)


def _sequence_length(lead: int) -> int:
    if lead < 0x80:
        return 1
    if lead & 0xE0 == 0xC0:
        return 2
    if lead & 0xF0 == 0xE0:
        return 3
    if lead & 0xF8 == 0xF0:
        return 4
    return 0


_LEAD_MASKS = {1: 0x7F, 2: 0x1F, 3: 0x0F, 4: 0x07}


def iter_decode(data: BytesLike) -> Iterator[tuple[int, int]]:
    """
    Yield ``(scalar, byte_length)`` pairs for every codepoint in data.

    The buffer is scanned once, left to right. Only the structural rules of
    UTF-8 are enforced: the leading byte decides the sequence length and every
    following byte must be a ``10xxxxxx`` continuation byte. Overlong forms and
    surrogate scalars are not rejected.

    Raises
    ------
    EncodingError
        At the first invalid leading byte, truncated sequence or malformed
        continuation byte.
    """
    buf = as_bytes(data)
    size = len(buf)
    pos = 0
    while pos < size:
        lead = buf[pos]
        length = _sequence_length(lead)
        if length == 0:
            raise EncodingError(f"invalid leading byte 0x{lead:02X}", pos)
        if pos + length > size:
            raise EncodingError(
                f"truncated {length}-byte sequence ({size - pos} bytes left)", pos
            )
        scalar = lead & _LEAD_MASKS[length]
        for idx in range(pos + 1, pos + length):
            cont = buf[idx]
            if cont & 0xC0 != 0x80:
                raise EncodingError(f"malformed continuation byte 0x{cont:02X}", pos)
            scalar = (scalar << 6) | (cont & 0x3F)
        yield scalar, length
        pos += length


def decode_runes(data: BytesLike) -> list[int]:
    """Decode data into a list of scalar values, failing on invalid UTF-8."""
    return [scalar for scalar, _ in iter_decode(data)]


def utf8_length(scalar: int) -> int:
    """Return the number of bytes the encoder uses for scalar."""
    if scalar < 0:
        raise ValueError(f"Scalar value must be non-negative, got {scalar}.")
    if scalar < 0x80:
        return 1
    if scalar < 0x800:
        return 2
    if scalar < 0x10000:
        return 3
    return 4


def encode_runes(scalars: Iterable[int]) -> bytes:
    """
    Encode scalar values back into UTF-8 bytes.

    Any iterable works, so a slice of a sequence can be streamed in without
    being collected first. Values in the surrogate range or above U+10FFFF are
    bit-packed as-is; only the 4-byte form is ever produced for large values.
    """
    out = bytearray()
    for scalar in scalars:
        length = utf8_length(scalar)
        if length == 1:
            out.append(scalar)
        elif length == 2:
            out.append(0xC0 | (scalar >> 6))
            out.append(0x80 | (scalar & 0x3F))
        elif length == 3:
            out.append(0xE0 | (scalar >> 12))
            out.append(0x80 | ((scalar >> 6) & 0x3F))
            out.append(0x80 | (scalar & 0x3F))
        else:
            out.append(0xF0 | ((scalar >> 18) & 0x07))
            out.append(0x80 | ((scalar >> 12) & 0x3F))
            out.append(0x80 | ((scalar >> 6) & 0x3F))
            out.append(0x80 | (scalar & 0x3F))
    return bytes(out)
