from __future__ import annotations

from pathlib import Path


def write_sample_inputs(directory: Path) -> dict[str, Path]:
    """Write a valid UTF-8 file and a malformed one for CLI tests."""
    directory.mkdir(parents=True, exist_ok=True)
    valid = directory / "valid.txt"
    valid.write_bytes("Hi中文".encode("utf-8"))
    invalid = directory / "invalid.txt"
    # Truncated 3-byte sequence after valid ASCII.
    invalid.write_bytes(b"ok\xe4\xb8")
    return {"valid": valid, "invalid": invalid}
