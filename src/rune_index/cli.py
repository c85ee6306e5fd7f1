from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Tuple, TypedDict

import typer
import yaml

from .codec import EncodingError, as_bytes
from .config import RuneIndexConfig, load_config
from .counting import count_codepoints
from .sequence import RuneSequence, WordRange, decode_runes_in_string
from .words import get_words_from_ranges

app = typer.Typer(help="Rune index CLI.", no_args_is_help=True)

LOGGER = logging.getLogger(__name__)


class RunePayload(TypedDict, total=False):
    rune: int
    scalar: str
    offset: int
    len: int
    unicode_offset: int
    unicode_length: int


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    """Decode UTF-8 text into byte/codepoint indexed runes."""
    logging.basicConfig(level=log_level.upper())


@app.command()
def decode(
    text: str | None = typer.Option(None, "--text", "-t", help="Inline input text."),
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Decode the input and print every indexed rune as JSON."""
    cfg = load_config(config)
    data = _read_input(text, input_path)
    sequence = _decode_or_fail(data)
    runes = [_rune_payload(rune.to_dict(), cfg) for rune in sequence]
    LOGGER.info("Decoded %d runes from %d bytes", len(runes), len(data))
    typer.echo(json.dumps({"runes": runes}, indent=cfg.json_indent))


@app.command()
def count(
    text: str | None = typer.Option(None, "--text", "-t", help="Inline input text."),
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    strict: bool | None = typer.Option(
        None,
        "--strict/--no-strict",
        help="Fail on invalid UTF-8 instead of reporting 0 (overrides strict_count).",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Print the number of codepoints in the input."""
    cfg = load_config(config)
    if strict is not None:
        cfg.strict_count = strict
    data = _read_input(text, input_path)
    try:
        total = count_codepoints(data, strict=cfg.strict_count)
    except EncodingError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(str(total))


@app.command("slice")
def slice_words(
    ranges: List[str] = typer.Argument(
        ..., help="Inclusive LEFT:RIGHT rune positions, e.g. 0:1 2:2."
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Inline input text."),
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Materialize inclusive rune ranges as words and print them as JSON."""
    cfg = load_config(config)
    data = _read_input(text, input_path)
    sequence = _decode_or_fail(data)
    word_ranges = [_parse_range(sequence, range_arg, cfg) for range_arg in ranges]
    words = get_words_from_ranges(data, word_ranges)
    payload = {"words": [word.to_dict() for word in words]}
    typer.echo(json.dumps(payload, indent=cfg.json_indent))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = RuneIndexConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _read_input(text: str | None, input_path: Path | None) -> bytes:
    """Return the raw bytes from exactly one of --text or --input-path."""
    if (text is None) == (input_path is None):
        raise typer.BadParameter("Provide exactly one of --text or --input-path.")
    if input_path is not None:
        # Files are read as bytes so invalid UTF-8 reaches the decoder untouched.
        return input_path.read_bytes()
    try:
        return as_bytes(text or "")
    except EncodingError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _decode_or_fail(data: bytes) -> RuneSequence:
    try:
        return decode_runes_in_string(data)
    except EncodingError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _parse_range(
    sequence: RuneSequence, range_arg: str, cfg: RuneIndexConfig
) -> WordRange:
    """Turn a LEFT:RIGHT argument into a validated WordRange."""
    left, right = _split_range_arg(range_arg)
    try:
        word_range = sequence.range(left, right)
    except ValueError as exc:
        raise typer.BadParameter(f"{range_arg}: {exc}") from exc
    if word_range.length() > cfg.max_word_length:
        raise typer.BadParameter(
            f"{range_arg}: range covers {word_range.length()} codepoints, "
            f"max_word_length is {cfg.max_word_length}"
        )
    return word_range


def _split_range_arg(range_arg: str) -> Tuple[int, int]:
    parts = range_arg.split(":")
    if len(parts) != 2:
        raise typer.BadParameter(f"Range '{range_arg}' must look like LEFT:RIGHT.")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise typer.BadParameter(
            f"Range '{range_arg}' must use integer positions."
        ) from exc


def _rune_payload(values: dict[str, Any], cfg: RuneIndexConfig) -> RunePayload:
    payload: RunePayload = {
        "rune": values["rune"],
        "offset": values["offset"],
        "len": values["len"],
        "unicode_offset": values["unicode_offset"],
        "unicode_length": values["unicode_length"],
    }
    if cfg.include_scalars:
        payload["scalar"] = f"U+{values['rune']:04X}"
    return payload


if __name__ == "__main__":
    main()
