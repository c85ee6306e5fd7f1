import json
from pathlib import Path

from typer.testing import CliRunner

from rune_index.cli import app
from tests.utils import write_sample_inputs

runner = CliRunner()


def test_cli_decode_outputs_runes():
    """decode prints byte and codepoint coordinates for every rune."""
    result = runner.invoke(app, ["decode", "--text", "Hi中"])
    assert result.exit_code == 0
    runes = json.loads(result.stdout)["runes"]
    assert [r["offset"] for r in runes] == [0, 1, 2]
    assert [r["len"] for r in runes] == [1, 1, 3]
    assert runes[2]["scalar"] == "U+4E2D"


def test_cli_decode_rejects_invalid_file(tmp_path: Path):
    paths = write_sample_inputs(tmp_path / "inputs")
    result = runner.invoke(app, ["decode", "--input-path", str(paths["invalid"])])
    assert result.exit_code != 0


def test_cli_count(tmp_path: Path):
    paths = write_sample_inputs(tmp_path / "inputs")
    result = runner.invoke(app, ["count", "--input-path", str(paths["valid"])])
    assert result.exit_code == 0
    assert result.stdout.strip() == "4"

    lenient = runner.invoke(app, ["count", "--input-path", str(paths["invalid"])])
    assert lenient.exit_code == 0
    assert lenient.stdout.strip() == "0"

    strict = runner.invoke(
        app, ["count", "--input-path", str(paths["invalid"]), "--strict"]
    )
    assert strict.exit_code != 0


def test_cli_slice_materializes_words():
    """slice turns inclusive LEFT:RIGHT ranges into words in order."""
    result = runner.invoke(app, ["slice", "0:2", "2:2", "--text", "Hi中"])
    assert result.exit_code == 0
    words = json.loads(result.stdout)["words"]
    assert words == [
        {"word": "Hi中", "offset": 0, "unicode_offset": 0, "unicode_length": 3},
        {"word": "中", "offset": 2, "unicode_offset": 2, "unicode_length": 1},
    ]


def test_cli_slice_enforces_max_word_length(tmp_path: Path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("max_word_length: 2\n", encoding="utf-8")
    result = runner.invoke(
        app, ["slice", "0:2", "--text", "Hi中", "--config", str(config_path)]
    )
    assert result.exit_code != 0


def test_cli_slice_rejects_bad_ranges():
    assert runner.invoke(app, ["slice", "a:b", "--text", "Hi"]).exit_code != 0
    assert runner.invoke(app, ["slice", "1:0", "--text", "Hi"]).exit_code != 0
    assert runner.invoke(app, ["slice", "0:5", "--text", "Hi"]).exit_code != 0


def test_cli_requires_one_input():
    result = runner.invoke(app, ["count"])
    assert result.exit_code != 0


def test_cli_print_config():
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "max_word_length" in result.stdout


def test_cli_text_with_lone_surrogate_is_rejected():
    result = runner.invoke(app, ["count", "--text", "a\ud800", "--strict"])
    assert result.exit_code != 0
