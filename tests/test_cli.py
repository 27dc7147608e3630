import json
from pathlib import Path

from typer.testing import CliRunner

from tagspan.cli import app

runner = CliRunner()

SAMPLE_LINE = "@you #hello there #welcome to @ our"


def test_cli_segment_outputs_spans(tmp_path: Path):
    """segment command returns JSON spans for every line of the input file."""
    input_file = tmp_path / "post.txt"
    input_file.write_text(f"{SAMPLE_LINE}\nno tags here\n", encoding="utf-8")
    result = runner.invoke(app, ["segment", "--input-path", str(input_file)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    lines = payload["lines"]
    assert len(lines) == 2
    assert [span["text"] for span in lines[0]["spans"]][:3] == ["@you", " ", "#hello"]
    assert lines[0]["spans"][2]["kind"] == "hashtag"
    assert lines[0]["spans"][2]["content"] == "hello"
    assert lines[1]["spans"] == [
        {
            "kind": "plain_text",
            "content": "no tags here",
            "text": "no tags here",
            "highlighted": False,
        }
    ]


def test_cli_segment_reads_stdin():
    result = runner.invoke(app, ["segment"], input="#solo\n")
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["lines"][0]["spans"][0]["text"] == "#solo"


def test_cli_caret_maps_both_directions():
    result = runner.invoke(app, ["caret", "--text", SAMPLE_LINE, "--offset", "28"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["offset"] == 39

    result = runner.invoke(
        app,
        [
            "caret",
            "--text",
            SAMPLE_LINE,
            "--offset",
            "39",
            "--direction",
            "structured-to-plain",
        ],
    )
    assert result.exit_code == 0
    assert json.loads(result.stdout)["offset"] == 28


def test_cli_caret_rejects_unknown_direction():
    result = runner.invoke(
        app, ["caret", "--text", "#a", "--offset", "0", "--direction", "up"]
    )
    assert result.exit_code != 0


def test_cli_render_echoes_text():
    result = runner.invoke(app, ["render", "--text", SAMPLE_LINE])
    assert result.exit_code == 0
    assert "#welcome" in result.stdout
    assert "to @ our" in result.stdout


def test_cli_print_config():
    """print-config command dumps the current configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "highlight_kinds" in result.stdout


def test_cli_render_rejects_unknown_color(tmp_path: Path):
    """render reports a bad color in the config as a usage error."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text("highlight_color: reddish\n", encoding="utf-8")
    result = runner.invoke(
        app, ["render", "--text", "#a", "--config", str(config_path)]
    )
    assert result.exit_code == 2
    assert not isinstance(result.exception, TypeError)
