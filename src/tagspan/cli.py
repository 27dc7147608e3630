from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, TypedDict

import click
import typer
import yaml

from .caret import CaretDirection, remap_caret
from .config import FormatterConfig, load_config
from .formatter import build_document
from .models import Line, Span
from .segmentation import segment

app = typer.Typer(help="Hashtag and username segmentation CLI.", no_args_is_help=True)


class SpanPayload(TypedDict):
    kind: str
    content: str
    text: str
    highlighted: bool


class LinePayload(TypedDict):
    index: int
    text: str
    spans: List[SpanPayload]


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Segment text into plain text, hashtags and usernames."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


@app.command("segment")
def segment_command(
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Inline text to segment."),
) -> None:
    """Emit the spans of every input line as JSON."""
    lines = _read_lines(input_path, text)
    document = build_document(lines)
    payload = [_line_dict(index, line) for index, line in enumerate(document.lines)]
    typer.echo(json.dumps({"lines": payload}, indent=2))


@app.command("caret")
def caret_command(
    text: str = typer.Option(..., "--text", "-t", help="Line the caret sits in."),
    offset: int = typer.Option(..., "--offset", "-o", help="Observed caret offset."),
    direction: str = typer.Option(
        CaretDirection.PLAIN_TO_STRUCTURED.value,
        "--direction",
        "-d",
        help="plain-to-structured or structured-to-plain.",
    ),
) -> None:
    """Translate a caret offset against the spans of a single line."""
    try:
        resolved = CaretDirection(direction.replace("-", "_").lower())
    except ValueError as exc:
        raise typer.BadParameter(f"Unknown caret direction '{direction}'.") from exc
    mapped = remap_caret(segment(text), offset, resolved)
    typer.echo(
        json.dumps(
            {"direction": resolved.value, "input_offset": offset, "offset": mapped},
            indent=2,
        )
    )


@app.command("render")
def render_command(
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Inline text to render."),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Echo the input with highlighted spans colored."""
    try:
        cfg = load_config(config)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    document = build_document(_read_lines(input_path, text))
    for line in document.lines:
        typer.echo("".join(_style_span(span, cfg) for span in line.spans))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = FormatterConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _read_lines(input_path: Path | None, text: str | None) -> List[str]:
    """Collect raw lines from --text, --input-path or stdin, in that order."""
    if text is not None:
        raw = text
    elif input_path is not None:
        raw = input_path.read_text(encoding="utf-8")
    else:
        raw = click.get_text_stream("stdin").read()
    return raw.splitlines()


def _style_span(span: Span, config: FormatterConfig) -> str:
    if config.highlights(span.kind):
        return typer.style(
            span.full_text, fg=config.highlight_color, bold=config.bold_highlights
        )
    if config.plain_color:
        return typer.style(span.full_text, fg=config.plain_color)
    return span.full_text


def _line_dict(index: int, line: Line) -> LinePayload:
    """Serialize a Line so it can be emitted in JSON."""
    return {
        "index": index,
        "text": line.text,
        "spans": [_span_dict(span) for span in line.spans],
    }


def _span_dict(span: Span) -> SpanPayload:
    return {
        "kind": span.kind.value,
        "content": span.content,
        "text": span.full_text,
        "highlighted": span.highlighted,
    }


if __name__ == "__main__":
    main()
