from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import typer
import yaml

from .caret import CaretDirection
from .models import SpanKind


@dataclass(slots=True)
class FormatterConfig:
    """Configuration options for highlighting and caret handling."""

    highlight_kinds: List[str] = field(
        default_factory=lambda: [SpanKind.HASHTAG.value, SpanKind.USERNAME.value]
    )
    highlight_color: str = "red"
    plain_color: str | None = None
    bold_highlights: bool = False
    caret_direction: str = "plain_to_structured"

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))

    def highlights(self, kind: SpanKind) -> bool:
        """Return True when spans of the given kind should be highlighted."""
        return SpanKind(kind).value in self.highlight_kinds


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(FormatterConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "highlight_kinds" in kwargs:
        kwargs["highlight_kinds"] = _normalize_kinds(kwargs["highlight_kinds"])
    if "caret_direction" in kwargs:
        kwargs["caret_direction"] = _normalize_direction(kwargs["caret_direction"])
    for key in ("highlight_color", "plain_color"):
        if kwargs.get(key) is not None:
            _check_color(key, kwargs[key])
    return kwargs


def _normalize_kinds(values: Any) -> List[str]:
    if isinstance(values, str):
        values = [values]
    try:
        return [SpanKind(str(value).lower().strip()).value for value in values]
    except ValueError as exc:
        raise ValueError(f"Unknown span kind in highlight_kinds: {values!r}") from exc


def _normalize_direction(value: Any) -> str:
    try:
        return CaretDirection(str(value).replace("-", "_").lower().strip()).value
    except ValueError as exc:
        raise ValueError(f"Unknown caret direction '{value}'.") from exc


def _check_color(key: str, value: Any) -> None:
    """Reject colors the terminal styling cannot render."""
    try:
        typer.style("", fg=value)
    except TypeError as exc:
        raise ValueError(f"Unknown color for {key}: {value!r}") from exc


def config_from_dict(data: Mapping[str, Any] | None) -> FormatterConfig:
    """Build a FormatterConfig from a dictionary-like input."""
    if data is None:
        return FormatterConfig()
    return FormatterConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> FormatterConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(contents) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Configuration YAML at {path} is malformed.") from exc
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> FormatterConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return FormatterConfig()
    return config_from_yaml(path)
