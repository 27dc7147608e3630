"""
tagspan package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .caret import (
    NO_CARET,
    CaretDirection,
    plain_to_structured,
    remap_caret,
    structured_to_plain,
)
from .config import FormatterConfig, config_from_dict, config_from_yaml, load_config
from .formatter import TextFormatter, build_document
from .models import Document, Line, Span, SpanKind, ValidationError
from .segmentation import InternalConsistencyError, segment
from .session import EditSession

__all__ = [
    "NO_CARET",
    "CaretDirection",
    "Document",
    "EditSession",
    "FormatterConfig",
    "InternalConsistencyError",
    "Line",
    "Span",
    "SpanKind",
    "TextFormatter",
    "ValidationError",
    "build_document",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "plain_to_structured",
    "remap_caret",
    "segment",
    "structured_to_plain",
]

__version__ = "0.1.0"
