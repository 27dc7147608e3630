from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from .caret import NO_CARET, CaretDirection, remap_caret
from .config import FormatterConfig
from .models import Document, Line
from .segmentation import segment

logger = logging.getLogger(__name__)


def build_line(text: str) -> Line:
    """Segment one raw line into a Line."""
    return Line(spans=tuple(segment(text)))


def build_document(lines: Iterable[str]) -> Document:
    """Segment every raw line into a freshly built Document."""
    return Document(lines=[build_line(text) for text in lines])


class TextFormatter:
    """
    Holds the segmented state of the displayed text.

    Every text change rebuilds the whole document and recomputes where the
    caret has to go so it stays on the same character once the host renders
    the new runs.
    """

    def __init__(self, config: FormatterConfig | None = None) -> None:
        self._config = config or FormatterConfig()
        self._document = Document()
        self._caret_line_index = NO_CARET
        self._observed_caret_offset = NO_CARET
        self._caret_offset = NO_CARET

    @property
    def config(self) -> FormatterConfig:
        return self._config

    @property
    def document(self) -> Document:
        return self._document

    @property
    def caret_line_index(self) -> int:
        """Index of the line holding the caret, or -1 when there is none."""
        return self._caret_line_index

    @property
    def caret_offset(self) -> int:
        """Caret offset to apply after the change, or -1 outside any line."""
        return self._caret_offset

    @property
    def formatted_text(self) -> List[List[Tuple[str, bool]]]:
        """Per line, the ``(text, highlighted)`` pieces to display."""
        return [
            [(span.full_text, self._config.highlights(span.kind)) for span in line.spans]
            for line in self._document.lines
        ]

    def handle_text_changed(
        self,
        lines: Iterable[str],
        caret_line_index: int,
        caret_offset: int,
    ) -> int:
        """Rebuild the document from the host's lines and remap the caret."""
        self._caret_line_index = caret_line_index
        self._observed_caret_offset = caret_offset
        self._document = build_document(lines)
        self._caret_offset = self._compute_caret_offset()
        return self._caret_offset

    def _compute_caret_offset(self) -> int:
        index = self._caret_line_index
        if index < 0 or index >= len(self._document.lines):
            return NO_CARET
        spans = self._document.lines[index].spans
        direction = CaretDirection(self._config.caret_direction)
        offset = remap_caret(spans, self._observed_caret_offset, direction)
        logger.debug(
            "Caret on line %d moved from %d to %d",
            index,
            self._observed_caret_offset,
            offset,
        )
        return offset
