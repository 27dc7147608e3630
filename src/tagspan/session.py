from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Tuple

from .formatter import TextFormatter

logger = logging.getLogger(__name__)

ApplyCallback = Callable[[List[List[Tuple[str, bool]]], int, int], None]


class EditSession:
    """
    Serializes edit cycles between a host text widget and a TextFormatter.

    ``apply`` receives the formatted pieces, the caret line and the new caret
    offset. Hosts usually report their own redraw as another text change; such
    nested notifications are ignored until the running cycle completes.
    """

    def __init__(self, formatter: TextFormatter, apply: ApplyCallback) -> None:
        self._formatter = formatter
        self._apply = apply
        self._suppressed = False

    @property
    def suppressed(self) -> bool:
        return self._suppressed

    def on_text_changed(
        self, lines: Iterable[str], caret_line_index: int, caret_offset: int
    ) -> bool:
        """Run one edit cycle; return False when a cycle is already running."""
        if self._suppressed:
            logger.debug("Ignoring nested text change notification")
            return False
        self._suppressed = True
        try:
            new_offset = self._formatter.handle_text_changed(
                lines, caret_line_index, caret_offset
            )
            self._apply(self._formatter.formatted_text, caret_line_index, new_offset)
        finally:
            self._suppressed = False
        return True
