"""
Caret translation between plain and structured offsets.

A line renders as one run per span. Each run owns a start slot and an end
slot that occupy caret positions without holding characters, so a structured
offset is the plain offset inflated by the slots crossed before the caret.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Sequence

from .models import Span

logger = logging.getLogger(__name__)

NO_CARET = -1

# Slots crossed when the caret enters a run.
RUN_ENTRY_SLOTS = 1
# Slots of a run the caret passes over entirely (its start and end).
RUN_SKIP_SLOTS = 2


class CaretDirection(str, Enum):
    """How the observed caret offset was measured."""

    PLAIN_TO_STRUCTURED = "plain_to_structured"
    STRUCTURED_TO_PLAIN = "structured_to_plain"


@dataclass(frozen=True, slots=True)
class RunBoundary:
    """Structured offsets bounding the content of one run."""

    index: int
    start: int
    end: int


def run_boundaries(spans: Sequence[Span]) -> Iterator[RunBoundary]:
    """Yield the structured content start/end offsets of each run in order."""
    position = 0
    for index, span in enumerate(spans):
        start = position + RUN_ENTRY_SLOTS
        end = start + len(span.full_text)
        yield RunBoundary(index=index, start=start, end=end)
        position = end + RUN_SKIP_SLOTS - RUN_ENTRY_SLOTS


def plain_to_structured(spans: Sequence[Span], plain_offset: int) -> int:
    """
    Map a plain offset to the structured offset of the same character.

    A caret sitting on the boundary between two runs stays in the earlier one.
    Offsets past the end of the line are placed in the last run.
    """
    if not spans:
        return plain_offset

    result = plain_offset
    consumed = 0
    last = len(spans) - 1
    for index, span in enumerate(spans):
        length = len(span.full_text)
        if consumed + length >= plain_offset or index == last:
            result += RUN_ENTRY_SLOTS
            break
        result += RUN_SKIP_SLOTS
        consumed += length
    return result


def structured_to_plain(spans: Sequence[Span], structured_offset: int) -> int:
    """Map a structured offset back to the plain offset of the same character."""
    if not spans:
        return structured_offset

    result = structured_offset
    for boundary in run_boundaries(spans):
        if structured_offset <= boundary.end or boundary.index == len(spans) - 1:
            result -= RUN_ENTRY_SLOTS
            break
        result -= RUN_SKIP_SLOTS
    return result


def remap_caret(
    spans: Sequence[Span],
    observed_offset: int,
    direction: CaretDirection | str = CaretDirection.PLAIN_TO_STRUCTURED,
) -> int:
    """Translate a caret offset against freshly computed spans."""
    try:
        resolved = CaretDirection(direction)
    except ValueError as exc:
        raise ValueError(f"Unknown caret direction '{direction}'.") from exc

    if resolved is CaretDirection.PLAIN_TO_STRUCTURED:
        mapped = plain_to_structured(spans, observed_offset)
    else:
        mapped = structured_to_plain(spans, observed_offset)
    logger.debug(
        "Remapped caret %s: %d -> %d over %d runs",
        resolved.value,
        observed_offset,
        mapped,
        len(spans),
    )
    return mapped
