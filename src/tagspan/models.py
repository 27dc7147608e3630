from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

WORD_PATTERN = re.compile(r"\w+", re.UNICODE)


class ValidationError(ValueError):
    """Raised when a Span cannot be built from the given text."""


class SpanKind(str, Enum):
    """Kind of text a Span holds."""

    PLAIN_TEXT = "plain_text"
    HASHTAG = "hashtag"
    USERNAME = "username"

    @property
    def marker(self) -> str:
        """Leading character that introduces the kind in raw text."""
        return _MARKERS[self]

    @property
    def prefix_length(self) -> int:
        return len(self.marker)

    @property
    def is_tag(self) -> bool:
        return self is not SpanKind.PLAIN_TEXT


_MARKERS = {
    SpanKind.PLAIN_TEXT: "",
    SpanKind.HASHTAG: "#",
    SpanKind.USERNAME: "@",
}


@dataclass(frozen=True, slots=True)
class Span:
    """
    Immutable typed unit of line content.

    Tagged kinds accept their content with or without the leading marker; the
    marker is stripped so ``content`` only ever holds the word characters.
    """

    kind: SpanKind
    content: str

    def __post_init__(self) -> None:
        kind = SpanKind(self.kind)
        content = self.content
        if not content:
            raise ValidationError("Span content cannot be an empty string.")
        if kind.is_tag:
            if content.startswith(kind.marker):
                content = content[kind.prefix_length :]
            if WORD_PATTERN.fullmatch(content) is None:
                label = "Hashtag" if kind is SpanKind.HASHTAG else "Username"
                raise ValidationError(
                    f"{label} must be one or more word characters, got {self.content!r}."
                )
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "content", content)

    @property
    def full_text(self) -> str:
        """Content including the marker of tagged kinds."""
        return self.kind.marker + self.content

    @property
    def highlighted(self) -> bool:
        return self.kind.is_tag


@dataclass(slots=True)
class Token:
    """Represents a token and its inclusive-exclusive character offsets."""

    text: str
    start_char: int
    end_char: int


@dataclass(frozen=True, slots=True)
class Match:
    """A tag occurrence located in a raw line; ``end`` is inclusive."""

    start: int
    end: int
    kind: SpanKind


@dataclass(frozen=True, slots=True)
class Line:
    """Ordered spans of one line; their full texts rebuild the raw line."""

    spans: Tuple[Span, ...] = ()

    @property
    def text(self) -> str:
        return "".join(span.full_text for span in self.spans)

    def formatted(self) -> List[Tuple[str, bool]]:
        """Return ``(text, highlighted)`` pairs in display order."""
        return [(span.full_text, span.highlighted) for span in self.spans]


@dataclass(slots=True)
class Document:
    """Lines of the current text, replaced wholesale on each edit."""

    lines: List[Line] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(line.text for line in self.lines)
