from __future__ import annotations

import logging
import re
from typing import List

from .models import Match, Span, SpanKind, Token
from .tokenization import tokenize_line

logger = logging.getLogger(__name__)

# A hashtag closes its token and may only be preceded by non-word characters.
HASHTAG_PATTERN = re.compile(r"(?P<lead>\W*)#\w+", re.UNICODE)
USERNAME_PATTERN = re.compile(r"@\w+", re.UNICODE)


class InternalConsistencyError(RuntimeError):
    """Raised when located matches overlap one another."""


def classify_token(token: Token) -> Match | None:
    """Return the tag match carried by a token, if any."""
    if USERNAME_PATTERN.fullmatch(token.text):
        return Match(
            start=token.start_char, end=token.end_char - 1, kind=SpanKind.USERNAME
        )
    hashtag = HASHTAG_PATTERN.fullmatch(token.text)
    if hashtag:
        return Match(
            start=token.start_char + len(hashtag.group("lead")),
            end=token.end_char - 1,
            kind=SpanKind.HASHTAG,
        )
    return None


def find_matches(line: str) -> List[Match]:
    """Locate every hashtag and username in a line, ordered by start offset."""
    matches: List[Match] = []
    for token in tokenize_line(line):
        match = classify_token(token)
        if match is not None:
            matches.append(match)
    matches.sort(key=lambda m: m.start)
    ensure_disjoint(matches)
    return matches


def ensure_disjoint(matches: List[Match]) -> None:
    """Fail when consecutive sorted matches share a character."""
    for previous, current in zip(matches, matches[1:]):
        if previous.end >= current.start:
            raise InternalConsistencyError(
                f"Matches overlap: {previous} and {current}."
            )


def segment(line: str) -> List[Span]:
    """Split a raw line into plain-text, hashtag and username spans."""
    spans: List[Span] = []
    cursor = 0
    for match in find_matches(line):
        if match.start > cursor:
            spans.append(Span(SpanKind.PLAIN_TEXT, line[cursor : match.start]))
        spans.append(Span(match.kind, line[match.start : match.end + 1]))
        cursor = match.end + 1
    if cursor < len(line):
        spans.append(Span(SpanKind.PLAIN_TEXT, line[cursor:]))

    logger.debug(
        "Segmented line of %d chars into %d spans (%d tagged)",
        len(line),
        len(spans),
        sum(1 for span in spans if span.highlighted),
    )
    return spans
