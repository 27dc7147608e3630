from __future__ import annotations

import re
from typing import List

from .models import Token

TOKEN_PATTERN = re.compile(r"\S+", re.UNICODE)


def tokenize_line(line: str) -> List[Token]:
    """Split a line into whitespace-delimited tokens with character offsets."""
    tokens: List[Token] = []
    for match in TOKEN_PATTERN.finditer(line):
        tokens.append(
            Token(text=match.group(), start_char=match.start(), end_char=match.end())
        )
    return tokens
