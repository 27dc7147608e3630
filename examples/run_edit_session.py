"""
Tiny helper script that replays a few keystrokes through an EditSession
and prints where the host should put the caret after each redraw.
"""

from __future__ import annotations

from tagspan.formatter import TextFormatter
from tagspan.session import EditSession


def main() -> None:
    def apply(formatted, line_index, caret_offset):
        pieces = " | ".join(
            f"[{text}]" if highlighted else text
            for text, highlighted in formatted[line_index]
        )
        print("-" * 40)
        print(pieces)
        print(f"Structured caret: {caret_offset}")

    session = EditSession(TextFormatter(), apply)
    typed = ""
    for char in "@you #hello there":
        typed += char
        session.on_text_changed([typed], 0, len(typed))


if __name__ == "__main__":
    main()
