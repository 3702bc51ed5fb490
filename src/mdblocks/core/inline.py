"""Inline span resolution: plain text and **strong** segments"""

import re

from mdblocks.core.models import Plain, Span, Strong


# Capturing group keeps the delimited runs in the split result.
STRONG_RE = re.compile(r'(\*\*.*?\*\*)')
DELIMITER = '**'


def resolve_spans(line: str) -> list[Span]:
    """Split a line into Plain and Strong spans, dropping empty pieces.

    Strong content is not re-scanned, and an unterminated ``**`` stays in
    the surrounding plain text.
    """
    spans: list[Span] = []
    for piece in STRONG_RE.split(line):
        if len(piece) >= 4 and piece.startswith(DELIMITER) and piece.endswith(DELIMITER):
            inner = piece[2:-2]
            if inner:
                spans.append(Strong(text=inner))
        elif piece:
            spans.append(Plain(text=piece))
    return spans
