"""Single-pass line classifier: groups table and list runs, emits headings and paragraphs"""

import logging
import re

from mdblocks.core.inline import resolve_spans
from mdblocks.core.models import Block, BulletList, Heading, Paragraph, Table


logger = logging.getLogger(__name__)

HEADING_RE = re.compile(r'^(#+)\s*')
BULLETS = ('- ', '* ')


def _is_table_line(line: str) -> bool:
    return line.strip().startswith('|')


def _is_list_line(line: str) -> bool:
    return line.strip().startswith(BULLETS)


def heading_level(raw_level: int) -> int:
    """Map a raw '#' count to the rendered level: 1 -> 2, 2 -> 3, 3+ -> 4."""
    return min(max(raw_level, 1) + 1, 4)


def split_row(row: str) -> list[str]:
    """Split a pipe-delimited row into trimmed, non-empty cell strings."""
    return [c.strip() for c in row.split('|') if c.strip()]


def _flush_table(lines: list[str]) -> Table:
    """Line 0 is the header; line 1 is taken as the separator and discarded unchecked."""
    header = [tuple(resolve_spans(c)) for c in split_row(lines[0])]
    body = [
        tuple(tuple(resolve_spans(c)) for c in split_row(row))
        for row in lines[2:]
    ]
    logger.debug("Flushed table run of %d line(s): %d body row(s)", len(lines), len(body))
    return Table(header_cells=tuple(header), body_rows=tuple(body))


def _flush_list(items: list[str]) -> BulletList:
    logger.debug("Flushed list run of %d item(s)", len(items))
    return BulletList(items=tuple(tuple(resolve_spans(item)) for item in items))


def _heading(line: str) -> Heading:
    m = HEADING_RE.match(line)
    raw_level = len(m.group(1)) if m else 1
    text = line[m.end():] if m else line
    return Heading(level=heading_level(raw_level), spans=tuple(resolve_spans(text)))


def classify(lines: list[str]) -> list[Block]:
    """Classify lines into an ordered block sequence.

    Table and list lines accumulate in local buffers until the next line
    no longer continues the run (or input ends), then flush into a single
    node. Headings and paragraphs are emitted one per line; blank lines
    produce nothing. Never raises: malformed runs degrade structurally.
    """
    blocks: list[Block] = []
    table_lines: list[str] = []
    list_items: list[str] = []
    last = len(lines) - 1

    for i, raw in enumerate(lines):
        line = raw.rstrip()
        following = lines[i + 1] if i < last else None

        if _is_table_line(line):
            table_lines.append(line)
            if following is None or not _is_table_line(following):
                blocks.append(_flush_table(table_lines))
                table_lines = []
            continue

        if _is_list_line(line):
            list_items.append(line.strip()[2:])
            if following is None or not _is_list_line(following):
                blocks.append(_flush_list(list_items))
                list_items = []
            continue

        if line.startswith('#'):
            blocks.append(_heading(line))
            continue

        if not line.strip():
            continue

        blocks.append(Paragraph(spans=tuple(resolve_spans(line))))

    return blocks


def parse_text(text: str) -> list[Block]:
    """Classify a complete text value using '\\n' as the line separator."""
    return classify(text.split('\n'))
