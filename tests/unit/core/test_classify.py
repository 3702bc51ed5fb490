"""Unit tests for core/classify.py"""

import pytest

from mdblocks.core.classify import classify, heading_level, parse_text, split_row
from mdblocks.core.models import BulletList, Heading, Paragraph, Plain, Strong, Table


def _texts(spans) -> str:
    return ''.join(s.text for s in spans)


# --- headings ---

@pytest.mark.parametrize("line,level", [
    ("# Title", 2),
    ("## Title", 3),
    ("### Title", 4),
    ("#### Title", 4),
    ("###### Title", 4),
])
def test_heading_level_shift(line, level):
    """Raw heading levels shift down one and cap at 4."""
    blocks = classify([line])
    assert blocks == [Heading(level=level, spans=(Plain(text="Title"),))]


@pytest.mark.parametrize("raw,expected", [(0, 2), (1, 2), (2, 3), (3, 4), (9, 4)])
def test_heading_level_mapping(raw, expected):
    """heading_level treats anything below 1 as 1."""
    assert heading_level(raw) == expected


def test_heading_without_space():
    """A '#' run with no following whitespace is still a heading."""
    blocks = classify(["##Tight"])
    assert blocks == [Heading(level=3, spans=(Plain(text="Tight"),))]


def test_heading_inline_strong():
    """Heading text is resolved into spans."""
    (heading,) = classify(["# The **key** point"])
    assert heading.spans == (Plain(text="The "), Strong(text="key"), Plain(text=" point"))


def test_indented_heading_is_paragraph():
    """Heading markers must start at column 0."""
    (block,) = classify(["  # not a heading"])
    assert isinstance(block, Paragraph)
    assert _texts(block.spans) == "  # not a heading"


def test_heading_tier():
    """Heading tier is the 1..3 style index."""
    assert [b.tier for b in classify(["# a", "## b", "### c"])] == [1, 2, 3]


# --- paragraphs and blank lines ---

def test_blank_lines_produce_no_nodes():
    """Two paragraphs separated by a blank line yield exactly two paragraphs."""
    blocks = parse_text("para one\n\npara two")
    assert blocks == [
        Paragraph(spans=(Plain(text="para one"),)),
        Paragraph(spans=(Plain(text="para two"),)),
    ]


def test_adjacent_lines_are_separate_paragraphs():
    """Paragraphs are never merged across lines."""
    blocks = classify(["first line", "second line"])
    assert len(blocks) == 2
    assert all(isinstance(b, Paragraph) for b in blocks)


def test_trailing_whitespace_removed():
    """Trailing whitespace (including CR) is stripped before classification."""
    blocks = parse_text("hello   \r\nworld\t")
    assert [_texts(b.spans) for b in blocks] == ["hello", "world"]


@pytest.mark.parametrize("text", ["", "\n", "   \n\t\n"])
def test_empty_input(text):
    """Empty or whitespace-only input yields no blocks."""
    assert parse_text(text) == []


# --- lists ---

def test_list_run_then_paragraph():
    """Contiguous bullet lines form one list; the next plain line is a paragraph."""
    blocks = classify(["- one", "- two", "not a list"])
    assert blocks == [
        BulletList(items=((Plain(text="one"),), (Plain(text="two"),))),
        Paragraph(spans=(Plain(text="not a list"),)),
    ]


def test_list_mixed_bullets_one_run():
    """'-' and '*' bullets continue the same run."""
    (block,) = classify(["- a", "* b", "  - c"])
    assert isinstance(block, BulletList)
    assert [_texts(i) for i in block.items] == ["a", "b", "c"]


def test_list_strips_exactly_two_chars():
    """Only the two-character bullet prefix is removed from each item."""
    (block,) = classify(["-  spaced"])
    assert block.items == ((Plain(text=" spaced"),),)


def test_list_item_spans():
    """List items pass through the inline resolver independently."""
    (block,) = classify(["- **Bold** start", "- plain"])
    assert block.items[0] == (Strong(text="Bold"), Plain(text=" start"))
    assert block.items[1] == (Plain(text="plain"),)


def test_blank_line_splits_list():
    """A blank line between bullets closes the run; two lists result."""
    blocks = classify(["- a", "", "- b"])
    assert len(blocks) == 2
    assert all(isinstance(b, BulletList) for b in blocks)


def test_bare_dash_is_paragraph():
    """A dash with no following space is not a bullet."""
    (block,) = classify(["-"])
    assert isinstance(block, Paragraph)


# --- tables ---

TABLE_LINES = ["| A | B |", "|---|---|", "| 1 | 2 |", "| 3 | 4 |"]


def test_table_scenario():
    """Header row, discarded separator, and two body rows."""
    (table,) = classify(TABLE_LINES)
    assert isinstance(table, Table)
    assert table.header_cells == ((Plain(text="A"),), (Plain(text="B"),))
    assert table.body_rows == (
        ((Plain(text="1"),), (Plain(text="2"),)),
        ((Plain(text="3"),), (Plain(text="4"),)),
    )


def test_table_ragged_rows():
    """Body rows keep their own cell counts."""
    (table,) = classify(["| A | B |", "|---|---|", "| 1 |", "| 1 | 2 | 3 |"])
    assert [len(r) for r in table.body_rows] == [1, 3]


def test_table_single_line_header_only():
    """A one-line table has a header and an empty body."""
    (table,) = classify(["| A | B |"])
    assert len(table.header_cells) == 2
    assert table.body_rows == ()


def test_table_two_lines_second_discarded():
    """The line after the header is always consumed as the separator."""
    (table,) = classify(["| A | B |", "| 1 | 2 |"])
    assert [_texts(c) for c in table.header_cells] == ["A", "B"]
    assert table.body_rows == ()


def test_table_indented_lines():
    """Leading whitespace before the pipe still marks a table line."""
    (table,) = classify(["  | A |", "  |---|", "  | x |"])
    assert table.body_rows == (((Plain(text="x"),),),)


def test_table_cells_with_strong():
    """Cell text passes through the inline resolver."""
    (table,) = classify(["| **Name** | Value |", "|---|---|", "| a | **1** |"])
    assert table.header_cells[0] == (Strong(text="Name"),)
    assert table.body_rows[0][1] == (Strong(text="1"),)


def test_table_then_list_never_merge():
    """A list line right after a table line closes the table run first."""
    blocks = classify(["| A | B |", "- item"])
    assert isinstance(blocks[0], Table)
    assert blocks[0].body_rows == ()
    assert isinstance(blocks[1], BulletList)


def test_list_then_table_never_merge():
    blocks = classify(["- item", "| A |"])
    assert [type(b) for b in blocks] == [BulletList, Table]


@pytest.mark.parametrize("row,cells", [
    ("| a | b |", ["a", "b"]),
    ("a | b", ["a", "b"]),
    ("|  | b |", ["b"]),
    ("|", []),
    ("|---|:---:|", ["---", ":---:"]),
])
def test_split_row(row, cells):
    """split_row trims cells and drops empty ones."""
    assert split_row(row) == cells


# --- ordering and bounds ---

MIXED = """\
# Report

Intro with **bold**.

| Col | Val |
|-----|-----|
| a   | 1   |

- first
- second

## Summary
closing line
"""


def test_mixed_document_order():
    """Blocks appear in source order with one node per run."""
    kinds = [b.kind for b in parse_text(MIXED)]
    assert kinds == ["heading", "paragraph", "table", "list", "heading", "paragraph"]


@pytest.mark.parametrize("text", [
    MIXED,
    "| a\n| b\n| c\n- x\n- y\n# h\n\n\ntext",
    "***\n**\n|\n-\n#",
])
def test_block_count_bounded_by_nonblank_lines(text):
    """Output never has more nodes than non-blank input lines."""
    nonblank = [l for l in text.split('\n') if l.strip()]
    assert len(parse_text(text)) <= len(nonblank)


def test_calls_are_independent():
    """No buffered state leaks between calls."""
    classify(["| A |", "|---|"])
    assert classify(["- x"]) == [BulletList(items=((Plain(text="x"),),))]
