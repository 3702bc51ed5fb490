"""Export: render block sequences to HTML, restricted markdown, or JSON and write output files"""

import logging
from html import escape
from pathlib import Path

from mdblocks.core.models import Block, BlockDoc, BulletList, Heading, Paragraph, Spans, Strong, Table


logger = logging.getLogger(__name__)

FORMATS = ('html', 'json', 'md')
EMPTY_STRONG = '****'


def _spans_html(spans: Spans) -> str:
    return ''.join(
        f"<strong>{escape(s.text)}</strong>" if isinstance(s, Strong) else escape(s.text)
        for s in spans
    )


def _spans_md(spans: Spans) -> str:
    """Serialize spans as markdown; an empty sequence becomes an empty strong pair."""
    return ''.join(f"**{s.text}**" if isinstance(s, Strong) else s.text for s in spans) or EMPTY_STRONG


def _md_row(cells: tuple[Spans, ...]) -> str:
    if not cells:
        return '|'
    return '| ' + ' | '.join(_spans_md(c) for c in cells) + ' |'


def block_html(block: Block) -> str:
    """Render one block node as an HTML fragment."""
    if isinstance(block, Heading):
        tag = f"h{block.level}"
        return f'<{tag} class="tier-{block.tier}">{_spans_html(block.spans)}</{tag}>'
    if isinstance(block, Paragraph):
        return f"<p>{_spans_html(block.spans)}</p>"
    if isinstance(block, BulletList):
        items = ''.join(f"<li>{_spans_html(item)}</li>" for item in block.items)
        return f"<ul>{items}</ul>"
    if isinstance(block, Table):
        head = ''.join(f"<th>{_spans_html(c)}</th>" for c in block.header_cells)
        body = ''.join(
            '<tr>' + ''.join(f"<td>{_spans_html(c)}</td>" for c in row) + '</tr>'
            for row in block.body_rows
        )
        return f"<table><thead><tr>{head}</tr></thead><tbody>{body}</tbody></table>"
    raise TypeError(f"Unsupported block type: {type(block).__name__}")


def block_lines(block: Block) -> list[str]:
    """Serialize one block node back into restricted-markdown source lines."""
    if isinstance(block, Heading):
        return [f"{'#' * (block.level - 1)} {_spans_md(block.spans)}"]
    if isinstance(block, Paragraph):
        return [_spans_md(block.spans)]
    if isinstance(block, BulletList):
        return [f"- {_spans_md(item)}" for item in block.items]
    if isinstance(block, Table):
        separator = ('| ' + ' | '.join('---' for _ in block.header_cells) + ' |') if block.header_cells else '|---|'
        return [_md_row(block.header_cells), separator, *(_md_row(r) for r in block.body_rows)]
    raise TypeError(f"Unsupported block type: {type(block).__name__}")


def render_html(blocks: list[Block], title: str | None = None) -> str:
    """Render blocks as HTML; an optional title fills the h1 slot above the content."""
    parts = [f"<h1>{escape(title)}</h1>"] if title else []
    parts.extend(block_html(b) for b in blocks)
    body = "\n".join(parts)
    return f'<div class="markdown-view">\n{body}\n</div>\n'


def render_markdown(blocks: list[Block]) -> str:
    """Re-serialize blocks as restricted markdown, one blank line between blocks."""
    return "\n\n".join("\n".join(block_lines(b)) for b in blocks) + "\n"


def build_json(doc: BlockDoc) -> str:
    return doc.model_dump_json(indent=2)


def build_output(doc: BlockDoc, fmt: str = 'html', emit_title: bool = True) -> str:
    """Return the rendered content of doc in the given output format."""
    if fmt == 'html':
        return render_html(doc.blocks, doc.title if emit_title else None)
    if fmt == 'md':
        return render_markdown(doc.blocks)
    if fmt == 'json':
        return build_json(doc)
    raise ValueError(f"Unknown output format: {fmt!r} (expected one of {', '.join(FORMATS)})")


def output_path(doc: BlockDoc, output_dir: Path, fmt: str = 'html', subdir: Path = Path()) -> Path:
    """Return output_dir / subdir / doc.slug.{fmt}."""
    return output_dir / subdir / f"{doc.slug}.{fmt}"


def write_doc(
    doc: BlockDoc,
    output_dir: Path,
    fmt: str = 'html',
    emit_title: bool = True,
    subdir: Path = Path(),
    ) -> Path:
    """Write a single rendered document and return its path.

    Output path mirrors the source layout under the input root:
      output_dir / subdir / doc.slug.{fmt}
    """
    content = build_output(doc, fmt, emit_title)
    out_path = output_path(doc, output_dir, fmt, subdir)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(content, encoding='utf-8')
    logger.info("Wrote %s", out_path)
    return out_path
