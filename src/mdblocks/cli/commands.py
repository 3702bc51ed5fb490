"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdblocks.config import Settings, load_config
from mdblocks.core.models import Block, BulletList, Heading, Paragraph, Spans, Table
from mdblocks.core.parse import parse_file
from mdblocks.core.pipeline import run_render


PREVIEW_CHARS = 60


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _preview(spans: Spans) -> str:
    text = ''.join(s.text for s in spans)
    return text if len(text) <= PREVIEW_CHARS else text[:PREVIEW_CHARS - 3] + '...'


def _summary(block: Block) -> str:
    """One-line description of a block for the inspect command."""
    if isinstance(block, Heading):
        return f"heading (h{block.level}): {_preview(block.spans)}"
    if isinstance(block, Paragraph):
        return f"paragraph: {_preview(block.spans)}"
    if isinstance(block, BulletList):
        return f"list: {len(block.items)} item(s)"
    if isinstance(block, Table):
        return f"table: {len(block.header_cells)} column(s), {len(block.body_rows)} row(s)"
    raise TypeError(f"Unsupported block type: {type(block).__name__}")


def render_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to render")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="Output format: html, json or md")] = None,
    title: Annotated[Optional[bool], typer.Option("--title/--no-title", help="Render frontmatter title as h1")] = None,
    ):
    """Classify source files into blocks and write rendered output."""
    settings = _settings(overrides={"output_dir": out, "output_format": fmt, "emit_title": title})
    if not Path(path).exists():
        _fail(f"Path not found: {path}")
    output_dir = Path(settings.output_dir)

    try:
        results = run_render(path, output_dir, settings.output_format, settings.emit_title)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No source files found under {path}.")
        raise typer.Exit(1)
    for src, out_file in results:
        typer.echo(f"  {src} -> {out_file}")
    typer.echo(f"Rendered {len(results)} document(s) to {output_dir}/")


def inspect_cmd(
    path: Annotated[str, typer.Argument(help="Single source file to inspect")],
    ):
    """Print one summary line per block of a single file."""
    _settings()
    source = Path(path)
    if not source.is_file():
        _fail(f"Not a file: {path}")
    try:
        doc = parse_file(source)
    except (ValueError, OSError) as e:
        _fail(f"Could not parse {path}", e)
    for i, block in enumerate(doc.blocks):
        typer.echo(f"{i:>3}  {_summary(block)}")
    typer.echo(f"{len(doc.blocks)} block(s)")
