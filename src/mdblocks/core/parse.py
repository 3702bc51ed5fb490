"""File discovery, frontmatter extraction, and block classification of source files"""

import logging
import re
from pathlib import Path
from typing import Any

import yaml

from mdblocks.core.classify import parse_text
from mdblocks.core.models import BlockDoc
from mdblocks.core.utils.slug import slugify


logger = logging.getLogger(__name__)

FRONTMATTER_RE = re.compile(r'^---\s*\n(.*?)\n---\s*\n', re.DOTALL)
TEXT_EXTENSIONS = {'.md', '.markdown', '.txt'}


def _strip_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter_dict, body) with YAML header removed."""
    m = FRONTMATTER_RE.match(text)
    if m:
        try:
            fm = yaml.safe_load(m.group(1)) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML frontmatter: {e}") from e
        if not isinstance(fm, dict):
            raise ValueError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
        return fm, text[m.end():]
    return {}, text


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.markdown/.txt files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in TEXT_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix in TEXT_EXTENSIONS)


def parse_file(path: Path) -> BlockDoc:
    """Parse a single source file into a BlockDoc."""
    raw = path.read_text(encoding='utf-8')
    frontmatter, body = _strip_frontmatter(raw)
    blocks = parse_text(body)
    slug = slugify(str(frontmatter.get('slug') or path.stem))
    logger.info("Parsed %s: %d block(s)", path, len(blocks))
    return BlockDoc(
        slug=slug,
        path=str(path),
        markdown=body,
        frontmatter=frontmatter,
        blocks=blocks,
    )
