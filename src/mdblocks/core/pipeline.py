"""Pipeline orchestration: discover source files, classify, and write rendered output"""

import logging
from pathlib import Path

from mdblocks.core.export import output_path, write_doc
from mdblocks.core.parse import discover_files, parse_file


logger = logging.getLogger(__name__)


def _subdir(source: Path, root: Path) -> Path:
    """Directory of source relative to the input root (empty for a single-file input)."""
    if root.is_file():
        return Path()
    return source.parent.relative_to(root)


def run_render(
    path: str,
    output_dir: Path,
    fmt: str = 'html',
    emit_title: bool = True,
    ) -> list[tuple[Path, Path]]:
    """Parse every source file under path and write rendered output. Returns (source, output) pairs.

    Refuses to overwrite a source file or an output already written in this run.
    """
    root = Path(path)
    results = []
    written: dict[Path, Path] = {}
    for p in discover_files(root):
        try:
            doc = parse_file(p)
            subdir = _subdir(p, root)
            target = output_path(doc, output_dir, fmt, subdir).resolve()
            if target == p.resolve():
                raise ValueError(f"output would overwrite the source file {target}")
            if target in written:
                raise ValueError(f"output collides with {written[target]} ({target})")
            written[target] = p
            out_file = write_doc(doc, output_dir, fmt, emit_title, subdir)
            results.append((p, out_file))
        except Exception as e:
            raise RuntimeError(f"Failed to render {p}: {e}") from e
    logger.info("Rendered %d document(s) to %s", len(results), output_dir)
    return results
