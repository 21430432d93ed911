"""Convert a tree of markdown posts using a topic mapping."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .converter import convert_file, extract_date_from_path

MARKDOWN_SUFFIX = ".md"


@dataclass
class BatchResult:
    converted: list[tuple[str, Path]] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


def iter_markdown_files(input_dir: Path) -> list[Path]:
    if not input_dir.is_dir():
        raise FileNotFoundError(f"Input directory not found: {input_dir}")
    return sorted(p for p in input_dir.rglob(f"*{MARKDOWN_SUFFIX}") if p.is_file())


def output_path_for(output_dir: Path, target: str) -> Path:
    return output_dir / f"{target}.mdx"


def convert_tree(
    input_dir: Path,
    mapping: dict[str, str],
    output_dir: Path,
    logger: Optional[logging.Logger] = None,
) -> BatchResult:
    """Convert every mapped ``*.md`` file under input_dir into output_dir.

    Files whose slug (filename stem) has no mapping entry are skipped with a
    warning.
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    result = BatchResult()
    for md_file in iter_markdown_files(input_dir):
        slug = md_file.stem
        target = mapping.get(slug)
        if target is None:
            logger.warning(f"No mapping for: {slug}")
            result.skipped.append(slug)
            continue

        output_file = output_path_for(output_dir, target)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        content = convert_file(md_file, extract_date_from_path(md_file))
        output_file.write_text(content, encoding="utf-8")
        result.converted.append((slug, output_file))
        print(f"  {slug} -> {target}.mdx")

    print(f"\nConverted: {len(result.converted)} files, Warnings: {len(result.skipped)}")
    return result
