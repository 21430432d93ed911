"""Markdown post -> Mintlify MDX document conversion."""

from __future__ import annotations

import re
from pathlib import Path

from .frontmatter import (
    FRONTMATTER_DELIMITER,
    escape_yaml_string,
    parse_frontmatter,
    split_lines,
)
from .rewriter import process_body
from .titles import extract_description, sidebar_title

DEFAULT_TITLE = "Untitled"

_PATH_DATE_RE = re.compile(r"/(\d{4})/(\d{2})/")


def extract_date_from_path(path: str | Path) -> str | None:
    """Publication date from a ``/YYYY/MM/`` path segment, as ``YYYY-MM-01``."""
    match = _PATH_DATE_RE.search(Path(path).as_posix())
    if match:
        return f"{match.group(1)}-{match.group(2)}-01"
    return None


def convert_text(text: str, date_from_path: str | None = None) -> str:
    """Convert markdown source text into an MDX document."""
    lines = split_lines(text)
    frontmatter = parse_frontmatter(lines)

    title = frontmatter.get("title", DEFAULT_TITLE)
    date = frontmatter.get("publishedAt") or date_from_path
    description = extract_description(lines, frontmatter.body_start)

    header = [
        FRONTMATTER_DELIMITER,
        f'title: "{escape_yaml_string(title)}"',
        f'sidebarTitle: "{escape_yaml_string(sidebar_title(title))}"',
    ]
    if description is not None:
        header.append(f'description: "{escape_yaml_string(description)}"')
    author = frontmatter.get("author")
    if author is not None:
        header.append(f'author: "{escape_yaml_string(author)}"')
    if date:
        header.append(f'date: "{escape_yaml_string(date)}"')
    header.append(FRONTMATTER_DELIMITER)

    body = process_body(lines[frontmatter.body_start:])
    return "".join(line + "\n" for line in header + body)


def convert_file(input_path: Path, date_from_path: str | None = None) -> str:
    return convert_text(input_path.read_text(encoding="utf-8"), date_from_path)
