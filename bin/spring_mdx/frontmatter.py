"""Frontmatter parsing for markdown source documents."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

FRONTMATTER_DELIMITER = "---"

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


@dataclass
class Frontmatter:
    """Key/value fields of a document header and where its body begins."""

    fields: dict[str, str] = field(default_factory=dict)
    body_start: int = 0

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.fields.get(key, default)


def split_lines(text: str) -> list[str]:
    """Split text into lines; a trailing line break does not add an empty line."""
    lines = _LINE_BREAK_RE.split(text)
    if lines and lines[-1] == "":
        lines = lines[:-1]
    return lines


def parse_frontmatter(lines: list[str]) -> Frontmatter:
    """Parse a ``---`` delimited header block.

    Lines between the delimiters are read as ``key: value`` pairs split on the
    first colon. Lines without a colon are ignored. When the closing delimiter
    is missing the whole document is body and no fields are returned.
    """
    if not lines or lines[0] != FRONTMATTER_DELIMITER:
        return Frontmatter()

    end = _find_closing_delimiter(lines)
    if end is None:
        return Frontmatter()

    fields: dict[str, str] = {}
    for line in lines[1:end]:
        colon = line.find(":")
        if colon <= 0:
            continue
        key = line[:colon].strip()
        fields[key] = _strip_quotes(line[colon + 1:].strip())
    return Frontmatter(fields=fields, body_start=end + 1)


def _find_closing_delimiter(lines: list[str]) -> int | None:
    for i in range(1, len(lines)):
        if lines[i] == FRONTMATTER_DELIMITER:
            return i
    return None


def _strip_quotes(value: str) -> str:
    for quote in ('"', "'"):
        if len(value) >= 2 and value.startswith(quote) and value.endswith(quote):
            value = value[1:-1]
    return value


def escape_yaml_string(value: str) -> str:
    """Escape a value for use inside a double-quoted YAML scalar."""
    return value.replace("\\", "\\\\").replace('"', '\\"')
