"""Sidebar title and description derivation."""

from __future__ import annotations

import re

ELLIPSIS = "..."

SIDEBAR_TITLE_MAX = 35
SIDEBAR_TITLE_MIN_CUT = 15
DESCRIPTION_MAX = 160
DESCRIPTION_MIN_CUT = 80
DESCRIPTION_MIN_LENGTH = 20

# (pattern, replacement) applied in order to the start of the title
_TITLE_PREFIXES = (
    (re.compile(r"^Spring AI\s*:?\s*"), ""),
    (re.compile(r"^Spring Tips:\s*"), ""),
    (re.compile(r"^AI Meets Spring Petclinic:\s*"), "Petclinic: "),
)

# Lines starting with these never make a description
_NON_PROSE_PREFIXES = ("#", "<", "!", "```")


def truncate_at_word(text: str, max_length: int, min_cut: int) -> str:
    """Shorten text to max_length, preferring to cut at a space."""
    if len(text) <= max_length:
        return text
    cut = text.rfind(" ", 0, max_length + 1)
    if cut >= min_cut:
        return text[:cut] + ELLIPSIS
    return text[:max_length] + ELLIPSIS


def sidebar_title(title: str) -> str:
    """Short navigation label for a post title."""
    short = title
    for pattern, replacement in _TITLE_PREFIXES:
        short = pattern.sub(replacement, short, count=1)
    return truncate_at_word(short.strip(), SIDEBAR_TITLE_MAX, SIDEBAR_TITLE_MIN_CUT)


def extract_description(lines: list[str], body_start: int) -> str | None:
    """First prose line of the body, or None when the body has none."""
    for raw in lines[body_start:]:
        line = raw.strip()
        if not line or line.startswith(_NON_PROSE_PREFIXES):
            continue
        if len(line) > DESCRIPTION_MIN_LENGTH:
            return truncate_at_word(line, DESCRIPTION_MAX, DESCRIPTION_MIN_CUT)
    return None
