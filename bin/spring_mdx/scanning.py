"""Character scanning helpers shared by the rewriter and the validator.

Both sides must agree on what counts as an inline code span, a recognized
HTML tag and a bare angle bracket, otherwise freshly converted output would
not pass validation.
"""

from __future__ import annotations

import re

# HTML element names that are left alone when they follow a '<'
KNOWN_HTML_TAGS = frozenset({
    "img", "iframe", "div", "span", "br", "hr", "p", "a", "b", "i", "em", "strong",
    "table", "thead", "tbody", "tr", "th", "td", "ul", "ol", "li", "h1", "h2", "h3",
    "h4", "h5", "h6", "pre", "code", "blockquote", "video", "source", "details", "summary",
    "sup", "sub", "section", "article", "nav", "header", "footer", "figure", "figcaption",
})

CODE_FENCE = "```"
CODE_SPAN = "`"

# A closing '>' further away than this is not treated as part of the same token
BARE_BRACKET_WINDOW = 60

_TAG_START_RE = re.compile(r"</?([a-zA-Z][a-zA-Z0-9]*)[\s>!/]")
_AUTOLINK_PREFIXES = ("<http", "<mailto")
# Characters that open a markdown link target or an attribute value
_LINK_OPENERS = ("(", '"')


def is_code_fence(line: str) -> bool:
    return line.strip().startswith(CODE_FENCE)


def is_self_contained_tag(line: str) -> bool:
    """True when the whole line is one HTML tag, e.g. ``<img ... />``.

    The leading '<' must be one the angle bracket pass keeps; a line opening
    with ``<Note>`` or ``<T>`` gets that token quoted as code, so its braces
    are prose.
    """
    trimmed = line.strip()
    if not (trimmed.startswith("<") and trimmed.endswith(">")):
        return False
    return is_protected_bracket(trimmed, 0)


def is_escaped(line: str, index: int) -> bool:
    return index > 0 and line[index - 1] == "\\"


def is_known_tag_start(rest: str) -> bool:
    match = _TAG_START_RE.match(rest)
    return bool(match) and match.group(1).lower() in KNOWN_HTML_TAGS


def is_protected_bracket(line: str, index: int) -> bool:
    """Whether the '<' at index belongs to markup that must be kept as is."""
    rest = line[index:]
    if is_known_tag_start(rest):
        return True
    if rest.startswith(_AUTOLINK_PREFIXES):
        return True
    return index > 0 and line[index - 1] in _LINK_OPENERS


def bare_bracket_close(line: str, index: int) -> int | None:
    """Offset of the '>' closing the bare '<' at index, if it is close enough."""
    close = line.find(">", index)
    if close == -1:
        return None
    offset = close - index
    if 0 < offset < BARE_BRACKET_WINDOW:
        return offset
    return None


def has_unescaped_braces(line: str) -> bool:
    in_code_span = False
    for i, char in enumerate(line):
        if char == CODE_SPAN:
            in_code_span = not in_code_span
            continue
        if not in_code_span and char in "{}" and not is_escaped(line, i):
            return True
    return False


def has_bare_angle_brackets(line: str) -> bool:
    in_code_span = False
    for i, char in enumerate(line):
        if char == CODE_SPAN:
            in_code_span = not in_code_span
            continue
        if in_code_span or char != "<":
            continue
        if is_protected_bracket(line, i):
            continue
        if bare_bracket_close(line, i) is not None:
            return True
    return False
