"""Rewrite markdown body lines into MDX that the JSX-based renderer accepts.

Lines inside fenced code blocks are passed through untouched. Every other
line goes through the passes in ``fix_mdx_line`` in order: void tags are
self-closed and comments removed before braces and angle brackets are
escaped, since both contain characters the later passes would act on.
"""

from __future__ import annotations

import re

from .scanning import (
    CODE_SPAN,
    bare_bracket_close,
    is_code_fence,
    is_escaped,
    is_protected_bracket,
    is_self_contained_tag,
)

# Void elements with attributes, e.g. <img src="a.png">
_VOID_WITH_ATTRS_RE = re.compile(r"<(img|source)\s([^>]*[^/])>")
# Void elements without attributes, e.g. <br> or <hr >
_VOID_BARE_RE = re.compile(r"<(br|hr)\s*>")

_COMMENT_RE = re.compile(r"<!--.*?-->")
_STRAY_COMMENT_END_RE = re.compile(r"\s*-->\s*$")
_UNTERMINATED_COMMENT_RE = re.compile(r"<!--.*$")

_STYLE_ATTR_RE = re.compile(r'style="([^"]*)"')


def process_body(lines: list[str]) -> list[str]:
    """Rewrite body lines, leaving fenced code blocks as they are."""
    result: list[str] = []
    in_code_block = False
    for line in lines:
        if is_code_fence(line):
            in_code_block = not in_code_block
            result.append(line)
            continue
        if in_code_block:
            result.append(line)
            continue
        result.append(fix_mdx_line(line))
    return result


def fix_mdx_line(line: str) -> str:
    line = close_void_tags(line)
    line = remove_html_comments(line)
    line = convert_style_to_jsx(line)
    line = escape_curly_braces(line)
    line = escape_angle_brackets(line)
    return line


def close_void_tags(line: str) -> str:
    line = _VOID_WITH_ATTRS_RE.sub(r"<\1 \2 />", line)
    return _VOID_BARE_RE.sub(r"<\1 />", line)


def remove_html_comments(line: str) -> str:
    line = _COMMENT_RE.sub("", line)
    line = _STRAY_COMMENT_END_RE.sub("", line)
    return _UNTERMINATED_COMMENT_RE.sub("", line)


def convert_style_to_jsx(line: str) -> str:
    """``style="font-size: 12px"`` -> ``style={{fontSize: "12px"}}``"""
    def _replace(match: re.Match[str]) -> str:
        return "style={" + css_to_jsx_object(match.group(1)) + "}"

    return _STYLE_ATTR_RE.sub(_replace, line)


def css_to_jsx_object(css: str) -> str:
    entries = []
    for declaration in css.split(";"):
        declaration = declaration.strip()
        if not declaration or ":" not in declaration:
            continue
        prop, value = declaration.split(":", 1)
        entries.append(f'{camel_case(prop.strip())}: "{value.strip()}"')
    return "{" + ", ".join(entries) + "}"


def camel_case(css_property: str) -> str:
    head, *rest = css_property.split("-")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def escape_curly_braces(line: str) -> str:
    if is_self_contained_tag(line):
        return line

    out: list[str] = []
    in_code_span = False
    for i, char in enumerate(line):
        if char == CODE_SPAN:
            in_code_span = not in_code_span
        elif not in_code_span and char in "{}" and not is_escaped(line, i):
            out.append("\\")
        out.append(char)
    return "".join(out)


def escape_angle_brackets(line: str) -> str:
    """Quote generic-type-like ``<T>`` tokens as code, escape lone ``<``."""
    out: list[str] = []
    in_code_span = False
    i = 0
    while i < len(line):
        char = line[i]
        if char == CODE_SPAN:
            in_code_span = not in_code_span
        elif not in_code_span and char == "<" and not is_protected_bracket(line, i):
            close = bare_bracket_close(line, i)
            if close is not None:
                out.append(CODE_SPAN + line[i:i + close + 1] + CODE_SPAN)
                i += close + 1
                continue
            out.append("&lt;")
            i += 1
            continue
        out.append(char)
        i += 1
    return "".join(out)
