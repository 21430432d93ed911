"""Topic mapping file (Java properties format): source slug -> blog path."""

from __future__ import annotations

from pathlib import Path

_COMMENT_MARKERS = ("#", "!")
_KEY_TERMINATORS = "=: \t\f"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def load_mapping(path: Path) -> dict[str, str]:
    """Read a properties file into a dict; later keys override earlier ones."""
    return parse_properties(path.read_text(encoding="utf-8"))


def parse_properties(text: str) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for logical_line in _logical_lines(text):
        key, value = _split_entry(logical_line)
        mapping[key] = value
    return mapping


def _logical_lines(text: str):
    """Yield entries with comments removed and continuation lines joined."""
    pending = None
    for raw in text.splitlines():
        line = raw.lstrip(" \t\f")
        if pending is None:
            if not line or line.startswith(_COMMENT_MARKERS):
                continue
            pending = ""
        if _ends_with_continuation(line):
            pending += line[:-1]
            continue
        yield pending + line
        pending = None
    if pending:
        yield pending


def _ends_with_continuation(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_entry(line: str) -> tuple[str, str]:
    i = 0
    while i < len(line) and line[i] not in _KEY_TERMINATORS:
        i += 2 if line[i] == "\\" else 1
    key = line[:i]

    rest = line[i:].lstrip(" \t\f")
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(" \t\f")
    return _unescape(key), _unescape(rest)


def _unescape(value: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(value):
        char = value[i]
        if char != "\\" or i + 1 >= len(value):
            out.append(char)
            i += 1
            continue
        nxt = value[i + 1]
        if nxt == "u" and i + 6 <= len(value):
            out.append(chr(int(value[i + 2:i + 6], 16)))
            i += 6
            continue
        out.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return "".join(out)


def append_mapping(path: Path, source_slug: str, target: str) -> None:
    """Add ``source_slug = target`` to the end of the mapping file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "a", encoding="utf-8") as f:
        f.write("\n")
        f.write(f"{source_slug} = {target}\n")
