"""Static checks for MDX files.

Scans with the same code fence and inline code span tracking as the
rewriter, so converter output is expected to validate cleanly. The
frontmatter block is checked by loading it as YAML instead of line by line.
"""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Optional

import yaml

from .frontmatter import parse_frontmatter, split_lines
from .scanning import (
    has_bare_angle_brackets,
    has_unescaped_braces,
    is_code_fence,
    is_self_contained_tag,
)

MDX_SUFFIX = ".mdx"
SNIPPET_LENGTH = 60

_UNCLOSED_BR_RE = re.compile(r"<br\s*>")


@dataclass
class ValidationIssue:
    """One problem found in an MDX file. ``line`` is None for whole-file issues."""

    line: Optional[int]
    message: str

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"Line {self.line}: {self.message}"


@dataclass
class FileValidation:
    path: Path
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.issues


@dataclass
class ValidationSummary:
    total: int
    failed: int
    failed_paths: list[Path]


def validate_lines(lines: list[str]) -> list[ValidationIssue]:
    """Collect issues for one document given as a list of lines."""
    issues: list[ValidationIssue] = []
    frontmatter = parse_frontmatter(lines)
    if frontmatter.body_start:
        issues.extend(_check_frontmatter_yaml(lines[1:frontmatter.body_start - 1]))

    in_code_block = False
    for line_num, line in enumerate(lines[frontmatter.body_start:], start=frontmatter.body_start + 1):
        if is_code_fence(line):
            in_code_block = not in_code_block
            continue
        if in_code_block:
            continue
        issues.extend(check_line(line, line_num))

    if in_code_block:
        issues.append(ValidationIssue(None, "Unclosed code block (mismatched ``` fences)"))
    return issues


def check_line(line: str, line_num: int) -> list[ValidationIssue]:
    """Issues for a single line outside code blocks."""
    issues: list[ValidationIssue] = []
    trimmed = line.strip()
    snippet = trimmed[:SNIPPET_LENGTH]

    if not is_self_contained_tag(line) and has_unescaped_braces(line):
        issues.append(ValidationIssue(line_num, f"unescaped curly braces: {snippet}"))

    if _UNCLOSED_BR_RE.search(line):
        issues.append(ValidationIssue(line_num, "unclosed <br> tag (needs <br />)"))

    if "<!--" in trimmed or "-->" in trimmed:
        issues.append(ValidationIssue(line_num, "HTML comment outside code block"))

    if has_bare_angle_brackets(line):
        issues.append(ValidationIssue(line_num, f"possible bare angle brackets: {snippet}"))

    return issues


def _check_frontmatter_yaml(header_lines: list[str]) -> list[ValidationIssue]:
    try:
        data = yaml.safe_load("\n".join(header_lines))
    except yaml.YAMLError as e:
        mark = getattr(e, "problem_mark", None)
        # +2: one for the opening delimiter, one for the 0-based mark
        line_num = mark.line + 2 if mark is not None else 1
        problem = getattr(e, "problem", None) or str(e)
        return [ValidationIssue(line_num, f"invalid YAML frontmatter: {problem}")]
    if data is not None and not isinstance(data, dict):
        return [ValidationIssue(1, "frontmatter is not a key/value mapping")]
    return []


def validate_file(path: Path) -> FileValidation:
    lines = split_lines(path.read_text(encoding="utf-8"))
    return FileValidation(path=path, issues=validate_lines(lines))


def iter_mdx_files(root: Path) -> list[Path]:
    """All ``*.mdx`` files under root, sorted."""
    if not root.is_dir():
        raise FileNotFoundError(f"MDX directory not found: {root}")
    return sorted(p for p in root.rglob(f"*{MDX_SUFFIX}") if p.is_file())


def validate_directory(root: Path) -> list[FileValidation]:
    return [validate_file(path) for path in iter_mdx_files(root)]


def summarize_results(results: Iterable[FileValidation]) -> ValidationSummary:
    results = list(results)
    failed_paths = [result.path for result in results if not result.passed]
    return ValidationSummary(
        total=len(results),
        failed=len(failed_paths),
        failed_paths=failed_paths,
    )


def print_report(results: list[FileValidation]) -> ValidationSummary:
    """Print failing files with their issues and the overall counts."""
    for result in results:
        if result.passed:
            continue
        print(f"FAIL: {result.path}", file=sys.stderr)
        for issue in result.issues:
            print(f"  {issue}", file=sys.stderr)

    summary = summarize_results(results)
    print(f"\nValidated {summary.total} files, {summary.failed} with issues.")
    return summary


def run_validation(
    directory: Path,
    link_checker: Optional[Callable[[], int]] = None,
) -> int:
    """Validate every MDX file under directory and return the exit code.

    link_checker runs only when all files pass static checks; a non-zero
    return from it fails the run.
    """
    print(f"Validating MDX files in {directory} ...\n")
    results = validate_directory(directory)
    summary = print_report(results)

    if summary.failed:
        print("\nRun `mintlify broken-links` for full Mintlify-level validation.")
        return 1

    print("All files passed static checks.")
    if link_checker is not None and link_checker() != 0:
        return 1
    return 0
