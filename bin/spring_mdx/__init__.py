"""Spring.io blog markdown -> Mintlify MDX conversion package."""

from .converter import convert_file, convert_text, extract_date_from_path
from .frontmatter import Frontmatter, parse_frontmatter
from .rewriter import fix_mdx_line, process_body
from .titles import extract_description, sidebar_title
from .validator import FileValidation, ValidationIssue, validate_file, validate_lines

__all__ = [
    "FileValidation",
    "Frontmatter",
    "ValidationIssue",
    "convert_file",
    "convert_text",
    "extract_date_from_path",
    "extract_description",
    "fix_mdx_line",
    "parse_frontmatter",
    "process_body",
    "sidebar_title",
    "validate_file",
    "validate_lines",
]
