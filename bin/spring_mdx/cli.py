"""
Spring.io blog markdown -> Mintlify MDX converter and validator.

The first argument selects the mode:
  spring-to-mdx [convert] input.md [-o output.mdx]
  spring-to-mdx --input-dir DIR --mapping FILE --output-dir DIR [--skip-validation]
  spring-to-mdx --validate [DIR]

--output-dir should point to the blog/ directory at the docs repo root.
"""

from __future__ import annotations

import argparse
import logging
import sys
from functools import partial
from pathlib import Path
from typing import Optional

from .batch import convert_tree
from .config import Config
from .converter import convert_file
from .link_check import run_link_check
from .mapping import load_mapping
from .validator import run_validation

USAGE = """\
Usage:
  spring-to-mdx [convert] input.md [-o output.mdx]
  spring-to-mdx --input-dir DIR --mapping FILE --output-dir DIR [--skip-validation]
  spring-to-mdx --validate [DIR]"""

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class UsageErrorParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def add_log_level_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS,
                        help="Set the logging level (default: %(default)s)")


def _build_single_parser() -> argparse.ArgumentParser:
    parser = UsageErrorParser(prog="spring-to-mdx", description="Convert one markdown post to MDX")
    parser.add_argument("input", type=Path, help="Source markdown file")
    parser.add_argument("-o", "--output", type=Path,
                        help="Output MDX file (default: write to stdout)")
    add_log_level_argument(parser)
    return parser


def _build_batch_parser() -> argparse.ArgumentParser:
    parser = UsageErrorParser(prog="spring-to-mdx",
                              description="Convert a directory of markdown posts using a topic mapping")
    parser.add_argument("--input-dir", type=Path, help="Directory searched recursively for *.md files")
    parser.add_argument("--mapping", type=Path, help="topic-mapping.properties file")
    parser.add_argument("--output-dir", type=Path, help="Blog root receiving the MDX files")
    parser.add_argument("--skip-validation", action="store_true",
                        help="Do not validate the output directory afterwards")
    add_log_level_argument(parser)
    return parser


def _build_validate_parser(config: Config) -> argparse.ArgumentParser:
    parser = UsageErrorParser(prog="spring-to-mdx --validate", description="Validate existing MDX files")
    parser.add_argument("directory", nargs="?", type=Path, default=Path(config.default_validate_dir),
                        help="Directory searched recursively for *.mdx files (default: %(default)s)")
    parser.add_argument("--skip-link-check", action="store_true",
                        help="Do not run the external link checker")
    add_log_level_argument(parser)
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def validate_with_config(directory: Path, config: Config, skip_link_check: bool = False) -> int:
    link_checker = None
    if not skip_link_check:
        link_checker = partial(run_link_check, config.link_check_command)
    return run_validation(directory, link_checker=link_checker)


def single_mode(argv: list[str]) -> int:
    args = _build_single_parser().parse_args(argv)
    configure_logging(args.log_level)

    result = convert_file(args.input)
    if args.output is None:
        sys.stdout.write(result)
        return 0

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(result, encoding="utf-8")
    print(f"Converted: {args.output}")
    return 0


def batch_mode(argv: list[str], config: Config) -> int:
    args = _build_batch_parser().parse_args(argv)
    configure_logging(args.log_level)

    if args.input_dir is None or args.mapping is None or args.output_dir is None:
        print("Batch mode requires --input-dir, --mapping, and --output-dir", file=sys.stderr)
        return 1

    mapping = load_mapping(args.mapping)
    logging.getLogger(__name__).info(f"Loaded {len(mapping)} mapping entries from {args.mapping}")
    convert_tree(args.input_dir, mapping, args.output_dir)

    if args.skip_validation:
        return 0
    print()
    return validate_with_config(args.output_dir, config)


def validate_mode(argv: list[str], config: Config) -> int:
    args = _build_validate_parser(config).parse_args(argv)
    configure_logging(args.log_level)
    return validate_with_config(args.directory, config, skip_link_check=args.skip_link_check)


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print(USAGE, file=sys.stderr)
        return 1

    config = Config()
    if argv[0] == "--validate":
        return validate_mode(argv[1:], config)
    if argv[0] == "--input-dir":
        return batch_mode(argv, config)
    if argv[0] == "convert":
        argv = argv[1:]
    return single_mode(argv)


if __name__ == "__main__":
    sys.exit(main())
