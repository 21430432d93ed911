"""
Onboard a new Spring.io blog post into the Mintlify docs site.

Usage:
  onboard-post <source.md> <topic-dir/slug>

Example:
  onboard-post ~/downloads/spring-ai-new-feature.md agents/new-feature

Steps:
  1. Convert the source markdown to Mintlify-compatible MDX
  2. Place it in blog/<topic-dir>/<slug>.mdx
  3. Add the mapping to tools/topic-mapping.properties
  4. Print the mint.json navigation entry to add by hand
  5. Run validation over blog/
"""

from __future__ import annotations

import logging
import posixpath
import sys
from pathlib import Path
from typing import Optional

from .cli import UsageErrorParser, add_log_level_argument, configure_logging, validate_with_config
from .config import Config
from .converter import convert_file
from .mapping import append_mapping


def topic_group_name(topic_dir: str) -> str:
    """``model-providers`` -> ``Model Providers``"""
    return topic_dir.replace("-", " ").title()


def onboard_post(source: Path, target: str, config: Config, skip_validation: bool = False) -> int:
    topic_dir = posixpath.dirname(target)
    source_slug = source.stem

    if not source.is_file():
        print(f"ERROR: Source file not found: {source}", file=sys.stderr)
        return 1
    if topic_dir not in config.valid_topics:
        print(f"ERROR: Unknown topic directory: {topic_dir or '.'}", file=sys.stderr)
        print(f"Valid: {' '.join(config.valid_topics)}", file=sys.stderr)
        return 1

    print(f"=== Onboarding: {source_slug} -> blog/{target} ===\n")

    blog_dir = Path(config.blog_dir)
    output_file = blog_dir / f"{target}.mdx"
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(convert_file(source), encoding="utf-8")
    print(f"Converted: {output_file}")

    mapping_file = Path(config.mapping_file)
    append_mapping(mapping_file, source_slug, target)
    print(f"Added mapping: {source_slug} = {target}")
    logging.getLogger(__name__).debug(f"Mapping file: {mapping_file}")

    print("\n=== MANUAL STEP REQUIRED ===")
    print("Add this to the appropriate group in mint.json navigation:\n")
    print(f'  "blog/{target}"\n')
    print(f'For example, in the "{topic_group_name(topic_dir)}" group.\n')

    if skip_validation:
        return 0

    print("=== Running validation ===")
    rc = validate_with_config(blog_dir, config)
    if rc == 0:
        print("\nDone! Don't forget to update mint.json navigation.")
    return rc


def _build_parser(config: Config) -> UsageErrorParser:
    parser = UsageErrorParser(
        prog="onboard-post",
        description="Onboard a new Spring.io blog post into the Mintlify docs site",
        epilog=f"Topic directories: {', '.join(config.valid_topics)}",
    )
    parser.add_argument("source", type=Path, help="Source markdown file")
    parser.add_argument("target", help="Destination as <topic-dir>/<slug>, e.g. agents/new-feature")
    parser.add_argument("--skip-validation", action="store_true",
                        help="Do not validate blog/ afterwards")
    add_log_level_argument(parser)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    config = Config()
    args = _build_parser(config).parse_args(argv)
    configure_logging(args.log_level)
    return onboard_post(args.source, args.target, config, skip_validation=args.skip_validation)


if __name__ == "__main__":
    sys.exit(main())
