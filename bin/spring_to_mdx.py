#!/usr/bin/env python3
"""
Spring.io blog markdown -> Mintlify MDX converter — script entry point.

The implementation lives in the spring_mdx package (spring_mdx/cli.py).

Usage:
  bin/spring_to_mdx.py input.md -o output.mdx
  bin/spring_to_mdx.py --input-dir /path/to/blog --mapping topic-mapping.properties --output-dir blog/
  bin/spring_to_mdx.py --validate blog/    # validate existing MDX files
"""

import sys
from pathlib import Path

_SCRIPT_DIR = Path(__file__).resolve().parent   # bin/

# Ensure bin/ is on sys.path so the package resolves without installation
if str(_SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(_SCRIPT_DIR))

from spring_mdx.cli import main

if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
