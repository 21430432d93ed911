#!/usr/bin/env python3
"""
Onboard a new Spring.io blog post — script entry point.

Usage:
  bin/onboard_post.py <source.md> <topic-dir/slug>
"""

import sys
from pathlib import Path

_SCRIPT_DIR = Path(__file__).resolve().parent   # bin/

# Ensure bin/ is on sys.path so the package resolves without installation
if str(_SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(_SCRIPT_DIR))

from spring_mdx.onboard import main

if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
