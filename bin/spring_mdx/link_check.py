"""Run the external Mintlify link checker."""

from __future__ import annotations

import logging
import subprocess
import sys
from typing import Sequence

logger = logging.getLogger(__name__)


def run_link_check(command: Sequence[str]) -> int:
    """Run the link checker with inherited stdio and return its exit code.

    A checker that cannot be started is reported but not treated as a
    failure.
    """
    display = " ".join(command)
    print(f"\nRunning `{display}` ...")
    try:
        completed = subprocess.run(list(command), check=False)
    except OSError as e:
        print(f"Could not run {display}: {e}", file=sys.stderr)
        print("Install with: npm i -g mintlify", file=sys.stderr)
        return 0

    logger.debug(f"{display} exited with {completed.returncode}")
    if completed.returncode != 0:
        print(f"{display} found issues (exit {completed.returncode})", file=sys.stderr)
    return completed.returncode
