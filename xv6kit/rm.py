"""Remove files."""

from __future__ import annotations

import os
import sys
from typing import Sequence


def _unlink(path: str) -> None:
    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    else:
        os.unlink(path)


def main(argv: Sequence[str] | None = None) -> int:
    """Remove each named file, stopping at the first that cannot be removed.

    Empty directories are removed too.
    """
    paths = sys.argv[1:] if argv is None else list(argv)
    if not paths:
        print("Usage: rm files...", file=sys.stderr)
        return 1
    for path in paths:
        try:
            _unlink(path)
        except OSError:
            print(f"rm: {path} failed to delete", file=sys.stderr)
            return 1
    return 0