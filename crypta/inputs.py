from __future__ import annotations

import sys
from typing import Optional

from .errors import InputReadError


def read_input(path: Optional[str]) -> bytes:
    """Return the contents of ``path``, or all of standard input when no path is given."""
    try:
        if path:
            with open(path, "rb") as fh:
                return fh.read()
        return sys.stdin.buffer.read()
    except OSError as exc:
        raise InputReadError(f"cannot read input: {exc}") from exc
