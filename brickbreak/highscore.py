"""Reading and writing the stored high score."""

from __future__ import annotations

import os
import re
from pathlib import Path

_LEADING_INT = re.compile(r"[+-]?\d+")


def load_high_score(path: str | os.PathLike[str]) -> int:
    """The score stored at ``path``, or 0 if it is missing or unreadable."""
    try:
        text = Path(path).read_text()
    except (OSError, UnicodeDecodeError):
        return 0
    tokens = text.split()
    if not tokens:
        return 0
    match = _LEADING_INT.match(tokens[0])
    return int(match.group()) if match else 0


def save_high_score(path: str | os.PathLike[str], score: int) -> None:
    """Store ``score`` at ``path``; a file that cannot be written is skipped."""
    try:
        Path(path).write_text(str(int(score)))
    except OSError:
        pass