# rowing_history/loaders/text_loader.py
from __future__ import annotations
from pathlib import Path


def load(path: Path) -> list[str]:
    """
    All lines of a workout log; a UTF-8 BOM is dropped.
    Undecodable bytes become U+FFFD so only the damaged line fails to parse.
    Missing file → FileNotFoundError.
    """
    with Path(path).open("r", encoding="utf-8-sig", errors="replace") as f:
        return f.read().splitlines()
