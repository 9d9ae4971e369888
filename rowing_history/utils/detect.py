# rowing_history/utils/detect.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path

from ..core.pipeline import Mode


@dataclass(frozen=True)
class DetectedInput:
    mode: Mode
    path: Path        # resolved input path
    exists: bool


def discover_inputs(data_root: Path, modes: dict[str, Mode]) -> list[DetectedInput]:
    """Resolve each mode's input under ``data_root``, ordered by menu key."""
    items: list[DetectedInput] = []
    for key in sorted(modes):
        mode = modes[key]
        p = (data_root / mode.input).resolve()
        items.append(DetectedInput(mode=mode, path=p, exists=p.is_file()))
    return items
