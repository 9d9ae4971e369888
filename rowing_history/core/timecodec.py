# rowing_history/core/timecodec.py
from __future__ import annotations
import re
from datetime import timedelta

from .errors import FormatError

_PACE_RE = re.compile(r"(\d{1,2}):(\d{2})\.(\d)", re.ASCII)


def decode(text: str) -> timedelta:
    """
    Parse a monitor pace string ("2:12.6", "30:00.0") into a timedelta.

    The single tenths digit is worth 100 ms, so "2:12.6" is 132.6 s.
    Seconds above 59 roll over into minutes.
    """
    m = _PACE_RE.fullmatch(str(text).strip())
    if m is None:
        raise FormatError(f"pace must look like M:SS.T or MM:SS.T, got {text!r}")
    minutes, seconds, tenths = (int(g) for g in m.groups())
    return timedelta(minutes=minutes, seconds=seconds, milliseconds=tenths * 100)


def encode(pace: timedelta) -> str:
    """Render a pace back to M:SS.T (tenths truncated, minutes unpadded)."""
    total_ms = int(pace / timedelta(milliseconds=1))
    if total_ms < 0:
        raise FormatError(f"cannot encode negative pace {pace!r}")
    minutes, rest_ms = divmod(total_ms, 60_000)
    seconds, ms = divmod(rest_ms, 1000)
    return f"{minutes}:{seconds:02d}.{ms // 100}"
