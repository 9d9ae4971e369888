# rowing_history/core/select.py
from __future__ import annotations
import logging
from typing import Iterable

from .model import RawRecord, Unit

_LOG = logging.getLogger(__name__)


def select_records(records: Iterable[RawRecord],
                   min_distance_m: float | None = None,
                   exclude_years: Iterable[int] = ()) -> list[RawRecord]:
    """
    Order-preserving filter used by the dataset modes.
      - min_distance_m: drop distance records shorter than this (duration records pass)
      - exclude_years:  drop any record dated in one of these years
    """
    years = {int(y) for y in exclude_years or ()}
    kept: list[RawRecord] = []
    dropped = 0
    for r in records:
        if r.date.year in years:
            dropped += 1
            continue
        if min_distance_m is not None and r.unit is Unit.DISTANCE and r.value < float(min_distance_m):
            dropped += 1
            continue
        kept.append(r)
    if dropped:
        _LOG.debug("selection dropped %d record(s)", dropped)
    return kept
