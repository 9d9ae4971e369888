# rowing_history/core/store.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable

from .errors import InvalidArgument
from .model import PowerRecord, RawRecord, Unit
from .power import pace_to_watts

_LOG = logging.getLogger(__name__)

PARTITIONS: tuple[str, ...] = ("distance", "duration", "distance_power", "duration_power")

_RAW_BY_UNIT = {Unit.DISTANCE: "distance", Unit.DURATION: "duration"}


@dataclass(frozen=True)
class DeriveSummary:
    distance: int
    duration: int
    skipped: int


class RecordStore:
    """
    Raw records partitioned by unit, plus the power records derived from them.

    The power partitions are always rebuilt in full by ``derive_power``;
    call it again after any ingest. Not safe for concurrent use: one
    thread of control per store. ``RecordStore.build`` gives a fresh,
    already derived store for a single run.
    """

    def __init__(self):
        self._raw: dict[str, list[RawRecord]] = {"distance": [], "duration": []}
        self._power: dict[str, list[PowerRecord]] = {"distance_power": [], "duration_power": []}

    @classmethod
    def build(cls, records: Iterable[RawRecord]) -> "RecordStore":
        store = cls()
        store.ingest_all(records)
        store.derive_power()
        return store

    # ---------- raw partitions ----------
    def reset(self) -> None:
        for lst in self._raw.values():
            lst.clear()
        for lst in self._power.values():
            lst.clear()

    def ingest(self, records: Iterable[RawRecord], unit: Unit) -> None:
        target = self._raw[_RAW_BY_UNIT[unit]]
        for r in records:
            if r.unit is not unit:
                raise ValueError(f"record {r.to_line()!r} has unit {r.unit.value!r}, expected {unit.value!r}")
            target.append(r)

    def ingest_all(self, records: Iterable[RawRecord]) -> None:
        for r in records:
            self._raw[_RAW_BY_UNIT[r.unit]].append(r)

    # ---------- derived partitions ----------
    def derive_power(self) -> DeriveSummary:
        skipped = 0
        for raw_name in ("distance", "duration"):
            out: list[PowerRecord] = []
            for r in self._raw[raw_name]:
                try:
                    watts = pace_to_watts(r.pace, r.value)
                except InvalidArgument as e:
                    _LOG.warning("skipping power for %s: %s", r.to_line(), e)
                    skipped += 1
                    continue
                out.append(PowerRecord(date=r.date, power=watts, value=r.value))
            self._power[f"{raw_name}_power"] = out
        return DeriveSummary(
            distance=len(self._power["distance_power"]),
            duration=len(self._power["duration_power"]),
            skipped=skipped,
        )

    # ---------- access ----------
    def partition(self, name: str) -> tuple:
        if name in self._raw:
            return tuple(self._raw[name])
        if name in self._power:
            return tuple(self._power[name])
        raise KeyError(f"unknown partition {name!r}; expected one of {', '.join(PARTITIONS)}")

    @property
    def distance(self) -> tuple[RawRecord, ...]:
        return self.partition("distance")

    @property
    def duration(self) -> tuple[RawRecord, ...]:
        return self.partition("duration")

    @property
    def distance_power(self) -> tuple[PowerRecord, ...]:
        return self.partition("distance_power")

    @property
    def duration_power(self) -> tuple[PowerRecord, ...]:
        return self.partition("duration_power")

    def serialize(self, name: str) -> list[str]:
        return [r.to_line() for r in self.partition(name)]
