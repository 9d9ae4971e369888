# rowing_history/core/model.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Union

from .timecodec import encode

DATE_FORMAT = "%d.%m.%Y"


class Unit(Enum):
    DISTANCE = "m"
    DURATION = "min"


def format_value(value: float) -> str:
    """2500.0 -> "2500", 2500.5 -> "2500.5"."""
    v = float(value)
    return str(int(v)) if v.is_integer() else repr(v)


@dataclass(frozen=True)
class RawRecord:
    date: date                # day of the session
    pace: timedelta           # average time per 500 m
    value: float              # meters (DISTANCE) or minutes (DURATION)
    unit: Unit

    def __post_init__(self):
        if self.pace <= timedelta(0):
            raise ValueError(f"pace must be positive, got {self.pace}")
        if self.value < 0:
            raise ValueError(f"value must be non-negative, got {self.value}")

    def to_line(self) -> str:
        return f"{self.date.strftime(DATE_FORMAT)}, {encode(self.pace)}, {format_value(self.value)}"


@dataclass(frozen=True)
class PowerRecord:
    date: date
    power: int                # watts, integral so it never carries a separator
    value: float

    def to_line(self) -> str:
        return f"{self.date.strftime(DATE_FORMAT)}, {self.power}, {format_value(self.value)}"


@dataclass(frozen=True)
class PatternMismatch:
    line: str


@dataclass(frozen=True)
class SemanticFailure:
    line: str
    cause: Exception


ParseFailure = Union[PatternMismatch, SemanticFailure]
ParseResult = Union[RawRecord, PatternMismatch, SemanticFailure]
