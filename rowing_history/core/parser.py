# rowing_history/core/parser.py
from __future__ import annotations
import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable

from .model import (
    DATE_FORMAT, ParseFailure, ParseResult, PatternMismatch, RawRecord,
    SemanticFailure, Unit,
)
from .timecodec import decode

_LOG = logging.getLogger(__name__)

#   DD.MM.YYYY , M:SS.T | MM:SS.T , number <whitespace> m | min
_LINE_RE = re.compile(r"(\d{2}\.\d{2}\.\d{4}),(\d{1,2}:\d{2}\.\d),(\d+(?:\.\d+)?)\s+(min|m)", re.ASCII)

_UNITS = {"m": Unit.DISTANCE, "min": Unit.DURATION}


def parse_line(line: str) -> ParseResult:
    """
    Parse one workout line into a RawRecord.

    Never raises on malformed input: a line that does not fit the grammar
    yields PatternMismatch, a line that fits but holds an impossible date or
    pace yields SemanticFailure with the underlying exception.
    """
    m = _LINE_RE.fullmatch(line.strip())
    if m is None:
        return PatternMismatch(line)
    date_s, pace_s, value_s, unit_s = m.groups()
    try:
        return RawRecord(
            date=datetime.strptime(date_s, DATE_FORMAT).date(),
            pace=decode(pace_s),
            value=float(value_s),
            unit=_UNITS[unit_s],
        )
    except (ValueError, OverflowError) as e:
        return SemanticFailure(line, e)


@dataclass
class ParseReport:
    records: list[RawRecord] = field(default_factory=list)
    failures: list[ParseFailure] = field(default_factory=list)

    @property
    def n_lines(self) -> int:
        return len(self.records) + len(self.failures)


def parse_lines(lines: Iterable[str]) -> ParseReport:
    """Parse every line independently; blank lines are skipped."""
    report = ParseReport()
    for line in lines:
        if not line.strip():
            continue
        res = parse_line(line)
        if isinstance(res, PatternMismatch):
            _LOG.warning("Line did not match pattern: %s", res.line.strip())
            report.failures.append(res)
        elif isinstance(res, SemanticFailure):
            _LOG.warning("Error parsing line '%s': %s", res.line.strip(), res.cause)
            report.failures.append(res)
        else:
            report.records.append(res)
    _LOG.debug("parsed %d record(s), %d failure(s)", len(report.records), len(report.failures))
    return report
