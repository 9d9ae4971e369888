# rowing_history/core/reports.py
from __future__ import annotations
from pathlib import Path
from typing import Literal
import pandas as pd

from .model import DATE_FORMAT, format_value
from .store import RecordStore
from .timecodec import encode

ReportFormat = Literal["txt", "csv", "both"]

# partition -> output file stem
OUTPUT_FILES: dict[str, str] = {
    "distance":       "distanceList",
    "duration":       "durationList",
    "distance_power": "distancePowerList",
    "duration_power": "durationPowerList",
}


def _build_dataframe(records, power: bool) -> pd.DataFrame:
    """Tabular mirror of a partition (raw: date/pace/value/unit, power: date/power/value)."""
    if power:
        rows = [{"date": r.date.strftime(DATE_FORMAT), "power_W": r.power,
                 "value": format_value(r.value)} for r in records]
        cols = ["date", "power_W", "value"]
    else:
        rows = [{"date": r.date.strftime(DATE_FORMAT), "pace_500m": encode(r.pace),
                 "value": format_value(r.value), "unit": r.unit.value} for r in records]
        cols = ["date", "pace_500m", "value", "unit"]
    return pd.DataFrame(rows, columns=cols)


def _write_txt(lines: list[str], out_txt: Path, title: str) -> None:
    out_txt.parent.mkdir(parents=True, exist_ok=True)
    # whole-file rewrite; not atomic
    with out_txt.open("w", encoding="utf-8", newline="\n") as f:
        for line in lines:
            f.write(line + "\n")
    print(f"[OK] wrote {title}: {len(lines)} line(s) → {out_txt}")


def _write_csv(df_out: pd.DataFrame, out_csv: Path, title: str) -> None:
    out_csv.parent.mkdir(parents=True, exist_ok=True)
    df_out.to_csv(out_csv, index=False, encoding="utf-8")
    print(f"[OK] wrote {title} → {out_csv}")


def write_partitions(store: RecordStore, out_dir: Path, fmt: ReportFormat = "txt") -> list[Path]:
    """
    Write all four partitions of ``store`` into ``out_dir``.
    - fmt: "txt" (comma-space lines) | "csv" (pandas, with header) | "both"
    Returns the written paths in partition order.
    """
    fmt = str(fmt).lower()
    if fmt not in ("txt", "csv", "both"):
        raise ValueError(f"unknown report format {fmt!r}; expected txt, csv or both")

    written: list[Path] = []
    for name, stem in OUTPUT_FILES.items():
        base = out_dir / stem
        if fmt in ("txt", "both"):
            path = base.with_suffix(".txt")
            _write_txt(store.serialize(name), path, name)
            written.append(path)
        if fmt in ("csv", "both"):
            path = base.with_suffix(".csv")
            _write_csv(_build_dataframe(store.partition(name), power=name.endswith("_power")), path, name)
            written.append(path)
    return written
