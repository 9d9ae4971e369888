# rowing_history/core/pipeline.py
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path

from .parser import ParseReport, parse_lines
from .plotting import DEFAULT_HEIGHT_PX, DEFAULT_WIDTH_PX, build_chart, save_chart
from .reports import write_partitions
from .select import select_records
from .store import RecordStore
from ..loaders import text_loader


@dataclass(frozen=True)
class Mode:
    key: str                  # menu key, e.g. "1"
    label: str
    input: str                # file name under the data root
    plot: str                 # png stem under <data root>/<plots_dir>
    regression: bool = False
    min_distance_m: float | None = None
    exclude_years: tuple[int, ...] = ()


@dataclass
class PipelineResult:
    mode: Mode
    report: ParseReport
    store: RecordStore
    written: list[Path] = field(default_factory=list)
    chart_path: Path | None = None


def modes_from_config(cfg: dict) -> dict[str, Mode]:
    out: dict[str, Mode] = {}
    for key, m in ((cfg or {}).get("modes", {}) or {}).items():
        m = m or {}
        if "input" not in m:
            raise ValueError(f"mode {key!r}: missing 'input'")
        min_d = m.get("min_distance_m")
        out[str(key)] = Mode(
            key=str(key),
            label=str(m.get("label", m["input"])),
            input=str(m["input"]),
            plot=str(m.get("plot", Path(str(m["input"])).stem)),
            regression=bool(m.get("regression", False)),
            min_distance_m=float(min_d) if min_d is not None else None,
            exclude_years=tuple(int(y) for y in (m.get("exclude_years") or ())),
        )
    return out


def run_pipeline(mode: Mode, cfg: dict, data_root: Path) -> PipelineResult:
    """
    One full run for a dataset mode:
    load lines → parse → select → fresh store (derived) → write lists → chart.

    A fresh store per call keeps repeated runs from accumulating records.
    I/O errors and InsufficientData propagate to the caller.
    """
    cfg = cfg or {}
    data_cfg = cfg.get("data", {}) or {}
    fmt = str((cfg.get("reports", {}) or {}).get("format", "txt")).lower()
    chart_cfg = cfg.get("chart", {}) or {}

    in_path = data_root / mode.input
    print(f"[INFO] [{mode.key}] reading {in_path}")
    lines = text_loader.load(in_path)

    report = parse_lines(lines)
    records = select_records(report.records,
                             min_distance_m=mode.min_distance_m,
                             exclude_years=mode.exclude_years)
    store = RecordStore.build(records)
    print(f"[INFO] [{mode.key}] {report.n_lines} line(s): {len(store.distance)} distance, "
          f"{len(store.duration)} duration, {len(report.failures)} rejected")

    written = write_partitions(store, data_root, fmt=fmt)
    result = PipelineResult(mode=mode, report=report, store=store, written=written)

    points = [(p.date, p.power) for p in store.distance_power]
    if not points:
        print(f"[INFO] {mode.plot}: no distance records; skipping chart.")
        return result

    artifact = build_chart(
        points,
        with_regression=mode.regression,
        title=chart_cfg.get("title"),
        width_px=int(chart_cfg.get("width_px", DEFAULT_WIDTH_PX)),
        height_px=int(chart_cfg.get("height_px", DEFAULT_HEIGHT_PX)),
    )
    plots_dir = data_root / str(data_cfg.get("plots_dir", "plots"))
    result.chart_path = save_chart(artifact, plots_dir / f"{mode.plot}.png")
    return result
