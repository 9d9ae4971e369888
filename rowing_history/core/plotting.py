# rowing_history/core/plotting.py
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Sequence
import matplotlib.dates as mdates
import matplotlib.pyplot as plt
import numpy as np
from scipy.stats import linregress

from .errors import InsufficientData

DEFAULT_TITLE = "Rowing Power Over Time for 2500 m Distance on Concept II"
DEFAULT_WIDTH_PX = 744
DEFAULT_HEIGHT_PX = 400
_DPI = 100


@dataclass(frozen=True)
class TrendFit:
    slope: float              # watts per day
    intercept: float
    r_squared: float

    def value_at(self, x: float) -> float:
        return self.slope * x + self.intercept

    def formula(self) -> str:
        sign = "+" if self.intercept >= 0 else "-"
        return f"Y = {self.slope:.4f}x {sign} {abs(self.intercept):.4f} (R² = {self.r_squared:.4f})"


@dataclass
class ChartArtifact:
    figure: plt.Figure
    title: str
    n_points: int
    fit: TrendFit | None = None


def _to_xy(points: Sequence[tuple[date, float]]) -> tuple[np.ndarray, np.ndarray]:
    if not points:
        return np.array([], dtype=float), np.array([], dtype=float)
    dates, powers = zip(*points)
    return mdates.date2num(list(dates)), np.asarray(powers, dtype=float)


def fit_trend(points: Sequence[tuple[date, float]]) -> TrendFit:
    """Ordinary least squares of power against the matplotlib date number."""
    x, y = _to_xy(points)
    if x.size < 2:
        raise InsufficientData(f"regression needs at least 2 points, got {x.size}")
    if np.all(x == x[0]):
        raise InsufficientData("regression needs at least 2 distinct dates")
    res = linregress(x, y)
    return TrendFit(slope=float(res.slope), intercept=float(res.intercept),
                    r_squared=float(res.rvalue) ** 2)


def build_chart(points: Sequence[tuple[date, float]],
                with_regression: bool,
                title: str | None = None,
                width_px: int = DEFAULT_WIDTH_PX,
                height_px: int = DEFAULT_HEIGHT_PX) -> ChartArtifact:
    """
    Scatter of power over date.

    With ``with_regression`` the markers stand alone, a dashed trend line
    spans first to last point and the title carries the fit equation and
    R². Without it the markers are connected and the axes are labelled.
    """
    fit = fit_trend(points) if with_regression else None
    x, y = _to_xy(points)

    fig, ax = plt.subplots(figsize=(width_px / _DPI, height_px / _DPI), dpi=_DPI)
    if fit is not None:
        ax.plot(x, y, linestyle="none", marker="o", markersize=6)
        ax.plot([x[0], x[-1]], [fit.value_at(x[0]), fit.value_at(x[-1])],
                linestyle="--", linewidth=2)
        chart_title = fit.formula()
    else:
        ax.plot(x, y, linestyle="-", linewidth=2, marker="o", markersize=5)
        chart_title = title or DEFAULT_TITLE
        ax.set_xlabel("Date")
        ax.set_ylabel("Power (Watt)")

    locator = mdates.AutoDateLocator()
    ax.xaxis.set_major_locator(locator)
    ax.xaxis.set_major_formatter(mdates.ConciseDateFormatter(locator))
    ax.set_title(chart_title)
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    return ChartArtifact(figure=fig, title=chart_title, n_points=int(x.size), fit=fit)


def save_chart(artifact: ChartArtifact, out_path: Path) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        artifact.figure.savefig(out_path, dpi=_DPI)
    finally:
        plt.close(artifact.figure)
    print(f"[OK] power chart ({artifact.n_points} points) → {out_path}")
    return out_path
