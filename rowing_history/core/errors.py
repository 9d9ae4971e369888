# rowing_history/core/errors.py
from __future__ import annotations


class RowingHistoryError(Exception):
    """Base class for errors raised by the rowing_history core."""


class FormatError(RowingHistoryError, ValueError):
    """Pace text is not M:SS.T / MM:SS.T."""


class InvalidArgument(RowingHistoryError, ValueError):
    """Argument outside the domain of a calculation (e.g. non-positive pace)."""


class InsufficientData(RowingHistoryError, ValueError):
    """Not enough points to fit a regression line."""
