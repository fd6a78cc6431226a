"""Utilities for date label formatting and sorting method parsing."""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import QDateTime, QLocale

from core.models import SortingMethod

LONG_DATE_FMT = "MMMM d, yyyy"


def format_long_date(timestamp_ms: float, locale: QLocale | None = None) -> str:
    """Format an epoch-milliseconds timestamp as a long local date.

    Month names follow `locale` (system locale when None), e.g. "March 3, 2021".
    """
    loc = locale if locale is not None else QLocale()
    date = QDateTime.fromMSecsSinceEpoch(int(timestamp_ms)).date()
    return loc.toString(date, LONG_DATE_FMT)


def parse_sorting_method(value: Any) -> SortingMethod | None:
    """Parse a method from its value ("ascDate") or member name ("ASC_DATE").

    Returns None when the value matches no method.
    """
    if isinstance(value, SortingMethod):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    try:
        return SortingMethod(text)
    except ValueError:
        pass
    try:
        return SortingMethod[text.upper()]
    except KeyError:
        return None
