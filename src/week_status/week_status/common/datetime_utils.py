"""Calendar-day normalization for dates coming from the three sources.

Sources disagree on how they send dates: epoch seconds, epoch milliseconds
(sometimes as digit strings), bare ``YYYY-MM-DD`` strings, full ISO datetimes,
or ``date``/``datetime`` objects from the database driver. Everything is
reduced to a ``DayKey``: a ``date`` in the local calendar.

Nothing in here raises on bad input. ``to_day_key`` returns ``None`` and the
caller decides what an unplaceable record means.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timedelta, tzinfo
from typing import Callable, Optional, Tuple, Union

from ..core.constants import EPOCH_MAX_DIGITS, EPOCH_MILLIS_THRESHOLD, EPOCH_MIN_DIGITS
from ..core.enums import DateShape, WeekStart

DateRepr = Union[int, float, str, date, datetime]
DayKey = date


def _classify_number(value: Union[int, float]) -> Optional[Tuple[DateShape, object]]:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if value < 0 or value >= 10**EPOCH_MAX_DIGITS:
        return None
    if len(str(int(value))) <= EPOCH_MIN_DIGITS:
        return None
    if value > EPOCH_MILLIS_THRESHOLD:
        return DateShape.EPOCH_MILLIS, value / 1000
    return DateShape.EPOCH_SECONDS, value


def classify_date(value: object) -> Optional[Tuple[DateShape, object]]:
    """Resolve a raw value into ``(shape, payload)`` or ``None``.

    Payload is seconds for epochs, the ``YYYY-MM-DD`` text for ISO shapes and
    the object itself for ``NATIVE``.
    """

    if value is None or isinstance(value, bool):
        return None

    # datetime is a subclass of date.
    if isinstance(value, (datetime, date)):
        return DateShape.NATIVE, value

    if isinstance(value, (int, float)):
        return _classify_number(value)

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.isascii() and text.isdigit():
            if len(text) > EPOCH_MAX_DIGITS:
                return None
            return _classify_number(int(text))
        if "T" in text:
            return DateShape.ISO_DATETIME, text.split("T", 1)[0]
        return DateShape.ISO_DATE, text

    return None


def _epoch_to_day(seconds: float, tz: Optional[tzinfo]) -> Optional[DayKey]:
    try:
        return datetime.fromtimestamp(seconds, tz).date()
    except (OverflowError, OSError, ValueError):
        return None


def _iso_to_day(text: str, tz: Optional[tzinfo]) -> Optional[DayKey]:
    # Built from components; the string itself is never handed to a parser
    # that could read it as UTC midnight.
    parts = text.split("-")
    if len(parts) != 3 or not all(p.isascii() and p.isdigit() for p in parts):
        return None
    try:
        year, month, day = (int(p) for p in parts)
        return date(year, month, day)
    except ValueError:
        return None


def _native_to_day(value: date, tz: Optional[tzinfo]) -> Optional[DayKey]:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            try:
                return value.astimezone(tz).date()
            except (OverflowError, OSError, ValueError):
                return None
        return value.date()
    return value


_CONVERTERS: dict[DateShape, Callable[..., Optional[DayKey]]] = {
    DateShape.EPOCH_SECONDS: _epoch_to_day,
    DateShape.EPOCH_MILLIS: _epoch_to_day,
    DateShape.ISO_DATE: _iso_to_day,
    DateShape.ISO_DATETIME: _iso_to_day,
    DateShape.NATIVE: _native_to_day,
}


def to_day_key(value: object, tz: Optional[tzinfo] = None) -> Optional[DayKey]:
    """Normalize any supported date representation to a local calendar day.

    ``tz=None`` means the machine's local zone.
    """

    classified = classify_date(value)
    if classified is None:
        return None
    shape, payload = classified
    return _CONVERTERS[shape](payload, tz)


def week_start(day: date, starts_on: WeekStart = WeekStart.SUNDAY) -> date:
    """Most recent Sunday (or Monday) on or before ``day``."""
    if starts_on == WeekStart.MONDAY:
        offset = day.weekday()
    else:
        offset = (day.weekday() + 1) % 7
    return day - timedelta(days=offset)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
