"""Timestamp conversions.

GPX times are RFC 3339 strings in UTC (``2001-11-28T21:05:28Z``). In
geometries a time travels as the M ("measure") coordinate: seconds since
the Unix epoch as a float, keeping sub-second fractions.

Python datetimes resolve to microseconds, so that is the finest fraction
that survives ``m_to_time(time_to_m(t))``.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from gpxcodec.errors import ParseError

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _as_utc(t: datetime) -> datetime:
    """Naive datetimes are taken to already be UTC."""
    if t.tzinfo is None:
        return t.replace(tzinfo=timezone.utc)
    return t.astimezone(timezone.utc)


def time_to_m(t: datetime) -> float:
    """Seconds since the Unix epoch, e.g. 500ms past a second -> ``.5``."""
    return (_as_utc(t) - _EPOCH).total_seconds()


def m_to_time(m: float) -> datetime:
    """Inverse of :func:`time_to_m`; always returns an aware UTC datetime.

    Raises:
        ValueError: If ``m`` is NaN, infinite, or outside years 1-9999.
    """
    try:
        return _EPOCH + timedelta(seconds=m)
    except (OverflowError, ValueError) as e:
        raise ValueError(f"M coordinate {m!r} is not a representable time") from e


def parse_time(text: str) -> datetime:
    """Parse an RFC 3339 timestamp and normalise it to UTC.

    Accepts a ``Z`` suffix or a numeric offset (``+05:00``). A timestamp
    without any offset is read as UTC.

    Raises:
        ParseError: If the text is not a valid timestamp.
    """
    s = text.strip()
    if s[-1:] in ("Z", "z"):
        s = s[:-1] + "+00:00"
    try:
        t = datetime.fromisoformat(s)
    except ValueError as e:
        raise ParseError(f"invalid time {text!r}", tag="time") from e
    try:
        return _as_utc(t)
    except OverflowError as e:
        raise ParseError(f"time {text!r} is outside the UTC range", tag="time") from e


def format_time(t: datetime) -> str:
    """Format as ``YYYY-MM-DDTHH:MM:SSZ``, adding a trimmed fraction only if set."""
    t = _as_utc(t)
    text = (
        f"{t.year:04d}-{t.month:02d}-{t.day:02d}"
        f"T{t.hour:02d}:{t.minute:02d}:{t.second:02d}"
    )
    if t.microsecond:
        text += f".{t.microsecond:06d}".rstrip("0")
    return text + "Z"
