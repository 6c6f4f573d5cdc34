"""Human-readable schedule lines for an event's start/end instants."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, tzinfo

from .results import Err, Ok, Result
from .temporal import ParsedInstant, default_zone, lookup_zone, try_parse_temporal

logger = logging.getLogger(__name__)

RANGE_SEPARATOR = " – "
ALL_DAY_SUFFIX = " (all day)"

TemporalValue = str | ParsedInstant | None


@dataclass(frozen=True)
class RangeLabel:
    time: str | None = None
    date: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.time is None and self.date is None


EMPTY_LABEL = RangeLabel()


@dataclass(frozen=True)
class _Projection:
    start: datetime
    end: datetime | None

    @property
    def same_day(self) -> bool:
        return self.end is not None and self.start.date() == self.end.date()


def format_date(value: datetime) -> str:
    """``Jan 5, 2025``"""
    return f"{value:%b} {value.day}, {value.year}"


def format_weekday_date(value: datetime) -> str:
    """``Sun, Jan 5, 2025``"""
    return f"{value:%a}, {format_date(value)}"


def format_time(value: datetime) -> str:
    """``3:00 PM``"""
    hour = value.hour % 12 or 12
    meridiem = "PM" if value.hour >= 12 else "AM"
    return f"{hour}:{value.minute:02d} {meridiem}"


def format_date_time(value: datetime) -> str:
    """``Jan 5, 2025, 3:00 PM``"""
    return f"{format_date(value)}, {format_time(value)}"


def _coerce(value: TemporalValue) -> Result[ParsedInstant | None]:
    if value is None:
        return Ok(None)
    if isinstance(value, ParsedInstant):
        return Ok(value)
    if not value.strip():
        return Ok(None)
    return try_parse_temporal(value)


def effective_timezone(
    start: ParsedInstant,
    end: ParsedInstant | None = None,
    timezone: str | None = None,
) -> Result[tzinfo | None]:
    """Pick the zone used for rendering.

    Floating values force UTC so their wall-clock digits survive. ``Ok(None)``
    stands for the host's local zone.
    """

    if start.floating or (end is not None and end.floating):
        return Ok(UTC)
    if timezone and timezone.strip():
        zone = lookup_zone(timezone)
        if zone is None:
            return Err("timezone", f"unknown timezone {timezone!r}")
        return Ok(zone)
    return Ok(default_zone())


def _project(
    start: TemporalValue, end: TemporalValue, timezone: str | None
) -> Result[_Projection]:
    start_result = _coerce(start)
    if isinstance(start_result, Err):
        return start_result
    start_parsed = start_result.value
    if start_parsed is None:
        return Err("empty", "no start value")

    end_result = _coerce(end)
    if isinstance(end_result, Err):
        return end_result
    end_parsed = end_result.value

    zone_result = effective_timezone(start_parsed, end_parsed, timezone)
    if isinstance(zone_result, Err):
        return zone_result
    zone = zone_result.value

    def local(parsed: ParsedInstant) -> datetime:
        if zone is None:
            return parsed.instant.astimezone()
        return parsed.instant.astimezone(zone)

    try:
        projection = _Projection(
            start=local(start_parsed),
            end=local(end_parsed) if end_parsed is not None else None,
        )
    except (ValueError, OverflowError) as exc:
        return Err("range", str(exc))
    return Ok(projection)


def _all_day_label(projection: _Projection) -> str:
    label = format_weekday_date(projection.start)
    if projection.end is not None and not projection.same_day:
        label = f"{label}{RANGE_SEPARATOR}{format_weekday_date(projection.end)}"
    return f"{label}{ALL_DAY_SUFFIX}"


def format_range(
    start: TemporalValue,
    end: TemporalValue = None,
    timezone: str | None = None,
    all_day: bool = False,
) -> RangeLabel:
    """Return the split ``time``/``date`` fields for an event range.

    Never raises: unparseable values or an unknown timezone give an empty label.
    """

    result = _project(start, end, timezone)
    if isinstance(result, Err):
        logger.debug("Cannot format event range (%s): %s", result.kind, result.detail)
        return EMPTY_LABEL
    projection = result.value

    if all_day:
        return RangeLabel(time=None, date=_all_day_label(projection))

    start_time = format_time(projection.start)
    start_date = format_date(projection.start)
    if projection.end is None:
        return RangeLabel(time=start_time, date=start_date)

    time_range = f"{start_time}{RANGE_SEPARATOR}{format_time(projection.end)}"
    if projection.same_day:
        return RangeLabel(time=time_range, date=start_date)
    return RangeLabel(
        time=time_range,
        date=f"{start_date}{RANGE_SEPARATOR}{format_date(projection.end)}",
    )


def format_range_display(
    start: TemporalValue,
    end: TemporalValue = None,
    timezone: str | None = None,
    all_day: bool = False,
) -> str | None:
    """Return a single self-contained "When" line, or ``None``."""

    result = _project(start, end, timezone)
    if isinstance(result, Err):
        logger.debug("Cannot format event range (%s): %s", result.kind, result.detail)
        return None
    projection = result.value

    if all_day:
        return _all_day_label(projection)
    if projection.end is None:
        return format_date_time(projection.start)
    if projection.same_day:
        return (
            f"{format_date(projection.start)}, {format_time(projection.start)}"
            f"{RANGE_SEPARATOR}{format_time(projection.end)}"
        )
    return (
        f"{format_date_time(projection.start)}"
        f"{RANGE_SEPARATOR}{format_date_time(projection.end)}"
    )
