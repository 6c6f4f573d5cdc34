"""Parsing of event date/time values into absolute instants.

Two shapes are recognized. Values that look like ``2025-01-05T15:00`` with no
offset are *floating*: their wall-clock digits are anchored as UTC so that a
formatter rendering in UTC reproduces them verbatim for every viewer. Anything
else goes through :meth:`datetime.fromisoformat`.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import UTC, datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .config import settings
from .results import Err, Ok, Result

logger = logging.getLogger(__name__)

_floating_pattern = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2})(?::(\d{2})(?:\.(\d{1,3}))?)?$"
)
_date_only_pattern = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class InvalidTemporalValue(ValueError):
    """Raised when a date/time string cannot be turned into an instant."""


@dataclass(frozen=True)
class ParsedInstant:
    instant: datetime
    floating: bool = False


def lookup_zone(name: str | None) -> ZoneInfo | None:
    """Return the zone for an IANA name, or ``None`` when blank or unknown."""

    cleaned = (name or "").strip()
    if not cleaned:
        return None
    try:
        return ZoneInfo(cleaned)
    except (ZoneInfoNotFoundError, ValueError, TypeError, OSError):
        logger.debug("Unknown timezone %r", cleaned)
        return None


def default_zone() -> tzinfo | None:
    """Return the configured default zone; ``None`` means the host's local zone."""

    return lookup_zone(settings.default_timezone)


def _anchor_naive(value: datetime, raw: str) -> datetime:
    if _date_only_pattern.match(raw):
        return value.replace(tzinfo=UTC)
    zone = default_zone()
    if zone is None:
        # astimezone() reads a naive value as host-local time.
        return value.astimezone(UTC)
    return value.replace(tzinfo=zone).astimezone(UTC)


def try_parse_temporal(raw: str | None) -> Result[ParsedInstant]:
    """Parse ``raw`` without raising; see :func:`parse_temporal`."""

    text = (raw or "").strip()
    if not text:
        return Err("empty", "no date/time value")

    floating_match = _floating_pattern.match(text)
    if floating_match:
        year, month, day, hour, minute, second, _fraction = floating_match.groups()
        try:
            instant = datetime(
                int(year),
                int(month),
                int(day),
                int(hour),
                int(minute),
                int(second or "0"),
                tzinfo=UTC,
            )
        except ValueError as exc:
            return Err("invalid", f"{text!r}: {exc}")
        return Ok(ParsedInstant(instant=instant, floating=True))

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        return Err("invalid", f"{text!r}: {exc}")
    try:
        if parsed.tzinfo is None:
            instant = _anchor_naive(parsed, text)
        else:
            instant = parsed.astimezone(UTC)
    except (ValueError, OverflowError) as exc:
        return Err("invalid", f"{text!r}: {exc}")
    return Ok(ParsedInstant(instant=instant, floating=False))


def parse_temporal(raw: str | None) -> ParsedInstant:
    """Return the instant for ``raw`` or raise :class:`InvalidTemporalValue`."""

    result = try_parse_temporal(raw)
    if isinstance(result, Err):
        raise InvalidTemporalValue(result.detail)
    return result.value
