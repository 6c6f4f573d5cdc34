"""Turn a stored event record into the "When" line shown to guests."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .fallback import build_fallback_range_label
from .formatting import RangeLabel, format_range, format_range_display
from .reconcile import reconcile_when_label
from .results import Ok
from .temporal import try_parse_temporal

_TRUTHY = {"1", "true", "yes", "on"}


class EventTiming(BaseModel):
    """Date/time and location fields of a persisted event.

    Keys follow the stored JSON (``startISO``, ``allDay``...). Values of the
    wrong type are treated as missing rather than rejected.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    start_iso: str | None = Field(None, alias="startISO")
    end_iso: str | None = Field(None, alias="endISO")
    start: str | None = None
    end: str | None = None
    timezone: str | None = None
    all_day: bool = Field(False, alias="allDay")
    location: str | None = None
    venue: str | None = None

    @field_validator(
        "start_iso",
        "end_iso",
        "start",
        "end",
        "timezone",
        "location",
        "venue",
        mode="before",
    )
    @classmethod
    def _text_or_none(cls, value: Any) -> str | None:
        if not isinstance(value, str) or not value.strip():
            return None
        return value

    @field_validator("all_day", mode="before")
    @classmethod
    def _truthy(cls, value: Any) -> bool:
        if isinstance(value, str):
            return value.strip().lower() in _TRUTHY
        return bool(value)

    @classmethod
    def from_record(cls, record: EventTiming | Mapping[str, Any] | None) -> EventTiming:
        if isinstance(record, EventTiming):
            return record
        return cls.model_validate(dict(record or {}))

    @property
    def display_start(self) -> str | None:
        return self.start_iso or self.start

    @property
    def display_end(self) -> str | None:
        return self.end_iso or self.end


def resolve_when(record: EventTiming | Mapping[str, Any] | None) -> str | None:
    """Return the reconciled "When" line for ``record``, or ``None``."""

    timing = EventTiming.from_record(record)
    computed = format_range_display(
        timing.display_start,
        timing.display_end,
        timezone=timing.timezone,
        all_day=timing.all_day,
    )
    fallback = build_fallback_range_label(timing.start, timing.end)
    return reconcile_when_label(computed, fallback, timing.start, timing.end)


def resolve_when_summary(record: EventTiming | Mapping[str, Any] | None) -> RangeLabel:
    timing = EventTiming.from_record(record)
    return format_range(
        timing.display_start,
        timing.display_end,
        timezone=timing.timezone,
        all_day=timing.all_day,
    )


def is_upcoming(
    record: EventTiming | Mapping[str, Any] | None, *, now: datetime | None = None
) -> bool:
    """Return ``True`` when the event's start lies after ``now``."""

    timing = EventTiming.from_record(record)
    result = try_parse_temporal(timing.display_start)
    if not isinstance(result, Ok):
        return False
    reference = now or datetime.now(UTC)
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=UTC)
    return result.value.instant > reference
