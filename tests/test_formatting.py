from __future__ import annotations

from datetime import UTC

import pytest

from eventwhen.formatting import (
    EMPTY_LABEL,
    RangeLabel,
    effective_timezone,
    format_range,
    format_range_display,
)
from eventwhen.results import Err
from eventwhen.temporal import parse_temporal


@pytest.mark.parametrize(
    "timezone",
    [None, "America/Los_Angeles", "Asia/Tokyo", "Europe/London", "Australia/Sydney"],
)
def test_floating_values_keep_wall_clock_in_every_zone(timezone):
    label = format_range("2025-03-09T14:30:00", timezone=timezone)
    assert label == RangeLabel(time="2:30 PM", date="Mar 9, 2025")


def test_zoned_values_render_in_declared_zone():
    label = format_range(
        "2025-01-05T20:00:00Z", "2025-01-05T22:00:00Z", timezone="America/New_York"
    )
    assert label == RangeLabel(time="3:00 PM – 5:00 PM", date="Jan 5, 2025")


def test_same_day_is_decided_after_projection():
    # Different UTC dates, same evening in Los Angeles.
    label = format_range(
        "2025-01-06T02:00:00Z", "2025-01-06T04:30:00Z", timezone="America/Los_Angeles"
    )
    assert label == RangeLabel(time="6:00 PM – 8:30 PM", date="Jan 5, 2025")
    assert (
        format_range_display(
            "2025-01-06T02:00:00Z",
            "2025-01-06T04:30:00Z",
            timezone="America/Los_Angeles",
        )
        == "Jan 5, 2025, 6:00 PM – 8:30 PM"
    )


def test_same_utc_date_can_span_two_local_days():
    label = format_range(
        "2025-01-05T14:00:00Z", "2025-01-05T16:00:00Z", timezone="Asia/Tokyo"
    )
    assert label == RangeLabel(
        time="11:00 PM – 1:00 AM", date="Jan 5, 2025 – Jan 6, 2025"
    )
    assert (
        format_range_display(
            "2025-01-05T14:00:00Z", "2025-01-05T16:00:00Z", timezone="Asia/Tokyo"
        )
        == "Jan 5, 2025, 11:00 PM – Jan 6, 2025, 1:00 AM"
    )


def test_timed_without_end():
    assert format_range("2025-01-05T00:05") == RangeLabel(
        time="12:05 AM", date="Jan 5, 2025"
    )
    assert format_range_display("2025-01-05T12:00") == "Jan 5, 2025, 12:00 PM"


def test_all_day_is_deterministic_and_suffixed():
    first = format_range("2025-07-04T00:00:00", all_day=True)
    second = format_range("2025-07-04T00:00:00", all_day=True)
    assert first == second == RangeLabel(time=None, date="Fri, Jul 4, 2025 (all day)")
    line = format_range_display("2025-07-04T00:00:00", all_day=True)
    assert line == format_range_display("2025-07-04T00:00:00", all_day=True)
    assert line.endswith("(all day)")


def test_all_day_multi_day_and_same_day_end():
    assert (
        format_range_display("2025-07-04T00:00", "2025-07-06T00:00", all_day=True)
        == "Fri, Jul 4, 2025 – Sun, Jul 6, 2025 (all day)"
    )
    assert (
        format_range_display("2025-07-04T00:00", "2025-07-04T23:59", all_day=True)
        == "Fri, Jul 4, 2025 (all day)"
    )


def test_one_floating_endpoint_forces_utc():
    label = format_range(
        "2025-01-05T15:00", "2025-01-05T22:00:00Z", timezone="America/New_York"
    )
    assert label.time == "3:00 PM – 10:00 PM"
    assert effective_timezone(
        parse_temporal("2025-01-05T15:00"), timezone="America/New_York"
    ).value is UTC


def test_default_zone_comes_from_settings(use_settings):
    use_settings(default_timezone="America/Chicago")
    assert format_range("2025-01-05T21:00:00Z").time == "3:00 PM"


def test_accepts_parsed_instants():
    start = parse_temporal("2025-01-05T15:00")
    end = parse_temporal("2025-01-05T16:30")
    assert format_range(start, end).time == "3:00 PM – 4:30 PM"


@pytest.mark.parametrize(
    "start, end, timezone",
    [
        ("not a date", None, None),
        (None, None, None),
        ("   ", None, None),
        ("2025-01-05T15:00", "garbage", None),
        ("2025-01-05T15:00:00Z", None, "Mars/Olympus_Mons"),
        ("2025-01-05T15:00:00Z", None, "America"),
        ("0001-01-01T00:30:00+01:00", None, None),
        ("9999-12-31T23:30:00-05:00", None, None),
        ("0001-01-01T00:30:00Z", None, "America/New_York"),
        ("2025-01-05T15:00:00Z", "9999-12-31T23:30:00-05:00", None),
    ],
)
def test_failures_are_soft(start, end, timezone):
    assert format_range(start, end, timezone=timezone) == EMPTY_LABEL
    assert format_range(start, end, timezone=timezone).is_empty
    assert format_range_display(start, end, timezone=timezone) is None


def test_unknown_zone_is_ignored_for_floating_values():
    assert format_range("2025-01-05T15:00", timezone="Mars/Olympus_Mons").time == (
        "3:00 PM"
    )
    assert isinstance(
        effective_timezone(parse_temporal("2025-01-05T15:00:00Z"), timezone="Nope/Nope"),
        Err,
    )
