"""Best-effort "When" labels built only from what the organizer typed."""

from __future__ import annotations

import re

from .formatting import RANGE_SEPARATOR
from .tokens import extract_time_tokens, first_time_token

_trailing_comma = re.compile(r",\s*$")


def _date_prefix(label: str) -> str:
    """Drop a trailing comma-separated segment that holds a clock time."""

    parts = [part.strip() for part in label.split(",") if part.strip()]
    if parts and extract_time_tokens(parts[-1]):
        parts.pop()
    return ", ".join(parts)


def build_fallback_range_label(
    start_label: str | None, end_label: str | None
) -> str | None:
    """Join raw start/end labels into one line without parsing any dates.

    ``"Jan 5, 3:00 PM"`` and ``"5:00 PM"`` become ``"Jan 5, 3:00 PM – 5:00 PM"``.
    When the end label names a different day it is kept whole so nothing the
    organizer wrote is lost.
    """

    trimmed_start = (start_label or "").strip()
    if not trimmed_start:
        return None
    trimmed_end = (end_label or "").strip()
    if not trimmed_end:
        return trimmed_start

    start_time = first_time_token(trimmed_start)
    end_time = first_time_token(trimmed_end)

    if start_time and end_time:
        date_part = _date_prefix(trimmed_start)
        end_remainder = _trailing_comma.sub(
            "", trimmed_end.replace(end_time, "", 1)
        ).strip()
        if end_remainder and end_remainder != date_part:
            prefix = f"{date_part}, {start_time}" if date_part else start_time
            return f"{prefix}{RANGE_SEPARATOR}{trimmed_end}"
        prefix = f"{date_part}, " if date_part else ""
        return f"{prefix}{start_time}{RANGE_SEPARATOR}{end_time}"

    if start_time:
        date_part = _date_prefix(trimmed_start)
        prefix = f"{date_part}, " if date_part else ""
        return f"{prefix}{start_time}"

    return f"{trimmed_start}{RANGE_SEPARATOR}{trimmed_end}"
