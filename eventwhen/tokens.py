"""Clock-time tokens found in free text, and how to compare them."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .config import settings

_time_token_pattern = re.compile(
    r"\b(\d{1,2})(?::(\d{2}))?\s*(?:a\.?m\.?|p\.?m\.?)\b|\b([01]?\d|2[0-3]):([0-5]\d)\b",
    re.IGNORECASE,
)
_meridiem_pattern = re.compile(
    r"^(\d{1,2})(?::(\d{2}))?\s*(a\.?m\.?|p\.?m\.?)$", re.IGNORECASE
)
_military_pattern = re.compile(r"^([01]?\d|2[0-3]):([0-5]\d)$")
_whitespace = re.compile(r"\s+")


@dataclass(frozen=True)
class TimeToken:
    text: str
    minutes: int | None


def normalize_time_token(token: str | None) -> int | None:
    """Return minutes since midnight for ``token`` or ``None`` if it is not a time."""

    if not token:
        return None
    trimmed = _whitespace.sub(" ", token.strip().lower())

    meridiem = _meridiem_pattern.match(trimmed)
    if meridiem:
        try:
            hour = int(meridiem.group(1))
            minute = int(meridiem.group(2) or "0")
        except ValueError:
            return None
        hour %= 12
        if meridiem.group(3).startswith("p"):
            hour += 12
        return hour * 60 + minute

    military = _military_pattern.match(trimmed)
    if military:
        try:
            return int(military.group(1)) * 60 + int(military.group(2))
        except ValueError:
            return None
    return None


def extract_time_tokens(text: str | None) -> list[TimeToken]:
    """Return the clock times in ``text`` in order of appearance."""

    if not text:
        return []
    return [
        TimeToken(text=match.group(0), minutes=normalize_time_token(match.group(0)))
        for match in _time_token_pattern.finditer(text)
    ]


def first_time_token(text: str | None) -> str | None:
    tokens = extract_time_tokens(text)
    return tokens[0].text if tokens else None


def last_time_token(text: str | None) -> str | None:
    tokens = extract_time_tokens(text)
    return tokens[-1].text if tokens else None


def _normalize_text(value: str) -> str:
    return _whitespace.sub(" ", value.strip().lower().replace(".", ""))


def tokens_equivalent(a: str | None, b: str | None) -> bool:
    """Return whether two time expressions name the same moment.

    Numeric times match within ``time_match_tolerance_minutes``; anything the
    grammar does not cover is compared as normalized text.
    """

    if not a or not b:
        return False
    first = normalize_time_token(a)
    second = normalize_time_token(b)
    if first is not None and second is not None:
        return abs(first - second) <= settings.time_match_tolerance_minutes
    return _normalize_text(a) == _normalize_text(b)
