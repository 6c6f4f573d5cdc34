"""Event date/time resolution and display."""

from __future__ import annotations

import logging

from .address import (
    AddressParts,
    combine_venue_and_location,
    map_search_url,
    split_address,
)
from . import config
from .fallback import build_fallback_range_label
from .formatting import RangeLabel, format_range, format_range_display
from .reconcile import reconcile_when_label
from .schedule import EventTiming, is_upcoming, resolve_when, resolve_when_summary
from .temporal import InvalidTemporalValue, ParsedInstant, parse_temporal
from .tokens import TimeToken, extract_time_tokens, tokens_equivalent

__all__ = [
    "AddressParts",
    "EventTiming",
    "InvalidTemporalValue",
    "ParsedInstant",
    "RangeLabel",
    "TimeToken",
    "build_fallback_range_label",
    "combine_venue_and_location",
    "configure_logging",
    "extract_time_tokens",
    "format_range",
    "format_range_display",
    "is_upcoming",
    "map_search_url",
    "parse_temporal",
    "reconcile_when_label",
    "resolve_when",
    "resolve_when_summary",
    "split_address",
    "tokens_equivalent",
]


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Set the package logger's level, defaulting to ``settings.log_level``."""
    logger = logging.getLogger(__name__)
    logger.setLevel(level if level is not None else config.settings.log_level)
    return logger
