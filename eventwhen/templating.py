"""Jinja helpers exposing the "When" line and address layout to templates."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jinja2 import Environment
from markupsafe import Markup, escape

from .address import map_search_url, split_address
from .formatting import RangeLabel
from .schedule import EventTiming, resolve_when, resolve_when_summary


def when_line(record: EventTiming | Mapping[str, Any] | None, default: str = "") -> str:
    return resolve_when(record) or default


def when_summary(record: EventTiming | Mapping[str, Any] | None) -> RangeLabel:
    return resolve_when_summary(record)


def address_lines(address: str | None) -> Markup:
    """Render an address as escaped street and city lines separated by ``<br>``."""

    parts = split_address(address)
    if not parts.city_state_zip:
        return Markup(escape(parts.street))
    return Markup("{}<br>{}").format(parts.street, parts.city_state_zip)


def register_template_helpers(env: Environment) -> Environment:
    """Install the filters and globals on ``env`` (e.g. ``templates.env``)."""
    env.filters["when_line"] = when_line
    env.filters["when_summary"] = when_summary
    env.filters["address_lines"] = address_lines
    env.globals["map_search_url"] = map_search_url
    return env
