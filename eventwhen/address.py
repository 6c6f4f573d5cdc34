"""Location helpers: two-line address layout, venue joining and map links."""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import quote

_postal_code = re.compile(r"\b\d{5}(?:-\d{4})?\b")

MAP_SEARCH_URLS = {
    "google": "https://www.google.com/maps/search/?api=1&query={query}",
    "apple": "https://maps.apple.com/?q={query}",
}


@dataclass(frozen=True)
class AddressParts:
    street: str = ""
    city_state_zip: str = ""


def split_address(address: str | None) -> AddressParts:
    """Split ``"123 Main St, Springfield, IL 62704"`` into street and city lines.

    Only addresses ending in a US postal code are split; anything else is
    returned whole as the street line.
    """

    original = (address or "").strip()
    if not original:
        return AddressParts()

    segments = [segment.strip() for segment in original.split(",")]
    if len(segments) >= 2 and _postal_code.search(segments[-1]):
        if len(segments) >= 3:
            return AddressParts(
                street=segments[0], city_state_zip=", ".join(segments[1:])
            )
        return AddressParts(street=segments[0], city_state_zip=segments[-1])
    return AddressParts(street=original, city_state_zip="")


def combine_venue_and_location(
    venue: str | None, location: str | None
) -> str | None:
    venue_text = (venue or "").strip()
    location_text = (location or "").strip()
    if venue_text and location_text:
        if location_text.lower().startswith(venue_text.lower()):
            return location_text
        return f"{venue_text}, {location_text}"
    return venue_text or location_text or None


def map_search_url(location: str | None, provider: str = "google") -> str | None:
    """Return a maps search link for ``location``; blank locations give ``None``."""

    trimmed = (location or "").strip()
    if not trimmed:
        return None
    try:
        template = MAP_SEARCH_URLS[provider]
    except KeyError as exc:
        raise ValueError(f"Unknown map provider {provider!r}") from exc
    return template.format(query=quote(trimmed, safe=""))
