"""Destination filtering and price adjustment."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import Optional

from travel_search.domain.enums import ConnectionPreference, SortOrder
from travel_search.domain.models import Destination, SearchParams
from travel_search.domain.pricing import PricingTable

_logger = logging.getLogger("travel-search.search")

_DURATION_RE = re.compile(r"^\s*(?:(?P<hours>\d+)\s*h)?\s*(?:(?P<minutes>\d+)\s*min)?\s*$", re.IGNORECASE)


def parse_duration_minutes(tags: Iterable[str]) -> Optional[int]:
    """Return the first ``"2h 24min"`` / ``"120min"`` / ``"3h"`` tag as minutes."""
    for tag in tags:
        match = _DURATION_RE.match(str(tag))
        if not match:
            continue
        hours, minutes = match.group("hours"), match.group("minutes")
        if hours is None and minutes is None:
            continue
        return int(hours or 0) * 60 + int(minutes or 0)
    return None


def _contains(term: str, *fields: str) -> bool:
    needle = term.lower()
    return any(needle in (value or "").lower() for value in fields)


def matches(record: Destination, params: SearchParams) -> bool:
    if params.origin and not _contains(params.origin, record.name, record.description, record.from_city):
        return False
    if params.destination and not _contains(params.destination, record.name, record.description, record.to_city):
        return False
    return True


def _order_by_connection(records: list[Destination], preference: ConnectionPreference) -> list[Destination]:
    if preference == ConnectionPreference.ANY:
        return records
    known = [r for r in records if parse_duration_minutes(r.tags) is not None]
    unknown = [r for r in records if parse_duration_minutes(r.tags) is None]
    known.sort(
        key=lambda r: parse_duration_minutes(r.tags) or 0,
        reverse=preference == ConnectionPreference.LONGER,
    )
    return known + unknown


def _order_recommended(records: list[Destination]) -> list[Destination]:
    return sorted(records, key=lambda r: (-r.rating, r.price))


def search_destinations(
    records: Iterable[Destination],
    params: SearchParams,
    pricing: PricingTable,
) -> list[Destination]:
    """Filter by origin/destination substrings and reprice for class and party size.

    Returned records are copies; ``records`` is left untouched.
    """
    candidates = list(records)
    if params.has_location_filter:
        candidates = [r for r in candidates if matches(r, params)]

    priced = [
        r.model_copy(update={"price": pricing.price(r.price, params.travel_class, params.passengers)}, deep=True)
        for r in candidates
    ]

    priced = _order_by_connection(priced, params.connection_preference)
    if params.sort == SortOrder.RECOMMENDED:
        priced = _order_recommended(priced)

    _logger.debug(
        "search from=%r to=%r class=%s passengers=%d departure=%s return=%s flexible=%s -> %d results",
        params.origin,
        params.destination,
        params.travel_class,
        params.passengers,
        params.departure_date,
        params.return_date,
        params.flexible_dates,
        len(priced),
    )
    return priced


__all__ = ["matches", "parse_duration_minutes", "search_destinations"]
