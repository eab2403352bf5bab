"""Mock location provider backed by the seed data city list."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from travel_search.config.settings import seed_data_file
from travel_search.domain.models import Location
from travel_search.persistence.memory_repository import load_seed
from travel_search.tools.interfaces import LocationSearchInput

MIN_QUERY_LENGTH = 2


class MockLocationProvider:
    name = "mock"

    def __init__(self, locations: list[Location]):
        self._locations = list(locations)

    @classmethod
    def from_file(cls, path: Optional[Path] = None) -> "MockLocationProvider":
        seed = load_seed(path or seed_data_file())
        return cls([Location.model_validate(raw) for raw in seed.get("locations", [])])

    def search(self, params: LocationSearchInput) -> list[Location]:
        needle = params.query.strip().lower()
        if len(needle) < MIN_QUERY_LENGTH:
            return []
        results: list[Location] = []
        for loc in self._locations:
            if needle in loc.name.lower() or needle in loc.code.lower():
                results.append(loc.model_copy())
            if len(results) >= params.limit:
                break
        return results
