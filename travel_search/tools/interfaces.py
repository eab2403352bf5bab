"""Tool abstraction protocols and I/O schemas."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field

from travel_search.domain.models import Location


class LocationSearchInput(BaseModel):
    query: str
    limit: int = Field(default=10, ge=1)


@runtime_checkable
class LocationProvider(Protocol):
    """City lookup used by origin/destination autocompletion."""

    name: str

    def search(self, params: LocationSearchInput) -> list[Location]: ...


__all__ = ["LocationProvider", "LocationSearchInput"]
