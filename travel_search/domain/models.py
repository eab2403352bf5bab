"""Pydantic domain models.

Wire format is camelCase (``imageUrl``, ``bestTimeToVisit``); attributes are
snake_case. ``from``/``to`` are exposed as ``from_city``/``to_city``.
"""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from travel_search.domain.enums import ConnectionPreference, SortOrder, TravelClass


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Destination(_WireModel):
    id: int
    name: str
    description: str = ""
    image_url: str = Field(default="", alias="imageUrl")
    price: int = Field(ge=0)
    rating: int = Field(ge=1, le=5)
    tags: list[str] = Field(default_factory=list)
    from_city: str = Field(default="", alias="from")
    to_city: str = Field(default="", alias="to")


class TransportMode(_WireModel):
    id: int
    name: str
    type: str
    image_url: str = Field(default="", alias="imageUrl")
    price: int = Field(ge=0)


class Activity(_WireModel):
    id: int
    name: str
    description: str = ""
    image_url: str = Field(default="", alias="imageUrl")
    price: int = Field(ge=0)
    duration: float = Field(default=0, ge=0, description="Duration in hours")


class Location(_WireModel):
    id: int
    name: str
    code: str


class RouteSegment(_WireModel):
    id: int
    from_city: str = Field(alias="from")
    to_city: str = Field(alias="to")
    transport_mode: str = Field(alias="transportMode")
    duration: int = Field(ge=0, description="Duration in minutes")
    price: int = Field(ge=0)


class CombinedRoute(_WireModel):
    id: int
    from_city: str = Field(alias="from")
    to_city: str = Field(alias="to")
    segments: list[int] = Field(default_factory=list, description="Ordered segment ids")
    total_price: int = Field(default=0, ge=0, alias="totalPrice")
    total_duration: int = Field(default=0, ge=0, alias="totalDuration")


class TravelSuggestion(BaseModel):
    destination: str
    duration: str
    budget: str
    activities: list[str]
    transportation: list[str]
    accommodation: str


class DreamDestination(_WireModel):
    destination: str
    description: str
    activities: list[str]
    best_time_to_visit: str = Field(alias="bestTimeToVisit")
    estimated_budget: str = Field(alias="estimatedBudget")
    highlights: list[str]
    climate: str
    travel_tips: list[str] = Field(alias="travelTips")


class SearchParams(BaseModel):
    origin: Optional[str] = None
    destination: Optional[str] = None
    travel_class: str = TravelClass.ECONOMY.value
    passengers: int = 1
    departure_date: Optional[dt.date] = None
    return_date: Optional[dt.date] = None
    flexible_dates: bool = False
    connection_preference: ConnectionPreference = ConnectionPreference.ANY
    sort: SortOrder = SortOrder.NONE

    @field_validator("origin", "destination", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @property
    def has_location_filter(self) -> bool:
        return bool(self.origin or self.destination)
