"""Destination repository interface and factory."""

from __future__ import annotations

import logging
from typing import Optional, Protocol, runtime_checkable

from travel_search.config.settings import seed_data_file
from travel_search.domain.models import (
    Activity,
    CombinedRoute,
    Destination,
    RouteSegment,
    SearchParams,
    TransportMode,
)
from travel_search.domain.pricing import PricingTable
from travel_search.persistence.memory_repository import InMemoryDestinationRepository

_logger = logging.getLogger("travel-search.repository")


@runtime_checkable
class DestinationRepository(Protocol):
    backend: str
    pricing: PricingTable

    def search_destinations(self, params: SearchParams) -> list[Destination]: ...

    def get_popular_destinations(self) -> list[Destination]: ...

    def get_transport_modes(self) -> list[TransportMode]: ...

    def get_activities(self) -> list[Activity]: ...

    def get_combined_routes(self, origin: str, destination: str) -> list[CombinedRoute]: ...

    def get_route(self, route_id: int) -> CombinedRoute: ...

    def get_route_segments(self, route_id: int) -> list[RouteSegment]: ...


_repository: Optional[DestinationRepository] = None


def get_repository() -> DestinationRepository:
    global _repository
    if _repository is None:
        path = seed_data_file()
        _logger.info("Loading seed data from %s", path)
        _repository = InMemoryDestinationRepository.from_file(path, pricing=PricingTable.from_env())
    return _repository


def reset_repository() -> None:
    """重置仓库单例（测试用）"""
    global _repository
    _repository = None


__all__ = ["DestinationRepository", "get_repository", "reset_repository"]
