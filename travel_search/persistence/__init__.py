"""Persistence package exports."""

from travel_search.persistence.memory_repository import InMemoryDestinationRepository
from travel_search.persistence.repository import DestinationRepository, get_repository, reset_repository

__all__ = [
    "DestinationRepository",
    "InMemoryDestinationRepository",
    "get_repository",
    "reset_repository",
]
