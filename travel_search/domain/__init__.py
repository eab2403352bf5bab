"""Domain layer: models, pricing and search semantics."""

from travel_search.domain.exceptions import DomainError, InvalidSearchParams, RouteNotFound

__all__ = ["DomainError", "InvalidSearchParams", "RouteNotFound"]
