"""Domain semantic exceptions."""


class DomainError(Exception):
    """Base domain exception."""


class InvalidSearchParams(DomainError):
    """Raised when search parameters are semantically invalid."""


class RouteNotFound(DomainError):
    """Raised when a combined route id does not exist."""

    def __init__(self, route_id: int | str):
        self.route_id = route_id
        super().__init__(f"Route not found: {route_id}")
