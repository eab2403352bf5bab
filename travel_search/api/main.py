"""FastAPI 主应用: travel search endpoints"""

from __future__ import annotations

import datetime as dt
import logging
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from travel_search.adapters.tool_factory import describe_active_tools, get_location_provider
from travel_search.api.schemas import DiagnosticsResponse, ErrorResponse, HealthResponse
from travel_search.config.settings import (
    cors_origins,
    docs_enabled,
    location_suggestion_limit,
    resolve_provider_snapshot,
)
from travel_search.domain.enums import ConnectionPreference, SortOrder, TravelClass
from travel_search.domain.exceptions import RouteNotFound
from travel_search.domain.models import (
    Activity,
    CombinedRoute,
    Destination,
    DreamDestination,
    Location,
    RouteSegment,
    SearchParams,
    TransportMode,
    TravelSuggestion,
)
from travel_search.persistence.repository import get_repository
from travel_search.security.redact import redact_sensitive
from travel_search.services import suggestion_service
from travel_search.shared.exceptions import ConfigError
from travel_search.tools.interfaces import LocationSearchInput

_api_logger = logging.getLogger("travel-search.api")

load_dotenv()

app = FastAPI(
    title="travel-search",
    version="1.0.0",
    docs_url="/docs" if docs_enabled() else None,
    redoc_url=None,
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """注入安全响应头"""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)

_ERROR_RESPONSES = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def _safe_log_exception(context: str, exc: Exception) -> None:
    _api_logger.error("%s: %s: %s", context, type(exc).__name__, redact_sensitive(str(exc)))


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")


@app.get("/diagnostics", response_model=DiagnosticsResponse, responses=_ERROR_RESPONSES)
def diagnostics():
    """Active providers and the pricing table the repository was loaded with."""
    try:
        repo = get_repository()
    except ConfigError as exc:
        _safe_log_exception("diagnostics endpoint error", exc)
        return _error(500, "Configuration error")
    tools = describe_active_tools()
    snapshot = resolve_provider_snapshot(
        repository_backend=repo.backend,
        location_provider=tools["location"],
        class_multipliers=repo.pricing.multipliers,
    )
    return DiagnosticsResponse(tools=tools, providers=snapshot.model_dump())


@app.get("/api/destinations", response_model=list[Destination])
def search_destinations(
    origin: Optional[str] = Query(default=None, alias="from"),
    destination: Optional[str] = Query(default=None, alias="to"),
    departure_date: Optional[dt.date] = Query(default=None, alias="departureDate"),
    return_date: Optional[dt.date] = Query(default=None, alias="returnDate"),
    passengers: int = Query(default=1, ge=1),
    travel_class: str = Query(default=TravelClass.ECONOMY.value, alias="class"),
    flexible_dates: bool = Query(default=False, alias="flexibleDates"),
    connection_preference: ConnectionPreference = Query(
        default=ConnectionPreference.ANY, alias="connectionPreference"
    ),
    sort: SortOrder = Query(default=SortOrder.NONE),
):
    params = SearchParams(
        origin=origin,
        destination=destination,
        travel_class=travel_class,
        passengers=passengers,
        departure_date=departure_date,
        return_date=return_date,
        flexible_dates=flexible_dates,
        connection_preference=connection_preference,
        sort=sort,
    )
    return get_repository().search_destinations(params)


@app.get("/api/popular", response_model=list[Destination])
def popular_destinations():
    return get_repository().get_popular_destinations()


@app.get("/api/transport", response_model=list[TransportMode])
def transport_modes():
    return get_repository().get_transport_modes()


@app.get("/api/activities", response_model=list[Activity])
def activities():
    return get_repository().get_activities()


@app.get("/api/locations/suggestions", response_model=list[Location])
def location_suggestions(q: str = Query(default="")):
    provider = get_location_provider()
    return provider.search(LocationSearchInput(query=q, limit=location_suggestion_limit()))


@app.get(
    "/api/travel-suggestions",
    response_model=TravelSuggestion,
    responses=_ERROR_RESPONSES,
)
def travel_suggestions(prompt: Optional[str] = Query(default=None)):
    if not prompt or not prompt.strip():
        return _error(400, "Prompt is required")
    try:
        return suggestion_service.get_travel_suggestions(prompt)
    except Exception as exc:
        _safe_log_exception("travel-suggestions endpoint error", exc)
        return _error(500, "Failed to generate travel suggestions")


@app.get(
    "/api/dream-destination",
    response_model=DreamDestination,
    responses=_ERROR_RESPONSES,
)
def dream_destination():
    try:
        return suggestion_service.get_dream_destination()
    except Exception as exc:
        _safe_log_exception("dream-destination endpoint error", exc)
        return _error(500, "Failed to generate dream destination")


@app.get("/api/routes/combined", response_model=list[CombinedRoute], responses=_ERROR_RESPONSES)
def combined_routes(
    origin: Optional[str] = Query(default=None, alias="from"),
    destination: Optional[str] = Query(default=None, alias="to"),
):
    if not (origin and origin.strip()) or not (destination and destination.strip()):
        return _error(400, "Both 'from' and 'to' parameters are required")
    return get_repository().get_combined_routes(origin, destination)


@app.get("/api/routes/segments/{route_id}", response_model=list[RouteSegment], responses=_ERROR_RESPONSES)
def route_segments(route_id: str):
    try:
        return get_repository().get_route_segments(int(route_id))
    except (ValueError, RouteNotFound):
        return _error(404, "Route not found")
