"""travel-search CLI 入口: query the store and the suggestion service from a shell"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel

from travel_search.adapters.tool_factory import get_location_provider
from travel_search.config.settings import location_suggestion_limit
from travel_search.domain.enums import ConnectionPreference, SortOrder
from travel_search.domain.models import SearchParams
from travel_search.persistence.repository import get_repository
from travel_search.services import suggestion_service
from travel_search.shared.exceptions import SuggestionGenerationError
from travel_search.tools.interfaces import LocationSearchInput


def _dump(payload: Any) -> str:
    if isinstance(payload, BaseModel):
        data: Any = payload.model_dump(by_alias=True, mode="json")
    else:
        data = [item.model_dump(by_alias=True, mode="json") for item in payload]
    return json.dumps(data, ensure_ascii=False, indent=2)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="travel-search", description="Travel search and suggestion CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="Search destinations with class/passenger pricing")
    search.add_argument("--from", dest="origin", default=None)
    search.add_argument("--to", dest="destination", default=None)
    search.add_argument("--class", dest="travel_class", default="economy")
    search.add_argument("--passengers", type=int, default=1)
    search.add_argument(
        "--connection",
        choices=[c.value for c in ConnectionPreference],
        default=ConnectionPreference.ANY.value,
    )
    search.add_argument("--sort", choices=[s.value for s in SortOrder], default=SortOrder.NONE.value)

    sub.add_parser("popular", help="List popular destinations")

    locations = sub.add_parser("locations", help="City name suggestions")
    locations.add_argument("query")

    routes = sub.add_parser("routes", help="Combined multi-segment routes")
    routes.add_argument("origin")
    routes.add_argument("destination")

    suggest = sub.add_parser("suggest", help="Ask the LLM for travel suggestions")
    suggest.add_argument("prompt", nargs="+")

    sub.add_parser("dream", help="Ask the LLM for a dream destination")

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = _build_parser().parse_args(argv)

    if args.command == "serve":
        import uvicorn

        uvicorn.run("travel_search.api.main:app", host=args.host, port=args.port)
        return 0

    repo = get_repository()

    if args.command == "search":
        if args.passengers < 1:
            print("--passengers must be >= 1", file=sys.stderr)
            return 2
        params = SearchParams(
            origin=args.origin,
            destination=args.destination,
            travel_class=args.travel_class,
            passengers=args.passengers,
            connection_preference=ConnectionPreference(args.connection),
            sort=SortOrder(args.sort),
        )
        print(_dump(repo.search_destinations(params)))
    elif args.command == "popular":
        print(_dump(repo.get_popular_destinations()))
    elif args.command == "locations":
        query = LocationSearchInput(query=args.query, limit=location_suggestion_limit())
        print(_dump(get_location_provider().search(query)))
    elif args.command == "routes":
        print(_dump(repo.get_combined_routes(args.origin, args.destination)))
    else:
        try:
            if args.command == "suggest":
                result = suggestion_service.get_travel_suggestions(" ".join(args.prompt))
            else:
                result = suggestion_service.get_dream_destination()
        except SuggestionGenerationError as exc:
            print(f"❌ {exc}", file=sys.stderr)
            return 1
        print(_dump(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
