import json

import pytest

from travel_search.domain.exceptions import RouteNotFound
from travel_search.domain.models import SearchParams
from travel_search.domain.pricing import PricingTable
from travel_search.persistence.memory_repository import InMemoryDestinationRepository
from travel_search.persistence.repository import DestinationRepository, get_repository, reset_repository
from travel_search.shared.exceptions import ConfigError


@pytest.fixture
def repo():
    return get_repository()


def test_default_repository_satisfies_protocol(repo):
    assert isinstance(repo, DestinationRepository)
    assert repo.backend == "memory"


def test_repository_is_singleton_until_reset(repo):
    assert get_repository() is repo
    reset_repository()
    assert get_repository() is not repo


def test_london_paris_business_example(repo):
    params = SearchParams(origin="London", destination="Paris", travel_class="business", passengers=2)
    results = repo.search_destinations(params)
    train = next(r for r in results if "train" in r.tags)
    assert train.price == 320
    assert all(r.from_city == "London" and r.to_city == "Paris" for r in results)


def test_repeated_searches_never_mutate_store(repo):
    before = [d.model_dump() for d in repo.get_popular_destinations()]
    for passengers in (1, 2, 5):
        repo.search_destinations(SearchParams(travel_class="first", passengers=passengers))
    after = [d.model_dump() for d in repo.get_popular_destinations()]
    assert before == after


def test_popular_returns_copies(repo):
    first = repo.get_popular_destinations()
    first[0].price = 999_999
    assert repo.get_popular_destinations()[0].price != 999_999


def test_seed_records_are_valid(repo):
    for dest in repo.get_popular_destinations():
        assert 1 <= dest.rating <= 5
        assert dest.price >= 0
    assert len(repo.get_transport_modes()) == 4
    assert [a.name for a in repo.get_activities()] == ["City Tour", "Food Tour"]


def test_combined_routes_match_case_insensitively(repo):
    routes = repo.get_combined_routes("london", "AMSTERDAM")
    assert [r.id for r in routes] == [1, 2]
    assert routes[0].total_price == 140
    assert routes[0].total_duration == 344


def test_combined_routes_unknown_pair_is_empty(repo):
    assert repo.get_combined_routes("London", "Tokyo") == []


def test_route_segments_follow_route_order(repo):
    segments = repo.get_route_segments(2)
    assert [s.id for s in segments] == [3, 4, 5]
    assert [s.transport_mode for s in segments] == ["bus", "ferry", "train"]


def test_unknown_route_raises(repo):
    with pytest.raises(RouteNotFound):
        repo.get_route_segments(999)


def test_route_with_unknown_segment_is_rejected():
    seed = {"routeSegments": [], "combinedRoutes": [{"id": 1, "from": "A", "to": "B", "segments": [7]}]}
    with pytest.raises(ConfigError):
        InMemoryDestinationRepository(seed)


def test_missing_seed_file_is_config_error(tmp_path):
    with pytest.raises(ConfigError):
        InMemoryDestinationRepository.from_file(tmp_path / "missing.json")


def test_custom_seed_file_and_pricing(tmp_path, monkeypatch):
    seed_file = tmp_path / "seed.json"
    seed_file.write_text(
        json.dumps(
            {
                "destinations": [
                    {"id": 1, "name": "Tram", "description": "", "imageUrl": "", "price": 10, "rating": 3, "tags": []}
                ]
            }
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("SEED_DATA_FILE", str(seed_file))
    monkeypatch.setenv("CLASS_MULTIPLIERS", "first=4")
    repo = get_repository()
    assert repo.search_destinations(SearchParams(travel_class="first"))[0].price == 40
    assert repo.get_transport_modes() == []


def test_explicit_pricing_table_is_used():
    seed = {"destinations": [{"id": 1, "name": "X", "imageUrl": "", "price": 10, "rating": 1, "tags": []}]}
    repo = InMemoryDestinationRepository(seed, pricing=PricingTable({"economy": 1.5, "business": 2, "first": 3}))
    assert repo.search_destinations(SearchParams())[0].price == 15
