import pytest

from conftest import FakeProvider, make_feature
from apps.locations.services.location_search import UKLocationSearchService


def test_queries_all_variants_with_poi_filter(service, provider):
    service.search_famous_places("Tower")

    assert provider.queries() == [
        "Tower",
        "Tower landmark",
        "Tower attraction",
        "Tower tourist",
        "Tower famous",
        "Tower popular",
    ]
    assert all(c["types"] == ("poi",) and c["limit"] == 10 for c in provider.calls)


def test_keeps_only_landmarks_matching_query(service, provider):
    provider.respond("London", [
        make_feature("poi.1", "Tower of London", "Tower of London, London, England"),
        make_feature("poi.2", "London Records", "London Records, Soho, England"),
        make_feature("poi.3", "Blackpool Tower", "Blackpool Tower, Blackpool, England"),
    ])
    provider.respond("London landmark", [
        make_feature("poi.4", "Big Ben", "Big Ben, Westminster, London"),
        make_feature("poi.1", "Tower of London", "Tower of London, London, England"),
        make_feature("poi.5", "Natural History Museum", "Natural History Museum, London, England"),
    ])

    result = service.search_famous_places("London")

    assert result.success
    assert [s.id for s in result.data] == ["poi.1", "poi.5"]
    assert all(s.metadata.category == "famous_place" for s in result.data)


def test_landmark_keyword_may_come_from_place_name(service, provider):
    provider.respond("kew", [
        make_feature("poi.kew", "Kew Gardens", "Kew Gardens, Royal Botanic Park, Richmond"),
    ])

    result = service.search_famous_places("kew")

    assert [s.id for s in result.data] == ["poi.kew"]


def test_results_capped_at_fifteen(service, provider):
    provider.respond("Castle", [make_feature(f"poi.a{i}", f"Castle {i}") for i in range(10)])
    provider.respond("Castle landmark", [make_feature(f"poi.b{i}", f"Castle {i}b") for i in range(10)])

    result = service.search_famous_places("Castle")

    assert len(result.data) == 15
    assert result.data[0].id == "poi.a0"
    assert result.data[-1].id == "poi.b4"


@pytest.mark.parametrize("query", ["", " ", "a", " b "])
def test_short_query_returns_empty_without_calls(service, provider, query):
    result = service.search_famous_places(query)

    assert result.success
    assert result.data == []
    assert provider.calls == []


def test_short_query_skips_token_check(cache):
    svc = UKLocationSearchService(provider=FakeProvider(configured=False), cache=cache, max_workers=1)
    assert svc.search_famous_places("a").success


def test_cache_key_is_case_insensitive(service, provider):
    provider.respond("Palace", [make_feature("poi.p", "Buckingham Palace")])

    first = service.search_famous_places("Palace")
    calls = len(provider.calls)
    second = service.search_famous_places("PALACE")

    assert len(provider.calls) == calls
    assert second == first


def test_no_matches_is_empty_success_and_cached(service, provider):
    first = service.search_famous_places("zzzz")
    calls = len(provider.calls)
    second = service.search_famous_places("zzzz")

    assert first.success and first.data == []
    assert second.success and second.data == []
    assert len(provider.calls) == calls


def test_missing_token(cache):
    svc = UKLocationSearchService(provider=FakeProvider(configured=False), cache=cache, max_workers=1)

    result = svc.search_famous_places("Tower")

    assert result.error.message == "Missing Mapbox token"
    assert result.error.details == "Mapbox access token is not configured"


def test_hyde_park_kept_hyde_street_dropped(service, provider):
    provider.respond("hyde", [
        make_feature("poi.hp", "Hyde Park", "Hyde Park, London, England"),
        make_feature("addr.hs", "Hyde Street", "Hyde Street, Winchester, England"),
    ])

    result = service.search_famous_places("hyde")

    assert [s.id for s in result.data] == ["poi.hp"]
