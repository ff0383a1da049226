import pytest

from conftest import FakeProvider, make_feature
from apps.locations.errors import ProviderTimeout
from apps.locations.services.location_search import UKLocationSearchService


def test_runs_four_strategies(service, provider):
    service.enhanced_search("Baker Street")

    assert [(c["query"], c["types"], c["limit"]) for c in provider.calls] == [
        ("Baker Street", None, 20),
        ("Baker Street", ("poi",), 15),
        ("Baker Street", ("address",), 10),
        ("Baker Street", ("place",), 10),
    ]


def test_results_ranked_by_place_type_with_stable_ties(service, provider):
    provider.respond("Baker Street", [
        make_feature("addr.1", "221B Baker Street", place_type=["address"]),
        make_feature("nbh.1", "Marylebone", place_type=["neighborhood"]),
        make_feature("poi.1", "Sherlock Holmes Museum"),
        make_feature("pc.1", "NW1 6XE", place_type=["postcode"]),
        make_feature("reg.1", "England", place_type=["region"]),
    ], types=None)
    provider.respond("Baker Street", [
        make_feature("poi.2", "Baker Street Station"),
        make_feature("poi.1", "Sherlock Holmes Museum"),
    ], types=["poi"])
    provider.respond("Baker Street", [
        make_feature("place.1", "London", place_type=["place"]),
    ], types=["place"])

    result = service.enhanced_search("Baker Street")

    assert [s.id for s in result.data] == [
        "poi.1", "poi.2", "place.1", "addr.1", "pc.1", "nbh.1", "reg.1",
    ]
    assert all(s.metadata.category == "general" for s in result.data)


def test_results_capped_at_twenty(service, provider):
    provider.respond("Oxford", [make_feature(f"poi.{i}", f"Oxford {i}") for i in range(20)], types=None)
    provider.respond("Oxford", [make_feature(f"poi.x{i}", f"Oxford x{i}") for i in range(15)], types=["poi"])

    result = service.enhanced_search("Oxford")

    assert len(result.data) == 20
    assert result.data[-1].id == "poi.19"


@pytest.mark.parametrize("query", ["", "x", "  "])
def test_short_query_returns_empty(service, provider, query):
    result = service.enhanced_search(query)

    assert result.success and result.data == []
    assert provider.calls == []


def test_cached_by_lowercased_query(service, provider):
    service.enhanced_search("Soho")
    calls = len(provider.calls)
    service.enhanced_search("soho")

    assert len(provider.calls) == calls


def test_one_strategy_timing_out_keeps_the_rest(service, provider):
    provider.fail("Leeds", ProviderTimeout("8s"), types=None)
    provider.respond("Leeds", [make_feature("place.leeds", "Leeds", place_type=["place"])], types=["place"])

    result = service.enhanced_search("Leeds")

    assert result.success
    assert [s.id for s in result.data] == ["place.leeds"]


def test_missing_token(cache):
    svc = UKLocationSearchService(provider=FakeProvider(configured=False), cache=cache, max_workers=1)

    result = svc.enhanced_search("Leeds")

    assert result.error.code == "config_error"
    assert result.error.message == "Missing Mapbox token"


def test_place_poi_address_reordered(service, provider):
    provider.respond("Camden", [
        make_feature("place.1", "Camden Town", place_type=["place"]),
        make_feature("poi.1", "Camden Market"),
        make_feature("addr.1", "Camden Road", place_type=["address"]),
    ], types=None)

    result = service.enhanced_search("Camden")

    assert [s.metadata.primary_type for s in result.data] == ["poi", "place", "address"]
