import pytest
from fastapi.testclient import TestClient

from conftest import FakeProvider, make_feature
from apps.api.deps import get_location_service
from apps.api.main import app
from apps.locations.services.location_search import UKLocationSearchService


@pytest.fixture
def api(service):
    app.dependency_overrides[get_location_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(api):
    r = api.get("/api/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_locations_health_reports_cache(api, service):
    service.search_terminals("heathrow", "airport")

    r = api.get("/api/health/locations")

    data = r.json()
    assert data["status"] == "healthy"
    assert data["components"]["cache"]["total_entries"] == 1


def test_list_categories(api, provider):
    r = api.get("/api/locations/categories")

    assert r.status_code == 200
    data = r.json()
    assert data["totalCount"] == 12
    first = data["categories"][0]
    assert first["id"] == "airports"
    assert "Heathrow Airport" in first["searchQueries"]
    assert provider.calls == []


def test_category_search_envelope(api, provider):
    provider.respond("Heathrow Airport", [make_feature("poi.lhr", "Heathrow Airport")])

    r = api.get("/api/locations/categories/airports")

    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["error"] is None
    assert body["data"][0]["mainText"] == "Heathrow Airport"
    assert body["data"][0]["metadata"]["category"] == "airports"


def test_unknown_category_is_404(api):
    r = api.get("/api/locations/categories/volcanoes")

    assert r.status_code == 404
    body = r.json()
    assert body["success"] is False
    assert body["data"] is None
    assert body["error"] == {
        "message": "Category not found",
        "details": "Category volcanoes does not exist",
        "code": "not_found",
    }


def test_missing_token_is_503(cache):
    svc = UKLocationSearchService(provider=FakeProvider(configured=False), cache=cache, max_workers=1)
    app.dependency_overrides[get_location_service] = lambda: svc
    try:
        r = TestClient(app).get("/api/locations/search", params={"q": "Leeds"})
    finally:
        app.dependency_overrides.clear()

    assert r.status_code == 503
    assert r.json()["error"]["code"] == "config_error"


def test_famous_and_search_accept_short_queries(api, provider):
    assert api.get("/api/locations/famous", params={"q": "a"}).json() == {
        "success": True, "data": [], "error": None,
    }
    assert api.get("/api/locations/search").json()["data"] == []
    assert provider.calls == []


def test_terminals_endpoint(api):
    r = api.get("/api/locations/kings-cross/terminals", params={"category": "train_station"})

    assert r.status_code == 200
    data = r.json()["data"]
    assert [d["id"] for d in data] == ["kings-cross-main", "kings-cross-west"]
    assert data[0]["metadata"]["parentPlaceId"] == "kings-cross"


def test_terminals_rejects_unknown_category(api):
    r = api.get("/api/locations/heathrow/terminals", params={"category": "ferry"})
    assert r.status_code == 422


class _BrokenDataset:
    def find_location_by_id(self, location_id):
        raise RuntimeError("dataset unavailable")

    def get_terminals_by_location_id(self, location_id):
        return []


def test_unexpected_failure_is_502(provider, cache):
    svc = UKLocationSearchService(provider=provider, cache=cache, dataset=_BrokenDataset(), max_workers=1)
    app.dependency_overrides[get_location_service] = lambda: svc
    try:
        r = TestClient(app).get("/api/locations/heathrow/terminals")
    finally:
        app.dependency_overrides.clear()

    assert r.status_code == 502
    assert r.json()["error"]["message"] == "Failed to search terminals"


def test_failing_query_is_skipped_not_502(api, provider):
    provider.fail("Leeds", RuntimeError("boom"), types=None)
    provider.respond("Leeds", [make_feature("place.leeds", "Leeds", place_type=["place"])], types=["place"])

    r = api.get("/api/locations/search", params={"q": "Leeds"})

    assert r.status_code == 200
    assert [d["id"] for d in r.json()["data"]] == ["place.leeds"]
