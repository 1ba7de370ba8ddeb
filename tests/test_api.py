"""Tests for the HTTP surface over the session coordinator."""

import logging

import pytest
from fastapi.testclient import TestClient

from explorer.config import Settings
from explorer.dependencies.session import get_app_settings, get_coordinator, get_record_source, reset_session
from explorer.exceptions import FetchFailure
from explorer.models.catalog import ShowDetail
from main import create_app


class FakeSource:
    """Stands in for RecordSource; returns canned results."""

    def __init__(self, shows=None, detail=None, error=None):
        self.shows = shows or []
        self.detail = detail
        self.error = error

    async def fetch_all(self):
        if self.error:
            raise self.error
        return self.shows

    async def fetch_show(self, show_id):
        if self.error:
            raise self.error
        return self.detail


@pytest.fixture
def app():
    reset_session()
    application = create_app(load_on_startup=False)
    yield application
    application.dependency_overrides.clear()
    reset_session()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def loaded(app, fourteen_shows):
    get_coordinator().load(fourteen_shows)
    return fourteen_shows


class TestViewEndpoints:

    def test_view_reports_loading_before_fetch(self, client):
        response = client.get("/view")

        assert response.status_code == 200
        assert response.json()["state"]["kind"] == "loading"
        assert response.json()["meta"]["total_pages"] == 0

    def test_ready_view(self, client, loaded):
        data = client.get("/view").json()

        assert data["state"]["kind"] == "ready"
        assert len(data["state"]["view"]["items"]) == 12
        assert data["state"]["view"]["total_pages"] == 2
        assert data["showing"] == 12
        assert data["total"] == 14

    def test_page_then_query_resets_page(self, client, loaded):
        assert client.post("/view/page", json={"page": 2}).json()["params"]["page_index"] == 2

        data = client.post("/view/query", json={"query": "show 1"}).json()

        assert data["params"]["page_index"] == 1
        assert data["params"]["query"] == "show 1"

    def test_out_of_range_page_is_ignored(self, client, loaded):
        data = client.post("/view/page", json={"page": 9}).json()
        assert data["params"]["page_index"] == 1

    def test_category_accepts_string_ids(self, client, loaded):
        data = client.post("/view/category", json={"category_id": "1"}).json()

        assert data["params"]["category_id"] == 1
        assert data["total"] == 14

    def test_invalid_category_is_422(self, client, loaded):
        response = client.post("/view/category", json={"category_id": "comedy"})

        assert response.status_code == 422
        assert response.json()["detail"]["parameter"] == "category id"

    def test_sort_and_invalid_sort(self, client, loaded):
        assert client.post("/view/sort", json={"sort_key": "a-z"}).json()["params"]["sort_key"] == "title-asc"
        assert client.post("/view/sort", json={"sort_key": "random"}).status_code == 422

    def test_empty_results(self, client, loaded):
        data = client.post("/view/query", json={"query": "zzz"}).json()

        assert data["state"]["kind"] == "empty"
        assert data["total"] == 0

    def test_reset(self, client, loaded):
        client.post("/view/query", json={"query": "zzz"})

        data = client.post("/view/reset").json()

        assert data["params"] == {"query": "", "category_id": None, "sort_key": "newest", "page_index": 1}

    def test_cards(self, client, loaded):
        cards = client.get("/view/cards").json()

        assert len(cards) == 12
        assert cards[0]["genres"] == "Personal Growth"
        assert cards[0]["seasons"] == "1 season"
        assert cards[0]["last_updated"] == "Jan 1, 2024"


class TestReload:

    def test_reload_loads_in_background(self, app, client, make_show):
        show = make_show(show_id="9", title="Fresh")
        app.dependency_overrides[get_record_source] = lambda: FakeSource(shows=[show])

        response = client.post("/view/reload")

        assert response.json()["state"]["kind"] == "loading"
        # background tasks finish before TestClient returns control
        data = client.get("/view").json()
        assert data["state"]["kind"] == "ready"
        assert data["total"] == 1

    def test_reload_failure_is_error_state(self, app, client):
        failure = FetchFailure("Could not connect to the podcast API.", attempts=3)
        app.dependency_overrides[get_record_source] = lambda: FakeSource(error=failure)

        client.post("/view/reload")

        data = client.get("/view").json()
        assert data["state"] == {"kind": "error", "message": "Could not connect to the podcast API."}
        assert data["meta"]["total_pages"] == 0


class TestCatalogEndpoints:

    def test_categories(self, client):
        categories = client.get("/categories").json()

        assert len(categories) == 15
        assert categories[-1] == {"id": 15, "name": "True Crime"}

    def test_show_detail(self, app, client):
        detail = ShowDetail(id="7", title="Detail", genres=["Comedy"], seasons=[])
        app.dependency_overrides[get_record_source] = lambda: FakeSource(detail=detail)

        data = client.get("/shows/7").json()

        assert data["id"] == "7"
        assert data["genres"] == ["Comedy"]

    def test_show_detail_failure_is_502(self, app, client):
        failure = FetchFailure("Failed to load details for show ID 7.", attempts=3)
        app.dependency_overrides[get_record_source] = lambda: FakeSource(error=failure)

        response = client.get("/shows/7")

        assert response.status_code == 502
        assert response.json()["detail"]["attempts"] == 3

    def test_health(self, client, loaded):
        data = client.get("/health").json()

        assert data["status"] == "healthy"
        assert data["catalog"] == "ready"
        assert data["shows"] == 14


class TestSettingsDrivenLogging:

    def test_debug_setting_logs_search_terms(self, app, client, loaded, caplog):
        app.dependency_overrides[get_app_settings] = lambda: Settings(debug=True, log_level="DEBUG")

        with caplog.at_level(logging.DEBUG, logger="explorer.routers.view"):
            client.post("/view/query", json={"query": "show 1"})

        assert "Search term: 'show 1'" in caplog.text

    def test_search_terms_not_logged_without_debug(self, app, client, loaded, caplog):
        app.dependency_overrides[get_app_settings] = lambda: Settings(debug=False)

        with caplog.at_level(logging.DEBUG, logger="explorer.routers.view"):
            client.post("/view/query", json={"query": "show 1"})

        assert "Search term" not in caplog.text
