"""
Unit tests for API routes
"""

import math

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.routes import get_quote_store
from quotebook import Category, QuoteStore, SEED_QUOTES


@pytest.mark.unit
class TestSystemRoutes:
    """Test cases for root and health endpoints"""

    def test_root_endpoint(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json() == {
            "ok": True,
            "msg": "Hello from the test suite!",
            "name": "quotebook-test",
        }

    def test_root_endpoint_is_idempotent(self, client):
        assert client.get("/").json() == client.get("/").json()

    def test_health_check_endpoint(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.text == "healthy"
        assert response.headers["content-type"].startswith("text/plain")

    def test_process_time_header(self, client):
        response = client.get("/health")
        assert "x-process-time" in response.headers

    def test_openapi_spec_accessible(self, client):
        response = client.get("/openapi.json")
        assert response.status_code == 200
        paths = response.json()["paths"]
        assert "/quotebook/quote/{category}" in paths
        assert "/math/power/{base}/{exponent}" in paths


@pytest.mark.unit
class TestQuotebookRoutes:
    """Test cases for quotebook endpoints"""

    def test_list_categories(self, client):
        response = client.get("/quotebook/categories")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text.split("\n") == [
            "A possible category is successQuotes",
            "A possible category is perseveranceQuotes",
            "A possible category is happinessQuotes",
        ]

    @pytest.mark.parametrize("category", [c.value for c in Category])
    def test_get_random_quote(self, client, quote_store, category):
        response = client.get(f"/quotebook/quote/{category}")
        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"quote", "author"}
        assert data in [q.model_dump() for q in quote_store.quotes(Category(category))]

    @pytest.mark.parametrize("category", ["sadQuotes", "SUCCESSQUOTES", "new"])
    def test_get_random_quote_invalid_category(self, client, category):
        response = client.get(f"/quotebook/quote/{category}")
        assert response.status_code == 400
        assert response.json() == {"error": f"no category listed for {category}"}

    def test_add_quote(self, client, quote_store):
        response = client.post("/quotebook/quote/new", json={
            "category": "successQuotes",
            "quote": "Keep going.",
            "author": "Someone",
        })

        assert response.status_code == 200
        assert response.text == "Success!"
        assert response.headers["content-type"].startswith("text/plain")
        assert quote_store.count(Category.SUCCESS) == 3
        assert quote_store.quotes(Category.SUCCESS)[-1].model_dump() == {
            "quote": "Keep going.",
            "author": "Someone",
        }

    @pytest.mark.parametrize("payload", [
        {},
        {"quote": "X", "author": "Y"},
        {"category": "happinessQuotes", "author": "Y"},
        {"category": "happinessQuotes", "quote": "X"},
        {"category": "happinessQuotes", "quote": "", "author": "Y"},
        {"category": "happinessQuotes", "quote": "X", "author": ""},
        {"category": "sadQuotes", "quote": "X", "author": "Y"},
        {"category": "happinessQuotes", "quote": 42, "author": "Y"},
    ])
    def test_add_quote_invalid_input(self, client, quote_store, payload):
        counts = {c: quote_store.count(c) for c in Category}

        response = client.post("/quotebook/quote/new", json=payload)

        assert response.status_code == 400
        assert response.json() == {"error": "invalid or insufficient user input"}
        assert {c: quote_store.count(c) for c in Category} == counts

    def test_add_quote_malformed_json(self, client, quote_store):
        response = client.post(
            "/quotebook/quote/new",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "invalid or insufficient user input"}
        assert quote_store.count(Category.HAPPINESS) == 2

    def test_store_dependency_override(self, app):
        """Handlers read the store through the injectable dependency"""
        other = QuoteStore(seed={category: SEED_QUOTES[category][:1] for category in Category})
        app.dependency_overrides[get_quote_store] = lambda: other

        response = TestClient(app).get("/quotebook/quote/successQuotes")

        assert response.json() == SEED_QUOTES[Category.SUCCESS][0].model_dump()
        app.dependency_overrides.clear()


@pytest.mark.unit
class TestMathRoutes:
    """Test cases for math endpoints"""

    def test_circle(self, client):
        response = client.get("/math/circle/2")
        assert response.status_code == 200
        data = response.json()
        assert data["area"] == pytest.approx(12.5664, abs=1e-4)
        assert data["circumference"] == pytest.approx(12.5664, abs=1e-4)

    def test_circle_negative_radius(self, client):
        data = client.get("/math/circle/-1").json()
        assert data["area"] == pytest.approx(math.pi)
        assert data["circumference"] == pytest.approx(-2 * math.pi)

    @pytest.mark.parametrize("path", ["/math/circle/abc", "/math/circle/NaN", "/math/circle/inf", "/math/circle/_1"])
    def test_circle_invalid(self, client, path):
        response = client.get(path)
        assert response.status_code == 400
        assert response.json() == {"error": "Radius must be a number"}

    def test_circle_trailing_text_ignored(self, client):
        response = client.get("/math/circle/12abc")
        assert response.status_code == 200
        assert response.json()["area"] == pytest.approx(math.pi * 144)

    def test_rectangle(self, client):
        response = client.get("/math/rectangle/5/5")
        assert response.status_code == 200
        assert response.json() == {"area": 25, "perimeter": 20}

    def test_rectangle_unit_suffix_ignored(self, client):
        response = client.get("/math/rectangle/5px/5")
        assert response.status_code == 200
        assert response.json() == {"area": 25, "perimeter": 20}

    @pytest.mark.parametrize("path", ["/math/rectangle/a/5", "/math/rectangle/5/b"])
    def test_rectangle_invalid(self, client, path):
        response = client.get(path)
        assert response.status_code == 400
        assert response.json() == {"error": "Width and height must be numbers"}

    def test_power(self, client):
        response = client.get("/math/power/4/2")
        assert response.status_code == 200
        assert response.json() == {"result": 16}

    def test_power_whole_result_is_integer(self, client):
        response = client.get("/math/power/4/2")
        assert isinstance(response.json()["result"], int)
        assert '"result":16' in response.text
        assert '"area":25' in client.get("/math/rectangle/5/5").text

    def test_power_underscore_stops_parsing(self, client):
        response = client.get("/math/power/1_000/1")
        assert response.status_code == 200
        assert response.json() == {"result": 1}

    def test_power_with_root(self, client):
        response = client.get("/math/power/4/2?root=true")
        assert response.status_code == 200
        assert response.json() == {"result": 16, "root": 2}

    @pytest.mark.parametrize("flag", ["false", "TRUE", "1", ""])
    def test_power_root_flag_must_be_exact(self, client, flag):
        response = client.get(f"/math/power/4/2?root={flag}")
        assert response.json() == {"result": 16}

    def test_power_negative_base_root_is_null(self, client):
        response = client.get("/math/power/-4/2?root=true")
        assert response.status_code == 200
        assert response.json() == {"result": 16, "root": None}

    def test_power_overflow_is_null(self, client):
        response = client.get("/math/power/10/400")
        assert response.status_code == 200
        assert response.json() == {"result": None}

    @pytest.mark.parametrize("path", ["/math/power/x/2", "/math/power/4/y"])
    def test_power_invalid(self, client, path):
        response = client.get(path)
        assert response.status_code == 400
        assert response.json() == {"error": "Base and exponent must be numbers"}


@pytest.mark.unit
class TestErrorHandling:
    """Unexpected errors are rendered by the error handling middleware"""

    def test_unexpected_error_returns_500(self, app):
        class BrokenStore(QuoteStore):
            def list_categories(self):
                raise RuntimeError("boom")

        app.dependency_overrides[get_quote_store] = lambda: BrokenStore()
        response = TestClient(app).get("/quotebook/categories")

        assert response.status_code == 500
        assert response.json() == {"error": "An unexpected error occurred"}
        app.dependency_overrides.clear()

    def test_create_app_uses_fresh_store_by_default(self, test_config_manager):
        first = create_app(config=test_config_manager)
        second = create_app(config=test_config_manager)
        assert first.state.quote_store is not second.state.quote_store
