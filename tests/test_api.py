"""
HTTP surface: pages, view fragments and the diagnose API.

The warehouse dependency is overridden with a connector whose BigQuery
client is a mock (see conftest.py).
"""
import base64

import pytest
from fastapi.testclient import TestClient
from google.api_core.exceptions import Forbidden

from statasphere.api.deps import get_diagnose_service
from statasphere.config import get_settings
from statasphere.main import app
from statasphere.middleware.security_middleware import parse_basic_auth
from statasphere.services.diagnose_service import DiagnoseService


@pytest.fixture
def client(connector):
    app.dependency_overrides[get_diagnose_service] = lambda: DiagnoseService(connector)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


# ────────────────────────────────────────────
# DIAGNOSE API
# ────────────────────────────────────────────


class TestDiagnoseApi:

    def test_returns_normalised_rows(self, client):
        response = client.get("/api/diagnose")

        assert response.status_code == 200
        rows = response.json()
        assert len(rows) == 3
        assert rows[0] == {
            "date": "2025-03-03",
            "variantId": "44012",
            "impressions": 1200,
            "clicks": 36,
            "cost": 18.5,
            "conversions": 2.0,
            "revenue": 96.0,
            "source": "google_shopping",
        }
        assert [r["date"] for r in rows] == ["2025-03-03", "2025-03-02", "2025-03-01"]

    def test_warehouse_failure_is_500(self, client, bigquery_client):
        bigquery_client.query.side_effect = Forbidden("Access Denied: Table performance_master")

        response = client.get("/api/diagnose")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Failed to run diagnose query"
        assert "Access Denied" in body["message"]


# ────────────────────────────────────────────
# VIEW FRAGMENTS
# ────────────────────────────────────────────


class TestViewFragments:

    @pytest.mark.parametrize("identifier,component", [
        ("dashboard", "dashboard-content"),
        ("diagnose", "diagnose"),
        ("optimize", "optimize"),
        ("impact", "impact"),
    ])
    def test_known_views(self, client, identifier, component):
        response = client.get(f"/views/{identifier}")

        assert response.status_code == 200
        assert f'data-component="{component}"' in response.text
        assert response.headers["X-Active-View"] == identifier

    @pytest.mark.parametrize("identifier", ["reports", "DIAGNOSE", "impact/q3"])
    def test_unknown_views_render_dashboard(self, client, identifier):
        response = client.get(f"/views/{identifier}")

        assert response.status_code == 200
        assert 'data-component="dashboard-content"' in response.text
        assert response.headers["X-Active-View"] == "dashboard"

    def test_diagnose_view_lists_rows_and_summary(self, client):
        html = client.get("/views/diagnose").text

        assert "51877" in html
        assert "meta_catalog" in html
        assert "2,500" in html  # total impressions
        assert "2%" in html  # visibility index

    def test_diagnose_view_shows_error_banner(self, client, bigquery_client):
        bigquery_client.query.side_effect = Forbidden("Access Denied")

        response = client.get("/views/diagnose")

        assert response.status_code == 200
        assert "Failed to run diagnose query" in response.text
        assert "Access Denied" in response.text

    def test_diagnose_view_with_numeric_columns(self, client, bigquery_client, numeric_rows):
        bigquery_client.query.return_value.result.return_value = iter(numeric_rows)

        response = client.get("/views/diagnose")

        assert response.status_code == 200
        assert "Failed to run diagnose query" not in response.text
        assert "1,600" in response.text  # total impressions
        assert "80.25" in response.text  # total revenue

    def test_diagnose_api_with_numeric_columns(self, client, bigquery_client, numeric_rows):
        bigquery_client.query.return_value.result.return_value = iter(numeric_rows)

        rows = client.get("/api/diagnose").json()

        assert rows[0]["cost"] == 12.5
        assert rows[0]["variantId"] == "44012"
        assert rows[1]["revenue"] is None

    def test_diagnose_view_lists_product_diagnostics(self, client):
        html = client.get("/views/diagnose").text

        assert 'data-table="product-diagnostics"' in html
        assert "Nike Air Max 270 Running Shoes" in html
        assert "Feed issue: Image Quality and Resolution" in html
        assert "Trademark infringement" in html
        assert "MISSING_ATTRIBUTES" in html
        assert 'class="text-red">-55.2%' in html
        assert 'class="text-green">+18.5%' in html
        assert '<span class="badge destructive">Disapproved</span>' in html
        assert '<span class="badge secondary">In Progress</span>' in html

    def test_product_diagnostics_survive_warehouse_failure(self, client, bigquery_client):
        bigquery_client.query.side_effect = Forbidden("Access Denied")

        html = client.get("/views/diagnose").text

        assert "Failed to run diagnose query" in html
        assert "KitchenAid Stand Mixer" in html

    def test_dashboard_does_not_query_warehouse(self, client, bigquery_client):
        client.get("/views/dashboard")
        bigquery_client.query.assert_not_called()


# ────────────────────────────────────────────
# PAGES
# ────────────────────────────────────────────


class TestPages:

    def test_shell_renders_sidebar_and_default_view(self, client):
        html = client.get("/").text

        for fragment in ("#dashboard", "#diagnose", "#optimize", "#impact"):
            assert f'href="{fragment}"' in html
        assert 'data-component="dashboard-content"' in html
        assert 'data-active-view="dashboard"' in html
        assert "hashchange" in html

    def test_products_page(self, client):
        html = client.get("/products").text

        assert "Sample Product" in html
        assert "USD 19.99" in html
        assert 'data-level="high"' in html
        assert "Enabled" in html and "Disabled" in html


# ────────────────────────────────────────────
# HEALTH / SECURITY
# ────────────────────────────────────────────


def test_health(client):
    body = client.get("/health").json()
    assert body["status"] == "healthy"
    assert body["timestamp"].endswith("+00:00")


def test_status_reports_warehouse(client):
    warehouse = client.get("/status").json()["warehouse"]
    assert warehouse["name"] == "BigQuery"
    assert warehouse["performance_table"] == get_settings().performance_table


def test_robots(client):
    assert "Disallow: /" in client.get("/robots.txt").text


class TestBasicAuthGate:

    @pytest.fixture
    def gated(self, monkeypatch):
        settings = get_settings()
        monkeypatch.setattr(settings, "dash_user", "ops")
        monkeypatch.setattr(settings, "dash_pass", "s3cret")

    def test_pages_require_auth(self, client, gated):
        response = client.get("/")
        assert response.status_code == 401
        assert "Basic" in response.headers["WWW-Authenticate"]

    def test_health_stays_open(self, client, gated):
        assert client.get("/health").status_code == 200

    def test_valid_credentials(self, client, gated):
        token = base64.b64encode(b"ops:s3cret").decode()
        response = client.get("/views/impact", headers={"Authorization": f"Basic {token}"})
        assert response.status_code == 200
        assert response.headers["X-Robots-Tag"] == "noindex, nofollow"

    def test_wrong_password(self, client, gated):
        token = base64.b64encode(b"ops:nope").decode()
        assert client.get("/", headers={"Authorization": f"Basic {token}"}).status_code == 401

    def test_non_ascii_credentials_are_rejected(self, client, gated):
        token = base64.b64encode("é:x".encode("utf-8")).decode()
        response = client.get("/products", headers={"Authorization": f"Basic {token}"})
        assert response.status_code == 401

    def test_non_ascii_configured_password(self, client, gated, monkeypatch):
        monkeypatch.setattr(get_settings(), "dash_pass", "pässwort")
        token = base64.b64encode("ops:pässwort".encode("utf-8")).decode()
        response = client.get("/products", headers={"Authorization": f"Basic {token}"})
        assert response.status_code == 200

    @pytest.mark.parametrize("header", [
        "Bearer abc",
        "Basic",
        "Basic not-base64!!",
        "Basic " + base64.b64encode(b"no-colon").decode(),
    ])
    def test_malformed_headers(self, client, gated, header):
        assert client.get("/", headers={"Authorization": header}).status_code == 401


class TestParseBasicAuth:

    def test_splits_on_first_colon(self):
        token = base64.b64encode(b"ops:pa:ss").decode()
        assert parse_basic_auth(f"Basic {token}") == ("ops", "pa:ss")

    def test_rejects_other_schemes(self):
        assert parse_basic_auth("Digest abc") is None
