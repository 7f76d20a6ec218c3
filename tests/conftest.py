"""Shared fixtures: a warehouse connector whose BigQuery client is a mock."""
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from google.cloud.bigquery.table import Row

from statasphere.connectors.bigquery_connector import BigQueryConnector

FIELD_TO_INDEX = {
    "date": 0,
    "variant_id": 1,
    "impressions": 2,
    "clicks": 3,
    "cost": 4,
    "conversions": 5,
    "revenue": 6,
    "source": 7,
}


def make_row(day, variant_id, impressions, clicks, cost, conversions, revenue, source):
    """A ``bigquery.Row`` shaped like the performance master table"""
    return Row(
        (day, variant_id, impressions, clicks, cost, conversions, revenue, source),
        FIELD_TO_INDEX,
    )


@pytest.fixture
def performance_rows():
    return [
        make_row(date(2025, 3, 3), "44012", 1200, 36, 18.5, 2.0, 96.0, "google_shopping"),
        make_row(date(2025, 3, 2), "44012", 900, 20, 12.25, 1.0, 48.0, "google_shopping"),
        make_row(date(2025, 3, 1), "51877", 400, 4, 3.0, 0.0, 0.0, "meta_catalog"),
    ]


@pytest.fixture
def numeric_rows():
    """NUMERIC cost/revenue columns come back from BigQuery as Decimal"""
    return [
        make_row(date(2025, 3, 3), 44012, 1000, 25, Decimal("12.50"), Decimal("1"), Decimal("80.25"), "google_shopping"),
        make_row(date(2025, 3, 2), 44012, 600, 5, Decimal("1.50"), Decimal("0"), None, "google_shopping"),
    ]


@pytest.fixture
def bigquery_client(performance_rows):
    client = MagicMock()
    client.query.return_value.result.return_value = iter(performance_rows)
    return client


@pytest.fixture
def connector(bigquery_client):
    """Connector with its client pre-built, so nothing talks to Google"""
    connector = BigQueryConnector(project_id="statasphere-analytics", credentials_info={})
    connector.client = bigquery_client
    return connector
