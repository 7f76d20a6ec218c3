"""
Dependency injection for FastAPI
"""
from functools import lru_cache

from fastapi import Depends

from statasphere.config import get_settings
from statasphere.connectors.bigquery_connector import BigQueryConnector
from statasphere.services.diagnose_service import DiagnoseService


@lru_cache()
def get_bigquery_connector() -> BigQueryConnector:
    """Process-wide warehouse connector built from settings"""
    return BigQueryConnector.from_settings(get_settings())


def get_diagnose_service(
    connector: BigQueryConnector = Depends(get_bigquery_connector),
) -> DiagnoseService:
    return DiagnoseService(connector, table=get_settings().performance_table)
