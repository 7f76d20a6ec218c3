"""Data source connectors"""
from statasphere.connectors.bigquery_connector import BigQueryConnector

__all__ = ["BigQueryConnector"]
