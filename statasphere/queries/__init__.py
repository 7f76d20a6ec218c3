"""Warehouse queries"""
from statasphere.queries.diagnose import (
    DIAGNOSE_ROW_LIMIT,
    QueryExecutionError,
    build_diagnose_query,
    run_diagnose_query,
)

__all__ = [
    "DIAGNOSE_ROW_LIMIT",
    "QueryExecutionError",
    "build_diagnose_query",
    "run_diagnose_query",
]
