"""
Diagnose query: latest rows of the performance master table
"""
from typing import Any, List, Optional

from statasphere.config import DEFAULT_PERFORMANCE_TABLE

DIAGNOSE_ROW_LIMIT = 20

DIAGNOSE_COLUMNS = (
    "date",
    "variant_id",
    "impressions",
    "clicks",
    "cost",
    "conversions",
    "revenue",
    "source",
)


class QueryExecutionError(Exception):
    """BigQuery rejected the statement or the request did not complete"""


def build_diagnose_query(table: str = DEFAULT_PERFORMANCE_TABLE) -> str:
    """Return the diagnose statement for a ``project.dataset.table`` name."""
    parts = table.split(".")
    if len(parts) != 3 or not all(parts) or "`" in table:
        raise ValueError(f"Expected a project.dataset.table name, got {table!r}")

    columns = ",\n      ".join(DIAGNOSE_COLUMNS)
    return f"""
    SELECT
      {columns}
    FROM `{table}`
    ORDER BY date DESC
    LIMIT {DIAGNOSE_ROW_LIMIT}
    """


def run_diagnose_query(
    client,
    table: str = DEFAULT_PERFORMANCE_TABLE,
    timeout: Optional[float] = None,
) -> List[Any]:
    """
    Run the diagnose statement and return the rows as BigQuery yields them.

    Args:
        client: ``google.cloud.bigquery.Client`` (or anything exposing ``query(sql)``
            returning a job with ``result(timeout=...)``)
        table: Fully-qualified source table
        timeout: Seconds to wait for the job; None waits indefinitely

    Raises:
        QueryExecutionError: the job could not be created or its results fetched
    """
    query = build_diagnose_query(table)
    try:
        job = client.query(query)
        rows = job.result(timeout=timeout)
        return list(rows)
    except Exception as e:
        raise QueryExecutionError(f"Diagnose query against {table} failed: {e}") from e
