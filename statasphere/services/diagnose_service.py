"""
Diagnose Service

Sits between the warehouse query and the presentation layer: runs the
diagnose query, turns failures into an explicit result instead of an
exception, and summarises the rows for the diagnose view.
"""
import math
from typing import Any, Dict, Iterable, List

from statasphere.config import DEFAULT_PERFORMANCE_TABLE
from statasphere.connectors.bigquery_connector import BigQueryConnector
from statasphere.models.performance import DiagnoseSummary, PerformanceRow
from statasphere.queries.diagnose import run_diagnose_query
from statasphere.utils.logger import log


def normalise_rows(rows: Iterable[Any]) -> List[PerformanceRow]:
    """Warehouse rows → JSON-friendly rows, order preserved"""
    return [PerformanceRow.from_row(row) for row in rows]


def summarise_rows(rows: Iterable[Any]) -> DiagnoseSummary:
    """
    Totals and visibility index; missing metrics count as zero.

    NUMERIC columns arrive as ``decimal.Decimal``, so every metric is
    coerced before it is added.
    """
    summary = DiagnoseSummary()
    for row in rows:
        summary.total_impressions += int(row.get("impressions") or 0)
        summary.total_clicks += int(row.get("clicks") or 0)
        summary.total_cost += float(row.get("cost") or 0)
        summary.total_revenue += float(row.get("revenue") or 0)
        summary.row_count += 1

    if summary.total_impressions:
        # Half-up rounding, so 12.5 shows as 13
        ratio = summary.total_clicks / summary.total_impressions * 100
        summary.visibility_index = math.floor(ratio + 0.5)
    return summary


class DiagnoseService:
    def __init__(self, connector: BigQueryConnector, table: str = DEFAULT_PERFORMANCE_TABLE):
        self.connector = connector
        self.table = table

    def get_performance(self) -> Dict[str, Any]:
        """
        Run the diagnose query.

        Returns:
            {"success": True, "data": [rows...], "count": n} or
            {"success": False, "error": "..."}
        """
        try:
            client = self.connector.connect()
            rows = run_diagnose_query(client, table=self.table, timeout=self.connector.timeout)
        except Exception as e:
            log.error(f"Diagnose query failed: {str(e)}")
            return {"success": False, "error": str(e)}

        log.info(f"Fetched {len(rows)} performance rows from {self.table}")
        return {"success": True, "data": rows, "count": len(rows)}

    def get_dashboard(self) -> Dict[str, Any]:
        """Payload for the diagnose view: normalised rows plus summary."""
        result = self.get_performance()
        if not result["success"]:
            return {
                "success": False,
                "error": result["error"],
                "rows": [],
                "summary": DiagnoseSummary(),
            }

        rows = result["data"]
        return {
            "success": True,
            "error": None,
            "rows": normalise_rows(rows),
            "summary": summarise_rows(rows),
        }
