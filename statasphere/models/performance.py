"""
Warehouse performance rows as served to the dashboard
"""
from datetime import date, datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


def _serialise_date(value: Any) -> Optional[str]:
    """BigQuery DATE/DATETIME/TIMESTAMP values become ISO strings"""
    if value is None:
        return None
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


class PerformanceRow(BaseModel):
    """One row of the diagnose query, keyed the way the front end reads it"""
    model_config = ConfigDict(populate_by_name=True)

    date: Optional[str] = None
    variant_id: Optional[str] = Field(None, alias="variantId")
    impressions: Optional[int] = None
    clicks: Optional[int] = None
    cost: Optional[float] = None
    conversions: Optional[float] = None
    revenue: Optional[float] = None
    source: Optional[str] = None

    @classmethod
    def from_row(cls, row) -> "PerformanceRow":
        """Build from a ``bigquery.Row`` or a plain mapping"""
        variant_id = row.get("variant_id")
        return cls(
            date=_serialise_date(row.get("date")),
            variant_id=str(variant_id) if variant_id is not None else None,
            impressions=row.get("impressions"),
            clicks=row.get("clicks"),
            cost=row.get("cost"),
            conversions=row.get("conversions"),
            revenue=row.get("revenue"),
            source=row.get("source"),
        )


class DiagnoseSummary(BaseModel):
    """Totals over the rows currently shown on the diagnose view"""
    total_impressions: int = 0
    total_clicks: int = 0
    total_cost: float = 0.0
    total_revenue: float = 0.0
    visibility_index: int = 0  # clicks / impressions, whole percent
    row_count: int = 0
