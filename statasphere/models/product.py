"""
Product record shown across the dashboard views

A read-only, display-oriented projection of a catalog item and its channel
metrics. Field names follow the feed payloads (camelCase aliases), so both
``Product(visibilityScore=85)`` and ``Product(visibility_score=85)`` work.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

YesNo = Literal["yes", "no"]
ImageQuality = Literal["high", "low", "blurry", "poor"]


class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Identity
    id: str
    name: str
    brand: str = ""
    category: str = ""
    gtin: str = ""
    mpn: str = ""

    # Commerce
    price: float = 0.0
    currency: str = "USD"
    availability: str = "in stock"  # in stock / out of stock / other feed values
    condition: str = "new"
    inventory_level: int = Field(0, alias="inventoryLevel")
    shipping_cost: float = Field(0.0, alias="shippingCost")

    # Performance
    impressions: int = 0
    clicks: int = 0
    ctr: float = 0.0
    cpc: float = 0.0
    conversions: int = 0
    revenue: float = 0.0
    roas: float = 0.0
    conversion_rate: float = Field(0.0, alias="conversionRate")
    return_rate: float = Field(0.0, alias="returnRate")
    bounce_rate: float = Field(0.0, alias="bounceRate")
    visibility_score: float = Field(0.0, alias="visibilityScore")  # 0-100

    # AI commerce eligibility
    enable_search: YesNo = "no"
    enable_checkout: YesNo = "no"

    # Quality / approval
    image_quality: Optional[ImageQuality] = Field(None, alias="imageQuality")
    approval_status: str = Field("pending", alias="approvalStatus")

    # Diagnostic annotations (diagnose views only)
    impression_change: Optional[float] = Field(None, alias="impressionChange")
    click_change: Optional[float] = Field(None, alias="clickChange")
    revenue_change: Optional[float] = Field(None, alias="revenueChange")
    cause_detected: Optional[str] = Field(None, alias="causeDetected")
    change_period: Optional[str] = Field(None, alias="changePeriod")
    channel_status: Optional[str] = Field(None, alias="channelStatus")
    ai_diagnostic: Optional[str] = Field(None, alias="aiDiagnostic")
    ai_detections: Optional[List[str]] = Field(None, alias="aiDetections")
    gmc_issue_type: Optional[str] = Field(None, alias="gmcIssueType")
    issue_timestamp: Optional[str] = Field(None, alias="issueTimestamp")
    resolution_status: Optional[str] = Field(None, alias="resolutionStatus")

    # Site search metrics
    search_impressions: Optional[int] = Field(None, alias="searchImpressions")
    search_clicks: Optional[int] = Field(None, alias="searchClicks")
    search_ctr: Optional[float] = Field(None, alias="searchCtr")
    search_add_to_carts: Optional[int] = Field(None, alias="searchAddToCarts")
    search_purchases: Optional[int] = Field(None, alias="searchPurchases")
    search_conversion_rate: Optional[float] = Field(None, alias="searchConversionRate")
    top_search_terms: List[str] = Field(default_factory=list, alias="topSearchTerms")

    # Feed attributes
    image_url: Optional[str] = Field(None, alias="imageUrl")
    last_updated: Optional[str] = Field(None, alias="lastUpdated")
    color: Optional[str] = None
    size: Optional[str] = None
    material: Optional[str] = None
    target_country: Optional[str] = Field(None, alias="targetCountry")
    feed_source: Optional[str] = Field(None, alias="feedSource")
    product_id: Optional[str] = Field(None, alias="productId")

    # Free-form
    custom_labels: List[str] = Field(default_factory=list, alias="customLabels")
    issues: List[str] = Field(default_factory=list)
    opportunities: List[str] = Field(default_factory=list)
    description: str = ""
