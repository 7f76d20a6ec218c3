"""
Static content for the views that are not backed by the warehouse yet
(dashboard, the diagnose product table, optimize, impact and the catalog).
"""
from statasphere.models.product import Product

DATE_RANGE_OPTIONS = [
    ("7", "Last 7 days"),
    ("14", "Last 14 days"),
    ("30", "Last 30 days"),
    ("60", "Last 60 days"),
    ("90", "Last 90 days"),
]

# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------

VISIBILITY_OVERVIEW = {
    "score": 87.4,
    "change": -1.2,
    "channels": [
        ("Google Shopping", 92),
        ("Facebook Catalog", 85),
        ("Amazon", 78),
        ("Bing Shopping", 94),
    ],
}

HEADLINE_METRICS = [
    {"title": "Total Products", "value": "2,847", "note": "+12% from last month"},
    {"title": "Active Feeds", "value": "8", "note": "Google, Facebook, Amazon"},
    {"title": "Revenue", "value": "£45,231", "note": "+20.1% from last month"},
]

PROBLEM_ALERTS = [
    {"priority": "High Priority", "variant": "destructive", "message": "23 products disapproved by Google", "action": "Fix Now"},
    {"priority": "Medium Priority", "variant": "secondary", "message": "147 products missing required attributes", "action": "Review"},
    {"priority": "Low Priority", "variant": "outline", "message": "89 products with outdated images", "action": "Schedule"},
]

FEED_SOURCES = [
    ("Google Shopping", 45),
    ("Facebook Catalog", 25),
    ("Amazon", 20),
    ("Bing Shopping", 10),
]

OPPORTUNITY_SIGNALS = [
    {"title": "Rewrite titles on low CTR SKUs", "impact": "high", "detail": "132 products below 1% CTR with strong impressions"},
    {"title": "Add GTINs to unbranded listings", "impact": "medium", "detail": "64 products missing identifiers"},
    {"title": "Enable AI checkout for top sellers", "impact": "medium", "detail": "18 best sellers not eligible for AI checkout"},
]

# ---------------------------------------------------------------------------
# Diagnose: product diagnostics table shown under the warehouse rows
# ---------------------------------------------------------------------------

DIAGNOSE_PRODUCTS = [
    Product(
        id="PROD-001",
        productId="PROD-001",
        name="Nike Air Max 270 Running Shoes",
        brand="Nike",
        category="Footwear > Athletic Shoes > Running",
        price=150.0,
        visibilityScore=28,
        impressions=28600,
        clicks=2450,
        ctr=8.57,
        revenue=28350.0,
        approvalStatus="disapproved",
        enable_search="yes",
        enable_checkout="yes",
        imageQuality="poor",
        channelStatus="Warning",
        aiDiagnostic="Feed issue: Image Quality and Resolution",
        aiDetections=["Image quality issues", "Low resolution"],
        gmcIssueType="IMAGE_QUALITY_AND_RESOLUTION",
        issueTimestamp="2024-01-15T10:30:00Z",
        resolutionStatus="Unresolved",
        impressionChange=-55.2,
        clickChange=-35.8,
        revenueChange=-40.1,
        searchImpressions=85000,
        searchClicks=4200,
        searchCtr=4.94,
        searchConversionRate=4.29,
        topSearchTerms=["nike air max", "running shoes", "black sneakers"],
    ),
    Product(
        id="PROD-007",
        productId="PROD-007",
        name="Fake Designer Handbag",
        brand="Counterfeit Co",
        category="Apparel > Accessories > Handbags",
        price=89.0,
        visibilityScore=18,
        approvalStatus="disapproved",
        enable_search="no",
        enable_checkout="no",
        imageQuality="poor",
        channelStatus="Disapproved",
        aiDiagnostic="Feed issue: Image Quality and Resolution",
        aiDetections=["Policy violation", "Trademark infringement"],
        gmcIssueType="IMAGE_QUALITY_AND_RESOLUTION",
        issueTimestamp="2024-01-17T08:15:00Z",
        resolutionStatus="Unresolved",
        impressionChange=-70.0,
        clickChange=-50.0,
        revenueChange=-60.0,
        searchImpressions=0,
        searchClicks=0,
        searchCtr=0,
        searchConversionRate=0,
    ),
    Product(
        id="PROD-ALT-002",
        productId="PROD-ALT-002",
        name="Canon EOS R6 Camera Body",
        brand="Canon",
        category="Electronics > Cameras > Mirrorless",
        price=2499.0,
        visibilityScore=18,
        impressions=15200,
        clicks=950,
        ctr=6.25,
        revenue=104958.0,
        approvalStatus="approved",
        enable_search="yes",
        enable_checkout="yes",
        imageQuality="low",
        channelStatus="Active",
        aiDiagnostic="Missing critical product attributes",
        aiDetections=["Missing dimensions", "Incomplete specs", "Low visibility"],
        gmcIssueType="MISSING_ATTRIBUTES",
        issueTimestamp="2024-01-20T09:15:00Z",
        resolutionStatus="In Progress",
        impressionChange=-18.2,
        clickChange=-12.5,
        revenueChange=-15.8,
        searchImpressions=38000,
        searchClicks=2100,
        searchCtr=5.53,
        searchConversionRate=1.9,
        topSearchTerms=["canon r6", "mirrorless camera", "professional camera"],
    ),
    Product(
        id="PROD-ALT-005",
        productId="PROD-ALT-005",
        name="KitchenAid Stand Mixer",
        brand="KitchenAid",
        category="Home & Garden > Kitchen > Mixers",
        price=429.0,
        visibilityScore=48,
        impressions=28500,
        clicks=1850,
        ctr=6.49,
        revenue=53625.0,
        approvalStatus="approved",
        enable_search="yes",
        enable_checkout="yes",
        imageQuality="high",
        channelStatus="Active",
        aiDiagnostic="Strong performer - optimize for growth",
        aiDetections=["High conversion rate", "Good visibility", "Premium product"],
        gmcIssueType="NONE",
        issueTimestamp="2024-01-20T13:20:00Z",
        resolutionStatus="Approved",
        impressionChange=18.5,
        clickChange=15.2,
        revenueChange=22.8,
        searchImpressions=95000,
        searchClicks=5200,
        searchCtr=5.47,
        searchConversionRate=2.31,
        topSearchTerms=["kitchenaid mixer", "stand mixer", "baking mixer"],
    ),
]

# ---------------------------------------------------------------------------
# Optimize
# ---------------------------------------------------------------------------

OPTIMIZE_SEGMENTS = [
    ("low-ctr-skus", "Low CTR SKUs"),
    ("high-spend-no-conversions", "High Spend, No Conversions"),
    ("top-margin-performers", "Top Margin Performers"),
    ("create-new-segment", "Create New Segment"),
]

OPTIMIZE_ACTIONS = [
    {"id": "ai-recommendation", "title": "AI Recommendation", "description": "Let AI choose the best optimization strategy", "recommended": True},
    {"id": "exclude-products", "title": "Exclude Products", "description": "Remove underperforming products from feeds", "recommended": False},
    {"id": "enrich-attributes", "title": "Enrich Attributes", "description": "Add missing product attributes and details", "recommended": False},
    {"id": "relabel-products", "title": "Relabel Products", "description": "Update product labels and categories", "recommended": False},
    {"id": "rewrite-titles", "title": "Rewrite Titles", "description": "Optimize product titles for better performance", "recommended": False},
]

# ---------------------------------------------------------------------------
# Impact
# ---------------------------------------------------------------------------

IMPACT_TIME_RANGES = [
    ("7d", "Last 7 days"),
    ("30d", "Last 30 days"),
    ("90d", "Last 90 days"),
    ("1y", "Last year"),
]

IMPACT_PERFORMANCE = [
    {"date": "Jan 1", "revenue": 45000, "conversions": 234, "clicks": 3400, "impressions": 45000},
    {"date": "Jan 8", "revenue": 52000, "conversions": 267, "clicks": 3800, "impressions": 48000},
    {"date": "Jan 15", "revenue": 48000, "conversions": 245, "clicks": 3600, "impressions": 46000},
    {"date": "Jan 22", "revenue": 61000, "conversions": 312, "clicks": 4200, "impressions": 52000},
    {"date": "Jan 29", "revenue": 58000, "conversions": 298, "clicks": 4000, "impressions": 50000},
    {"date": "Feb 5", "revenue": 67000, "conversions": 345, "clicks": 4600, "impressions": 55000},
    {"date": "Feb 12", "revenue": 72000, "conversions": 378, "clicks": 4900, "impressions": 58000},
]

IMPACT_CATEGORIES = [
    ("Electronics", 35),
    ("Clothing", 28),
    ("Home & Garden", 20),
    ("Sports", 17),
]

OPTIMIZATION_IMPACT = [
    {"type": "Title Optimization", "before": 2.3, "after": 3.1, "improvement": 34.8},
    {"type": "Description Enhancement", "before": 4.2, "after": 5.8, "improvement": 38.1},
    {"type": "Price Optimization", "before": 1.8, "after": 2.9, "improvement": 61.1},
    {"type": "Image Optimization", "before": 3.5, "after": 4.2, "improvement": 20.0},
]

# ---------------------------------------------------------------------------
# Product catalog
# ---------------------------------------------------------------------------

SAMPLE_PRODUCTS = [
    Product(
        id="1",
        name="Sample Product",
        brand="Sample Brand",
        category="Sample Category",
        currency="USD",
        price=19.99,
        availability="in stock",
        visibilityScore=85,
        ctr=3.2,
        conversionRate=2.5,
        enable_search="yes",
        enable_checkout="no",
        imageQuality="high",
        approvalStatus="approved",
        imageUrl="/sample-image.jpg",
    ),
]
