"""
Per-row display helpers, registered as Jinja2 filters.

Thresholds:
    visibility score  >= 80 high (green), >= 60 medium (yellow), else low (red)
"""
from typing import Optional

VISIBILITY_HIGH = 80
VISIBILITY_MEDIUM = 60

VISIBILITY_COLORS = {
    "high": "green",
    "medium": "yellow",
    "low": "red",
}


def visibility_level(score: Optional[float]) -> str:
    if score is None:
        return "low"
    if score >= VISIBILITY_HIGH:
        return "high"
    if score >= VISIBILITY_MEDIUM:
        return "medium"
    return "low"


def visibility_color(score: Optional[float]) -> str:
    return VISIBILITY_COLORS[visibility_level(score)]


def format_percent(value: Optional[float], decimals: int = 2) -> str:
    if value is None:
        return "N/A"
    return f"{value:.{decimals}f}%"


def format_currency(amount: Optional[float], currency: str = "USD") -> str:
    if amount is None:
        return "N/A"
    return f"{currency} {amount:.2f}"


def format_number(value: Optional[float]) -> str:
    """Thousands separators; whole numbers lose the decimal part."""
    if value is None:
        return "N/A"
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}"


def format_change(value: Optional[float]) -> str:
    """Signed percentage delta, e.g. ``+12.5%`` / ``-3.0%``"""
    if value is None:
        return "N/A"
    return f"{value:+.1f}%"


def change_color(value: Optional[float]) -> str:
    return "red" if value is not None and value < 0 else "green"


def availability_variant(availability: str) -> str:
    if availability == "in stock":
        return "default"
    if availability == "out of stock":
        return "destructive"
    return "secondary"


def is_enabled(flag: Optional[str]) -> bool:
    """AI search / checkout flags are the strings "yes" / "no"."""
    return flag == "yes"


def flag_label(flag: Optional[str]) -> str:
    return "Enabled" if is_enabled(flag) else "Disabled"


def image_quality_variant(quality: Optional[str]) -> Optional[str]:
    """None means there is no assessment to badge (rendered as N/A)."""
    if quality is None:
        return None
    if quality == "high":
        return "default"
    if quality == "low":
        return "secondary"
    return "destructive"


def approval_variant(status: str) -> str:
    if status == "approved":
        return "default"
    if status == "pending":
        return "secondary"
    return "destructive"


def channel_status_variant(status: Optional[str]) -> str:
    """Merchant Center channel status; no status reads as a warning."""
    if status == "Active":
        return "default"
    if status == "Disapproved":
        return "destructive"
    return "secondary"


def resolution_variant(status: Optional[str]) -> str:
    if status in ("Approved", "Resolved"):
        return "default"
    if status == "Unresolved":
        return "destructive"
    return "secondary"


FILTERS = {
    "visibility_level": visibility_level,
    "visibility_color": visibility_color,
    "percent": format_percent,
    "currency": format_currency,
    "number": format_number,
    "change": format_change,
    "change_color": change_color,
    "availability_variant": availability_variant,
    "flag_label": flag_label,
    "image_quality_variant": image_quality_variant,
    "approval_variant": approval_variant,
    "channel_status_variant": channel_status_variant,
    "resolution_variant": resolution_variant,
}


def register_filters(env) -> None:
    """Install the display helpers on a Jinja2 ``Environment``."""
    env.filters.update(FILTERS)
    env.tests["enabled"] = is_enabled
