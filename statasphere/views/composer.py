"""
Page composition: active view identifier → display component
"""
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional


class View(str, Enum):
    DASHBOARD = "dashboard"
    DIAGNOSE = "diagnose"
    OPTIMIZE = "optimize"
    IMPACT = "impact"

    @classmethod
    def resolve(cls, identifier: Optional[str]) -> "View":
        """Known identifiers map to their view; anything else is the dashboard."""
        try:
            return cls(identifier)
        except ValueError:
            return cls.DASHBOARD


VIEW_TEMPLATES: Dict[View, str] = {
    View.DASHBOARD: "views/dashboard.html",
    View.DIAGNOSE: "views/diagnose.html",
    View.OPTIMIZE: "views/optimize.html",
    View.IMPACT: "views/impact.html",
}


@dataclass(frozen=True)
class NavItem:
    title: str
    view: View
    icon: str

    @property
    def url(self) -> str:
        return f"#{self.view.value}"


NAV_ITEMS = [
    NavItem("Dashboard", View.DASHBOARD, "home"),
    NavItem("Diagnose", View.DIAGNOSE, "search"),
    NavItem("Optimize", View.OPTIMIZE, "wrench"),
    NavItem("Impact", View.IMPACT, "bar-chart"),
]


def compose(active_view: Optional[str]) -> str:
    """Template name of the display component for ``active_view``."""
    return VIEW_TEMPLATES[View.resolve(active_view)]


def sidebar_items(active_view: Optional[str]) -> List[dict]:
    """Navigation entries; only an exact identifier match is highlighted."""
    return [
        {
            "title": item.title,
            "view": item.view.value,
            "url": item.url,
            "icon": item.icon,
            "is_active": active_view == item.view.value,
        }
        for item in NAV_ITEMS
    ]
