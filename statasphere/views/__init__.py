"""Dashboard view routing, composition and display helpers"""
from statasphere.views.composer import View, compose, sidebar_items
from statasphere.views.router import DEFAULT_VIEW, FragmentEvents, ViewRouter, fragment_of

__all__ = [
    "DEFAULT_VIEW",
    "FragmentEvents",
    "View",
    "ViewRouter",
    "compose",
    "fragment_of",
    "sidebar_items",
]
