"""
Display models
"""
from statasphere.models.product import Product
from statasphere.models.performance import PerformanceRow, DiagnoseSummary

__all__ = [
    "Product",
    "PerformanceRow",
    "DiagnoseSummary",
]
