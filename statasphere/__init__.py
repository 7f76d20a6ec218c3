"""
Statasphere Channel Intelligence
"""
__version__ = "1.0.0"
