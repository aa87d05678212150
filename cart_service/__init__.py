"""
Shopping Cart Service

A single in-memory shopping cart exposed over a small JSON API.
"""

__version__ = "1.0.0"
