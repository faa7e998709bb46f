"""Crop profitability statistics calculator."""

__version__ = "1.0.0"
