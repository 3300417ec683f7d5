"""Spending categories and per-category questions over HTTP."""

__version__ = "0.1.0"
