"""Utility functions and helpers."""

from .statistics import safe_divide, safe_mean

__all__ = [
    "safe_divide",
    "safe_mean",
]
