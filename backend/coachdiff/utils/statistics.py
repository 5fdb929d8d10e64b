"""Statistical utility functions for safe calculations."""

import math
from typing import Sequence


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """
    Safely divide two numbers, returning default if denominator is not positive.

    Args:
        numerator: The numerator
        denominator: The denominator
        default: Value to return if denominator is zero or negative

    Returns:
        Result of division or default value
    """
    return numerator / denominator if denominator > 0 else default


def safe_mean(values: Sequence[float], default: float = 0.0) -> float:
    """
    Safely calculate mean of values, returning default if empty.

    Uses an exactly rounded sum so the result does not depend on the order
    of the values.

    Args:
        values: Numeric values
        default: Value to return if there are no values

    Returns:
        Mean of values or default value
    """
    return math.fsum(values) / len(values) if values else default
