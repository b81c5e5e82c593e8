"""
Big-O label helpers: severity ranking and display mapping.

Labels are compared through a numeric power (``O(n²)`` -> 2). Polynomial
labels written as ``O(n^k)`` or ``O(nk)`` are recognized for any integer k.
"""

import re
from typing import Optional

POLYNOMIAL_PATTERN = re.compile(r"O\(n\^?(\d+)\)")

_FIXED_POWERS = {
    "O(1)": 0.0,
    "O(log n)": 0.5,
    "O(n)": 1.0,
    "O(n log n)": 1.5,
}

_COLORS = {
    "O(1)": "text-green-600",
    "O(log n)": "text-blue-600",
    "O(n)": "text-yellow-600",
    "O(n log n)": "text-orange-600",
    "O(n²)": "text-red-600",
    "O(n^2)": "text-red-600",
    "O(n³)": "text-red-800",
    "O(n^3)": "text-red-800",
}

_DESCRIPTIONS = {
    "O(1)": "Constant time - excellent performance",
    "O(log n)": "Logarithmic time - very good performance",
    "O(n)": "Linear time - good performance",
    "O(n log n)": "Linearithmic time - acceptable performance",
    "O(n²)": "Quadratic time - consider optimization",
    "O(n^2)": "Quadratic time - consider optimization",
    "O(n³)": "Cubic time - needs optimization",
    "O(n^3)": "Cubic time - needs optimization",
}

UNKNOWN_COLOR = "text-gray-600"
UNKNOWN_DESCRIPTION = "Unknown complexity"


def polynomial_degree(label: str) -> Optional[int]:
    """Return k for ``O(n^k)`` style labels, otherwise None."""
    match = POLYNOMIAL_PATTERN.fullmatch(label)
    if match is None:
        return None
    return int(match.group(1))


def get_complexity_power(label: str) -> float:
    """
    Rank a complexity label by asymptotic severity.

    Unknown labels rank as constant time.
    """
    if label in _FIXED_POWERS:
        return _FIXED_POWERS[label]

    degree = polynomial_degree(label)
    if degree is not None:
        return float(degree)

    if label == "O(n²)":
        return 2.0
    if label == "O(n³)":
        return 3.0

    return 0.0


def get_complexity_color(label: str) -> str:
    """Map a complexity label to the display color class used by the UI."""
    degree = polynomial_degree(label)
    if degree is not None:
        if degree == 1:
            return "text-yellow-600"
        if degree == 2:
            return "text-red-600"
        if degree == 3:
            return "text-red-800"
        if degree >= 4:
            return "text-red-900"

    return _COLORS.get(label, UNKNOWN_COLOR)


def get_complexity_description(label: str) -> str:
    """Map a complexity label to a one-line human description."""
    degree = polynomial_degree(label)
    if degree is not None:
        if degree == 1:
            return "Linear time - good performance"
        if degree == 2:
            return "Quadratic time - consider optimization"
        if degree == 3:
            return "Cubic time - needs optimization"
        if degree >= 4:
            return f"O(n^{degree}) time - requires significant optimization"

    return _DESCRIPTIONS.get(label, UNKNOWN_DESCRIPTION)
