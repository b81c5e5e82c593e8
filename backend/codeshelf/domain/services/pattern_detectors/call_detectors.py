"""
Detectors for well-known library calls and algorithm names.
"""

from codeshelf.domain.models.analysis import Pattern, PatternCategory
from codeshelf.domain.services.pattern_detectors.base_detector import SubstringPatternDetector


class SortingPatternDetector(SubstringPatternDetector):
    """Any ``sort(`` call, including ``.sort()``."""

    pattern = Pattern("Sorting", PatternCategory.ALGORITHM, "O(n log n)", 0.9)
    markers = ("sort(",)


class BinarySearchPatternDetector(SubstringPatternDetector):
    pattern = Pattern("Binary Search", PatternCategory.ALGORITHM, "O(log n)", 0.8)
    markers = ("binary", "Binary")


class ArrayOperationPatternDetector(SubstringPatternDetector):
    """
    Higher-order array helpers (map, filter, reduce).
    One instance per operation so each reports independently.
    """

    def __init__(self, operation: str):
        self.pattern = Pattern(
            name=f"Array {operation.capitalize()}",
            category=PatternCategory.LOOP,
            complexity="O(n)",
            confidence=0.8,
        )
        self.markers = (f"{operation}(",)
