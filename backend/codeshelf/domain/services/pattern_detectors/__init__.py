"""
Pattern detection utilities package.
Contains detectors for the structural signals used by the complexity analyzer.
"""

from typing import List

from codeshelf.domain.services.pattern_detectors.base_detector import PatternDetector
from codeshelf.domain.services.pattern_detectors.call_detectors import (
    ArrayOperationPatternDetector,
    BinarySearchPatternDetector,
    SortingPatternDetector,
)
from codeshelf.domain.services.pattern_detectors.data_structure_detector import (
    HashTablePatternDetector,
    TreeTraversalPatternDetector,
)
from codeshelf.domain.services.pattern_detectors.loop_detector import LoopPatternDetector
from codeshelf.domain.services.pattern_detectors.recursion_detector import RecursionPatternDetector


def default_detectors() -> List[PatternDetector]:
    """Detector pipeline in reporting order."""
    return [
        LoopPatternDetector(),
        RecursionPatternDetector(),
        SortingPatternDetector(),
        BinarySearchPatternDetector(),
        ArrayOperationPatternDetector("map"),
        ArrayOperationPatternDetector("filter"),
        ArrayOperationPatternDetector("reduce"),
        HashTablePatternDetector(),
        TreeTraversalPatternDetector(),
    ]


__all__ = [
    "PatternDetector",
    "LoopPatternDetector",
    "RecursionPatternDetector",
    "SortingPatternDetector",
    "BinarySearchPatternDetector",
    "ArrayOperationPatternDetector",
    "HashTablePatternDetector",
    "TreeTraversalPatternDetector",
    "default_detectors",
]
