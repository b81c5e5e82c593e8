"""
Detectors keyed on data structure vocabulary.
"""

from codeshelf.domain.models.analysis import Pattern, PatternCategory
from codeshelf.domain.services.pattern_detectors.base_detector import SubstringPatternDetector


class HashTablePatternDetector(SubstringPatternDetector):
    pattern = Pattern("Hash Table", PatternCategory.DATA_STRUCTURE, "O(1)", 0.7)
    markers = ("Map", "Set", "HashMap")


class TreeTraversalPatternDetector(SubstringPatternDetector):
    pattern = Pattern("Tree Traversal", PatternCategory.ALGORITHM, "O(n)", 0.6)
    markers = ("tree", "Tree", "node")
