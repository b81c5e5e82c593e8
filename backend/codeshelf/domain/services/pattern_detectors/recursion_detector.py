"""
Recursion pattern detector.
Flags snippets that define named functions returning values.
"""

import re
from typing import Optional

from codeshelf.domain.models.analysis import Pattern, PatternCategory
from codeshelf.domain.services.pattern_detectors.base_detector import PatternDetector

FUNCTION_DEFINITION = re.compile(r"function\s+\w+")

RECURSIVE_FUNCTION = Pattern(
    name="Recursive Function",
    category=PatternCategory.RECURSION,
    complexity="O(n)",
    confidence=0.6,
)


class RecursionPatternDetector(PatternDetector):
    """
    Weak recursion signal: a ``function`` definition plus a ``return``.

    Whether the function actually calls itself is not checked, so most
    non-trivial named functions are reported.
    """

    def detect(self, text: str) -> Optional[Pattern]:
        if "function" not in text or "return" not in text:
            return None
        if FUNCTION_DEFINITION.search(text) is None:
            return None
        return RECURSIVE_FUNCTION
