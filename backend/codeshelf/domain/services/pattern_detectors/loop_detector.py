"""
Loop pattern detector.
Estimates loop nesting depth by counting braces line by line.
"""

import re
from typing import List, Optional

from codeshelf.domain.models.analysis import Pattern, PatternCategory
from codeshelf.domain.services.pattern_detectors.base_detector import PatternDetector

LOOP_KEYWORD = re.compile(r"for\s*\(|while\s*\(")


class LoopPatternDetector(PatternDetector):
    """
    Detects single, sequential and nested loops.

    Nesting is tracked with a depth counter: a line opening a loop
    increments it, a line containing ``}`` decrements it (never below 0).
    Braces are not matched to their owning construct, so any closing brace
    ends the innermost loop.
    """

    def detect(self, text: str) -> Optional[Pattern]:
        loop_count = len(LOOP_KEYWORD.findall(text))
        if loop_count == 0:
            return None

        max_depth = self.max_nesting_depth(text.split("\n"))

        if max_depth >= 4:
            return Pattern(
                name=f"{max_depth}-Level Nested Loops",
                category=PatternCategory.LOOP,
                complexity=f"O(n^{max_depth})",
                confidence=0.95,
            )
        if max_depth == 3:
            return Pattern("Triple Nested Loops", PatternCategory.LOOP, "O(n³)", 0.95)
        if max_depth == 2:
            return Pattern("Nested Loops", PatternCategory.LOOP, "O(n²)", 0.9)
        if loop_count == 1:
            return Pattern("Single Loop", PatternCategory.LOOP, "O(n)", 0.8)
        return Pattern("Multiple Loops", PatternCategory.LOOP, "O(n²)", 0.8)

    @staticmethod
    def max_nesting_depth(lines: List[str]) -> int:
        depth = 0
        max_depth = 0
        for line in lines:
            stripped = line.strip()
            if LOOP_KEYWORD.search(stripped):
                depth += 1
                max_depth = max(max_depth, depth)
            if "}" in stripped:
                depth = max(0, depth - 1)
        return max_depth
