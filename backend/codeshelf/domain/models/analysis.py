"""
Domain models produced by the heuristic complexity analyzer.

This module defines the value objects of a single analysis call:
    - PatternCategory: Kind of structural signal a detector reports
    - Pattern: One detected signal with its guessed complexity
    - ComplexityAnalysis: Final estimate returned to callers

Nothing here is persisted; every analysis builds fresh instances.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class PatternCategory(str, Enum):
    """Family a detected pattern belongs to."""

    LOOP = "loop"
    RECURSION = "recursion"
    DATA_STRUCTURE = "data-structure"
    ALGORITHM = "algorithm"


@dataclass(frozen=True)
class Pattern:
    """
    Structural signal detected in snippet source text.

    Invariants:
        - confidence lies in [0, 1]
        - complexity is a Big-O label such as "O(n)" or "O(n^4)"

    Example:
        >>> Pattern(
        ...     name="Nested Loops",
        ...     category=PatternCategory.LOOP,
        ...     complexity="O(n²)",
        ...     confidence=0.9,
        ... )
    """

    name: str
    category: PatternCategory
    complexity: str
    confidence: float


@dataclass
class ComplexityAnalysis:
    """
    Estimated time complexity of a snippet.

    Attributes:
        estimated_complexity: Dominant Big-O label among detected patterns
        confidence: Detection confidence of the dominant pattern
        reasoning: One line per detected pattern, highest confidence first
        patterns: Names of detected patterns in detection order
    """

    estimated_complexity: str
    confidence: float
    reasoning: List[str] = field(default_factory=list)
    patterns: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "estimatedComplexity": self.estimated_complexity,
            "confidence": self.confidence,
            "reasoning": list(self.reasoning),
            "patterns": list(self.patterns),
        }
