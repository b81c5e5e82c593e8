"""
Complexity Analysis Service estimating time complexity from snippet text.
Runs a pipeline of independent pattern detectors over comment-stripped
source and keeps the asymptotically dominant pattern.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from codeshelf.domain.models.analysis import ComplexityAnalysis, Pattern
from codeshelf.domain.services.complexity.notation import get_complexity_power
from codeshelf.domain.services.complexity.preprocessor import clean_source
from codeshelf.domain.services.pattern_detectors import PatternDetector, default_detectors

logger = logging.getLogger(__name__)

FALLBACK_COMPLEXITY = "O(1)"
FALLBACK_CONFIDENCE = 0.3
FALLBACK_REASON = "No complex patterns detected"


class ComplexityAnalysisService:
    """
    Heuristic time complexity estimator.

    The service holds no mutable state, so a single instance can be shared
    across requests and threads.
    """

    def __init__(self, detectors: Optional[Sequence[PatternDetector]] = None):
        self._detectors = tuple(detectors) if detectors is not None else tuple(default_detectors())

    def detect_patterns(self, code: str, language: str = "") -> List[Pattern]:
        """
        Run every detector over the cleaned code.

        ``language`` is accepted for callers that know it but does not change
        detection.
        """
        text = clean_source(code or "")
        patterns = []
        for detector in self._detectors:
            pattern = detector.detect(text)
            if pattern is not None:
                patterns.append(pattern)
        return patterns

    def estimate_complexity(self, patterns: Sequence[Pattern]) -> Tuple[str, float, List[str]]:
        """
        Pick the dominant complexity among detected patterns.

        Patterns are visited by descending confidence; the winner changes
        only on a strictly higher power, so ties keep the more confident one.
        The reported confidence is the winner's own.
        """
        if not patterns:
            return FALLBACK_COMPLEXITY, FALLBACK_CONFIDENCE, [FALLBACK_REASON]

        ordered = sorted(patterns, key=lambda pattern: pattern.confidence, reverse=True)
        reasoning = []
        winner = ordered[0]
        for pattern in ordered:
            reasoning.append(f"Detected {pattern.name} ({pattern.complexity})")
            if get_complexity_power(pattern.complexity) > get_complexity_power(winner.complexity):
                winner = pattern

        return winner.complexity, winner.confidence, reasoning

    def analyze(self, code: str, language: str = "") -> ComplexityAnalysis:
        patterns = self.detect_patterns(code, language)
        complexity, confidence, reasoning = self.estimate_complexity(patterns)

        logger.debug(
            "Complexity estimate %s (confidence %.2f) from %d patterns",
            complexity,
            confidence,
            len(patterns),
        )

        return ComplexityAnalysis(
            estimated_complexity=complexity,
            confidence=confidence,
            reasoning=reasoning,
            patterns=[pattern.name for pattern in patterns],
        )


_default_service = ComplexityAnalysisService()


def analyze_complexity(code: str, language: str = "") -> ComplexityAnalysis:
    """Estimate the time complexity of ``code`` with the default detectors."""
    return _default_service.analyze(code, language)
