"""
Base pattern detector interface.
Defines contract for all pattern detection implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple

from codeshelf.domain.models.analysis import Pattern


class PatternDetector(ABC):
    """
    Abstract base class for pattern detectors.
    Each detector looks for one structural signal in cleaned snippet text
    and reports at most one pattern.
    """

    @abstractmethod
    def detect(self, text: str) -> Optional[Pattern]:
        """
        Detect a specific pattern in comment-stripped source text.
        """


class SubstringPatternDetector(PatternDetector):
    """
    Reports ``pattern`` when any of ``markers`` occurs in the text.
    Matching is case sensitive.
    """

    pattern: Pattern
    markers: Tuple[str, ...] = ()

    def detect(self, text: str) -> Optional[Pattern]:
        if any(marker in text for marker in self.markers):
            return self.pattern
        return None
