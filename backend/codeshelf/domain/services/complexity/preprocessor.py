"""
Line-oriented cleanup applied to snippet text before pattern detection.
"""

from typing import List

COMMENT_PREFIXES = ("//", "#")


def clean_lines(code: str) -> List[str]:
    """
    Strip every line and drop blank and single-line comment lines.

    Block comments and language specific comment syntaxes are left in place.
    """
    lines = []
    for raw_line in code.split("\n"):
        line = raw_line.strip()
        if not line or line.startswith(COMMENT_PREFIXES):
            continue
        lines.append(line)
    return lines


def clean_source(code: str) -> str:
    """Return the cleaned lines joined back into a single text."""
    return "\n".join(clean_lines(code))
