"""Fuzzy line matching that ignores markup punctuation."""

import re

from .utils import collapse_whitespace

# Structural characters are discarded so that patterns copied from the
# document's markup (|tags|, *anchors*, (notes)) compare on prose only.
METACHARS = re.compile(r"[\\^$.|?*+(){}\[\]]")


def normalize(text: str) -> str:
    """Replace metacharacters with spaces and collapse whitespace runs."""
    return collapse_whitespace(METACHARS.sub(" ", text))


def matches(line: str, pattern: str) -> bool:
    """
    Check whether ``line`` matches ``pattern``.
    
    Both operands are normalized first. The line matches when the normalized
    forms are equal or the normalized line contains the normalized pattern.
    
    Examples:
        >>> matches("*Q_ac* Automatic Commands", "*Q_ac*")
        True
        >>> matches("|:tp| :[count]tp[revious][!]", "|:tp| :[count]tp[revious][!]")
        True
    """
    cleaned_line = normalize(line)
    cleaned_pattern = normalize(pattern)
    return cleaned_line == cleaned_pattern or cleaned_pattern in cleaned_line
