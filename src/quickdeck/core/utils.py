"""Utility functions for quickdeck."""

import re

_WS = re.compile(r"\s+")


def collapse_whitespace(text: str) -> str:
    """Replace every run of whitespace with a single space."""
    return _WS.sub(" ", text)


def split_document(text: str, drop_empty: bool = True) -> tuple[str, ...]:
    """
    Split a document into lines on ``\\n``.
    
    Empty trailing segments are always removed. With ``drop_empty`` every
    empty line is removed, so line positions count only lines with content.
    
    Examples:
        >>> split_document("a\\n\\nb\\n")
        ('a', 'b')
        >>> split_document("a\\n\\nb\\n\\n", drop_empty=False)
        ('a', '', 'b')
    """
    parts = text.split("\n")
    if drop_empty:
        return tuple(p for p in parts if p)
    
    while parts and not parts[-1]:
        parts.pop()
    return tuple(parts)
