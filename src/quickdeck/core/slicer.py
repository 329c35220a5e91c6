"""Slicing engine for deleting, keeping and replacing line ranges."""

import logging
from collections.abc import Sequence

from .errors import PatternNotFound
from .markers import collect_markers
from .model import Lines, Range
from .ports import ChangeReporter

logger = logging.getLogger(__name__)


def filter_lines(lines: Sequence[str], ranges: Sequence[Range], keep: bool = False) -> Lines:
    """
    Keep or drop the lines that fall inside any range.
    
    A line is inside when its position lies within some range's adjusted
    [start, stop] span, inclusive.
    
    Args:
        lines: Document lines
        ranges: Ranges to test against
        keep: Return the inside lines (True) or the outside lines (False)
    
    Returns:
        New tuple of lines in original order
    """
    return tuple(
        line
        for position, line in enumerate(lines)
        if any(r.contains(position) for r in ranges) == keep
    )


def delete_lines(
    lines: Sequence[str],
    start_pattern: str,
    stop_pattern: str = "",
    start_offset: int = 0,
    stop_offset: int = 0,
    *,
    reporter: ChangeReporter | None = None,
    required: bool = True,
) -> Lines:
    """
    Remove every block delimited by the given patterns.
    
    With an empty ``stop_pattern`` only the first line matching
    ``start_pattern`` (shifted by ``start_offset``) is removed.
    
    Args:
        lines: Document lines
        start_pattern: Fuzzy pattern opening the block
        stop_pattern: Fuzzy pattern closing the block ("" for a single line)
        start_offset: Shift applied to start markers
        stop_offset: Shift applied to stop markers
        reporter: Receives the lines before and after deletion
        required: Raise PatternNotFound when nothing matches
    
    Returns:
        Lines outside all matched blocks
    """
    ranges = collect_markers(lines, start_pattern, stop_pattern, start_offset, stop_offset)
    if not ranges and required:
        raise PatternNotFound(start_pattern)
    
    result = filter_lines(lines, ranges)
    logger.debug("Deleted %d lines for %r", len(lines) - len(result), start_pattern)
    
    if reporter is not None:
        reporter.report(lines, result)
    return result


def replace_line(lines: Sequence[str], corrected: str) -> Lines:
    """
    Replace the one line resembling ``corrected`` with ``corrected`` itself.
    
    The corrected text doubles as the search pattern: fuzzy matching ignores
    the punctuation and whitespace that differ in the malformed line.
    
    Raises:
        PatternNotFound: No line resembles ``corrected``
    """
    ranges = collect_markers(lines, corrected)
    if not ranges:
        raise PatternNotFound(corrected)
    
    marker = ranges[0].start
    index = marker.adjusted
    logger.debug("Replacing line %d: %r", index, lines[index] if 0 <= index < len(lines) else None)
    return tuple(
        marker.pattern if position == index else line
        for position, line in enumerate(lines)
    )
