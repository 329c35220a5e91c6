"""Marker validation and grouping into ranges."""

import logging
from collections.abc import Sequence

from .errors import CountMismatch, InvalidRange, OutOfOrder
from .model import Marker, Range
from .scanner import scan_markers

logger = logging.getLogger(__name__)


def validate_markers(markers: Sequence[Marker], minimum: int, maximum: int) -> None:
    """
    Make sure marker line numbers are in range and strictly increasing.
    
    Only the original positions are checked, not the offset-adjusted ones.
    Stops at the first violation.
    
    Raises:
        InvalidRange: A position lies outside [minimum, maximum]
        OutOfOrder: A position is not greater than the one before it
    """
    previous: int | None = None
    for marker in markers:
        if not minimum <= marker.position <= maximum:
            raise InvalidRange(marker.position, minimum, maximum)
        if previous is not None and marker.position <= previous:
            raise OutOfOrder(previous, marker.position)
        previous = marker.position


def group_markers(markers: Sequence[Marker], paired: bool) -> list[Range]:
    """
    Turn a flat marker list into ranges.
    
    Paired markers are chunked into (start, stop) ranges in encounter order.
    Unpaired markers are doubled up into (start, start) ranges.
    
    Raises:
        CountMismatch: Paired mode with an odd number of markers
    """
    if not paired:
        return [Range(marker, marker) for marker in markers]
    
    if len(markers) % 2 != 0:
        raise CountMismatch(list(markers))
    
    return [Range(markers[i], markers[i + 1]) for i in range(0, len(markers), 2)]


def collect_markers(
    lines: Sequence[str],
    start_pattern: str,
    stop_pattern: str = "",
    start_offset: int = 0,
    stop_offset: int = 0,
) -> list[Range]:
    """
    Scan, validate and group markers for a pattern pair.
    
    Validation always runs; an ambiguous pattern that matches out of
    document order fails here instead of corrupting the ranges.
    """
    markers = scan_markers(lines, start_pattern, stop_pattern, start_offset, stop_offset)
    validate_markers(markers, 0, len(lines))
    ranges = group_markers(markers, paired=stop_pattern != "")
    logger.debug("Collected %d ranges for %r", len(ranges), start_pattern)
    return ranges
