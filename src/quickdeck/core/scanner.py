"""Marker scanning over an ordered sequence of lines."""

import logging
from collections.abc import Sequence

from .matcher import matches
from .model import Marker

logger = logging.getLogger(__name__)

OUTSIDE = "outside"
INSIDE = "inside"


def scan_markers(
    lines: Sequence[str],
    start_pattern: str,
    stop_pattern: str = "",
    start_offset: int = 0,
    stop_offset: int = 0,
) -> list[Marker]:
    """
    Walk ``lines`` and emit a marker each time a block opens or closes.
    
    The scan is a two-state machine starting OUTSIDE:
    
    - OUTSIDE, start matches: emit a start marker, move INSIDE
    - INSIDE, start matches: ignored, blocks do not nest
    - INSIDE, stop matches: emit a stop marker, move OUTSIDE
    - OUTSIDE, stop matches: ignored
    
    Start matching wins over stop matching on the same line, so equal start
    and stop patterns never close a block. With an empty ``stop_pattern``
    nothing closes the block, so only the first start match yields a marker
    (single-marker mode).
    
    Args:
        lines: Document lines in order
        start_pattern: Fuzzy pattern that opens a block
        stop_pattern: Fuzzy pattern that closes a block ("" for single-marker mode)
        start_offset: Added to the position of each start marker
        stop_offset: Added to the position of each stop marker
    
    Returns:
        Markers in line order
    """
    state = OUTSIDE
    markers: list[Marker] = []
    
    for position, line in enumerate(lines):
        if matches(line, start_pattern):
            if state == INSIDE:
                continue
            markers.append(Marker(start_pattern, position, position + start_offset))
            state = INSIDE
        elif stop_pattern and matches(line, stop_pattern):
            if state == OUTSIDE:
                continue
            markers.append(Marker(stop_pattern, position, position + stop_offset))
            state = OUTSIDE
    
    logger.debug("Scanned %d lines for %r: %d markers", len(lines), start_pattern, len(markers))
    return markers
