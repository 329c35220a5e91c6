"""Marker location and line-range extraction engine."""

from .errors import (
    ConfigError,
    CountMismatch,
    DocumentError,
    InvalidRange,
    OutOfOrder,
    PatternNotFound,
    QuickdeckError,
    RecipeError,
    SplitArity,
)
from .markers import collect_markers, group_markers, validate_markers
from .matcher import matches, normalize
from .model import Lines, Marker, Range, Record
from .scanner import scan_markers
from .slicer import delete_lines, filter_lines, replace_line

__all__ = [
    "ConfigError",
    "CountMismatch",
    "DocumentError",
    "InvalidRange",
    "Lines",
    "Marker",
    "OutOfOrder",
    "PatternNotFound",
    "QuickdeckError",
    "Range",
    "RecipeError",
    "Record",
    "SplitArity",
    "collect_markers",
    "delete_lines",
    "filter_lines",
    "group_markers",
    "matches",
    "normalize",
    "replace_line",
    "scan_markers",
    "validate_markers",
]
