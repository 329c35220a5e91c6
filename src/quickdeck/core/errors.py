"""Exceptions raised by the extraction engine."""

from .model import Marker


class QuickdeckError(Exception):
    """Base class for all quickdeck failures."""


class PatternNotFound(QuickdeckError):
    def __init__(self, pattern: str):
        self.pattern = pattern
        super().__init__(f"Pattern not found: {pattern!r}")


class OutOfOrder(QuickdeckError):
    def __init__(self, previous: int, position: int, message: str | None = None):
        self.previous = previous
        self.position = position
        super().__init__(
            message
            or f"Marker positions are not strictly increasing: {previous} then {position}"
        )


class InvalidRange(OutOfOrder):
    def __init__(self, position: int, minimum: int, maximum: int):
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            -1,
            position,
            f"Marker position {position} is out of range [{minimum}, {maximum}]",
        )


class CountMismatch(QuickdeckError):
    def __init__(self, markers: list[Marker]):
        self.markers = markers
        found = ", ".join(f"{m.position}:{m.pattern!r}" for m in markers)
        super().__init__(
            f"Failed to match both start and stop for requested patterns "
            f"({len(markers)} markers: {found})"
        )


class SplitArity(QuickdeckError):
    def __init__(self, line: str, fields: int):
        self.line = line
        self.fields = fields
        super().__init__(f"Expected 2 fields but found {fields}: {line!r}")


class RecipeError(QuickdeckError):
    """Recipe file is missing or malformed."""


class ConfigError(QuickdeckError):
    """Config file cannot be parsed."""


class DocumentError(QuickdeckError):
    """Input document cannot be read as text."""
