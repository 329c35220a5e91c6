from __future__ import annotations
from dataclasses import dataclass

Lines = tuple[str, ...]


@dataclass(frozen=True)
class Marker:
    pattern: str  # pattern that matched (for repairs, the corrected line itself)
    position: int  # zero-based index of the matching line
    adjusted: int  # position + caller-supplied offset


@dataclass(frozen=True)
class Range:
    start: Marker
    stop: Marker

    @property
    def self_paired(self) -> bool:
        return self.start == self.stop

    def contains(self, position: int) -> bool:
        return self.start.adjusted <= position <= self.stop.adjusted


@dataclass(frozen=True)
class Record:
    front: str
    back: str
    title: str
