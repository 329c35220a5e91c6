"""Flashcard extraction from section ranges."""

from .extractor import clean_field, extract_cards, join_lines, section_title, split_card

__all__ = [
    "clean_field",
    "extract_cards",
    "join_lines",
    "section_title",
    "split_card",
]
