"""quickdeck - turn line-oriented reference documents into flashcard decks."""

__version__ = "0.3.0"
