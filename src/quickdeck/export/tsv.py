"""Tab-separated deck output for Anki's text importer."""

from pathlib import Path

from ..core.model import Record


class TsvDeckWriter:
    """
    Writes a header once, then appends one line per record.
    
    Each field is prefixed with the section title so both card directions
    show which part of the reference the card came from.
    """

    def __init__(self, path: Path, title_format: str = "({title})<br>"):
        self.path = path
        self.title_format = title_format
        self.count = 0

    def write_header(self, header: str) -> None:
        """Truncate the deck and write the header comment block."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(header, encoding="utf-8")
        self.count = 0

    def format_record(self, record: Record) -> str:
        prefix = self.title_format.format(title=record.title)
        return f"{prefix}{record.front}\t{prefix}{record.back}\n"

    def __call__(self, record: Record) -> None:
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(self.format_record(record))
        self.count += 1
