"""Card extraction from a section range."""

import logging
import re
from collections.abc import Sequence

from ..core.errors import SplitArity
from ..core.model import Range, Record
from ..core.ports import RecordSink
from ..core.slicer import filter_lines
from ..core.utils import collapse_whitespace

logger = logging.getLogger(__name__)

_LEADING_TOKEN = re.compile(r"^\S+\s")


def join_lines(lines: Sequence[str], field_marker: str = "|") -> list[str]:
    """
    Rebuild records that the document wrapped over several lines.
    
    A line starting with ``field_marker`` opens a new record; any other line
    continues the open record and is appended with a space. Lines seen
    before the first record has opened are dropped.
    """
    records: list[str] = []
    current: str | None = None
    
    for line in lines:
        if line.startswith(field_marker):
            if current is not None:
                records.append(current)
            current = line
        elif current is None:
            logger.debug("Dropping line before first record: %r", line)
        else:
            current = f"{current} {line}"
    
    if current is not None:
        records.append(current)
    return records


def clean_field(field: str) -> str:
    """Collapse whitespace and swap angle brackets for square ones."""
    field = collapse_whitespace(field)
    field = field.replace("<", "[").replace(">", "]")
    return field.strip()


def split_card(line: str, field_marker: str = "|", separator: str = "\t") -> tuple[str, str]:
    """
    Split one joined record into cleaned (front, back) fields.
    
    The leading ``|tag|`` prefix is removed first, then the record is split on
    the first separator.
    
    Raises:
        SplitArity: The record has no separator
    """
    marker = re.escape(field_marker)
    prefix = re.compile(rf"^{marker}[^{marker}]*{marker}")
    text = prefix.sub("", line, count=1).strip()
    
    fields = text.split(separator, 1)
    if len(fields) != 2:
        raise SplitArity(line, len(fields))
    
    front, back = fields
    return clean_field(front), clean_field(back)


def section_title(lines: Sequence[str], section: Range) -> str:
    """
    Title of a section, taken from the line its start marker matched.
    
    The leading tag token (e.g. ``*Q_ac*``) is dropped.
    """
    title = lines[section.start.position]
    title = _LEADING_TOKEN.sub("", title, count=1)
    return collapse_whitespace(title.strip())


def extract_cards(
    lines: Sequence[str],
    section: Range,
    emit: RecordSink | None = None,
    *,
    field_marker: str = "|",
    separator: str = "\t",
) -> list[Record]:
    """
    Extract flashcard records for one section.
    
    Args:
        lines: Full document lines
        section: Range covering the section body
        emit: Called with each record once the whole section has split
        field_marker: Character opening each record line
        separator: Separator between front and back
    
    Returns:
        Records in document order
    """
    title = section_title(lines, section)
    body = filter_lines(lines, [section], keep=True)
    
    # Split everything before emitting so a bad record leaves no partial section
    records = [
        Record(front=front, back=back, title=title)
        for front, back in (
            split_card(joined, field_marker, separator)
            for joined in join_lines(body, field_marker)
        )
    ]
    if emit is not None:
        for record in records:
            emit(record)

    logger.debug("Section %r: %d cards", title, len(records))
    return records
