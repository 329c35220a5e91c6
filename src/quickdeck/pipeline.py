"""Conversion pipeline: delete passes, repairs, then one extraction per section."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .cards.extractor import extract_cards
from .core.errors import DocumentError, PatternNotFound
from .core.markers import collect_markers
from .core.model import Lines, Record
from .core.ports import ChangeReporter, RecordSink
from .core.slicer import delete_lines, replace_line
from .core.utils import split_document
from .export.tsv import TsvDeckWriter
from .recipe import Recipe

logger = logging.getLogger(__name__)


@dataclass
class ConvertResult:
    """Summary of one conversion run."""
    lines_in: int
    lines_kept: int
    sections: int
    cards: int


def prepare_lines(
    lines: Sequence[str],
    recipe: Recipe,
    reporter: ChangeReporter | None = None,
) -> Lines:
    """Apply the recipe's delete passes, then its repairs, in order."""
    result = tuple(lines)
    for step in recipe.delete:
        result = delete_lines(
            result,
            step.start,
            step.stop,
            step.start_offset,
            step.stop_offset,
            reporter=reporter,
            required=step.required,
        )
    
    for corrected in recipe.repair:
        result = replace_line(result, corrected)
    
    if recipe.append_divider and recipe.divider:
        result = result + (recipe.divider,)
    
    logger.debug("Prepared %d of %d lines", len(result), len(lines))
    return result


def extract_deck(
    lines: Sequence[str],
    recipe: Recipe,
    emit: RecordSink | None = None,
    *,
    field_marker: str = "|",
    separator: str = "\t",
) -> tuple[int, list[Record]]:
    """
    Extract the cards of every section.
    
    Returns:
        (number of sections, records in document order)
    
    Raises:
        PatternNotFound: The document has no sections
    """
    spec = recipe.sections
    sections = collect_markers(lines, spec.start, spec.stop, spec.start_offset, spec.stop_offset)
    if not sections:
        raise PatternNotFound(spec.start)
    
    records: list[Record] = []
    for section in sections:
        records.extend(
            extract_cards(lines, section, emit, field_marker=field_marker, separator=separator)
        )
    return len(sections), records


def convert_text(
    text: str,
    recipe: Recipe,
    writer: TsvDeckWriter,
    *,
    drop_empty: bool = True,
    field_marker: str = "|",
    separator: str = "\t",
    reporter: ChangeReporter | None = None,
) -> ConvertResult:
    """Convert a whole document and write the deck."""
    lines = split_document(text, drop_empty=drop_empty)
    writer.write_header(recipe.render_header(lines[0] if lines else ""))
    
    prepared = prepare_lines(lines, recipe, reporter)
    sections, records = extract_deck(
        prepared, recipe, writer, field_marker=field_marker, separator=separator
    )
    
    return ConvertResult(
        lines_in=len(lines),
        lines_kept=len(prepared),
        sections=sections,
        cards=len(records),
    )


def convert_file(input_path: Path, output_path: Path, rt: Any) -> ConvertResult:
    """Read ``input_path`` and write the deck for it to ``output_path``."""
    try:
        text = input_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DocumentError(f"{input_path} is not valid UTF-8 text: {e}") from e
    writer = TsvDeckWriter(output_path, title_format=rt.config.output.title_format)
    try:
        return convert_text(
            text,
            rt.recipe,
            writer,
            drop_empty=rt.config.input.drop_empty_lines,
            field_marker=rt.config.extract.field_marker,
            separator=rt.config.extract.separator,
            reporter=rt.reporter,
        )
    except Exception:
        # A deck cut short by a failure is not a valid deck
        if output_path.exists():
            output_path.unlink()
        raise
