"""Recipes: the ordered passes that turn one document family into cards."""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from .core.errors import RecipeError

DIVIDER_REF = "@divider"


@dataclass(frozen=True)
class DeletePass:
    """One block (or single line) to remove from the document."""
    start: str
    stop: str = ""
    start_offset: int = 0
    stop_offset: int = 0
    required: bool = True


@dataclass(frozen=True)
class SectionSpec:
    """Markers bounding each card section."""
    start: str
    stop: str
    start_offset: int = 1
    stop_offset: int = -1


@dataclass
class Recipe:
    """Complete conversion recipe."""
    name: str
    sections: SectionSpec
    header: str = ""
    divider: str = ""
    delete: list[DeletePass] = field(default_factory=list)
    repair: list[str] = field(default_factory=list)
    append_divider: bool = False

    def render_header(self, first_line: str) -> str:
        """Header text with ``{first_line}`` filled in."""
        return self.header.replace("{first_line}", first_line)


def _pattern(value: Any, divider: str, where: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise RecipeError(f"{where}: pattern must be a string, got {value!r}")
    if value == DIVIDER_REF:
        if not divider:
            raise RecipeError(f"{where}: {DIVIDER_REF} used but recipe has no divider")
        return divider
    return value


def _offset(value: Any, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise RecipeError(f"{where}: offset must be an integer, got {value!r}")
    return value


def parse_recipe(data: Any) -> Recipe:
    """
    Build a Recipe from a decoded YAML mapping.
    
    Pattern values equal to ``"@divider"`` are replaced by the recipe's
    divider line.
    
    Raises:
        RecipeError: Missing keys or values of the wrong type
    """
    if not isinstance(data, dict):
        raise RecipeError("Recipe must be a mapping")
    
    divider = _pattern(data.get("divider"), "", "divider")
    
    delete = []
    for i, item in enumerate(data.get("delete") or []):
        where = f"delete[{i}]"
        if isinstance(item, str):
            item = {"start": item}
        if not isinstance(item, dict) or "start" not in item:
            raise RecipeError(f"{where}: expected a pattern or a mapping with 'start'")
        delete.append(
            DeletePass(
                start=_pattern(item["start"], divider, where),
                stop=_pattern(item.get("stop"), divider, where),
                start_offset=_offset(item.get("start_offset", 0), where),
                stop_offset=_offset(item.get("stop_offset", 0), where),
                required=bool(item.get("required", True)),
            )
        )
    
    repair = []
    for i, line in enumerate(data.get("repair") or []):
        if not isinstance(line, str) or not line:
            raise RecipeError(f"repair[{i}]: expected a non-empty string")
        repair.append(line)
    
    sections_data = data.get("sections")
    if not isinstance(sections_data, dict) or "start" not in sections_data:
        raise RecipeError("sections: expected a mapping with 'start' and 'stop'")
    sections = SectionSpec(
        start=_pattern(sections_data["start"], divider, "sections"),
        stop=_pattern(sections_data.get("stop"), divider, "sections"),
        start_offset=_offset(sections_data.get("start_offset", 1), "sections"),
        stop_offset=_offset(sections_data.get("stop_offset", -1), "sections"),
    )
    if not sections.stop:
        raise RecipeError("sections: a stop pattern is required")
    
    return Recipe(
        name=str(data.get("name", "recipe")),
        sections=sections,
        header=str(data.get("header") or ""),
        divider=divider,
        delete=delete,
        repair=repair,
        append_divider=bool(data.get("append_divider", False)),
    )


def load_recipe(path: Path) -> Recipe:
    """Load a recipe from a YAML file."""
    if not path.exists():
        raise RecipeError(f"Recipe not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise RecipeError(f"Invalid recipe {path}: {e}") from e
    return parse_recipe(data)


def load_builtin_recipe(name: str = "vim_quickref") -> Recipe:
    """Load a recipe shipped in the quickdeck.recipes package."""
    resource = resources.files("quickdeck.recipes").joinpath(f"{name}.yaml")
    if not resource.is_file():
        raise RecipeError(f"Unknown built-in recipe: {name}")
    data = yaml.safe_load(resource.read_text(encoding="utf-8"))
    return parse_recipe(data)
