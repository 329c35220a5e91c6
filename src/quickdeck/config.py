"""Configuration loader for quickdeck.toml."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

from .core.errors import ConfigError


@dataclass
class InputConfig:
    """Input document configuration."""
    drop_empty_lines: bool = True


@dataclass
class ExtractConfig:
    """Card extraction configuration."""
    field_marker: str = "|"
    separator: str = "\t"


@dataclass
class OutputConfig:
    """Deck output configuration."""
    title_format: str = "({title})<br>"


@dataclass
class DebugConfig:
    """Diagnostic diff configuration."""
    enabled: bool = False
    diff_command: str = "diff"


@dataclass
class RecipeConfig:
    """Recipe selection."""
    path: Path | None = None


@dataclass
class QuickdeckConfig:
    """Complete quickdeck configuration."""
    input: InputConfig
    extract: ExtractConfig
    output: OutputConfig
    debug: DebugConfig
    recipe: RecipeConfig


def load_config(config_path: Path | None = None) -> QuickdeckConfig:
    """
    Load configuration from quickdeck.toml.
    
    Search order:
    1. config_path (if provided)
    2. cwd/quickdeck.toml
    
    Args:
        config_path: Explicit path to config file
    
    Returns:
        QuickdeckConfig with resolved settings
    """
    toml_data: dict[str, Any] = {}
    loaded_from: Path | None = None
    
    search_paths = []
    if config_path:
        search_paths.append(config_path)
    search_paths.append(Path.cwd() / "quickdeck.toml")
    
    for path in search_paths:
        if path.exists():
            try:
                with open(path, "rb") as f:
                    toml_data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid config {path}: {e}") from e
            loaded_from = path
            break
    
    input_data = toml_data.get("input", {})
    input_config = InputConfig(
        drop_empty_lines=input_data.get("drop_empty_lines", True),
    )
    
    extract_data = toml_data.get("extract", {})
    extract_config = ExtractConfig(
        field_marker=extract_data.get("field_marker", "|"),
        separator=extract_data.get("separator", "\t"),
    )
    
    output_data = toml_data.get("output", {})
    output_config = OutputConfig(
        title_format=output_data.get("title_format", "({title})<br>"),
    )
    
    debug_data = toml_data.get("debug", {})
    debug_config = DebugConfig(
        enabled=debug_data.get("enabled", False),
        diff_command=debug_data.get("diff_command", "diff"),
    )
    
    # Relative recipe paths are taken relative to the config file
    recipe_data = toml_data.get("recipe", {})
    recipe_path = recipe_data.get("path")
    if recipe_path is not None:
        recipe_path = Path(recipe_path)
        if not recipe_path.is_absolute() and loaded_from is not None:
            recipe_path = loaded_from.parent / recipe_path
    
    return QuickdeckConfig(
        input=input_config,
        extract=extract_config,
        output=output_config,
        debug=debug_config,
        recipe=RecipeConfig(path=recipe_path),
    )
