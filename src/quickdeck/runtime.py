"""Runtime wiring helper for CLI applications."""

from dataclasses import dataclass
from pathlib import Path

from .config import QuickdeckConfig, load_config
from .core.ports import ChangeReporter
from .debug import DiffReporter
from .recipe import Recipe, load_builtin_recipe, load_recipe


@dataclass
class Runtime:
    """Container for all wired components."""
    config: QuickdeckConfig
    recipe: Recipe
    reporter: ChangeReporter | None


def build_runtime(
    config_path: Path | None = None,
    recipe_path: Path | None = None,
    debug: bool = False,
) -> Runtime:
    """Build and wire all components for one conversion."""
    config = load_config(config_path=config_path)
    
    # Use config values if CLI args not provided
    if recipe_path is None:
        recipe_path = config.recipe.path
    recipe = load_recipe(recipe_path) if recipe_path else load_builtin_recipe()
    
    reporter = None
    if debug or config.debug.enabled:
        reporter = DiffReporter(command=config.debug.diff_command)
    
    return Runtime(config=config, recipe=recipe, reporter=reporter)
