"""Tests for recipe loading."""

import tempfile
from pathlib import Path

import pytest

from quickdeck.core.errors import RecipeError
from quickdeck.recipe import DeletePass, load_builtin_recipe, load_recipe, parse_recipe

DIVIDER = "-" * 78


def test_builtin_recipe():
    """Test the shipped Vim quickref recipe."""
    recipe = load_builtin_recipe()
    
    assert recipe.name == "vim_quickref"
    assert recipe.divider == DIVIDER
    assert len(recipe.delete) == 21
    assert len(recipe.repair) == 11
    assert recipe.append_divider is True
    
    assert recipe.delete[0] == DeletePass("*quickref.txt* For Vim", DIVIDER, 0, 2)
    assert recipe.delete[3] == DeletePass("These only work when 'wrap' is off:")
    assert recipe.sections.start == "*Q_"
    assert recipe.sections.stop == DIVIDER
    assert (recipe.sections.start_offset, recipe.sections.stop_offset) == (1, -1)
    
    # Repairs carry a real tab between command and description
    assert all("\t" in line for line in recipe.repair)
    assert recipe.repair[8] == (
        "|:noreabbrev| :norea[bbrev] [lhs] [rhs]  \t  like \":ab\", but don't remap [rhs]"
    )


def test_builtin_recipe_header():
    """Test that the header embeds the document's first line."""
    recipe = load_builtin_recipe()
    header = recipe.render_header("*quickref.txt*  For Vim version 9.1.")
    
    assert header.startswith("#\n# https://github.com/ccammack/anki-vim-quickref\n#\n")
    assert "# *quickref.txt*  For Vim version 9.1.\n" in header
    assert "Fields separated by:  Tab" in header


def test_unknown_builtin_recipe():
    """Test that asking for a missing built-in recipe fails."""
    with pytest.raises(RecipeError):
        load_builtin_recipe("nope")


def test_parse_recipe_defaults():
    """Test default offsets and flags."""
    recipe = parse_recipe(
        {
            "sections": {"start": "## ", "stop": "----"},
            "delete": ["junk", {"start": "a", "stop": "b", "required": False}],
        }
    )
    
    assert recipe.name == "recipe"
    assert recipe.delete == [DeletePass("junk"), DeletePass("a", "b", required=False)]
    assert recipe.repair == []
    assert (recipe.sections.start_offset, recipe.sections.stop_offset) == (1, -1)
    assert recipe.append_divider is False


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"delete": []},
        {"sections": {"start": "x"}},
        {"sections": {"start": "x", "stop": "@divider"}},
        {"sections": {"start": "x", "stop": "y"}, "delete": [{"stop": "y"}]},
        {"sections": {"start": "x", "stop": "y"}, "delete": [{"start": "a", "stop_offset": "2"}]},
        {"sections": {"start": "x", "stop": "y"}, "repair": [""]},
    ],
)
def test_parse_recipe_invalid(data):
    """Test that malformed recipes are rejected."""
    with pytest.raises(RecipeError):
        parse_recipe(data)


def test_load_recipe_file():
    """Test loading a recipe from YAML on disk."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "notes.yaml"
        path.write_text("""
name: notes
divider: "===="
delete:
  - start: "DRAFT"
    stop: "@divider"
repair:
  - "|b| fixed\\tline"
sections:
  start: "## "
  stop: "@divider"
""")
        
        recipe = load_recipe(path)
        assert recipe.name == "notes"
        assert recipe.delete == [DeletePass("DRAFT", "====")]
        assert recipe.repair == ["|b| fixed\tline"]
        assert recipe.sections.stop == "===="


def test_load_recipe_missing_file():
    """Test that a missing recipe file is reported."""
    with pytest.raises(RecipeError):
        load_recipe(Path("/nonexistent/recipe.yaml"))


def test_load_recipe_invalid_yaml():
    """Test that YAML syntax errors become recipe errors."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "bad.yaml"
        path.write_text("sections: [unclosed\n")
        with pytest.raises(RecipeError):
            load_recipe(path)
