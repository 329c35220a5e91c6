"""Tests for the quickdeck CLI."""

import subprocess
import tempfile
from pathlib import Path

DIVIDER = "-" * 20

DOCUMENT = f"""*sample.txt*  Sample reference
*Q_mv* Moving around
|h| h\tleft
|l| l\tright
{DIVIDER}
*Q_ed* Editing
|x| x\tdelete <char>
"""

RECIPE = f"""
name: sample
divider: "{DIVIDER}"
header: |
  # {{first_line}}
sections:
  start: "*Q_"
  stop: "@divider"
append_divider: true
"""


def _workspace(tmpdir: str) -> tuple[Path, Path, Path]:
    root = Path(tmpdir)
    doc = root / "sample.txt"
    doc.write_text(DOCUMENT, encoding="utf-8")
    recipe = root / "sample.yaml"
    recipe.write_text(RECIPE, encoding="utf-8")
    return doc, recipe, root / "deck.csv"


def test_convert():
    """Test a full conversion through the command line."""
    with tempfile.TemporaryDirectory() as tmpdir:
        doc, recipe, out = _workspace(tmpdir)
        
        result = subprocess.run(
            ["quickdeck", "--recipe", str(recipe), str(doc), str(out)],
            capture_output=True,
            text=True,
        )
        
        assert result.returncode == 0, result.stderr
        assert "Wrote 3 cards from 2 sections" in result.stdout
        
        lines = out.read_text(encoding="utf-8").splitlines()
        assert lines == [
            "# *sample.txt*  Sample reference",
            "(Moving around)<br>h\t(Moving around)<br>left",
            "(Moving around)<br>l\t(Moving around)<br>right",
            "(Editing)<br>x\t(Editing)<br>delete [char]",
        ]


def test_convert_quiet():
    """Test that --quiet suppresses the summary."""
    with tempfile.TemporaryDirectory() as tmpdir:
        doc, recipe, out = _workspace(tmpdir)
        
        result = subprocess.run(
            ["quickdeck", "-q", "--recipe", str(recipe), str(doc), str(out)],
            capture_output=True,
            text=True,
        )
        
        assert result.returncode == 0
        assert result.stdout == ""
        assert out.exists()


def test_recipe_from_config():
    """Test that the recipe path can come from quickdeck.toml."""
    with tempfile.TemporaryDirectory() as tmpdir:
        doc, _recipe, out = _workspace(tmpdir)
        config = Path(tmpdir) / "quickdeck.toml"
        config.write_text('[recipe]\npath = "sample.yaml"\n')
        
        result = subprocess.run(
            ["quickdeck", "--config", str(config), str(doc), str(out)],
            capture_output=True,
            text=True,
        )
        
        assert result.returncode == 0, result.stderr
        assert "3 cards" in result.stdout


def test_missing_arguments():
    """Test that missing positional arguments print usage and fail."""
    result = subprocess.run(["quickdeck"], capture_output=True, text=True)
    
    assert result.returncode != 0
    assert "usage:" in result.stderr


def test_missing_input_file():
    """Test that an unreadable input is reported."""
    with tempfile.TemporaryDirectory() as tmpdir:
        result = subprocess.run(
            ["quickdeck", str(Path(tmpdir) / "nope.txt"), str(Path(tmpdir) / "deck.csv")],
            capture_output=True,
            text=True,
        )
        
        assert result.returncode == 1
        assert result.stderr.startswith("Error:")


def test_failure_removes_partial_deck():
    """Test that a failed extraction leaves no deck behind."""
    with tempfile.TemporaryDirectory() as tmpdir:
        doc, recipe, out = _workspace(tmpdir)
        doc.write_text(DOCUMENT.replace("|h| h\tleft", "|h| h   left"), encoding="utf-8")
        
        result = subprocess.run(
            ["quickdeck", "--recipe", str(recipe), str(doc), str(out)],
            capture_output=True,
            text=True,
        )
        
        assert result.returncode == 1
        assert "Expected 2 fields" in result.stderr
        assert not out.exists()


def test_builtin_recipe_rejects_other_documents():
    """Test that the Vim recipe fails loudly on a document it does not fit."""
    with tempfile.TemporaryDirectory() as tmpdir:
        doc, _recipe, out = _workspace(tmpdir)
        
        result = subprocess.run(
            ["quickdeck", str(doc), str(out)],
            capture_output=True,
            text=True,
            cwd=tmpdir,
        )
        
        assert result.returncode == 1
        assert "Pattern not found" in result.stderr


def test_input_not_utf8():
    """Test that undecodable input is reported, not dumped as a traceback."""
    with tempfile.TemporaryDirectory() as tmpdir:
        doc, recipe, out = _workspace(tmpdir)
        doc.write_bytes(b"\xff\xfe*Q_mv* Moving\n")
        
        result = subprocess.run(
            ["quickdeck", "--recipe", str(recipe), str(doc), str(out)],
            capture_output=True,
            text=True,
        )
        
        assert result.returncode == 1
        assert result.stderr.startswith("Error:")
        assert "not valid UTF-8" in result.stderr
        assert "Traceback" not in result.stderr


def test_malformed_config():
    """Test that a broken quickdeck.toml is reported."""
    with tempfile.TemporaryDirectory() as tmpdir:
        doc, recipe, out = _workspace(tmpdir)
        config = Path(tmpdir) / "quickdeck.toml"
        config.write_text("[recipe\npath =\n")
        
        result = subprocess.run(
            ["quickdeck", "--config", str(config), "--recipe", str(recipe), str(doc), str(out)],
            capture_output=True,
            text=True,
        )
        
        assert result.returncode == 1
        assert result.stderr.startswith("Error:")
        assert "Invalid config" in result.stderr
        assert "Traceback" not in result.stderr
