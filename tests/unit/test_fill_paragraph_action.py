"""Unit tests for the fill paragraph action."""

import pytest

from fillpara.actions import FillParagraphAction, build_replacement
from fillpara.core.config import Settings
from fillpara.core.factory import ComponentFactory
from fillpara.interfaces.buffer import TextBufferError
from fillpara.interfaces.paragraph import BaseParagraphFiller, Paragraph
from fillpara.strategies.buffers import InMemoryTextBuffer


PYTHON_SOURCE = "def f():\n    # alpha beta\n    # gamma\n    return 1\n"


class ExplodingFiller(BaseParagraphFiller):
    """Filler that fails, to exercise rollback."""

    def fill(self, paragraph):
        raise RuntimeError("filler failed")

    @property
    def width(self):
        return 70


# =============================================================================
# Action Tests
# =============================================================================


class TestFillParagraphAction:
    """Test suite for FillParagraphAction."""

    @pytest.fixture
    def action(self):
        """Create an action with default settings."""
        return FillParagraphAction(ComponentFactory(Settings()))

    def test_fill_python_comment(self, action):
        """Test refilling an indented python comment paragraph."""
        buffer = InMemoryTextBuffer(PYTHON_SOURCE)

        result = action.perform(buffer, 30, language="python")

        assert result is not None
        assert buffer.text == "def f():\n    # alpha beta gamma\n    return 1\n"
        assert result.lines == (" alpha beta gamma",)
        assert result.replacement == "    # alpha beta gamma"
        assert result.comment_prefix == "#"
        assert result.changed is True
        assert buffer.commands == ["XFillParagraph"]

    def test_wraps_long_paragraph_at_fill_column(self, action):
        """Test that a long comment is split into lines of the fill column."""
        words = [f"word{i:02d}" for i in range(30)]
        text = "    // " + " ".join(words) + "\nint x;"
        buffer = InMemoryTextBuffer(text)

        result = action.perform(buffer, 10, language="kotlin")

        assert result is not None
        new_lines = buffer.text.split("\n")
        assert new_lines[-1] == "int x;"
        assert len(new_lines) == len(result.lines) + 1
        for line in new_lines[:-1]:
            assert line.startswith("    // ")
            assert len(line) - len("    //") <= 70
        assert " ".join(new_lines[:-1]).replace("//", " ").split() == words

    def test_already_filled_is_unchanged(self, action):
        """Test that refilling a filled paragraph reports no change."""
        buffer = InMemoryTextBuffer("# one two three\ncode")

        result = action.perform(buffer, 0, language="python")

        assert result is not None
        assert result.changed is False
        assert buffer.text == "# one two three\ncode"

    def test_no_buffer(self, action):
        """Test that a missing document does nothing."""
        assert action.perform(None, 0, language="python") is None

    def test_no_paragraph_at_caret(self, action):
        """Test that a caret on code leaves the buffer untouched."""
        buffer = InMemoryTextBuffer(PYTHON_SOURCE)

        assert action.perform(buffer, 2, language="python") is None
        assert buffer.text == PYTHON_SOURCE
        assert buffer.commands == []

    def test_caret_outside_buffer(self, action):
        """Test that an invalid caret raises TextBufferError."""
        buffer = InMemoryTextBuffer(PYTHON_SOURCE)

        with pytest.raises(TextBufferError):
            action.perform(buffer, 1000, language="python")

    def test_caret_outside_buffer_logs_no_error(self, action, caplog):
        """Test that a rejected caret does not log a rollback error."""
        buffer = InMemoryTextBuffer(PYTHON_SOURCE)

        with pytest.raises(TextBufferError):
            action.perform(buffer, 1000, language="python")

        assert not [r for r in caplog.records if r.levelname == "ERROR"]
        assert buffer.commands == []

    def test_failure_rolls_back(self):
        """Test that a failure inside the command leaves the buffer unchanged."""
        factory = ComponentFactory(Settings())
        factory._filler_cache = ExplodingFiller()
        buffer = InMemoryTextBuffer(PYTHON_SOURCE)

        with pytest.raises(RuntimeError, match="filler failed"):
            FillParagraphAction(factory).perform(buffer, 30, language="python")

        assert buffer.text == PYTHON_SOURCE
        assert buffer.commands == []

    def test_custom_action_name(self):
        """Test that the command name comes from settings."""
        action = FillParagraphAction(ComponentFactory(Settings(action_name="Reflow")))
        buffer = InMemoryTextBuffer("# a\n# b")

        action.perform(buffer, 0, language="python")

        assert action.name == "Reflow"
        assert buffer.commands == ["Reflow"]

    # =========================================================================
    # Comment Prefix Resolution Tests
    # =========================================================================

    def test_explicit_prefix_wins(self, action):
        """Test that an explicit prefix overrides the language."""
        buffer = InMemoryTextBuffer("-- a\n-- b")

        action.perform(buffer, 0, language="python", comment_prefix="--")

        assert buffer.text == "-- a b"

    def test_language_from_filename(self, action):
        """Test that the file extension selects the prefix."""
        assert action.resolve_comment_prefix(filename="src/main.rs") == "//"

    def test_language_argument_beats_filename(self, action):
        """Test that an explicit language is preferred over the file name."""
        assert action.resolve_comment_prefix(language="sql", filename="main.rs") == "--"

    def test_unknown_language_is_plain_text(self, action):
        """Test that a language without line comments reflows plain text."""
        buffer = InMemoryTextBuffer("one two\nthree\n\nfour")

        result = action.perform(buffer, 0, language="cobol")

        assert result is not None
        assert result.comment_prefix == ""
        assert buffer.text == "one two three\n\nfour"

    def test_default_language(self):
        """Test that the default language applies when nothing is given."""
        action = FillParagraphAction(ComponentFactory(Settings(default_language="python")))

        assert action.resolve_comment_prefix() == "#"

    def test_resolve_language(self, action):
        """Test the language precedence: argument, filename, default."""
        assert action.resolve_language("sql", "main.rs") == "sql"
        assert action.resolve_language(filename="main.rs") == "rust"
        assert action.resolve_language() == "text"


class TestBuildReplacement:
    """Test suite for build_replacement."""

    def test_prefix_applied_to_every_line(self):
        """Test that each line receives the paragraph prefix."""
        paragraph = Paragraph(0, 0, (" a",), paragraph_prefix="  //")

        assert build_replacement(paragraph, [" a b", " c"]) == "  // a b\n  // c"

    def test_missing_prefix(self):
        """Test that a paragraph without a prefix joins lines as they are."""
        paragraph = Paragraph(0, 0, ("a",), paragraph_prefix=None)

        assert build_replacement(paragraph, ["a", "b"]) == "a\nb"


class TestParagraph:
    """Test suite for the Paragraph value type."""

    def test_lines_are_stored_as_tuple(self):
        """Test that lines passed as a list become an immutable tuple."""
        paragraph = Paragraph(0, 3, ["abc"])

        assert paragraph.lines == ("abc",)

    def test_start_after_end(self):
        """Test that a reversed range is rejected."""
        with pytest.raises(ValueError):
            Paragraph(5, 1, ("x",))
