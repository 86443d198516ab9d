"""Commenter that treats every document as plain text."""

from fillpara.interfaces.commenter import BaseCommenter


class PlainTextCommenter(BaseCommenter):
    """Commenter that never reports a line comment prefix.

    With no prefix the locator falls back to plain text mode, where a
    paragraph is the run of non-blank lines around the caret.
    """

    def line_comment_prefix(self, language: str | None) -> str | None:
        """Return None for every language."""
        return None
