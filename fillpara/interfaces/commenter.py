"""Abstract base class for comment prefix lookup.

Mirrors what an editor knows about each language: the literal string
that starts a line comment, if the language has one.
"""

from abc import ABC, abstractmethod


class BaseCommenter(ABC):
    """Abstract base class for line comment prefix strategies."""

    @abstractmethod
    def line_comment_prefix(self, language: str | None) -> str | None:
        """Return the line comment prefix for a language.

        Args:
            language: Language identifier, e.g. ``"python"``. ``None`` means
                the language at the caret is unknown.

        Returns:
            The prefix string, or None if the language has no line comment.
        """
        ...

    def language_for_filename(self, filename: str) -> str | None:
        """Guess a language identifier from a filename.

        Args:
            filename: A file name or path.

        Returns:
            The language identifier, or None when no guess is possible.
        """
        return None
