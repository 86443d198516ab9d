"""Fill paragraph command.

Resolves the comment prefix for the caret's language, locates the
paragraph, refills it, and writes it back with a single replacement
inside one write command of the buffer.
"""

import logging
from dataclasses import dataclass

from fillpara.core.factory import ComponentFactory, get_factory
from fillpara.interfaces.buffer import BaseTextBuffer
from fillpara.interfaces.paragraph import Paragraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FillResult:
    """Outcome of a paragraph fill.

    Attributes:
        paragraph: The paragraph that was replaced.
        lines: The refilled lines, without the paragraph prefix.
        replacement: The text written over the paragraph's range.
        comment_prefix: The comment prefix used to locate the paragraph.
        changed: Whether the replacement differs from the original text.
    """

    paragraph: Paragraph
    lines: tuple[str, ...]
    replacement: str
    comment_prefix: str
    changed: bool


def build_replacement(paragraph: Paragraph, lines: list[str]) -> str:
    """Join refilled lines, each preceded by the paragraph prefix."""
    prefix = paragraph.paragraph_prefix or ""
    return "\n".join(prefix + line for line in lines)


class FillParagraphAction:
    """Command handler invoked with a buffer and a caret position.

    Example:
        ```python
        buffer = InMemoryTextBuffer(source)
        result = FillParagraphAction().perform(buffer, caret, language="python")
        if result is not None:
            source = buffer.text
        ```
    """

    def __init__(self, factory: ComponentFactory | None = None) -> None:
        """Initialize the action.

        Args:
            factory: Component factory. If None, uses the global factory.
        """
        self._factory = factory or get_factory()

    @property
    def name(self) -> str:
        """Return the command name recorded for each edit."""
        return self._factory.settings.action_name

    def resolve_language(
        self,
        language: str | None = None,
        filename: str | None = None,
    ) -> str:
        """Pick the language at the caret.

        The argument wins, then the language guessed from the filename,
        then the default language setting.
        """
        if not language and filename:
            language = self._factory.get_commenter().language_for_filename(filename)
        return language or self._factory.settings.default_language

    def resolve_comment_prefix(
        self,
        language: str | None = None,
        comment_prefix: str | None = None,
        filename: str | None = None,
    ) -> str:
        """Work out the comment prefix to locate a paragraph with.

        An explicit prefix wins. Otherwise the language is taken from the
        argument, then from the filename, then from the default language
        setting, and looked up with the configured commenter. Languages
        without a line comment resolve to the empty prefix.

        Returns:
            The comment prefix, possibly empty.
        """
        if comment_prefix is not None:
            return comment_prefix

        language = self.resolve_language(language, filename)
        return self._factory.get_commenter().line_comment_prefix(language) or ""

    def perform(
        self,
        buffer: BaseTextBuffer | None,
        caret_offset: int,
        language: str | None = None,
        comment_prefix: str | None = None,
        filename: str | None = None,
    ) -> FillResult | None:
        """Refill the paragraph at the caret.

        Args:
            buffer: The document buffer. None means the host has no active
                document, and nothing happens.
            caret_offset: Character offset of the caret.
            language: Language at the caret, used to look up the prefix.
            comment_prefix: Explicit comment prefix, overriding the language.
            filename: File name used to guess the language.

        Returns:
            The FillResult, or None if there is no paragraph at the caret.

        Raises:
            TextBufferError: If the caret offset is outside the buffer.
        """
        if buffer is None:
            logger.debug("No active buffer, nothing to fill")
            return None

        # Raises TextBufferError for a caret outside the buffer.
        buffer.line_number(caret_offset)
        prefix = self.resolve_comment_prefix(language, comment_prefix, filename)
        locator = self._factory.get_locator()
        filler = self._factory.get_filler()

        with buffer.write_command(self.name):
            paragraph = locator.locate(buffer, caret_offset, prefix)
            if paragraph is None:
                return None

            lines = filler.fill(paragraph)
            replacement = build_replacement(paragraph, lines)
            original = buffer.text[paragraph.start_offset:paragraph.end_offset]

            buffer.replace_string(paragraph.start_offset, paragraph.end_offset, replacement)

        changed = replacement != original
        logger.info(
            f"{self.name}: refilled {len(paragraph.lines)} lines into {len(lines)} "
            f"at [{paragraph.start_offset}, {paragraph.end_offset}), changed={changed}"
        )

        return FillResult(
            paragraph=paragraph,
            lines=tuple(lines),
            replacement=replacement,
            comment_prefix=prefix,
            changed=changed,
        )
