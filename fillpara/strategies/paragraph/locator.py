"""Comment-aware paragraph locator.

Scans outward from the caret line for the maximal run of lines that
are bare line comments with non-blank content. With an empty comment
prefix every line qualifies on the prefix test, so the paragraph is
the run of non-blank lines around the caret.
"""

import logging

from fillpara.interfaces.buffer import BaseTextBuffer
from fillpara.interfaces.paragraph import BaseParagraphLocator, Paragraph

logger = logging.getLogger(__name__)


def _content_start(line_text: str, comment_prefix: str) -> int | None:
    """Return the index right after the comment prefix of a bare comment line.

    Args:
        line_text: Raw text of the line.
        comment_prefix: Line comment prefix, possibly empty.

    Returns:
        The content start index, or None if the line has no comment
        prefix or has code before it.
    """
    comment_start = line_text.find(comment_prefix)
    if comment_start == -1 or line_text[:comment_start].strip():
        return None
    return comment_start + len(comment_prefix)


def locate_paragraph(
    buffer: BaseTextBuffer,
    caret_offset: int,
    comment_prefix: str,
) -> Paragraph | None:
    """Find the paragraph of comment lines containing the caret.

    Args:
        buffer: The buffer to scan.
        caret_offset: Character offset of the caret.
        comment_prefix: Line comment prefix for the language at the caret.

    Returns:
        The located Paragraph, or None if the caret line is not a
        non-blank bare comment line.

    Raises:
        TextBufferError: If the caret offset is outside the buffer.
    """
    current_line = buffer.line_number(caret_offset)

    lines: list[str] = []
    paragraph_start = 0
    paragraph_end = 0
    paragraph_prefix: str | None = None

    # up
    line = current_line
    while line >= 0:
        line_start = buffer.line_start_offset(line)
        line_text = buffer.line_text(line)

        text_start = _content_start(line_text, comment_prefix)
        if text_start is None:
            break

        text = line_text[text_start:]
        if not text.strip():
            break

        if paragraph_prefix is None:
            paragraph_prefix = line_text[:text_start]
            paragraph_end = buffer.line_end_offset(line)

        lines.append(text)
        paragraph_start = line_start
        line -= 1

    if not lines:
        logger.debug(f"No paragraph at line {current_line}")
        return None

    lines.reverse()

    # down
    line = current_line + 1
    while line < buffer.line_count:
        line_text = buffer.line_text(line)

        text_start = _content_start(line_text, comment_prefix)
        if text_start is None:
            break

        text = line_text[text_start:]
        if not text.strip():
            break

        lines.append(text)
        paragraph_end = buffer.line_end_offset(line)
        line += 1

    logger.debug(
        f"Located paragraph of {len(lines)} lines at [{paragraph_start}, {paragraph_end})"
    )
    return Paragraph(
        start_offset=paragraph_start,
        end_offset=paragraph_end,
        lines=tuple(lines),
        paragraph_prefix=paragraph_prefix,
    )


class CommentParagraphLocator(BaseParagraphLocator):
    """Locator that grows a paragraph through bare comment lines."""

    def locate(
        self,
        buffer: BaseTextBuffer,
        caret_offset: int,
        comment_prefix: str,
    ) -> Paragraph | None:
        """Find the paragraph containing the caret."""
        return locate_paragraph(buffer, caret_offset, comment_prefix)
