"""Greedy paragraph filler.

Rewraps the words of a paragraph into lines of at most ``FILL_COLUMN``
characters. Words are runs of non-space, non-tab characters and are
never split, so a single word wider than the column sits alone on an
overlong line. Every output line starts with the indentation of the
first content line.
"""

import logging
import re

from fillpara.interfaces.paragraph import BaseParagraphFiller, Paragraph

logger = logging.getLogger(__name__)

FILL_COLUMN = 70

_WORD_RE = re.compile(r"[^ \t]+")
_INDENT_RE = re.compile(r"[ \t]*")


def fill_paragraph(paragraph: Paragraph, width: int = FILL_COLUMN) -> list[str]:
    """Rewrap the content lines of a paragraph.

    Args:
        paragraph: The paragraph to refill.
        width: Maximum line length in characters.

    Returns:
        The new lines, without the paragraph prefix applied.
    """
    result: list[str] = []

    indent = _INDENT_RE.match(paragraph.lines[0]).group() if paragraph.lines else ""
    current_line = indent

    for line in paragraph.lines:
        for word in _WORD_RE.findall(line):
            if current_line and len(current_line) + len(word) + 1 > width:
                # a long word on an empty line goes in anyway
                result.append(current_line)
                current_line = indent
            elif current_line.strip():
                current_line += " "
            current_line += word

    if current_line:
        result.append(current_line)

    logger.debug(
        f"Filled {len(paragraph.lines)} lines into {len(result)} at width {width}"
    )
    return result


class GreedyParagraphFiller(BaseParagraphFiller):
    """Filler that packs as many words per line as fit the column."""

    def fill(self, paragraph: Paragraph) -> list[str]:
        """Rewrap the content lines of a paragraph."""
        return fill_paragraph(paragraph, FILL_COLUMN)

    @property
    def width(self) -> int:
        """Return the fill column."""
        return FILL_COLUMN
