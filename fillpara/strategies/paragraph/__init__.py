"""Paragraph locate and fill implementations."""

from fillpara.strategies.paragraph.filler import (
    FILL_COLUMN,
    GreedyParagraphFiller,
    fill_paragraph,
)
from fillpara.strategies.paragraph.locator import (
    CommentParagraphLocator,
    locate_paragraph,
)

__all__ = [
    "FILL_COLUMN",
    "CommentParagraphLocator",
    "GreedyParagraphFiller",
    "fill_paragraph",
    "locate_paragraph",
]
