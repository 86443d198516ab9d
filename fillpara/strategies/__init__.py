"""Concrete strategy implementations."""

from fillpara.strategies.buffers import (
    InMemoryTextBuffer,
)
from fillpara.strategies.commenters import (
    LanguageTableCommenter,
    PlainTextCommenter,
)
from fillpara.strategies.paragraph import (
    CommentParagraphLocator,
    GreedyParagraphFiller,
)

__all__ = [
    "InMemoryTextBuffer",
    "LanguageTableCommenter",
    "PlainTextCommenter",
    "CommentParagraphLocator",
    "GreedyParagraphFiller",
]
