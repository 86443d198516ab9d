"""Abstract base classes for the reflow collaborators."""

from fillpara.interfaces.buffer import BaseTextBuffer, TextBufferError
from fillpara.interfaces.commenter import BaseCommenter
from fillpara.interfaces.paragraph import (
    BaseParagraphFiller,
    BaseParagraphLocator,
    Paragraph,
)

__all__ = [
    "BaseTextBuffer",
    "TextBufferError",
    "BaseCommenter",
    "BaseParagraphLocator",
    "BaseParagraphFiller",
    "Paragraph",
]
