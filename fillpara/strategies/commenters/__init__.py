"""Concrete commenter implementations."""

from fillpara.strategies.commenters.language_table import LanguageTableCommenter
from fillpara.strategies.commenters.plain import PlainTextCommenter

__all__ = [
    "LanguageTableCommenter",
    "PlainTextCommenter",
]
