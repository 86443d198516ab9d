"""Editor commands built on the reflow strategies."""

from fillpara.actions.fill_paragraph import (
    FillParagraphAction,
    FillResult,
    build_replacement,
)

__all__ = [
    "FillParagraphAction",
    "FillResult",
    "build_replacement",
]
