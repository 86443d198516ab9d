"""Paragraph value type and the locate/fill strategy interfaces."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from fillpara.interfaces.buffer import BaseTextBuffer


@dataclass(frozen=True)
class Paragraph:
    """A run of comment lines located around a caret.

    Attributes:
        start_offset: Offset of the first character of the first paragraph line.
        end_offset: Offset one past the last character of the last paragraph line.
        lines: Content of each line after the comment prefix, in document order.
        paragraph_prefix: Indentation plus comment marker to insert before
            each line of the refilled paragraph, or None if none was captured.
    """

    start_offset: int
    end_offset: int
    lines: tuple[str, ...]
    paragraph_prefix: str | None = None

    def __post_init__(self) -> None:
        if self.start_offset > self.end_offset:
            raise ValueError(
                f"Paragraph start {self.start_offset} is after end {self.end_offset}"
            )
        # Callers may pass any sequence; keep the stored value immutable.
        object.__setattr__(self, "lines", tuple(self.lines))


class BaseParagraphLocator(ABC):
    """Abstract base class for finding the paragraph around a caret."""

    @abstractmethod
    def locate(
        self,
        buffer: BaseTextBuffer,
        caret_offset: int,
        comment_prefix: str,
    ) -> Paragraph | None:
        """Find the paragraph containing the caret.

        Args:
            buffer: The buffer to scan.
            caret_offset: Character offset of the caret.
            comment_prefix: Line comment prefix, empty for plain text.

        Returns:
            The located Paragraph, or None if the caret line does not qualify.
        """
        ...


class BaseParagraphFiller(ABC):
    """Abstract base class for paragraph wrapping strategies."""

    @abstractmethod
    def fill(self, paragraph: Paragraph) -> list[str]:
        """Rewrap the content lines of a paragraph.

        Args:
            paragraph: The paragraph to refill.

        Returns:
            The new lines, without the paragraph prefix applied.
        """
        ...

    @property
    @abstractmethod
    def width(self) -> int:
        """Return the maximum line width this filler produces."""
        ...
