"""Abstract base class for editable text buffers.

The host editor owns the document; the reflow code only needs a
read view addressable by line number and character offset, plus a
single range replacement performed inside a write command.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager


class TextBufferError(Exception):
    """Exception raised when an offset or line index falls outside a buffer."""

    pass


class BaseTextBuffer(ABC):
    """Abstract base class for text buffers.

    Lines are separated by ``"\\n"``. Line end offsets exclude the
    separator, so ``text[line_start_offset(i):line_end_offset(i)]`` is
    the raw text of line ``i``.

    Example:
        ```python
        with buffer.write_command("XFillParagraph"):
            buffer.replace_string(start, end, new_text)
        ```
    """

    @property
    @abstractmethod
    def text(self) -> str:
        """Return the full buffer text."""
        ...

    @property
    @abstractmethod
    def line_count(self) -> int:
        """Return the number of lines in the buffer."""
        ...

    @abstractmethod
    def line_number(self, offset: int) -> int:
        """Resolve a character offset to its zero-based line index.

        Args:
            offset: Character offset in ``[0, len(text)]``.

        Returns:
            The index of the line containing the offset.

        Raises:
            TextBufferError: If the offset is outside the buffer.
        """
        ...

    @abstractmethod
    def line_start_offset(self, line: int) -> int:
        """Return the offset of the first character of a line."""
        ...

    @abstractmethod
    def line_end_offset(self, line: int) -> int:
        """Return the offset one past the last character of a line."""
        ...

    @abstractmethod
    def replace_string(self, start_offset: int, end_offset: int, text: str) -> None:
        """Replace the characters in ``[start_offset, end_offset)`` with text.

        Raises:
            TextBufferError: If the range is outside the buffer or reversed.
        """
        ...

    @abstractmethod
    def write_command(self, name: str) -> AbstractContextManager[None]:
        """Return a scope in which edits apply atomically.

        Edits made inside the scope are serialized against other writers
        and are rolled back if the scope exits with an exception.

        Args:
            name: Command name recorded when the scope made an edit.
        """
        ...

    def line_text(self, line: int) -> str:
        """Return the raw text of a line, without its separator."""
        return self.text[self.line_start_offset(line):self.line_end_offset(line)]
