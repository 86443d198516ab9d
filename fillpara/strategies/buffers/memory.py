"""In-memory text buffer.

A self-contained buffer for hosts that hand over the whole document
text (HTTP clients, scripts, tests). Line starts are indexed once per
edit so offset-to-line lookups are a binary search.
"""

import bisect
import logging
import threading
from collections import deque
from collections.abc import Iterator
from contextlib import contextmanager

from fillpara.interfaces.buffer import BaseTextBuffer, TextBufferError

logger = logging.getLogger(__name__)


class InMemoryTextBuffer(BaseTextBuffer):
    """Text buffer backed by a Python string.

    Writes are serialized by a re-entrant lock held for the whole of a
    ``write_command`` scope, so a caller that reads, computes and
    replaces inside one scope sees no interleaved edits.

    Attributes:
        text: The current buffer content.
        line_count: Number of lines, counting a trailing empty line.
    """

    def __init__(self, text: str = "", max_commands: int = 100) -> None:
        """Initialize the buffer.

        Args:
            text: Initial content. Lines are separated by ``"\\n"``.
            max_commands: Number of completed command names kept.
        """
        self._text = text
        self._lock = threading.RLock()
        self._line_starts: list[int] = []
        self._commands: deque[str] = deque(maxlen=max_commands)
        self._edit_count = 0
        self._reindex()

    @property
    def text(self) -> str:
        """Return the full buffer text."""
        return self._text

    @property
    def line_count(self) -> int:
        """Return the number of lines in the buffer."""
        return len(self._line_starts)

    @property
    def commands(self) -> list[str]:
        """Return the names of write commands that completed, oldest first."""
        return list(self._commands)

    def line_number(self, offset: int) -> int:
        """Resolve a character offset to its zero-based line index."""
        if offset < 0 or offset > len(self._text):
            raise TextBufferError(
                f"Offset {offset} is outside the buffer (length {len(self._text)})"
            )
        return bisect.bisect_right(self._line_starts, offset) - 1

    def line_start_offset(self, line: int) -> int:
        """Return the offset of the first character of a line."""
        self._check_line(line)
        return self._line_starts[line]

    def line_end_offset(self, line: int) -> int:
        """Return the offset one past the last character of a line."""
        self._check_line(line)
        if line + 1 < len(self._line_starts):
            return self._line_starts[line + 1] - 1
        return len(self._text)

    def replace_string(self, start_offset: int, end_offset: int, text: str) -> None:
        """Replace the characters in ``[start_offset, end_offset)`` with text."""
        with self._lock:
            if start_offset < 0 or end_offset > len(self._text) or start_offset > end_offset:
                raise TextBufferError(
                    f"Invalid range [{start_offset}, {end_offset}) "
                    f"for buffer of length {len(self._text)}"
                )

            self._text = self._text[:start_offset] + text + self._text[end_offset:]
            self._edit_count += 1
            self._reindex()

        logger.debug(
            f"Replaced [{start_offset}, {end_offset}) with {len(text)} characters"
        )

    @contextmanager
    def write_command(self, name: str) -> Iterator[None]:
        """Run edits as one atomic command.

        The command name is recorded only if the scope replaced text.

        Args:
            name: Command name recorded once the scope completes.

        Yields:
            None. Edits made inside the scope are rolled back on error.
        """
        with self._lock:
            snapshot = self._text
            edits_before = self._edit_count
            try:
                yield
            except Exception as e:
                if self._edit_count != edits_before:
                    logger.error(f"Write command '{name}' failed, rolling back: {e}")
                    self._text = snapshot
                    self._reindex()
                raise
            if self._edit_count != edits_before:
                self._commands.append(name)
                logger.debug(f"Write command '{name}' completed")

    def _reindex(self) -> None:
        """Recompute the start offset of every line."""
        starts = [0]
        index = self._text.find("\n")
        while index != -1:
            starts.append(index + 1)
            index = self._text.find("\n", index + 1)
        self._line_starts = starts

    def _check_line(self, line: int) -> None:
        """Raise TextBufferError if the line index is out of range."""
        if line < 0 or line >= len(self._line_starts):
            raise TextBufferError(
                f"Line {line} is outside the buffer ({len(self._line_starts)} lines)"
            )
