"""Fill the comment paragraph at a line of a file.

The language is guessed from the file name unless given explicitly.

Usage:
    python -m scripts.fill_file src/module.py 12
    or
    python scripts/fill_file.py src/module.py 12 5 --dry-run (after pip install -e .)
"""

import argparse
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fillpara.actions import FillParagraphAction
from fillpara.core.logging_config import get_logger
from fillpara.interfaces.buffer import TextBufferError
from fillpara.strategies.buffers import InMemoryTextBuffer

logger = get_logger(__name__)


def caret_offset(buffer: InMemoryTextBuffer, line: int, column: int) -> int:
    """Convert a 1-based line and column to a buffer offset.

    Columns past the end of the line are clamped to the line end.
    """
    start = buffer.line_start_offset(line - 1)
    end = buffer.line_end_offset(line - 1)
    return min(start + max(column - 1, 0), end)


def main(argv: list[str] | None = None) -> int:
    """Fill the paragraph and write the file back."""
    parser = argparse.ArgumentParser(description="Reflow the comment paragraph at a line.")
    parser.add_argument("path", type=Path, help="File to edit")
    parser.add_argument("line", type=int, help="1-based line number of the caret")
    parser.add_argument("column", type=int, nargs="?", default=1, help="1-based column")
    parser.add_argument("--language", help="Language identifier, e.g. python")
    parser.add_argument("--comment-prefix", help="Explicit line comment prefix")
    parser.add_argument("--dry-run", action="store_true", help="Print instead of writing")
    args = parser.parse_args(argv)

    with open(args.path, encoding="utf-8", newline="") as f:
        text = f.read()
    # The buffer works on LF; CRLF files are written back with CRLF.
    separator = "\r\n" if "\r\n" in text else "\n"
    buffer = InMemoryTextBuffer(text.replace("\r\n", "\n"))

    try:
        offset = caret_offset(buffer, args.line, args.column)
    except TextBufferError as e:
        print(f"Invalid position {args.path}:{args.line}: {e}", file=sys.stderr)
        return 2

    result = FillParagraphAction().perform(
        buffer,
        offset,
        language=args.language,
        comment_prefix=args.comment_prefix,
        filename=args.path.name,
    )

    if result is None:
        print(f"No paragraph at {args.path}:{args.line}")
        return 1

    if args.dry_run:
        print(result.replacement)
    elif result.changed:
        with open(args.path, "w", encoding="utf-8", newline="") as f:
            f.write(buffer.text.replace("\n", separator))
        logger.info(f"Refilled paragraph in {args.path}")
        print(f"Refilled {len(result.paragraph.lines)} lines into {len(result.lines)}")
    else:
        print("Paragraph already filled")

    return 0


if __name__ == "__main__":
    sys.exit(main())
