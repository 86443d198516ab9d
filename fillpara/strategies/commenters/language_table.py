"""Table-driven line comment prefixes.

Resolves a language identifier (or a filename) to the string that
starts a line comment in that language. Languages without a line
comment, and languages the table does not know, resolve to None.
"""

import logging
from pathlib import PurePath

from fillpara.interfaces.commenter import BaseCommenter

logger = logging.getLogger(__name__)


LINE_COMMENT_PREFIXES: dict[str, str] = {
    # C family
    "c": "//",
    "cpp": "//",
    "csharp": "//",
    "dart": "//",
    "go": "//",
    "groovy": "//",
    "java": "//",
    "javascript": "//",
    "kotlin": "//",
    "objective-c": "//",
    "php": "//",
    "proto": "//",
    "rust": "//",
    "scala": "//",
    "swift": "//",
    "typescript": "//",
    "zig": "//",
    # Hash
    "bash": "#",
    "cmake": "#",
    "dockerfile": "#",
    "elixir": "#",
    "makefile": "#",
    "nim": "#",
    "perl": "#",
    "powershell": "#",
    "python": "#",
    "r": "#",
    "ruby": "#",
    "shell": "#",
    "toml": "#",
    "yaml": "#",
    # Double dash
    "ada": "--",
    "haskell": "--",
    "lua": "--",
    "sql": "--",
    # Others
    "clojure": ";",
    "commonlisp": ";",
    "elisp": ";",
    "ini": ";",
    "scheme": ";",
    "erlang": "%",
    "matlab": "%",
    "tex": "%",
    "fortran": "!",
    "vim": '"',
    "vb": "'",
}

EXTENSION_LANGUAGES: dict[str, str] = {
    ".c": "c",
    ".h": "c",
    ".cc": "cpp",
    ".cpp": "cpp",
    ".cxx": "cpp",
    ".hpp": "cpp",
    ".cs": "csharp",
    ".dart": "dart",
    ".go": "go",
    ".groovy": "groovy",
    ".gradle": "groovy",
    ".java": "java",
    ".js": "javascript",
    ".mjs": "javascript",
    ".jsx": "javascript",
    ".kt": "kotlin",
    ".kts": "kotlin",
    ".m": "objective-c",
    ".php": "php",
    ".proto": "proto",
    ".rs": "rust",
    ".scala": "scala",
    ".swift": "swift",
    ".ts": "typescript",
    ".tsx": "typescript",
    ".zig": "zig",
    ".sh": "shell",
    ".bash": "bash",
    ".zsh": "shell",
    ".cmake": "cmake",
    ".ex": "elixir",
    ".exs": "elixir",
    ".mk": "makefile",
    ".nim": "nim",
    ".pl": "perl",
    ".pm": "perl",
    ".ps1": "powershell",
    ".py": "python",
    ".pyi": "python",
    ".r": "r",
    ".rb": "ruby",
    ".toml": "toml",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".adb": "ada",
    ".ads": "ada",
    ".hs": "haskell",
    ".lua": "lua",
    ".sql": "sql",
    ".clj": "clojure",
    ".cljs": "clojure",
    ".lisp": "commonlisp",
    ".el": "elisp",
    ".ini": "ini",
    ".scm": "scheme",
    ".erl": "erlang",
    ".tex": "tex",
    ".f90": "fortran",
    ".vim": "vim",
    ".vb": "vb",
    ".txt": "text",
    ".md": "text",
    ".rst": "text",
}

FILENAME_LANGUAGES: dict[str, str] = {
    "Makefile": "makefile",
    "Dockerfile": "dockerfile",
    "CMakeLists.txt": "cmake",
    ".vimrc": "vim",
    ".bashrc": "bash",
}


class LanguageTableCommenter(BaseCommenter):
    """Commenter backed by static language and extension tables.

    Attributes:
        prefixes: Language identifier to line comment prefix.
    """

    def __init__(self, overrides: dict[str, str] | None = None) -> None:
        """Initialize the commenter.

        Args:
            overrides: Extra or replacement entries for the language table.
                Mapping a language to ``""`` puts it in plain text mode.
        """
        self._prefixes = dict(LINE_COMMENT_PREFIXES)
        for language, prefix in (overrides or {}).items():
            self._prefixes[language.lower()] = prefix

        if overrides:
            logger.debug(f"Applied {len(overrides)} comment prefix overrides")

    @property
    def prefixes(self) -> dict[str, str]:
        """Return a copy of the language table."""
        return dict(self._prefixes)

    def line_comment_prefix(self, language: str | None) -> str | None:
        """Return the line comment prefix for a language, if it has one."""
        if not language:
            return None
        return self._prefixes.get(language.strip().lower())

    def language_for_filename(self, filename: str) -> str | None:
        """Guess a language identifier from a filename or its extension."""
        path = PurePath(filename)

        if path.name in FILENAME_LANGUAGES:
            return FILENAME_LANGUAGES[path.name]

        return EXTENSION_LANGUAGES.get(path.suffix.lower())
