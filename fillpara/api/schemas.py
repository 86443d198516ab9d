"""API request and response schemas.

Pydantic v2 models for API serialization/deserialization.
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator


def _normalize_line_separators(text: str) -> str:
    """Convert CRLF and lone CR line separators to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


# =============================================================================
# Common Schemas
# =============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str = Field(description="Error message")
    error_code: str | None = Field(default=None, description="Application-specific error code")
    extra: dict[str, Any] | None = Field(default=None, description="Additional error context")


class TextRange(BaseModel):
    """Half-open character range ``[start, end)`` in the LF-normalized text."""

    start: int = Field(ge=0, description="Offset of the first character")
    end: int = Field(ge=0, description="Offset one past the last character")


# =============================================================================
# Paragraph Schemas
# =============================================================================


class ParagraphRequest(BaseModel):
    """Request schema shared by the locate and fill endpoints."""

    text: str = Field(description="Full document text; CR and CRLF separators become LF")
    caret_offset: int = Field(
        ge=0,
        description="Character offset of the caret in the text as sent",
    )
    language: str | None = Field(
        default=None,
        description="Language at the caret, used to look up the line comment prefix",
    )
    comment_prefix: str | None = Field(
        default=None,
        description="Explicit line comment prefix; overrides language and filename",
    )
    filename: str | None = Field(
        default=None,
        description="File name used to guess the language when none is given",
    )

    @model_validator(mode="after")
    def normalize_text(self) -> "ParagraphRequest":
        """Normalize line separators to LF and move the caret to match.

        Each CRLF before the caret collapses to one character, as does a
        CRLF the caret sits inside.
        """
        original = self.text
        before = original[: self.caret_offset]
        shift = before.count("\r\n")
        if before.endswith("\r") and original[self.caret_offset : self.caret_offset + 1] == "\n":
            shift += 1

        self.text = _normalize_line_separators(original)
        self.caret_offset -= shift
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "text": "def f():\n    # a comment that\n    # wraps early\n    pass\n",
                "caret_offset": 15,
                "language": "python",
            }
        }


class ParagraphResponse(BaseModel):
    """Response schema describing a located paragraph."""

    found: bool = Field(description="Whether a paragraph exists at the caret")
    comment_prefix: str = Field(description="Comment prefix used to locate the paragraph")
    range: TextRange | None = Field(default=None, description="Range covered by the paragraph")
    lines: list[str] = Field(default_factory=list, description="Content lines after the prefix")
    paragraph_prefix: str | None = Field(
        default=None, description="Indentation and comment marker captured from the caret line"
    )


class FillResponse(BaseModel):
    """Response schema for the fill endpoint."""

    found: bool = Field(description="Whether a paragraph exists at the caret")
    changed: bool = Field(default=False, description="Whether the text was modified")
    text: str = Field(description="Document text after the fill, with LF separators")
    comment_prefix: str = Field(description="Comment prefix used to locate the paragraph")
    range: TextRange | None = Field(
        default=None, description="Range of the original text that was replaced"
    )
    replacement: str | None = Field(default=None, description="Text written over the range")
    lines: list[str] = Field(
        default_factory=list, description="Refilled lines without the paragraph prefix"
    )


class CommentPrefixResponse(BaseModel):
    """Response schema for comment prefix lookups."""

    language: str | None = Field(description="Resolved language identifier")
    comment_prefix: str = Field(description="Line comment prefix, empty for plain text")
