"""Paragraph API routes.

Lets editor integrations that cannot host Python locate and refill the
comment paragraph at a caret by posting the document text.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from fillpara.actions import FillParagraphAction
from fillpara.api.deps import get_component_factory, get_fill_action
from fillpara.api.schemas import (
    CommentPrefixResponse,
    FillResponse,
    ParagraphRequest,
    ParagraphResponse,
    TextRange,
)
from fillpara.core.factory import ComponentFactory
from fillpara.interfaces.buffer import TextBufferError
from fillpara.strategies.buffers import InMemoryTextBuffer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/paragraphs", tags=["paragraphs"])


@router.post("/locate", response_model=ParagraphResponse)
async def locate_paragraph(
    request: ParagraphRequest,
    action: FillParagraphAction = Depends(get_fill_action),
    factory: ComponentFactory = Depends(get_component_factory),
) -> ParagraphResponse:
    """Locate the paragraph at the caret without editing the text.

    Raises:
        HTTPException: 400 if the caret offset is outside the text.
    """
    prefix = action.resolve_comment_prefix(
        request.language, request.comment_prefix, request.filename
    )
    buffer = InMemoryTextBuffer(request.text)

    try:
        paragraph = factory.get_locator().locate(buffer, request.caret_offset, prefix)
    except TextBufferError as e:
        logger.warning(f"Invalid locate request: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    if paragraph is None:
        return ParagraphResponse(found=False, comment_prefix=prefix)

    return ParagraphResponse(
        found=True,
        comment_prefix=prefix,
        range=TextRange(start=paragraph.start_offset, end=paragraph.end_offset),
        lines=list(paragraph.lines),
        paragraph_prefix=paragraph.paragraph_prefix,
    )


@router.post("/fill", response_model=FillResponse)
async def fill_paragraph(
    request: ParagraphRequest,
    action: FillParagraphAction = Depends(get_fill_action),
) -> FillResponse:
    """Refill the paragraph at the caret and return the new text.

    When there is no paragraph at the caret the text comes back
    unchanged with ``found`` set to false.

    Raises:
        HTTPException: 400 if the caret offset is outside the text.
    """
    buffer = InMemoryTextBuffer(request.text)

    try:
        result = action.perform(
            buffer,
            request.caret_offset,
            language=request.language,
            comment_prefix=request.comment_prefix,
            filename=request.filename,
        )
    except TextBufferError as e:
        logger.warning(f"Invalid fill request: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    if result is None:
        return FillResponse(
            found=False,
            text=buffer.text,
            comment_prefix=action.resolve_comment_prefix(
                request.language, request.comment_prefix, request.filename
            ),
        )

    return FillResponse(
        found=True,
        changed=result.changed,
        text=buffer.text,
        comment_prefix=result.comment_prefix,
        range=TextRange(start=result.paragraph.start_offset, end=result.paragraph.end_offset),
        replacement=result.replacement,
        lines=list(result.lines),
    )


@router.get("/comment-prefix", response_model=CommentPrefixResponse)
async def get_comment_prefix(
    language: str | None = Query(default=None, description="Language identifier"),
    filename: str | None = Query(default=None, description="File name to guess the language from"),
    action: FillParagraphAction = Depends(get_fill_action),
) -> CommentPrefixResponse:
    """Resolve a language or file name to its line comment prefix."""
    language = action.resolve_language(language, filename)

    return CommentPrefixResponse(
        language=language,
        comment_prefix=action.resolve_comment_prefix(language=language),
    )
