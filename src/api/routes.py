"""Analysis and health endpoints.

The analysis route decodes the attached file, validates it, and asks the
agent for an answer.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from src.agent.analysis_agent import AgentError, AnalysisService, get_agent_service
from src.composer.payload import (
    SUPPORTED_MEDIA_TYPES,
    PayloadDecodeError,
    decode_contents,
)
from src.models.schemas import AnalyzeResponse, FileData, MessageData

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analyze"])

# Inline-data ceiling of the model APIs
MAX_FILE_SIZE = 20 * 1024 * 1024  # 20MB


def _validate_media_type(media_type: str) -> str:
    """Validate that the file type is one the form accepts.

    Args:
        media_type: Declared MIME type of the file.

    Returns:
        The normalized media type.

    Raises:
        HTTPException: 400 if the type is unsupported.
    """
    normalized = media_type.split(";")[0].strip().lower()
    if normalized not in SUPPORTED_MEDIA_TYPES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported file type: {media_type or 'unknown'}",
        )
    return normalized


def _decode_and_validate_size(file: FileData) -> bytes:
    """Decode file contents and validate size.

    Args:
        file: The attached file.

    Returns:
        File content as bytes.

    Raises:
        HTTPException: 400 if contents are not base64 or empty,
            413 if the file exceeds the size limit.
    """
    try:
        content = decode_contents(file.contents)
    except PayloadDecodeError as e:
        logger.warning(f"Rejected undecodable upload: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e

    if not content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Empty file provided",
        )

    if len(content) > MAX_FILE_SIZE:
        size_mb = len(content) / (1024 * 1024)
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum allowed (20MB)",
        )

    return content


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(
    payload: MessageData,
    service: Annotated[AnalysisService, Depends(get_agent_service)],
) -> AnalyzeResponse:
    """Answer a question about an attached file.

    Args:
        payload: Prompt and base64-encoded file.
        service: The analysis agent service.

    Returns:
        AnalyzeResponse with the model's markdown answer.

    Raises:
        400: No file, unsupported type, invalid or empty contents.
        413: File exceeds 20MB limit.
        422: Missing or blank prompt.
        502: The model call failed.
    """
    if payload.file is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file specified",
        )

    media_type = _validate_media_type(payload.file.type)
    content = _decode_and_validate_size(payload.file)

    try:
        text = await service.analyze(payload.prompt, content, media_type)
    except AgentError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Model call failed: {e}",
        ) from e

    return AnalyzeResponse(text=text)


@router.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Check service health status."""
    return {"status": "healthy", "service": "nutrition-lens"}
