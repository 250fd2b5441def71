"""Pydantic models for API requests, responses and UI response state.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - FileData: Base64-encoded file with its MIME type
    - MessageData: Prompt plus optional file, sent once per submission
    - AnalyzeResponse: Markdown text returned by the analysis endpoint
    - ResponseState: Idle, Loading, Success or Failure
"""

from src.models.schemas import (
    AnalyzeResponse,
    Failure,
    FileData,
    Idle,
    Loading,
    MessageData,
    ResponseState,
    Success,
)

__all__ = [
    "AnalyzeResponse",
    "Failure",
    "FileData",
    "Idle",
    "Loading",
    "MessageData",
    "ResponseState",
    "Success",
]
