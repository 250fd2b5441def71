from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FileData(BaseModel):
    """An attached file in transportable form.

    Attributes:
        contents: Base64-encoded file bytes.
        type: MIME type of the file (e.g. image/png).
    """

    model_config = ConfigDict(frozen=True)

    contents: str
    type: str


class MessageData(BaseModel):
    """Request payload for the analysis endpoint.

    Attributes:
        file: The attached file, or None when nothing was selected.
        prompt: User's question about the file.
    """

    model_config = ConfigDict(frozen=True)

    file: FileData | None = None
    prompt: str = Field(..., min_length=1)

    @field_validator("prompt")
    @classmethod
    def reject_blank_prompt(cls, v: str) -> str:
        """Reject whitespace-only prompts; the text itself is kept as typed."""
        if not v.strip():
            raise ValueError("Prompt is required")
        return v


class AnalyzeResponse(BaseModel):
    """Response from the analysis endpoint.

    Attributes:
        text: Markdown-flavored answer produced by the model.
    """

    text: str


class Idle(BaseModel):
    status: Literal["idle"] = "idle"


class Loading(BaseModel):
    status: Literal["loading"] = "loading"


class Success(BaseModel):
    status: Literal["success"] = "success"
    text: str


class Failure(BaseModel):
    status: Literal["failure"] = "failure"
    message: str


ResponseState = Annotated[
    Idle | Loading | Success | Failure,
    Field(discriminator="status"),
]
