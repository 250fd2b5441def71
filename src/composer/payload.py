"""Request composition: turns form input into a MessageData payload.

Reads the selected file's bytes, base64-encodes them and pairs them with
the media type and the prompt. No network I/O happens here.
"""

import base64
import binascii
import logging
import mimetypes
from pathlib import PurePath
from typing import TYPE_CHECKING

from src.models.schemas import FileData, MessageData

if TYPE_CHECKING:
    from src.ui.state import FormState

logger = logging.getLogger(__name__)

# Constants
SUPPORTED_EXTENSIONS = (".pdf", ".jpg", ".jpeg", ".png", ".mp4", ".wav", ".m4v")
ACCEPT_ATTRIBUTE = ",".join(SUPPORTED_EXTENSIONS)
DEFAULT_MEDIA_TYPE = "application/octet-stream"
SUPPORTED_MEDIA_TYPES = frozenset({
    "application/pdf",
    "image/jpeg",
    "image/png",
    "video/mp4",
    "video/x-m4v",
    "audio/wav",
    "audio/wave",
    "audio/x-wav",
})

# Not every platform's mimetypes table knows these
_EXTENSION_MEDIA_TYPES = {
    ".m4v": "video/x-m4v",
    ".wav": "audio/wav",
}


class PayloadValidationError(Exception):
    """Raised when the form cannot be turned into a payload."""

    pass


class NoFileSpecifiedError(PayloadValidationError):
    """Raised when a submission is attempted without a selected file."""

    def __init__(self) -> None:
        super().__init__("No file specified")


class EmptyPromptError(PayloadValidationError):
    """Raised when the prompt is blank."""

    def __init__(self) -> None:
        super().__init__("Prompt is required")


class PayloadDecodeError(Exception):
    """Raised when base64 file contents cannot be decoded."""

    pass


def encode_file(content: bytes) -> str:
    """Encode raw file bytes as standard padded base64 text."""
    return base64.b64encode(content).decode("ascii")


def decode_contents(contents: str) -> bytes:
    """Decode base64 file contents back into bytes.

    Args:
        contents: Base64 text as produced by encode_file.

    Returns:
        The original file bytes.

    Raises:
        PayloadDecodeError: If the text is not valid base64.
    """
    try:
        return base64.b64decode(contents, validate=True)
    except (binascii.Error, ValueError) as e:
        raise PayloadDecodeError(f"Invalid file contents: {e}") from e


def is_supported_file(filename: str | None) -> bool:
    """Check whether a filename has one of the accepted extensions."""
    if not filename:
        return False
    return PurePath(filename).suffix.lower() in SUPPORTED_EXTENSIONS


def guess_media_type(filename: str, declared: str | None = None) -> str:
    """Resolve the media type of an uploaded file.

    The type declared by the browser wins. Otherwise it is guessed from
    the extension.

    Args:
        filename: Original filename.
        declared: Content type reported by the upload, if any.

    Returns:
        A MIME type string, DEFAULT_MEDIA_TYPE when nothing matches.
    """
    if declared and declared.strip():
        return declared.strip()

    suffix = PurePath(filename).suffix.lower()
    if suffix in _EXTENSION_MEDIA_TYPES:
        return _EXTENSION_MEDIA_TYPES[suffix]

    guessed, _ = mimetypes.guess_type(filename)
    return guessed or DEFAULT_MEDIA_TYPE


def compose_payload(form: "FormState") -> MessageData:
    """Build the request payload for one submission.

    Args:
        form: Current form state with prompt and selected file.

    Returns:
        A frozen MessageData ready for transmission.

    Raises:
        NoFileSpecifiedError: If no file is selected.
        EmptyPromptError: If the prompt is blank.
    """
    selected = form.selected_file
    if selected is None:
        raise NoFileSpecifiedError()

    if not form.prompt.strip():
        raise EmptyPromptError()

    payload = MessageData(
        file=FileData(
            contents=encode_file(selected.content),
            type=selected.media_type,
        ),
        prompt=form.prompt,
    )
    logger.debug(
        f"Composed payload for {selected.name} "
        f"({len(selected.content)} bytes, {selected.media_type})"
    )
    return payload
