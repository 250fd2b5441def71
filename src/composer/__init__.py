"""Request composition for the analysis form.

Responsibilities:
    - Base64 encoding of the selected file
    - Media type resolution for uploads
    - Supported extension checks
    - Payload assembly with validation (file present, prompt non-empty)

Pure functions, no network access.
"""

from src.composer.payload import (
    ACCEPT_ATTRIBUTE,
    SUPPORTED_EXTENSIONS,
    SUPPORTED_MEDIA_TYPES,
    EmptyPromptError,
    NoFileSpecifiedError,
    PayloadDecodeError,
    PayloadValidationError,
    compose_payload,
    decode_contents,
    encode_file,
    guess_media_type,
    is_supported_file,
)

__all__ = [
    "ACCEPT_ATTRIBUTE",
    "SUPPORTED_EXTENSIONS",
    "SUPPORTED_MEDIA_TYPES",
    "EmptyPromptError",
    "NoFileSpecifiedError",
    "PayloadDecodeError",
    "PayloadValidationError",
    "compose_payload",
    "decode_contents",
    "encode_file",
    "guess_media_type",
    "is_supported_file",
]
