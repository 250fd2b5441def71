"""Unit tests for payload composition and file encoding."""

import base64
import os

import pytest
import pytest_check as check
from pydantic import ValidationError

from src.composer.payload import (
    ACCEPT_ATTRIBUTE,
    DEFAULT_MEDIA_TYPE,
    EmptyPromptError,
    NoFileSpecifiedError,
    PayloadDecodeError,
    compose_payload,
    decode_contents,
    encode_file,
    guess_media_type,
    is_supported_file,
)
from src.models.schemas import MessageData
from src.ui.state import FormState, SelectedFile


class TestComposePayload:
    """Tests for compose_payload."""

    def test_builds_payload_from_form(self, form_with_file: FormState, png_bytes: bytes) -> None:
        """Payload carries base64 contents, media type and prompt."""
        payload = compose_payload(form_with_file)

        check.is_instance(payload, MessageData)
        check.equal(payload.prompt, "Is this good for me?")
        check.equal(payload.file.type, "image/png")
        check.equal(payload.file.contents, base64.b64encode(png_bytes).decode())

    def test_missing_file_raises_no_file_specified(self) -> None:
        """No selected file fails with the user-facing message."""
        with pytest.raises(NoFileSpecifiedError, match="^No file specified$"):
            compose_payload(FormState(prompt="Is this good for me?"))

    def test_missing_file_checked_before_prompt(self) -> None:
        """An empty form still reports the missing file."""
        with pytest.raises(NoFileSpecifiedError):
            compose_payload(FormState())

    def test_blank_prompt_raises(self, png_bytes: bytes) -> None:
        """Whitespace-only prompt is rejected."""
        form = FormState(
            selected_file=SelectedFile("a.png", "image/png", png_bytes),
            prompt="   ",
        )

        with pytest.raises(EmptyPromptError, match="Prompt is required"):
            compose_payload(form)

    def test_prompt_passed_through_unchanged(self, png_bytes: bytes) -> None:
        """Surrounding whitespace in the prompt is sent as typed."""
        form = FormState(
            selected_file=SelectedFile("a.png", "image/png", png_bytes),
            prompt="  Is this good?\n",
        )

        assert compose_payload(form).prompt == "  Is this good?\n"

    def test_message_data_rejects_whitespace_prompt(self) -> None:
        with pytest.raises(ValidationError, match="Prompt is required"):
            MessageData(prompt=" \n\t")

    def test_payload_is_frozen(self, form_with_file: FormState) -> None:
        """Payload cannot be modified once built."""
        payload = compose_payload(form_with_file)

        with pytest.raises(ValidationError):
            payload.prompt = "changed"

    @pytest.mark.parametrize("size", [0, 1, 2, 3, 1024, 65537])
    def test_contents_decode_to_original_bytes(self, size: int) -> None:
        """Encoded contents decode back to exactly the original N bytes."""
        original = os.urandom(size)
        form = FormState(
            selected_file=SelectedFile("label.pdf", "application/pdf", original),
            prompt="What's in this?",
        )

        decoded = decode_contents(compose_payload(form).file.contents)

        assert len(decoded) == size
        assert decoded == original


class TestEncoding:
    """Tests for encode_file and decode_contents."""

    def test_encode_uses_padded_standard_alphabet(self) -> None:
        check.equal(encode_file(b"\xfb\xff"), "+/8=")
        check.equal(encode_file(b""), "")

    def test_decode_rejects_invalid_base64(self) -> None:
        with pytest.raises(PayloadDecodeError, match="Invalid file contents"):
            decode_contents("not base64!")

    def test_decode_rejects_bad_padding(self) -> None:
        with pytest.raises(PayloadDecodeError):
            decode_contents("abc")


class TestFileTypes:
    """Tests for supported extensions and media type resolution."""

    @pytest.mark.parametrize(
        "filename",
        ["label.pdf", "photo.JPG", "photo.jpeg", "scan.png", "clip.mp4", "note.wav", "clip.m4v"],
    )
    def test_supported_extensions(self, filename: str) -> None:
        assert is_supported_file(filename)

    @pytest.mark.parametrize("filename", ["notes.txt", "archive.zip", "noext", "", None])
    def test_unsupported_extensions(self, filename: str | None) -> None:
        assert not is_supported_file(filename)

    def test_accept_attribute_lists_all_extensions(self) -> None:
        assert ACCEPT_ATTRIBUTE == ".pdf,.jpg,.jpeg,.png,.mp4,.wav,.m4v"

    def test_declared_type_wins(self) -> None:
        assert guess_media_type("photo.png", "image/webp") == "image/webp"

    def test_guesses_from_extension(self) -> None:
        check.equal(guess_media_type("photo.jpg"), "image/jpeg")
        check.equal(guess_media_type("label.pdf", ""), "application/pdf")
        check.equal(guess_media_type("note.WAV", None), "audio/wav")
        check.equal(guess_media_type("clip.m4v"), "video/x-m4v")

    def test_unknown_extension_falls_back(self) -> None:
        assert guess_media_type("blob.unknownext") == DEFAULT_MEDIA_TYPE
