"""Form and response state for one analysis page visit."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from src.composer.payload import compose_payload
from src.models.schemas import (
    Failure,
    Idle,
    Loading,
    MessageData,
    ResponseState,
    Success,
)

logger = logging.getLogger(__name__)

SendMessage = Callable[[MessageData], Awaitable[str]]
OnChange = Callable[[], None]


@dataclass
class SelectedFile:
    """A file picked in the upload area."""

    name: str
    media_type: str
    content: bytes = field(repr=False)


@dataclass
class FormState:
    """User input collected by the form."""

    selected_file: SelectedFile | None = None
    prompt: str = ""


class AnalyzeSession:
    """Manages form and response state for a user session.

    The response is always exactly one of Idle, Loading, Success or
    Failure. Submissions are ignored while one is in flight.

    Args:
        on_change: Called after every response state transition.
    """

    def __init__(self, on_change: OnChange | None = None) -> None:
        self.form = FormState()
        self._response: ResponseState = Idle()
        self._on_change = on_change

    @property
    def response(self) -> ResponseState:
        return self._response

    @response.setter
    def response(self, state: ResponseState) -> None:
        self._response = state
        if self._on_change is not None:
            self._on_change()

    @property
    def is_loading(self) -> bool:
        return isinstance(self.response, Loading)

    @property
    def error_message(self) -> str | None:
        if isinstance(self.response, Failure):
            return self.response.message
        return None

    @property
    def result_text(self) -> str | None:
        if isinstance(self.response, Success):
            return self.response.text
        return None

    def set_prompt(self, text: str | None) -> None:
        self.form.prompt = text or ""

    def select_file(self, name: str, media_type: str, content: bytes) -> None:
        if self.is_loading:
            logger.debug(f"Ignoring file {name} while a request is in flight")
            return
        self.form.selected_file = SelectedFile(
            name=name, media_type=media_type, content=content
        )

    async def submit(self, send: SendMessage) -> None:
        """Run one request cycle: Loading, then Success or Failure.

        Args:
            send: Coroutine function performing the remote call.
        """
        if self.is_loading:
            return

        self.response = Loading()
        try:
            payload = compose_payload(self.form)
            self.response = Success(text=await send(payload))
        except Exception as e:
            logger.warning(f"Analysis failed: {e}")
            self.response = Failure(message=str(e))
        finally:
            # Loading must never outlive the call
            if self.is_loading:
                self.response = Idle()

    def clear(self) -> None:
        """Reset the form, and the response unless a request is in flight.

        The in-flight request keeps its Loading state and settles normally,
        so the submit guard stays in place.
        """
        self.form = FormState()
        if not self.is_loading:
            self.response = Idle()
