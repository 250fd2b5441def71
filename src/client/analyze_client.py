"""HTTP client for the analysis endpoint.

Sends one MessageData payload and returns the model's markdown answer.
No retries, no streaming.
"""

import logging
import os

import httpx

from src.models.schemas import AnalyzeResponse, MessageData

logger = logging.getLogger(__name__)

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")
ANALYZE_TIMEOUT = float(os.getenv("ANALYZE_TIMEOUT", "120"))


class TransportError(Exception):
    """Raised when the analysis request fails in transit or on the server.

    Attributes:
        status_code: HTTP status of the failed response, None when no
            response was received.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _error_detail(response: httpx.Response) -> str:
    """Extract the FastAPI error detail from a failed response."""
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, str):
        return detail
    # 422 responses carry a list of validation errors
    if isinstance(detail, list) and detail:
        return "; ".join(
            str(item.get("msg", item)) if isinstance(item, dict) else str(item)
            for item in detail
        )
    return response.reason_phrase


async def _post(client: httpx.AsyncClient, url: str, payload: MessageData) -> str:
    try:
        response = await client.post(url, json=payload.model_dump())
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        status_code = e.response.status_code
        raise TransportError(
            f"HTTP {status_code}: {_error_detail(e.response)}",
            status_code=status_code,
        ) from e
    except httpx.RequestError as e:
        raise TransportError(f"Connection failed: {e}") from e

    return AnalyzeResponse.model_validate(response.json()).text


async def send_message(
    payload: MessageData,
    *,
    base_url: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Send one payload to POST /analyze and return the response text.

    Args:
        payload: The composed request.
        base_url: API root, API_BASE_URL when omitted.
        client: Existing client to reuse; a short-lived one is created
            when omitted.

    Returns:
        The model's answer, unchanged.

    Raises:
        TransportError: On connection failures or non-2xx responses.
    """
    url = f"{(base_url or API_BASE_URL).rstrip('/')}/analyze"
    logger.info(f"Sending analysis request to {url}")

    if client is not None:
        return await _post(client, url, payload)

    async with httpx.AsyncClient(timeout=ANALYZE_TIMEOUT) as own_client:
        return await _post(own_client, url, payload)
