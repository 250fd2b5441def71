"""Remote invocation client for the analysis API."""

from src.client.analyze_client import TransportError, send_message

__all__ = ["TransportError", "send_message"]
