"""Unit tests for individual components in isolation.

Coverage:
    - composer/: Payload assembly, base64 encoding, media types
    - ui/state: Request lifecycle and form clearing
    - client/: HTTP error mapping
    - agent/: Configuration and media mapping

Uses mocks for the model and transport.
"""
