"""Integration tests for components working together.

Coverage:
    - /analyze endpoint through the real FastAPI app
    - Session, composer, client and API in one submission
    - Live model answer (when an API key is configured)
"""
