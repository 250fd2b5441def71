"""FastAPI endpoints for Nutrition Lens.

HTTP routes with async request handling.

Endpoints:
    - GET /health: Service health status
    - POST /analyze: Answer a question about one attached file
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
