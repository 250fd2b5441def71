"""Nutrition Lens - ask a question about a food label, meal photo or document.

Combines FastAPI for HTTP, Agno for model orchestration, NiceGUI for
visualization, and Pydantic for data validation.

Components:
    - api: Analysis endpoint
    - agent: Multimodal model invocation
    - client: HTTP client used by the UI
    - composer: Payload assembly and file encoding
    - ui: Web form
    - models: Request/response schemas and response state
"""

__version__ = "0.1.0"
