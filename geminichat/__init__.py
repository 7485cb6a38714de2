"""Gemini Chat - single-page chat interfaces backed by the Generative Language API.

Combines NiceGUI for the chat page, httpx for the API call,
FastAPI for hosting, and Pydantic for configuration and wire models.

Components:
    - agent: Session controller, API client, configuration
    - models: Transcript and request/response schemas
    - ui: Web interface for chat interactions
    - api: Host application and health check
"""

__version__ = "0.1.0"
