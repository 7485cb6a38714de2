"""FastAPI host for the chat UI.

Endpoints:
    - GET /health: Service health status with active variant and model
    - /: NiceGUI chat page (mounted by geminichat.main)
"""

from geminichat.api.app import create_app

__all__ = ["create_app"]
