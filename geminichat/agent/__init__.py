"""Conversation logic for the Gemini chat.

Responsibilities:
    - Configuration and variant presets (tutor, persona)
    - Request assembly and the generateContent HTTP call
    - Transcript state and the one-submission-at-a-time rule

Maintains clean separation from the NiceGUI presentation layer.
"""

from geminichat.agent.config import ChatConfig, ChatVariant, get_chat_config
from geminichat.agent.gemini_client import GeminiAPIError, GeminiClient
from geminichat.agent.session import ChatSession, build_contents

__all__ = [
    "ChatConfig",
    "ChatSession",
    "ChatVariant",
    "GeminiAPIError",
    "GeminiClient",
    "build_contents",
    "get_chat_config",
]
