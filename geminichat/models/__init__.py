"""Pydantic models for the chat transcript and the Generative Language API.

Provides validation and (de)serialization for everything that crosses a
boundary: transcript messages rendered by the UI, and the JSON exchanged
with the generateContent endpoint.

Models:
    - Message: One bubble in the transcript (role, text, timestamp, status)
    - GenerateContentRequest: Outbound request body
    - GenerateContentResponse: Inbound candidates
    - ErrorResponse: Inbound error body
"""

from geminichat.models.schemas import (
    Candidate,
    Content,
    DeliveryStatus,
    ErrorResponse,
    GenerateContentRequest,
    GenerateContentResponse,
    GenerationConfig,
    Message,
    Part,
    Role,
    SafetySetting,
    format_timestamp,
)

__all__ = [
    "Candidate",
    "Content",
    "DeliveryStatus",
    "ErrorResponse",
    "GenerateContentRequest",
    "GenerateContentResponse",
    "GenerationConfig",
    "Message",
    "Part",
    "Role",
    "SafetySetting",
    "format_timestamp",
]
