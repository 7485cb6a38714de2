from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Speaker of a transcript message."""

    USER = "user"
    ASSISTANT = "assistant"


class DeliveryStatus(str, Enum):
    """Delivery state shown next to user messages in the persona chat."""

    PENDING = "pending"
    DELIVERED = "delivered"
    FAILED = "failed"


def format_timestamp(moment: datetime | None = None) -> str:
    """Format a message time the way chat bubbles display it (e.g. 09:41 AM)."""
    return (moment or datetime.now()).strftime("%I:%M %p")


class Message(BaseModel):
    """A single message in the chat transcript.

    Attributes:
        id: Position-stable key within the session, starting at 1.
        role: Who authored the message.
        text: The message body, unmodified.
        timestamp: Display time captured when the message was created.
        delivery_status: Only set for user messages in the persona chat.
    """

    id: int = Field(..., ge=1)
    role: Role
    text: str
    timestamp: str | None = None
    delivery_status: DeliveryStatus | None = None

    @property
    def is_user(self) -> bool:
        return self.role is Role.USER


# --- Generative Language API wire models ---


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Part(_WireModel):
    text: str | None = None


class Content(_WireModel):
    """One turn as the API expects it: role is "user" or "model"."""

    role: str | None = None
    parts: list[Part] = Field(default_factory=list)


class GenerationConfig(_WireModel):
    """Sampling parameters sent with every request."""

    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    top_k: int = Field(default=40, ge=1, alias="topK")
    top_p: float = Field(default=0.95, ge=0.0, le=1.0, alias="topP")
    max_output_tokens: int | None = Field(default=None, ge=1, alias="maxOutputTokens")


class SafetySetting(_WireModel):
    category: str
    threshold: str = "BLOCK_MEDIUM_AND_ABOVE"


class GenerateContentRequest(_WireModel):
    """Request body for models/{model}:generateContent."""

    contents: list[Content]
    generation_config: GenerationConfig = Field(alias="generationConfig")
    safety_settings: list[SafetySetting] = Field(alias="safetySettings")
    system_instruction: Content = Field(alias="systemInstruction")

    def to_payload(self) -> dict:
        """Serialize to the camelCase JSON shape, dropping unset optionals."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Candidate(_WireModel):
    content: Content | None = None
    finish_reason: str | None = Field(default=None, alias="finishReason")


class GenerateContentResponse(_WireModel):
    candidates: list[Candidate] = Field(default_factory=list)

    def first_text(self) -> str | None:
        """Text of the first part of the first candidate, if there is any."""
        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts:
            return None
        return content.parts[0].text or None


class ErrorDetail(_WireModel):
    code: int | None = None
    message: str | None = None
    status: str | None = None


class ErrorResponse(_WireModel):
    """Error body the API returns alongside non-2xx status codes."""

    error: ErrorDetail | None = None
