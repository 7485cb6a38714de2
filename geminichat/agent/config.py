"""Chat configuration with environment variable loading.

Pydantic-based configuration for the Gemini chat session.
Two variants share one controller: a DSA tutor and a chat persona.
"""

import os
from enum import Enum

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator, model_validator

from geminichat.models.schemas import GenerationConfig, SafetySetting

# Load environment variables from .env file
load_dotenv()

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-1.5-flash"

HARM_CATEGORIES = (
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
)

TUTOR_PROMPT = """You are a Data Structures and Algorithms instructor.
Your role is to explain and solve problems related to Data Structures and Algorithms in the simplest, easiest way possible, with clear examples.
If the user asks about anything outside of Data Structures and Algorithms, respond politely without answering the unrelated query."""

PERSONA_PROMPT = """You have to behave like a girl named Nancy.
you can use sweet words of endearment.

Nancy is cute, caring, and very helpful. Her hobbies include chit-chatting, makeup, and sharing her thoughts.
She works as a Software engineer.
While chatting, she frequently uses emojis to express herself and make the conversation lively.
She is friendly, supportive, and enjoys lighthearted conversations.
"""


class ChatVariant(str, Enum):
    """Which chat interface is being served."""

    TUTOR = "tutor"
    PERSONA = "persona"


class VariantProfile(BaseModel):
    """Fixed prompt and presentation settings for one chat variant.

    Attributes:
        title: Header text (app title or contact name).
        greeting: Seed assistant message shown when a session starts.
        system_prompt: System instruction sent with every request.
        typing_label: Text of the loading indicator.
        placeholder: Input field placeholder.
        max_output_tokens: Response token cap, None for the API default.
        track_delivery: Whether user messages carry a delivery status.
        show_timestamps: Whether bubbles display their creation time.
    """

    title: str
    greeting: str
    system_prompt: str
    typing_label: str
    placeholder: str
    max_output_tokens: int | None = None
    track_delivery: bool = False
    show_timestamps: bool = False


VARIANT_PROFILES: dict[ChatVariant, VariantProfile] = {
    ChatVariant.TUTOR: VariantProfile(
        title="DSA Instructor",
        greeting=(
            "Hello! I am your DSA Instructor. "
            "Ask me a question related to Data Structures and Algorithms."
        ),
        system_prompt=TUTOR_PROMPT,
        typing_label="Typing...",
        placeholder="Ask your DSA question...",
    ),
    ChatVariant.PERSONA: VariantProfile(
        title="Nancy",
        greeting="Hey There! How are you today? May I know your name?",
        system_prompt=PERSONA_PROMPT,
        typing_label="Nancy is typing...",
        placeholder="Type a message...",
        max_output_tokens=1024,
        track_delivery=True,
        show_timestamps=True,
    ),
}


def default_safety_settings() -> list[SafetySetting]:
    """Block medium-and-above content in every harm category."""
    return [
        SafetySetting(category=category, threshold="BLOCK_MEDIUM_AND_ABOVE")
        for category in HARM_CATEGORIES
    ]


class ChatConfig(BaseModel):
    """Configuration for a Gemini chat session.

    Values not passed explicitly are read from the environment. The system
    prompt and sampling parameters default to the selected variant's preset.

    Attributes:
        api_key: Generative Language API key, sent as the `key` query parameter.
        base_url: API root, without the trailing model path.
        model_name: Model identifier used in the endpoint path.
        variant: Which chat preset to use.
        system_prompt: System instruction text.
        generation: Sampling parameters (temperature, top-k, top-p, token cap).
        safety_settings: Per-category blocking thresholds.
        request_timeout: HTTP transport timeout in seconds.
    """

    api_key: str = Field(
        default_factory=lambda: (
            os.getenv("GEMINI_API_KEY") or os.getenv("NEXT_PUBLIC_GEMINI_API_KEY", "")
        ),
        validate_default=True,
        description="API key for the Generative Language API",
    )
    base_url: str = Field(
        default_factory=lambda: os.getenv("GEMINI_BASE_URL") or DEFAULT_BASE_URL,
        description="API base URL",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        description="Model to use",
    )
    variant: ChatVariant = Field(
        default_factory=lambda: os.getenv("CHAT_VARIANT", ChatVariant.TUTOR.value).lower(),
        validate_default=True,
        description="Chat preset: 'tutor' or 'persona'",
    )
    system_prompt: str | None = None
    generation: GenerationConfig | None = None
    safety_settings: list[SafetySetting] = Field(default_factory=default_safety_settings)
    request_timeout: float = Field(
        default_factory=lambda: os.getenv("GEMINI_TIMEOUT", "120"),
        validate_default=True,
        gt=0,
        description="HTTP timeout in seconds",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("API key required. Set GEMINI_API_KEY in .env")
        return v.strip()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @model_validator(mode="after")
    def apply_variant_defaults(self) -> "ChatConfig":
        """Fill prompt and sampling parameters from the variant preset."""
        if self.system_prompt is None:
            self.system_prompt = self.profile.system_prompt
        if self.generation is None:
            self.generation = GenerationConfig(
                max_output_tokens=self.profile.max_output_tokens
            )
        return self

    @property
    def profile(self) -> VariantProfile:
        return VARIANT_PROFILES[self.variant]

    @property
    def endpoint(self) -> str:
        """Full generateContent URL for the configured model."""
        return f"{self.base_url}/models/{self.model_name}:generateContent"


def get_chat_config(variant: ChatVariant | str | None = None) -> ChatConfig:
    """Create chat configuration from environment.

    Args:
        variant: Overrides CHAT_VARIANT when given.

    Returns:
        Configured ChatConfig instance.

    Raises:
        ValueError: If no API key is set or the variant is unknown.
    """
    if variant is None:
        return ChatConfig()
    return ChatConfig(variant=variant)
