"""Chat session controller.

Holds the transcript for one page lifetime and turns each user submission
into exactly one generateContent call. The presentation layer subscribes
with on_change() and re-renders whenever state moves.
"""

import logging
from collections.abc import Callable

from geminichat.agent.config import ChatConfig
from geminichat.agent.gemini_client import GeminiAPIError, GeminiClient
from geminichat.models.schemas import (
    Content,
    DeliveryStatus,
    Message,
    Part,
    Role,
    format_timestamp,
)

logger = logging.getLogger(__name__)

EMPTY_RESPONSE_TEXT = "I couldn't process that. Please try again."
FAILURE_RESPONSE_TEXT = "An error occurred while fetching the response. Please try again."

_API_ROLES = {Role.USER: "user", Role.ASSISTANT: "model"}


def build_contents(history: list[Message], text: str) -> list[Content]:
    """Map the transcript plus a new user message to API turns.

    Args:
        history: Messages already in the session, oldest first.
        text: The just-submitted user text.

    Returns:
        One Content per message, followed by the new user turn.
    """
    contents = [
        Content(role=_API_ROLES[msg.role], parts=[Part(text=msg.text)])
        for msg in history
    ]
    contents.append(Content(role=_API_ROLES[Role.USER], parts=[Part(text=text)]))
    return contents


class ChatSession:
    """Manages chat state for a single conversation.

    Attributes:
        messages: The transcript, in insertion order.
        is_pending: True while a submission awaits its response.
        last_error: Banner text from the most recent failed submission.
    """

    def __init__(
        self,
        config: ChatConfig,
        client: GeminiClient | None = None,
        messages: list[Message] | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            config: Chat configuration, including the variant preset.
            client: Optional API client. Built from config if not provided.
            messages: Optional starting transcript. Defaults to the variant's
                greeting as a single assistant message.
        """
        self._config = config
        self._client = client or GeminiClient(config)
        self._listeners: list[Callable[[], None]] = []
        self.is_pending: bool = False
        self.last_error: str | None = None

        if messages is None:
            self.messages: list[Message] = []
            self._append(Role.ASSISTANT, config.profile.greeting)
        else:
            self.messages = list(messages)

    @property
    def config(self) -> ChatConfig:
        return self._config

    @property
    def track_delivery(self) -> bool:
        return self._config.profile.track_delivery

    def on_change(self, callback: Callable[[], None]) -> None:
        """Register a callback run after every state change."""
        self._listeners.append(callback)

    def _notify(self) -> None:
        for callback in self._listeners:
            callback()

    def _append(
        self,
        role: Role,
        text: str,
        delivery_status: DeliveryStatus | None = None,
    ) -> Message:
        next_id = self.messages[-1].id + 1 if self.messages else 1
        message = Message(
            id=next_id,
            role=role,
            text=text,
            timestamp=format_timestamp(),
            delivery_status=delivery_status,
        )
        self.messages.append(message)
        return message

    def _mark(self, message: Message, status: DeliveryStatus) -> None:
        if message.delivery_status is DeliveryStatus.PENDING:
            message.delivery_status = status

    async def submit(self, text: str) -> bool:
        """Send a user message and append the assistant's reply.

        Empty input and calls made while another submission is in flight
        are ignored.

        Args:
            text: Raw user input; surrounding whitespace is stripped.

        Returns:
            True if the submission was accepted.
        """
        text = text.strip()
        if not text or self.is_pending:
            return False

        history = list(self.messages)
        status = DeliveryStatus.PENDING if self.track_delivery else None
        sent = self._append(Role.USER, text, delivery_status=status)
        self.last_error = None
        self.is_pending = True

        try:
            self._notify()
            reply = await self._client.generate(build_contents(history, text))
        except GeminiAPIError as e:
            logger.error(f"Error fetching AI response: {e}")
            self._fail(sent, e)
        except Exception as e:
            logger.exception("Unexpected error while fetching AI response")
            self._fail(sent, e)
            raise
        else:
            self._mark(sent, DeliveryStatus.DELIVERED)
            self._append(Role.ASSISTANT, reply or EMPTY_RESPONSE_TEXT)
        finally:
            self.is_pending = False
            self._notify()

        return True

    def _fail(self, sent: Message, error: Exception) -> None:
        """Close out a turn that produced no reply: banner, failed tick, fallback."""
        self.last_error = f"Error: {error}. Please check your API key and network connection."
        self._mark(sent, DeliveryStatus.FAILED)
        self._append(Role.ASSISTANT, FAILURE_RESPONSE_TEXT)
