"""Async client for the Generative Language generateContent endpoint.

One request per call, no retries. Success bodies are parsed into
GenerateContentResponse; anything else surfaces as GeminiAPIError so the
session controller has a single failure type to handle.
"""

import logging

import httpx
from pydantic import ValidationError

from geminichat.agent.config import ChatConfig
from geminichat.models.schemas import (
    Content,
    ErrorResponse,
    GenerateContentRequest,
    GenerateContentResponse,
    Part,
)

logger = logging.getLogger(__name__)


class GeminiAPIError(Exception):
    """Raised when a generateContent call fails.

    Attributes:
        status_code: HTTP status of the failed response, None for
            transport-level failures.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code

    def __str__(self) -> str:
        message = super().__str__()
        if self.status_code is None:
            return message
        return f"API Error: {self.status_code} - {message}"


def _error_message(response: httpx.Response) -> str:
    """Pull error.message out of an error body, tolerating any shape."""
    try:
        body = ErrorResponse.model_validate(response.json())
    except (ValueError, ValidationError):
        return "Unknown error"
    if body.error and body.error.message:
        return body.error.message
    return "Unknown error"


class GeminiClient:
    """Sends conversation turns to Gemini and returns the generated text."""

    def __init__(
        self,
        config: ChatConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Endpoint, key, prompt and sampling settings.
            transport: Optional httpx transport, used to stub the network.
        """
        self._config = config
        self._transport = transport

    def build_request(self, contents: list[Content]) -> GenerateContentRequest:
        return GenerateContentRequest(
            contents=contents,
            generation_config=self._config.generation,
            safety_settings=self._config.safety_settings,
            system_instruction=Content(parts=[Part(text=self._config.system_prompt)]),
        )

    async def generate(self, contents: list[Content]) -> str | None:
        """Request a completion for the given turns.

        Args:
            contents: The full ordered conversation, ending with the user turn.

        Returns:
            Text of the first candidate, or None when the API returned no
            usable text (e.g. the response was blocked by a safety filter).

        Raises:
            GeminiAPIError: On non-2xx status, transport failure, or a
                success body that is not valid JSON.
        """
        payload = self.build_request(contents).to_payload()
        logger.debug(
            f"POST {self._config.endpoint} with {len(contents)} turns "
            f"(model={self._config.model_name})"
        )

        async with httpx.AsyncClient(
            timeout=self._config.request_timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(
                    self._config.endpoint,
                    params={"key": self._config.api_key},
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
            except httpx.RequestError as e:
                raise GeminiAPIError(f"Connection failed: {e}") from e

        if not response.is_success:
            raise GeminiAPIError(_error_message(response), response.status_code)

        try:
            data = GenerateContentResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise GeminiAPIError(f"Malformed response: {e}") from e

        text = data.first_text()
        if text is None:
            reason = data.candidates[0].finish_reason if data.candidates else None
            logger.warning(f"Response carried no candidate text (finish_reason={reason})")
        else:
            logger.info(f"Received {len(text)} characters from {self._config.model_name}")
        return text
