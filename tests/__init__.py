"""Test package for Gemini Chat.

Unit tests cover isolated logic; integration tests cover the host app and
an optional live exchange with the Generative Language API.

Structure:
    - unit/: Config, wire models, API client, session controller, rendering
    - integration/: Host app and live API workflow

Leverages pytest with pytest-check for soft assertions.
"""
