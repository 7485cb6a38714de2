"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation and serialization
    - agent/: Configuration, request assembly, session state transitions
    - ui/: Markdown rendering of chat bubbles

The network is replaced by httpx.MockTransport or a stub client.
"""
