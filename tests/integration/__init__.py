"""Integration tests for components working together as a system.

Coverage:
    - Host app endpoints with real HTTP requests over ASGITransport
    - Full submit() round trip against the live API (when configured)

Requires GEMINI_API_KEY for the live test.
"""
