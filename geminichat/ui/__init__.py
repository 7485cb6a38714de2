"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Transcript rendering with timestamps and delivery ticks (persona)
    - Typing indicator and error banner
    - Input with Enter-key and button submission

Contains no request logic. Delegates every submission to ChatSession.
"""
