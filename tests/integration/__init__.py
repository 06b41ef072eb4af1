"""Integration tests for components working together as a system.

Coverage:
    - Web host with real HTTP requests through ASGITransport
    - Live Gemini analysis (when GEMINI_API_KEY is configured)
"""
