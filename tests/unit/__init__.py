"""Unit tests for individual components in isolation.

Coverage:
    - models/: Image validation and result normalization
    - scanner/: Configuration and the Gemini request adapter
    - ui/: Scan state machine transitions

Uses mocks for the Agno agent and Gemini model.
"""
