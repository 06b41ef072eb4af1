"""Car Scanner - identify a car's make, model, color and year from a photo.

Combines FastAPI as the web host, NiceGUI for the browser interface, Agno
with Google Gemini for image understanding, and Pydantic for validation.

Components:
    - api: Web host and health endpoint
    - scanner: Vision model configuration and request adapter
    - ui: Scan state machine and scanner page
    - models: Image and result types
"""

__version__ = "0.1.0"
