"""Test package for Car Scanner.

Structure:
    - unit/: Configuration, schemas, request adapter and state machine
    - integration/: Web host and live model calls

Unit tests never touch the network; the vision model is patched or replaced
by an in-memory analyzer.
"""
