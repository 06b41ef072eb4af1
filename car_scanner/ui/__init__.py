"""NiceGUI interface - thin visualization layer for car scans.

Responsibilities:
    - Image upload with type and size checks
    - Preview, scan button and loading indicator
    - Result card and error banner

Rendering follows ScanController state. The controller is the only place
where scan state changes.
"""
