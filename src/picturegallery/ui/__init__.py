"""Gradio user interface for the picture gallery.

Modules
-------
app
    Blocks layout, event wiring and the ``main()`` entry point.
components
    Toolbar component and gallery render helpers.
handlers
    Event handlers mapping widget events onto GalleryStore operations.
images
    Server-side image fetching with httpx and Pillow.
models
    Per-session UIState and UI constants.
state
    UIState initialization and cleanup.
"""
