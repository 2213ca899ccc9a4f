"""UI event handlers for the gallery screen.

All handlers take the session UIState as their last input and return it as
their last output, following the Gradio ``gr.State`` convention.
"""

from .gallery import (
    add_picture,
    clear_filter,
    clear_gallery,
    initialize_gallery,
    remove_selected_picture,
    toggle_display_mode,
    update_filter,
)

__all__ = [
    "add_picture",
    "clear_filter",
    "clear_gallery",
    "initialize_gallery",
    "remove_selected_picture",
    "toggle_display_mode",
    "update_filter",
]
