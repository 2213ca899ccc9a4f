"""Gallery screen handlers: search, display mode, add, remove and clear."""

import logging

import gradio as gr

from ..components import mode_button_label, render_gallery
from ..models import UIState
from ..state import initialize_ui_state

logger = logging.getLogger(__name__)


def initialize_gallery(state: UIState) -> tuple[dict, dict, dict, UIState]:
    """Render the gallery when the page loads.

    Args:
        state: UI state

    Returns:
        Tuple of (gallery_update, empty_message_update, mode_button_update, updated_state)
    """
    try:
        state = initialize_ui_state(state)

        gallery, empty = render_gallery(state)
        mode_btn = gr.update(value=mode_button_label(state.store.display_mode))

        logger.info(f"Gallery loaded with {len(state.store)} pictures")
        return gallery, empty, mode_btn, state

    except Exception as e:
        logger.error(f"Error initializing gallery: {e}", exc_info=True)
        return gr.update(), gr.update(), gr.update(), state


def update_filter(text: str, state: UIState) -> tuple[dict, dict, dict, UIState]:
    """Apply new search text.

    Args:
        text: Search text typed by the user
        state: UI state

    Returns:
        Tuple of (gallery_update, empty_message_update, clear_search_button_update,
        updated_state)
    """
    try:
        state = initialize_ui_state(state)

        state.store.set_filter_text(text)
        gallery, empty = render_gallery(state)

        return gallery, empty, gr.update(visible=bool(text)), state

    except Exception as e:
        logger.error(f"Error applying filter: {e}", exc_info=True)
        return gr.update(), gr.update(), gr.update(), state


def clear_filter(state: UIState) -> tuple[str, dict, dict, dict, UIState]:
    """Reset the search text.

    Args:
        state: UI state

    Returns:
        Tuple of (search_text, gallery_update, empty_message_update,
        clear_search_button_update, updated_state)
    """
    try:
        state = initialize_ui_state(state)

        state.store.set_filter_text("")
        gallery, empty = render_gallery(state)

        return "", gallery, empty, gr.update(visible=False), state

    except Exception as e:
        logger.error(f"Error clearing filter: {e}", exc_info=True)
        return gr.update(), gr.update(), gr.update(), gr.update(), state


def toggle_display_mode(state: UIState) -> tuple[dict, dict, dict, UIState]:
    """Switch between grid and list layout.

    Args:
        state: UI state

    Returns:
        Tuple of (gallery_update, empty_message_update, mode_button_update, updated_state)
    """
    try:
        state = initialize_ui_state(state)

        mode = state.store.toggle_display_mode()
        gallery, empty = render_gallery(state)

        logger.info(f"Switched gallery to {mode.value} mode")
        return gallery, empty, gr.update(value=mode_button_label(mode)), state

    except Exception as e:
        logger.error(f"Error toggling display mode: {e}", exc_info=True)
        return gr.update(), gr.update(), gr.update(), state


def add_picture(state: UIState) -> tuple[dict, dict, UIState]:
    """Add a generated picture at the front of the gallery.

    A duplicate is reported to the user by the store's notice callback and
    leaves the gallery unchanged.

    Args:
        state: UI state

    Returns:
        Tuple of (gallery_update, empty_message_update, updated_state)
    """
    try:
        state = initialize_ui_state(state)

        result = state.store.add_generated()
        if not result.added:
            logger.info(f"Picture {result.picture.id} not added (duplicate)")

        gallery, empty = render_gallery(state)
        return gallery, empty, state

    except Exception as e:
        logger.error(f"Error adding picture: {e}", exc_info=True)
        return gr.update(), gr.update(), state


def remove_selected_picture(evt: gr.SelectData, state: UIState) -> tuple[dict, dict, UIState]:
    """Remove the picture the user clicked.

    The selection index refers to the pictures as they were last rendered,
    so the removed picture is exactly the one the user saw.

    Args:
        evt: Gradio SelectData event containing the selected index
        state: UI state

    Returns:
        Tuple of (gallery_update, empty_message_update, updated_state)
    """
    try:
        state = initialize_ui_state(state)

        index = evt.index
        if not isinstance(index, int) or not 0 <= index < len(state.rendered_pictures):
            logger.warning(f"Ignoring selection with invalid index: {index}")
            return gr.update(), gr.update(), state

        picture = state.rendered_pictures[index]
        state.store.remove(picture)

        gallery, empty = render_gallery(state)
        return gallery, empty, state

    except Exception as e:
        logger.error(f"Error removing picture: {e}", exc_info=True)
        return gr.update(), gr.update(), state


def clear_gallery(state: UIState) -> tuple[dict, dict, UIState]:
    """Remove every picture from the gallery.

    Args:
        state: UI state

    Returns:
        Tuple of (gallery_update, empty_message_update, updated_state)
    """
    try:
        state = initialize_ui_state(state)

        state.store.clear()
        gallery, empty = render_gallery(state)

        return gallery, empty, state

    except Exception as e:
        logger.error(f"Error clearing gallery: {e}", exc_info=True)
        return gr.update(), gr.update(), state
