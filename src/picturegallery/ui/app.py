"""Gradio UI for the Picture Gallery."""

import logging

import gradio as gr

from picturegallery.core.config import config

from .components import GalleryToolbar
from .handlers import (
    add_picture,
    clear_filter,
    clear_gallery,
    initialize_gallery,
    remove_selected_picture,
    toggle_display_mode,
    update_filter,
)
from .models import EMPTY_MESSAGE, UIState
from .state import cleanup_ui_state

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_ui() -> gr.Blocks:
    """Create the single-screen gallery UI.

    Returns:
        Gradio Blocks app
    """
    app = gr.Blocks(title="Picture Gallery")

    with app:
        # Session state - one gallery per user, discarded when the session ends
        ui_state = gr.State(UIState(), delete_callback=cleanup_ui_state)

        gr.Markdown("# Picture Gallery")

        toolbar = GalleryToolbar()

        empty_message = gr.Markdown(value=EMPTY_MESSAGE, visible=False)

        gallery = gr.Gallery(
            label="Pictures",
            show_label=False,
            columns=config.grid_columns,
            height=config.gallery_height,
            object_fit="cover",
            allow_preview=False,
        )

        gr.Markdown("*Click a picture to remove it.*")

        # Page load renders the seed pictures
        app.load(
            fn=initialize_gallery,
            inputs=[ui_state],
            outputs=[gallery, empty_message, toolbar.mode_btn, ui_state],
        )

        # Search by author (user typing only, programmatic resets go through clear_filter)
        toolbar.search.input(
            fn=update_filter,
            inputs=[toolbar.search, ui_state],
            outputs=[gallery, empty_message, toolbar.clear_search_btn, ui_state],
        )

        toolbar.clear_search_btn.click(
            fn=clear_filter,
            inputs=[ui_state],
            outputs=[toolbar.search, gallery, empty_message, toolbar.clear_search_btn, ui_state],
        )

        toolbar.mode_btn.click(
            fn=toggle_display_mode,
            inputs=[ui_state],
            outputs=[gallery, empty_message, toolbar.mode_btn, ui_state],
        )

        toolbar.clear_all_btn.click(
            fn=clear_gallery,
            inputs=[ui_state],
            outputs=[gallery, empty_message, ui_state],
        )

        toolbar.add_btn.click(
            fn=add_picture,
            inputs=[ui_state],
            outputs=[gallery, empty_message, ui_state],
        )

        # Clicking a card removes it
        gallery.select(
            fn=remove_selected_picture,
            inputs=[ui_state],
            outputs=[gallery, empty_message, ui_state],
        )

    return app


def main():
    """Main entry point for the application."""
    logger.info("Starting Picture Gallery...")
    logger.info(f"Configuration: {config.model_dump()}")

    app = create_ui()

    logger.info(f"Launching Gradio UI on {config.gradio_server_name}:{config.gradio_server_port}")

    app.launch(
        server_name=config.gradio_server_name,
        server_port=config.gradio_server_port,
        share=config.gradio_share,
        show_error=True,
        inbrowser=False,
    )


if __name__ == "__main__":
    main()
