"""Reusable UI components and render helpers for the gallery screen."""

import logging
from collections.abc import Callable
from typing import Any

import gradio as gr

from picturegallery.core.config import config
from picturegallery.core.errors import ImageFetchError
from picturegallery.core.models import DisplayMode, Picture

from .images import ImageLoader, placeholder_image
from .models import EMPTY_MESSAGE, MODE_BUTTON_LABELS, SEARCH_LABEL, UIState

logger = logging.getLogger(__name__)


class GalleryToolbar:
    """Search box and action buttons shown above the gallery.

    The toolbar has:
    - Search text input (filters by author)
    - Clear search button (only visible while there is search text)
    - Display mode toggle
    - Clear all button
    - Add button
    """

    def __init__(self, mode: DisplayMode = DisplayMode.GRID):
        """Initialize the toolbar components.

        Args:
            mode: Initial display mode, used for the toggle button label
        """
        with gr.Row():
            self.search = gr.Textbox(
                label=SEARCH_LABEL,
                placeholder="Author name...",
                lines=1,
                max_lines=1,
                scale=4,
            )
            self.clear_search_btn = gr.Button("✕ Clear search", size="sm", scale=1, visible=False)
            self.mode_btn = gr.Button(mode_button_label(mode), size="sm", scale=1)
            self.clear_all_btn = gr.Button("🗑 Clear all", size="sm", scale=1, variant="stop")
            self.add_btn = gr.Button("＋ Add", size="sm", scale=1, variant="primary")


def mode_button_label(mode: DisplayMode) -> str:
    """Label for the mode toggle while the gallery is shown in ``mode``."""
    return MODE_BUTTON_LABELS[mode]


def columns_for_mode(mode: DisplayMode) -> int:
    """Number of gallery columns for a display mode."""
    return config.grid_columns if mode is DisplayMode.GRID else 1


def show_notice(message: str) -> None:
    """Show a transient notice (toast) in the browser."""
    gr.Warning(message)


def build_gallery_items(
    pictures: list[Picture],
    image_loader: ImageLoader | None,
    on_failure: Callable[[str], None] | None = None,
    image_cache: dict[str, Any] | None = None,
) -> list[tuple[Any, str]]:
    """Convert pictures into ``(image, caption)`` pairs for ``gr.Gallery``.

    Each url is fetched at most once per cache: a successful download and the
    placeholder for a failed one are both kept, so a broken url is reported
    only the first time it fails.

    Args:
        pictures: Pictures to render, in display order
        image_loader: Loader used to fetch images, or None to pass urls through
        on_failure: Called with the error message when an image cannot be loaded
        image_cache: Url to rendered image memo, reused across renders

    Returns:
        List of (image or url, author) tuples, one per picture
    """
    if image_cache is None:
        image_cache = {}

    items: list[tuple[Any, str]] = []

    for picture in pictures:
        if image_loader is None:
            items.append((picture.url, picture.author))
            continue

        image = image_cache.get(picture.url)
        if image is None:
            try:
                image = image_loader.load(picture.url)
            except ImageFetchError as e:
                logger.warning(f"Could not load picture {picture.id}: {e}")
                if on_failure is not None:
                    on_failure(str(e))
                image = placeholder_image()
            image_cache[picture.url] = image

        items.append((image, picture.author))

    return items


def render_gallery(state: UIState) -> tuple[dict, dict]:
    """Render the store's filtered view.

    Also records the rendered pictures on the state so a later selection
    event can be mapped back to the picture the user clicked.

    Args:
        state: Initialized UI state

    Returns:
        Tuple of (gallery_update, empty_message_update)
    """
    store = state.store
    pictures = store.filtered_view()
    state.rendered_pictures = pictures

    items = build_gallery_items(
        pictures,
        state.image_loader,
        store.report_fetch_failure,
        state.image_cache,
    )

    return (
        gr.update(
            value=items,
            columns=columns_for_mode(store.display_mode),
            visible=bool(pictures),
        ),
        gr.update(value=EMPTY_MESSAGE, visible=not pictures),
    )
