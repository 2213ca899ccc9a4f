"""Unit tests for gallery handler functions."""

from unittest.mock import Mock, patch

import pytest
from PIL import Image

from picturegallery.core.errors import ImageFetchError
from picturegallery.core.gallery_store import DUPLICATE_NOTICE
from picturegallery.core.models import SAMPLE_PICTURES, DisplayMode
from picturegallery.ui.handlers.gallery import (
    add_picture,
    clear_filter,
    clear_gallery,
    initialize_gallery,
    remove_selected_picture,
    toggle_display_mode,
    update_filter,
)
from picturegallery.ui.models import MODE_BUTTON_LABELS


@pytest.fixture(autouse=True)
def patched_config(test_config):
    """Render with the test configuration (3 grid columns)."""
    with (
        patch("picturegallery.ui.components.config", test_config),
        patch("picturegallery.ui.state.config", test_config),
    ):
        yield test_config


def _captions(gallery_update: dict) -> list[str]:
    return [caption for _, caption in gallery_update["value"]]


# ============================================================================
# initialize_gallery Tests
# ============================================================================


class TestInitializeGallery:
    """Tests for initialize_gallery handler."""

    def test_renders_seed_pictures(self, ui_state):
        """Test that the first load renders the five sample pictures."""
        gallery, empty, mode_btn, state = initialize_gallery(ui_state)

        assert _captions(gallery) == ["Alice", "Bob", "Carol", "Dave", "Erin"]
        assert gallery["visible"] is True
        assert gallery["columns"] == 3
        assert empty["visible"] is False
        assert mode_btn["value"] == MODE_BUTTON_LABELS[DisplayMode.GRID]
        assert state.rendered_pictures == list(SAMPLE_PICTURES)

    def test_urls_passed_through_without_loader(self, initialized_state):
        """Test that urls are handed to the gallery when fetching is off."""
        gallery, _, _, _ = initialize_gallery(initialized_state)

        assert gallery["value"][0] == (SAMPLE_PICTURES[0].url, "Alice")

    def test_error_returns_unchanged_outputs(self, initialized_state):
        """Test that an unexpected error does not break the session."""
        initialized_state.store = Mock()
        initialized_state.store.filtered_view.side_effect = RuntimeError("boom")

        gallery, empty, mode_btn, state = initialize_gallery(initialized_state)

        assert "value" not in gallery
        assert state is initialized_state


# ============================================================================
# Filter Tests
# ============================================================================


class TestUpdateFilter:
    """Tests for update_filter and clear_filter handlers."""

    def test_filter_by_author(self, initialized_state):
        """Test that typing narrows the gallery case-insensitively."""
        gallery, empty, clear_btn, state = update_filter("A", initialized_state)

        assert _captions(gallery) == ["Alice", "Carol", "Dave"]
        assert clear_btn["visible"] is True
        assert state.store.filter_text == "A"

    def test_no_match_shows_empty_message(self, initialized_state):
        """Test that an empty view hides the gallery and shows the placeholder."""
        gallery, empty, _, _ = update_filter("zzz", initialized_state)

        assert gallery["visible"] is False
        assert empty["visible"] is True

    def test_empty_text_hides_clear_button(self, initialized_state):
        """Test that the clear search button disappears with the text."""
        _, _, clear_btn, _ = update_filter("", initialized_state)

        assert clear_btn["visible"] is False

    def test_clear_filter(self, initialized_state):
        """Test that clearing the search restores the full gallery."""
        update_filter("bob", initialized_state)

        text, gallery, empty, clear_btn, state = clear_filter(initialized_state)

        assert text == ""
        assert len(_captions(gallery)) == 5
        assert clear_btn["visible"] is False
        assert state.store.filter_text == ""


# ============================================================================
# toggle_display_mode Tests
# ============================================================================


class TestToggleDisplayMode:
    """Tests for toggle_display_mode handler."""

    def test_switch_to_list(self, initialized_state):
        """Test that list mode renders one column and relabels the button."""
        gallery, _, mode_btn, state = toggle_display_mode(initialized_state)

        assert state.store.display_mode is DisplayMode.LIST
        assert gallery["columns"] == 1
        assert mode_btn["value"] == MODE_BUTTON_LABELS[DisplayMode.LIST]

    def test_switch_back_to_grid(self, initialized_state):
        """Test that toggling twice restores grid columns."""
        toggle_display_mode(initialized_state)
        gallery, _, mode_btn, state = toggle_display_mode(initialized_state)

        assert state.store.display_mode is DisplayMode.GRID
        assert gallery["columns"] == 3
        assert mode_btn["value"] == MODE_BUTTON_LABELS[DisplayMode.GRID]


# ============================================================================
# add_picture Tests
# ============================================================================


class TestAddPicture:
    """Tests for add_picture handler."""

    def test_add_prepends_new_picture(self, initialized_state):
        """Test that the new picture is rendered first."""
        gallery, _, state = add_picture(initialized_state)

        assert _captions(gallery)[0] == "New Author"
        assert state.store.items[0].id == 6
        assert len(state.store) == 6

    def test_duplicate_emits_notice(self, initialized_state, notices):
        """Test that a duplicate leaves the gallery unchanged and notifies."""
        add_picture(initialized_state)

        gallery, _, state = add_picture(initialized_state)

        assert len(state.store) == 6
        assert len(_captions(gallery)) == 6
        assert notices == [DUPLICATE_NOTICE]

    def test_add_hidden_by_filter(self, initialized_state):
        """Test that a new picture not matching the filter is stored but not shown."""
        update_filter("alice", initialized_state)

        gallery, _, state = add_picture(initialized_state)

        assert _captions(gallery) == ["Alice"]
        assert len(state.store) == 6


# ============================================================================
# remove_selected_picture Tests
# ============================================================================


class TestRemoveSelectedPicture:
    """Tests for remove_selected_picture handler."""

    def test_remove_uses_rendered_view(self, initialized_state):
        """Test that the selection index refers to the filtered view."""
        update_filter("a", initialized_state)  # Alice, Carol, Dave

        gallery, _, state = remove_selected_picture(Mock(index=1), initialized_state)

        assert _captions(gallery) == ["Alice", "Dave"]
        assert [p.author for p in state.store.items] == ["Alice", "Bob", "Dave", "Erin"]

    def test_invalid_index_is_ignored(self, initialized_state):
        """Test that an out-of-range selection leaves the gallery alone."""
        initialize_gallery(initialized_state)

        gallery, _, state = remove_selected_picture(Mock(index=10), initialized_state)

        assert "value" not in gallery
        assert len(state.store) == 5

    def test_stale_selection_after_clear(self, initialized_state):
        """Test that removing a picture that is already gone is a no-op."""
        initialize_gallery(initialized_state)
        stale = list(initialized_state.rendered_pictures)
        initialized_state.store.clear()
        initialized_state.rendered_pictures = stale

        gallery, empty, state = remove_selected_picture(Mock(index=0), initialized_state)

        assert len(state.store) == 0
        assert empty["visible"] is True


# ============================================================================
# clear_gallery Tests
# ============================================================================


class TestClearGallery:
    """Tests for clear_gallery handler."""

    def test_clear_shows_empty_message(self, initialized_state):
        """Test that clearing empties the gallery."""
        gallery, empty, state = clear_gallery(initialized_state)

        assert gallery["visible"] is False
        assert gallery["value"] == []
        assert empty["visible"] is True
        assert len(state.store) == 0

    def test_clear_keeps_filter_and_mode(self, initialized_state):
        """Test that filter text and display mode survive a clear."""
        update_filter("a", initialized_state)
        toggle_display_mode(initialized_state)

        _, _, state = clear_gallery(initialized_state)

        assert state.store.filter_text == "a"
        assert state.store.display_mode is DisplayMode.LIST


# ============================================================================
# Image loading Tests
# ============================================================================


class TestImageLoading:
    """Tests for rendering with a server-side image loader."""

    def test_loaded_images_are_rendered(self, initialized_state):
        """Test that fetched images replace the urls."""
        image = Image.new("RGB", (2, 2))
        initialized_state.image_loader = Mock()
        initialized_state.image_loader.load.return_value = image

        gallery, _, _, _ = initialize_gallery(initialized_state)

        assert gallery["value"][0] == (image, "Alice")
        assert initialized_state.image_loader.load.call_count == 5

    def test_failed_image_uses_placeholder_and_notifies(self, initialized_state, notices):
        """Test that a fetch failure renders a placeholder and reports it."""
        image = Image.new("RGB", (2, 2))
        initialized_state.image_loader = Mock()
        initialized_state.image_loader.load.side_effect = [
            image,
            ImageFetchError(SAMPLE_PICTURES[1].url, "HTTP 403"),
            image,
            image,
            image,
        ]

        gallery, _, _, _ = initialize_gallery(initialized_state)

        placeholder, caption = gallery["value"][1]
        assert caption == "Bob"
        assert isinstance(placeholder, Image.Image)
        assert placeholder is not image
        assert notices == ["Failed to load image: HTTP 403"]

    def test_images_are_fetched_once_per_session(self, initialized_state):
        """Test that re-rendering reuses downloaded images instead of fetching again."""
        initialized_state.image_loader = Mock()
        initialized_state.image_loader.load.side_effect = lambda url: Image.new("RGB", (2, 2))

        initialize_gallery(initialized_state)
        update_filter("A", initialized_state)
        update_filter("", initialized_state)
        toggle_display_mode(initialized_state)

        assert initialized_state.image_loader.load.call_count == 5
        assert set(initialized_state.image_cache) == {p.url for p in SAMPLE_PICTURES}

    def test_broken_image_is_reported_once(self, initialized_state, notices):
        """Test that a url that keeps failing is fetched and reported only once."""
        initialized_state.image_loader = Mock()
        initialized_state.image_loader.load.side_effect = ImageFetchError("u", "HTTP 403")

        initialize_gallery(initialized_state)
        for text in ["A", "Al", "Ali", ""]:
            update_filter(text, initialized_state)
        gallery, _, _, _ = toggle_display_mode(initialized_state)

        assert initialized_state.image_loader.load.call_count == 5
        assert len(notices) == 5
        assert all(isinstance(image, Image.Image) for image, _ in gallery["value"])

    def test_new_picture_is_fetched_on_add(self, initialized_state):
        """Test that only the added picture's url triggers a new download."""
        initialized_state.image_loader = Mock()
        initialized_state.image_loader.load.side_effect = lambda url: Image.new("RGB", (2, 2))
        initialize_gallery(initialized_state)

        _, _, state = add_picture(initialized_state)

        assert initialized_state.image_loader.load.call_count == 6
        initialized_state.image_loader.load.assert_called_with(state.store.items[0].url)
