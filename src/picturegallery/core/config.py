"""Configuration management for the Picture Gallery.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the GALLERY_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (GALLERY_* prefix)
2. .env file in the project root
3. Default values defined in GalleryConfig

Example .env file:
    GALLERY_NEW_AUTHOR=New Author
    GALLERY_GRID_COLUMNS=4
    GALLERY_FETCH_IMAGES=false
    GALLERY_GRADIO_SERVER_PORT=7861

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.

Usage Example
-------------
    from picturegallery.core.config import config

    print(config.grid_columns)
    print(config.generated_url_template)

Nothing here is persisted: the gallery lives in memory for one UI session and
the configuration only shapes how pictures are generated and rendered.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GalleryConfig(BaseSettings):
    """Main configuration for the Picture Gallery.

    Attributes
    ----------
    Picture Generation:
        new_author : str
            Author label given to pictures created with the Add button
        generated_url_template : str
            Url template for generated pictures; ``{timestamp}`` is replaced
            with the current time in milliseconds

    Image Loading:
        fetch_images : bool
            Download images server-side (True) or hand urls to the browser (False)
        image_user_agent : str
            User-Agent header sent with image requests
        image_referer : str
            Referer header sent with image requests
        image_timeout : float
            Timeout in seconds for a single image request

    Layout:
        grid_columns : int
            Number of columns in grid mode (list mode always uses one)
        gallery_height : int
            Height of the gallery widget in pixels

    UI Settings:
        gradio_server_name : str
            Server bind address (0.0.0.0 for local network)
        gradio_server_port : int
            Server port (1024-65535)
        gradio_share : bool
            Create public gradio.live link (keep False for local-only)

    Examples
    --------
        >>> custom_config = GalleryConfig(grid_columns=4, fetch_images=False)
        >>> custom_config.grid_columns
        4
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GALLERY_",
        case_sensitive=False,
    )

    # Picture generation
    new_author: str = Field(
        default="New Author",
        description="Author label for generated pictures",
    )
    generated_url_template: str = Field(
        default="https://picsum.photos/seed/{timestamp}/600/400",
        description="Url template for generated pictures (must contain {timestamp})",
    )

    # Image loading
    fetch_images: bool = Field(
        default=True,
        description="Fetch images server-side with custom headers",
    )
    image_user_agent: str = Field(
        default="PictureGallery/1.0 (Gradio; httpx)",
        description="User-Agent header for image requests",
    )
    image_referer: str = Field(
        default="https://commons.wikimedia.org/",
        description="Referer header for image requests",
    )
    image_timeout: float = Field(
        default=10.0,
        description="Image request timeout in seconds",
        gt=0,
    )

    # Layout
    grid_columns: int = Field(default=3, ge=1, le=8)
    gallery_height: int = Field(default=600, ge=200)

    # UI settings
    gradio_server_name: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    gradio_server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    gradio_share: bool = Field(
        default=False,
        description="Create public gradio.live link (keep False for local-only)",
    )

    @field_validator("generated_url_template")
    @classmethod
    def require_timestamp_placeholder(cls, value: str) -> str:
        # Without the placeholder every generated url would be identical
        if "{timestamp}" not in value:
            raise ValueError("generated_url_template must contain '{timestamp}'")
        return value


# Global configuration instance
config = GalleryConfig()
