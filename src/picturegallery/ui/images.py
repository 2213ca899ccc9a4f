"""Server-side image loading for the gallery widget.

Some image hosts (Wikimedia in particular) reject requests without a proper
User-Agent, so images are downloaded here with explicit headers instead of
letting the browser fetch the raw urls.
"""

import logging
from io import BytesIO

import httpx
from PIL import Image

from picturegallery.core.config import GalleryConfig
from picturegallery.core.errors import ImageFetchError

logger = logging.getLogger(__name__)

PLACEHOLDER_SIZE = (600, 400)
PLACEHOLDER_COLOR = (128, 128, 128)


class ImageLoader:
    """Download and decode gallery images.

    Args:
        user_agent: User-Agent header sent with every request
        referer: Referer header sent with every request
        timeout: Request timeout in seconds
    """

    def __init__(self, user_agent: str, referer: str, timeout: float = 10.0):
        self.user_agent = user_agent
        self.referer = referer
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: GalleryConfig) -> "ImageLoader":
        return cls(
            user_agent=config.image_user_agent,
            referer=config.image_referer,
            timeout=config.image_timeout,
        )

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent, "Referer": self.referer}

    def load(self, url: str) -> Image.Image:
        """Fetch an image and decode it.

        Args:
            url: Image url

        Returns:
            Decoded PIL image

        Raises:
            ImageFetchError: On HTTP errors, transport errors or content that
                is not a decodable image
        """
        try:
            response = httpx.get(
                url,
                headers=self.headers,
                timeout=self.timeout,
                follow_redirects=True,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ImageFetchError(url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise ImageFetchError(url, str(e) or type(e).__name__) from e

        try:
            image = Image.open(BytesIO(response.content))
            image.load()
        except OSError as e:
            raise ImageFetchError(url, f"cannot decode image ({e})") from e

        logger.debug(f"Loaded {url} ({image.width}x{image.height})")
        return image


def placeholder_image() -> Image.Image:
    """Plain grey image shown in place of a picture that failed to load."""
    return Image.new("RGB", PLACEHOLDER_SIZE, PLACEHOLDER_COLOR)
