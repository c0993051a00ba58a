"""
conftest.py

Test configuration for art-exposure tests.

Defines Pytest fixtures for supplying test data to tests across the entire test suite. Test images
are drawn with Pillow instead of being checked in, and the config directory is pointed at a
throwaway location before art-exposure is imported so the suite never touches ~/.config.
"""

import io
import os
import tempfile

os.environ["ART_EXPOSURE_CONFIG_DIR"] = tempfile.mkdtemp(prefix="art-exposure-test-")

import pytest
from PIL import Image

from artexposure.models import Artwork
from artexposure.models import ArtworkRecord


def make_image(width: int = 400, height: int = 300, mode: str = "RGBA") -> Image.Image:
    """
    Build an image where every pixel is different, so a misplaced copy can't go unnoticed.
    """

    image = Image.new(mode, (width, height))
    image.putdata(
        [
            (x % 256, y % 256, (x * y) % 256, 255)[: len(mode)]
            for y in range(height)
            for x in range(width)
        ]
    )
    return image


@pytest.fixture
def image_factory():
    """make_image, for tests that need an image of a particular size or mode."""

    return make_image


@pytest.fixture
def test_image() -> Image.Image:
    """A 400x300 RGBA image."""

    return make_image()


@pytest.fixture
def jpeg_bytes() -> bytes:
    """A small jpeg as it would come back from the image CDN."""

    buffer = io.BytesIO()
    make_image(64, 48, mode="RGB").save(buffer, format="JPEG")
    return buffer.getvalue()


@pytest.fixture
def record() -> ArtworkRecord:
    return ArtworkRecord(
        object_id=436532,
        title="Wheat Field with Cypresses",
        artist="Vincent van Gogh",
        image_url="https://images.metmuseum.org/CRDImages/ep/original/DT1567.jpg",
    )


@pytest.fixture
def artwork(record, test_image) -> Artwork:
    return Artwork(record=record, image=test_image)
