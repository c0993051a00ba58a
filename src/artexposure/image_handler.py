"""
Image Handler

Utilities for downloading, framing and saving artwork images.

Downloading images: supports only plain GET requests for image files specified by URL,
with no expectation of authentication. Searching the collection is done by met_handler.

Image manipulation: everything here works on in-memory RGBA Pillow images. Transforms
return a new image (resize, border) or draw onto the one they are given (text overlay).
Nothing touches the filesystem until save_image is called at the end of the pipeline.
"""

import io
import os
import tempfile
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont, UnidentifiedImageError
import requests

from artexposure.config import config
from artexposure.errors import FatalError


class InvalidImageError(FatalError):
    """
    Raised when a provided binary input is not an image. Wrapper around the PIL
    UnidentifiedImageError for better identification of errors during debugging
    and custom error messaging.
    """

    pass


class ImageDownloadError(FatalError):
    """
    Raised when an image download is unsuccessful.
    """

    pass


class FontLoadError(FatalError):
    """Raised when the caption font can't be loaded."""

    pass


class PersistenceError(FatalError):
    """Raised when the finished image can't be written to disk."""

    pass


IMAGE_SUFFIXES = (".jpg", ".jpeg", ".png")

TITLE_OFFSET = 275
ARTIST_OFFSET = 250
TEXT_COLOR = (0, 0, 0, 255)


def validate_image(input) -> str:
    """
    Determine whether input is a valid image. PIL open method accepts a Path object, string, or file object (buffered stream).
    The PIL method reads the content header to determine file type but doesn't actually load any of the contents
    in memory, so it should be safe to use as a validation method.
    """

    try:
        with Image.open(input) as image:
            return image.format

    except UnidentifiedImageError as error:
        raise InvalidImageError(f"Input {str(input)} does not appear to be an image.") from error

    except (FileNotFoundError, IsADirectoryError) as error:
        raise InvalidImageError(f"Input {str(input)} could not be found.") from error


def download_image_bytes(url: str, timeout: float = None) -> bytes:
    """
    Download the raw bytes of the image at url. Requests follows redirects on our behalf, which the
    Met image CDN uses. Raise ImageDownloadError for a failed request or a bad status code; whether
    the bytes are an image is decided later by decode_image.
    """

    if timeout is None:
        timeout = config.REQUEST_TIMEOUT

    try:
        r = requests.get(url, timeout=timeout)

    except requests.exceptions.RequestException as error:
        raise ImageDownloadError(f"Error downloading image: {url}. Error: {error}") from error

    # successful request but received a bad response from the server.
    try:
        r.raise_for_status()
    except requests.exceptions.HTTPError as error:
        raise ImageDownloadError(
            f"Download error: something went wrong trying to access {url} (status code {r.status_code})"
        ) from error

    return r.content


def decode_image(data: bytes) -> Image.Image:
    """
    Decode image bytes into an RGBA image. There is no fallback for partial or corrupt images.
    """

    try:
        with Image.open(io.BytesIO(data)) as image:
            image.load()
            return image.convert("RGBA")

    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError) as error:
        raise InvalidImageError(f"Downloaded data could not be decoded as an image: {error}") from error


def resize_to_height(image: Image.Image, target_height: int) -> Image.Image:
    """
    Scale image to target_height, keeping the aspect ratio. Lanczos resampling keeps
    paintings free of aliasing when they are scaled down a long way.
    """

    if target_height <= 0:
        raise ValueError(f"target height must be positive, got {target_height}")

    width, height = image.size
    new_width = max(1, round(width * target_height / height))

    return image.resize((new_width, target_height), resample=Image.Resampling.LANCZOS)


def add_border(
    image: Image.Image, border_width: int, bottom_multiplier: int = 1
) -> Image.Image:
    """
    Place image on a transparent canvas with border_width on the left, right and top, and
    bottom_multiplier * border_width underneath. A larger bottom margin leaves room for a caption.

    The source pixels are copied as-is (no blending at the seam), so cropping the interior back
    out recovers the original exactly.
    """

    if border_width < 0 or bottom_multiplier < 0:
        raise ValueError("border width and bottom multiplier must not be negative")

    source = image if image.mode == "RGBA" else image.convert("RGBA")
    width, height = source.size

    framed = Image.new(
        "RGBA",
        (
            width + 2 * border_width,
            height + border_width + bottom_multiplier * border_width,
        ),
        (0, 0, 0, 0),
    )
    framed.paste(source, (border_width, border_width))

    return framed


def load_font(font_path, size: int) -> ImageFont.FreeTypeFont:
    try:
        return ImageFont.truetype(str(font_path), max(1, int(size)))

    except OSError as error:
        raise FontLoadError(f"Could not load font {font_path}: {error}") from error


def overlay_text(
    image: Image.Image, title: str, artist: str, font_path
) -> Image.Image:
    """
    Draw the title and artist onto the bottom margin of image, in place.

    Text size is a rough fit: the title's pixel size is the image width divided by the number of
    characters in the title, and the artist gets half of that ratio over its own length. No font
    metrics are involved, so long or narrow strings can overflow the image or overlap; there is
    no wrapping or clipping.
    """

    width, height = image.size
    draw = ImageDraw.Draw(image)

    title_size = int(width / len(title)) if title else 0
    if title:
        draw.text(
            (int(0.3 * width), height - TITLE_OFFSET),
            title,
            fill=TEXT_COLOR,
            font=load_font(font_path, title_size),
        )

    if artist:
        artist_size = int(0.5 * width / len(artist))
        draw.text(
            (int(0.4 * width), height - ARTIST_OFFSET + title_size),
            artist,
            fill=TEXT_COLOR,
            font=load_font(font_path, artist_size),
        )

    return image


def save_image(image: Image.Image, dest_path: Path) -> Path:
    """
    Write image as a PNG at dest_path. The image is written to a temporary file in the same directory
    first and moved into place, so a failed save never leaves a half-written file behind.
    """

    dest_path = Path(dest_path).expanduser()

    try:
        dest_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(suffix=".png.part", dir=dest_path.parent)

    except OSError as error:
        raise PersistenceError(f"Could not prepare {dest_path.parent}: {error}") from error

    try:
        with os.fdopen(fd, "wb") as file:
            image.save(file, format="PNG")
        os.replace(tmp_name, dest_path)

    except (OSError, ValueError) as error:
        Path(tmp_name).unlink(missing_ok=True)
        raise PersistenceError(f"Could not save image to {dest_path}: {error}") from error

    return dest_path


def clear_images(directory: Path, keep=()) -> list:
    """
    Remove previously saved images (jpg, jpeg, png) from directory and return the removed paths.
    Paths in keep are left alone.
    """

    removed = []
    directory = Path(directory).expanduser()
    keep = {Path(path).expanduser().resolve() for path in keep}

    if not directory.is_dir():
        return removed

    for path in directory.iterdir():
        if path.resolve() in keep:
            continue

        if path.is_file() and path.suffix.lower() in IMAGE_SUFFIXES:
            try:
                path.unlink()
            except OSError as error:
                raise PersistenceError(f"Could not remove {path}: {error}") from error
            removed.append(path)

    return removed
