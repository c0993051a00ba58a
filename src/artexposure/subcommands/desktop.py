"""
Desktop Command

Set the desktop background to each artwork in the stream. Artworks that haven't been through
'save' yet are saved to the media directory first, since the desktop needs a file to point at.

Failing to apply the wallpaper is reported but doesn't stop the pipeline: the image is already
on disk by then and the rest of the commands can still use it.
"""

import click

from artexposure import wallpaper_handler
from artexposure.errors import WallpaperUpdateError
from artexposure.models import Artwork
from artexposure.models import ArtStream
from artexposure.cli_utils.console import confirm_success
from artexposure.cli_utils.console import warn
from artexposure.cli_utils.utils import save_artwork


def set_desktop(artwork: Artwork, written: list) -> Artwork:

    if artwork.path is None:
        artwork = save_artwork(artwork, keep=written)
        written.append(artwork.path)

    try:
        location = wallpaper_handler.update_wallpaper(artwork.path)

    except WallpaperUpdateError as error:
        warn(f"Could not set the wallpaper: {error}")
        warn(f"The image is saved at {artwork.path}")

    else:
        confirm_success(
            f":white_check_mark-emoji: 'desktop' updated wallpaper to {location}"
        )

    return artwork


@click.command(name="desktop")
def cli():
    """
    Set your desktop background to the image.
    """

    # custom callback so images saved earlier in this cycle survive the media directory cleanup
    def wrapper(stream: ArtStream):
        written = []
        stream.stream = (set_desktop(artwork, written) for artwork in stream.stream)
        return stream

    return wrapper
