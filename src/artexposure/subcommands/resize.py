import click

from artexposure import image_handler
from artexposure.display import get_display_height
from artexposure.models import Artwork
from artexposure.cli_utils.console import describe
from artexposure.cli_utils.decorators import callback
from artexposure.cli_utils.decorators import generator


@click.command(name="resize")
@click.option(
    "--height",
    type=click.IntRange(min=1),
    help="Target height in pixels. Defaults to the height of the primary display.",
)
@callback
@generator
def cli(artwork: Artwork, height):
    """
    Scale the image to a height, keeping its aspect ratio.
    """

    if height is None:
        height = get_display_height()

    describe(f":left_right_arrow-emoji: 'resize' scaling to height: {height}")
    artwork.image = image_handler.resize_to_height(artwork.image, height)

    return artwork
