"""
art-exposure border

Frame the image with a transparent border. The bottom edge can be made deeper than the other three
to leave room for the 'caption' command.
"""

import click

from artexposure import image_handler
from artexposure.config import config
from artexposure.models import Artwork
from artexposure.cli_utils.console import describe
from artexposure.cli_utils.decorators import callback
from artexposure.cli_utils.decorators import generator


@click.command(name="border")
@click.option(
    "--width",
    type=click.IntRange(min=0),
    default=config.BORDER_WIDTH,
    show_default=True,
    help="Border width in pixels.",
)
@click.option(
    "--bottom",
    type=click.IntRange(min=0),
    default=1,
    show_default=True,
    help="Depth of the bottom border as a multiple of --width. Use 3 with 'caption'.",
)
@callback
@generator
def cli(artwork: Artwork, width, bottom):
    """
    Add a transparent border around the image.
    """

    describe(f":framed_picture-emoji:  'border' adding a {width}px border")
    artwork.image = image_handler.add_border(
        artwork.image, border_width=width, bottom_multiplier=bottom
    )

    return artwork
