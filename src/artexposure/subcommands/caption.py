"""
art-exposure caption

Write the artwork's title and artist into the bottom margin of the image. The text is placed a
fixed distance from the bottom edge, so run 'border --bottom 3' first to make room for it.
"""

from pathlib import Path

import click

from artexposure import image_handler
from artexposure.config import config
from artexposure.models import Artwork
from artexposure.cli_utils.console import describe
from artexposure.cli_utils.decorators import callback
from artexposure.cli_utils.decorators import generator


@click.command(name="caption")
@click.option(
    "--font",
    "font_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=config.FONT_PATH or None,
    required=not config.FONT_PATH,
    help="TrueType/OpenType font used for the caption. Defaults to FONT_PATH in the config file.",
)
@callback
@generator
def cli(artwork: Artwork, font_path: Path):
    """
    Add the title and artist below the picture.
    """

    describe(f":memo-emoji: 'caption' adding '{artwork.record.title}' by {artwork.record.artist}")
    image_handler.overlay_text(
        artwork.image,
        title=artwork.record.title,
        artist=artwork.record.artist,
        font_path=font_path,
    )

    return artwork
