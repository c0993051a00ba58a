"""
art-exposure show

This module defines the 'show' subcommand which displays saved images in the stream by
launching the default image viewer defined by the OS.
"""

import click

from artexposure.models import Artwork
from artexposure.cli_utils.decorators import callback
from artexposure.cli_utils.decorators import generator


@click.command(name="show")
@callback
@generator
def cli(artwork: Artwork):
    """Show the current image using default image viewer."""

    if artwork.path is None:
        raise click.UsageError(
            "'show' needs a saved image. Did you run 'save' or 'desktop' before it?"
        )

    click.launch(str(artwork.path))
    return artwork
