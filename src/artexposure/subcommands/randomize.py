"""
art-exposure random

This module defines the 'random' subcommand, which searches the Met collection and adds a random
artwork that has an image to the stream.
"""

import click

from artexposure.config import config
from artexposure.selector import SystemRandomSource
from artexposure.cli_utils.utils import fetch_random_artwork
from artexposure.cli_utils.decorators import callback
from artexposure.cli_utils.decorators import stream


@click.command(name="random")
@click.option(
    "--query",
    "-q",
    default=config.DEFAULT_QUERY,
    show_default=True,
    help="Search term used to find candidate artworks, e.g. random -q 'Hokusai'",
)
@click.option(
    "--max-tries",
    type=click.IntRange(min=0),
    default=config.MAX_TRIES,
    show_default=True,
    help="Number of random objects to look up before giving up on finding one with an image.",
)
@click.option(
    "--count",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of random artworks to get.",
)
@click.option(
    "--seed",
    type=int,
    help="Seed the random picks to make a run repeatable.",
)
@click.option(
    "--with-images/--any-images",
    "has_images",
    default=False,
    show_default=True,
    help="Ask the collection to only return objects that have images.",
)
@callback
@stream
def cli(query, max_tries, count, seed, has_images):
    """
    Get a random artwork from the Met collection.
    """

    """
    'random' is a generator that yields the user's desired number of artworks. When the 'stream'
    decorator is applied, this generator is appended to the end of the existing input stream. Each
    artwork gets a fresh search so that a repeating pipeline picks up new results.
    """

    rng = SystemRandomSource(seed)

    for _ in range(count):
        yield fetch_random_artwork(
            query, max_tries=max_tries, has_images=has_images, rng=rng
        )
