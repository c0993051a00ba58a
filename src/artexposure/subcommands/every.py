"""
art-exposure every

This module defines the "every" command, which schedules the given sequence of subcommands on a
repeating interval. The common use is a fresh wallpaper on a regular period, e.g. every hour:

    $ art-exposure random resize border desktop every 3600
"""

from time import sleep

import click

from artexposure.models import ArtStream
from artexposure.cli_utils.console import describe


@click.command(name="every")
@click.argument("interval", type=click.IntRange(min=1))
def cli(interval):
    """Repeat the pipeline every INTERVAL seconds."""

    # custom callback that passes through each artwork after an interval delay
    def wrapper(stream: ArtStream):
        def _repeat(artwork):
            describe(f"Waiting {interval}s for the next artwork...")
            sleep(interval)
            return artwork

        stream.repeat = True
        stream.stream = (_repeat(artwork) for artwork in stream.stream)
        return stream

    return wrapper
