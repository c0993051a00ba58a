"""
art-exposure

Put a random work of art from the Metropolitan Museum of Art collection on your desktop.

This module defines the entry point to the art-exposure CLI. It defines a 'cli' command group
that collects the global options, and a pipeline processor that runs the subcommands' callbacks in
the order they were given on the command line.

Each callback accepts an ArtStream and wraps its stream in a new generator that, when later
accessed, yields artworks after they have been processed by the subcommand. After all callbacks
have run we are left with a generator-in-generator stream that is iterated to trigger the work.
"""

import click

from artexposure.models import ArtStream
from artexposure.cli_utils.console import set_verbosity
from artexposure.cli_utils.decorators import catch_errors


@click.group(chain=True, invoke_without_command=True)
@click.pass_context
@click.option(
    "--verbose",
    "verbosity",
    flag_value="verbose",
    default=True,
    help="Print all output to stdout or the terminal.",
)
@click.option(
    "--quiet",
    "verbosity",
    flag_value="quiet",
    help="Silence all output printed to stdout or the terminal.",
)
@click.option(
    "--debug",
    "verbosity",
    flag_value="debug",
    help="Also print debug logging, including tracebacks for failures.",
)
@click.version_option(package_name="art-exposure")
def cli(ctx: click.Context, verbosity):
    """
    art-exposure

    set your desktop wallpaper to a random artwork from the Met collection.


    ====================
    Quickstart
    ====================

    Frame a random Impressionist painting and make it your wallpaper:

        $ art-exposure random resize border desktop


    ====================
    Usage:
    ====================

    Commands chain together from left to right:

    1) source an artwork with 'random' (e.g. random --query "Hokusai")

    2) transform it with 'resize', 'border' and 'caption'

    3) write it out with 'save', apply it with 'desktop' or look at it with 'show'

    Add the title and artist under the picture. The caption sits in the bottom margin, so give
    the border a deeper bottom:

        $ art-exposure random -q "Van Gogh" resize border --bottom 3 caption --font ~/fonts/Lora.ttf desktop

    Keep the same query but get a new painting every hour:

        $ art-exposure random resize border desktop every 3600


    ====================
    Help
    ====================

    For detailed help text add --help to the specified command, e.g.

        $ art-exposure random --help
    """

    # no subcommands: show the help text and exit cleanly
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit()

    set_verbosity(verbosity)

    ctx.obj = ArtStream()
    return ctx.obj


@cli.result_callback()
@click.pass_obj
@catch_errors
def process_pipeline(obj: ArtStream, callbacks, *args, **kwargs):
    """
    The result_callback decorator supplies this function with the return values of all the invoked
    subcommands. Every subcommand returns a callback that acts on the stream, either by yielding a
    modification of each artwork or by chaining new artworks onto it. Nothing happens until the
    final stream is iterated.

    Processing follows this general flow:
    1) get an artwork -> 2) transform the image -> 3) save it / set the desktop background
    """

    def process_stream(stream: ArtStream):

        stream.stream = ()

        for callback in callbacks:
            stream = callback(stream)

        return sum(1 for _ in stream.stream)

    # do at least once, then bail out if no cycle or nothing came through the stream
    processed = process_stream(obj)

    while obj.repeat and processed:
        processed = process_stream(obj)
