"""
art-exposure Decorators

Use these decorators for converting simple functions that acquire or transform artworks into
properly formed art-exposure subcommands. A candidate function accepts an Artwork (and possibly
other arguments) and returns an Artwork. The body of the function performs whatever image
processing you want without worrying about any other pipeline logic.

All functions that operate on an input artwork should use @generator to allow the function to
operate on a stream of inputs. A function that sources new artworks (for example, by calling the
collection API) should instead yield them and use @stream, which appends its output to the
existing stream. Finally, all functions use @callback so that invoking the click command returns
the function for later invocation by the pipeline processor.

Here's how this looks for a command that flips images upside down:

    @click.command(name="flip")
    @callback
    @generator
    @catch_errors
    def cli(artwork):
        '''Flip the image'''

        artwork.image = artwork.image.rotate(180)
        return artwork

    $ art-exposure random flip desktop
"""

from sys import exit
from itertools import chain
from functools import wraps
from functools import partial

from artexposure.models import ArtStream
from artexposure.cli_utils.console import fail
from artexposure.cli_utils.console import logger


def stream(func):
    """
    Take a function that generates output(s) and extend an existing stream to include these new
    outputs. This allows functions that don't operate on received input to instead provide new
    inputs to a pipeline.
    """

    @wraps(func)
    def wrapper(stream: ArtStream, *args, **kwargs):
        @wraps(func)
        def inner():
            return (artwork for artwork in func(*args, **kwargs))

        stream.stream = (artwork for artwork in chain(stream.stream, inner()))
        return stream

    return wrapper


def generator(func):
    """
    Take a function that accepts and returns a single artwork and convert it into a function
    that accepts an input stream and yields the return value of the original function.
    """

    @wraps(func)
    def wrapper(stream: ArtStream, *args, **kwargs):

        stream.stream = (func(artwork, *args, **kwargs) for artwork in stream.stream)
        return stream

    return wrapper


def callback(func):
    """
    Receive a function and convert it into a new function that returns the original function as a
    callback function.

    The CLI is built on a callback architecture. Subcommands are invoked on the command line, each of
    which returns a callback immediately upon invocation. Once all subcommands have been invoked, the
    pipeline processor iterates over the callbacks and executes them in order. Options given on the
    command line are bound to the callback with functools.partial.
    """

    @wraps(func)
    def _callback(*args, **kwargs):
        @wraps(func)
        def wrapper(*fargs, **fkwargs):
            new_func = partial(func, *args, **kwargs)
            return new_func(*fargs, **fkwargs)

        return wrapper

    return _callback


def catch_errors(func):
    """
    Catch and format errors with the "fail" console template and gracefully
    exit the application with an error code. The traceback is kept for --debug.
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as error:
            logger.debug("pipeline failed", exc_info=True)
            fail(str(error))
            exit(1)

    return wrapper
