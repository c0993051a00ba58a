"""
art-exposure CLI Utilities

This module contains utilities shared across Click subcommands: sourcing a random artwork from the
collection for the pipeline, saving finished artworks, and importing subcommands from directories.
"""

import sys
import inspect
import importlib.util
from pathlib import Path
from collections.abc import Iterable

import click

import artexposure

from artexposure import image_handler
from artexposure import met_handler
from artexposure import selector
from artexposure.config import config
from artexposure.models import Artwork
from artexposure.utils import artwork_filename
from artexposure.cli_utils.console import describe
from artexposure.cli_utils.console import confirm_success
from artexposure.cli_utils.console import warn


def fetch_random_artwork(
    query: str,
    max_tries: int = None,
    has_images: bool = False,
    rng: selector.RandomSource = None,
) -> Artwork:
    """
    Search the collection for query, resolve a random object with an image and download it.

    A failed search ends the run before any object lookup is made. Lookups that fail inside the
    selector are retried; everything after a record is chosen (download, decode) is fatal.
    """

    if max_tries is None:
        max_tries = config.MAX_TRIES

    describe(f":mag-emoji: 'random' searching the collection for '{query}' ...")
    candidates = met_handler.search(query, has_images=has_images)
    describe(f"found {len(candidates)} candidate(s)")

    record = selector.resolve(
        candidates, lookup=met_handler.get_object, max_tries=max_tries, rng=rng
    )

    describe(f"Artist: {record.artist}")
    describe(f"Title: {record.title}")
    describe(f"URL: {record.image_url}")

    describe(f":earth_asia-emoji: 'random' downloading image ...", end=" ")
    data = image_handler.download_image_bytes(record.image_url)
    image = image_handler.decode_image(data)
    confirm_success(f":white_check_mark-emoji: {image.width}x{image.height}")

    return Artwork(record=record, image=image)


def is_media_dir(directory) -> bool:
    """True when directory is the media directory art-exposure owns."""

    return Path(directory).expanduser().resolve() == Path(config.MEDIA_DIR).expanduser().resolve()


def save_artwork(
    artwork: Artwork, dest_dir: Path = None, clean: bool = None, keep: Iterable = ()
) -> Artwork:
    """
    Save the artwork's image into dest_dir (default: the media directory) as
    "<artist> - <title>.png" with unsafe characters replaced.

    With clean, images left over from earlier runs are removed once the new image is safely on
    disk, so a failed save never costs the current wallpaper. Paths in keep (images written
    earlier in the same run) are never removed. clean defaults to True only for the media
    directory; other directories belong to the user.
    """

    if dest_dir is None:
        dest_dir = config.MEDIA_DIR

    if clean is None:
        clean = is_media_dir(dest_dir)

    dest_path = Path(dest_dir).expanduser() / artwork_filename(artwork.record)

    artwork.path = image_handler.save_image(artwork.image, dest_path)
    confirm_success(
        f":floppy_disk-emoji: saved '{artwork.path.name}' to {artwork.path.parent}"
    )

    if clean:
        try:
            removed = image_handler.clear_images(
                dest_path.parent, keep=[*keep, artwork.path]
            )
        except image_handler.PersistenceError as error:
            warn(str(error))
        else:
            if removed:
                describe(f":wastebasket-emoji: removed {len(removed)} old image(s) from {dest_path.parent}")

    return artwork


def import_commands(
    module_paths: Iterable = None,
) -> list:
    """
    Retrieve a set of click Commands from module_paths. Default directory is the built in subcommands
    directory for commands that come pre-installed with art-exposure.

    A valid command module defines a "cli" function that is wrapped as a click Command object. Set
    the 'name' keyword argument in the @click.command decorator to set the name of the command
    intended for the end user.
    """

    if module_paths is None:
        module_paths = sorted(
            Path(artexposure.__file__).parent.glob("subcommands/*.py")
        )

    commands = []

    for path in module_paths:
        name = inspect.getmodulename(path)
        if name == "__init__":
            continue

        # Recipe for loading and executing modules from given filepath comes from importlib docs:
        # https://docs.python.org/3/library/importlib.html#importing-a-source-file-directly
        module_name = f"artexposure.subcommands.{name}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        spec.loader.exec_module(module)

        try:
            commands.append(getattr(module, "cli"))

        except AttributeError:
            warn(f"Cannot add command {name}: no 'cli' function found.")

    return commands


def attach_commands(group: click.Group, commands: list):
    """
    Attach each command in a list of click Command objects to a provided group. Useful when
    retrieving a dynamic list of subcommands with import_commands().
    """

    for command in commands:
        group.add_command(command)
