"""
art-exposure save

Save each artwork in the stream as a PNG named after the artist and title. Images saved earlier
in the same run are never cleaned up, so 'random --count 3 save' leaves three files.
"""

from pathlib import Path

import click

from artexposure.models import ArtStream
from artexposure.cli_utils.utils import save_artwork


@click.command(name="save")
@click.option(
    "--dest",
    "dest_dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory to save the image in. Defaults to MEDIA_DIR from the config file.",
)
@click.option(
    "--clean/--keep",
    default=None,
    help=(
        "Remove images from earlier runs in the destination directory after saving. "
        "Only the media directory is cleaned unless --clean is given."
    ),
)
def cli(dest_dir: Path, clean: bool):
    """
    Save the image as a PNG named after the artist and title.
    """

    # custom callback: the paths written this cycle are shared by every artwork in the stream
    def wrapper(stream: ArtStream):
        written = []

        def _save(artwork):
            artwork = save_artwork(artwork, dest_dir=dest_dir, clean=clean, keep=written)
            written.append(artwork.path)
            return artwork

        stream.stream = (_save(artwork) for artwork in stream.stream)
        return stream

    return wrapper
