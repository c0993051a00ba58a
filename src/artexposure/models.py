"""
art-exposure data types

ArtworkRecord is what the collection API tells us about one object. Artwork pairs a record
with the decoded image that subcommands transform, and ArtStream wraps the lazy stream of
artworks passed from one subcommand to the next. The 'every' command uses 'repeat' to signal
to the callback processor that the callback sequence should be run again.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from collections.abc import Iterable

from PIL import Image


@dataclass(frozen=True)
class ArtworkRecord:
    """Metadata resolved from a single collection object id."""

    object_id: int
    title: str
    artist: str
    image_url: str = ""

    @property
    def is_usable(self) -> bool:
        """A record without a primary image url can't become a wallpaper."""

        return bool(self.image_url)


@dataclass
class Artwork:
    """An artwork moving through the pipeline. path is set once the image is saved."""

    record: ArtworkRecord
    image: Image.Image
    path: Optional[Path] = None


@dataclass
class ArtStream:
    """
    Used to store application data for the purpose of passing around subcommands.
    """

    stream: Iterable = ()  # empty iterator
    repeat: bool = False
