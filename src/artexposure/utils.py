"""
art-exposure utilities

Helpers for turning free text metadata into safe file names.
"""

import string

from artexposure.models import ArtworkRecord

SAFE_CHARACTERS = frozenset(string.ascii_letters + string.digits + "-_.")


def sanitize(text: str) -> str:
    """
    Map every character that is not an ASCII letter, digit, hyphen, underscore or period to an
    underscore. One underscore per replaced character, so the result has the same length as text.

    >>> sanitize("Monet / Sunrise: 1872.png")
    'Monet___Sunrise__1872.png'
    """

    return "".join(c if c in SAFE_CHARACTERS else "_" for c in text)


def artwork_filename(record: ArtworkRecord, suffix: str = ".png") -> str:
    """File name for a saved artwork, e.g. 'Claude_Monet_-_Water_Lilies.png'."""

    return sanitize(f"{record.artist} - {record.title}{suffix}")
