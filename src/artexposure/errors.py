"""
art-exposure Errors

Base exception types shared across art-exposure. Each handler module defines its own
concrete exceptions (e.g. image_handler.ImageDownloadError) on top of these bases so that
callers can tell a recoverable failure from one that should end the run just by the type.

    ArtExposureError
    ├── RetryableError        recovered locally, e.g. a single object lookup inside the selector
    ├── FatalError            ends the run with a failure message and exit code 1
    └── WallpaperUpdateError  reported to the user, never unwinds an image that is already saved
"""


class ArtExposureError(Exception):
    """Base class for all art-exposure errors."""

    pass


class RetryableError(ArtExposureError):
    """Raised for failures that the caller is expected to retry."""

    pass


class FatalError(ArtExposureError):
    """Raised for failures that terminate the pipeline."""

    pass


class WallpaperUpdateError(ArtExposureError):
    """
    Raised when an attempt to update the desktop background fails.
    """

    pass


class UnsupportedPlatformError(WallpaperUpdateError):
    """Raised when no wallpaper setter exists for the running platform."""

    def __init__(self, platform: str):
        self.platform = platform
        super().__init__(f"{platform} is an unsupported platform for setting wallpapers.")
