"""
Wallpaper Handler

This module applies a saved image as the desktop background by dropping into the platform's
own command line tools:

    macOS  - osascript tells System Events to set the picture of every desktop. Afterwards the
             Dock's desktoppicture.db is nudged so the picture is scaled to fit the screen.
    GNOME  - gsettings writes picture-uri (and picture-uri-dark) of org.gnome.desktop.background.

Use get_wallpaper_setter() to pick the setter for the running platform. Platforms without a
setter raise UnsupportedPlatformError, a WallpaperUpdateError like every other failure here,
so callers can report it without losing the image that was already saved.
"""

import subprocess
import sys
from collections import OrderedDict
from pathlib import Path

from artexposure.errors import UnsupportedPlatformError
from artexposure.errors import WallpaperUpdateError
from artexposure.image_handler import InvalidImageError
from artexposure.image_handler import validate_image
from artexposure.cli_utils.console import log
from artexposure.cli_utils.console import warn


def resolve_wallpaper(img_path) -> Path:
    """
    Return the absolute location of img_path, raising WallpaperUpdateError when it is not an existing
    image file. The desktop tools do no validation of their own; GNOME silently shows a blank
    background for a bad path.
    """

    try:
        wallpaper_location = Path(img_path).expanduser().resolve()
    except TypeError as error:
        raise WallpaperUpdateError(
            f"Invalid parameter: {img_path} is not a valid Pathlike object."
        ) from error

    # subsequent operations will fail if path does not exist or is not a file, so catch this.
    if not wallpaper_location.exists() or not wallpaper_location.is_file():
        raise WallpaperUpdateError(
            f"Invalid path provided for image location: {img_path} does not exist."
        )

    try:
        validate_image(wallpaper_location)
    except InvalidImageError as error:
        raise WallpaperUpdateError(
            f"Invalid image type provided. {wallpaper_location.name} is not a valid image."
        ) from error

    return wallpaper_location


def run_command(command: OrderedDict, action: str) -> subprocess.CompletedProcess:
    """
    Run the command described by the values of command. subprocess.CalledProcessError is raised by run
    if a non-zero exit status is returned, and OSError if the tool is not installed at all.
    """

    log("running %s", " ".join(command.values()))

    try:
        return subprocess.run(
            list(command.values()),
            check=True,
            capture_output=True,
            text=True,
        )

    except (subprocess.CalledProcessError, OSError) as error:
        raise WallpaperUpdateError(f"Could not {action}: {error}") from error


def applescript_quote(path) -> str:
    """Escape path for use inside a double quoted AppleScript string."""

    return str(path).replace("\\", "\\\\").replace('"', '\\"')


class WallpaperSetter:
    """Apply an image file as the desktop background."""

    platform = None

    def set_wallpaper(self, img_path) -> Path:
        """
        Validate img_path and hand it to the platform. Returns the absolute path that was applied.
        """

        wallpaper_location = resolve_wallpaper(img_path)
        self.apply(wallpaper_location)
        return wallpaper_location

    def apply(self, wallpaper_location: Path) -> None:
        raise NotImplementedError


class MacWallpaperSetter(WallpaperSetter):
    platform = "darwin"

    def __init__(self, home_dir: Path = None):
        self.home_dir = Path.home() if home_dir is None else Path(home_dir)

    def apply(self, wallpaper_location: Path) -> None:
        script = (
            'tell application "System Events" to tell every desktop '
            f'to set picture to "{applescript_quote(wallpaper_location)}"'
        )

        set_desktop_picture = OrderedDict(
            [("cmd", "osascript"), ("flag", "-e"), ("script", script)]
        )
        run_command(set_desktop_picture, action="set desktop background")

        # "fit to screen" lives in the Dock database; the picture is already set if this fails
        db_path = self.home_dir / "Library/Application Support/Dock/desktoppicture.db"
        fit_to_screen = OrderedDict(
            [
                ("cmd", "sqlite3"),
                ("db", str(db_path)),
                ("sql", "INSERT INTO data (value) VALUES (1);"),
            ]
        )

        try:
            run_command(fit_to_screen, action="set 'Fit to Screen' option")
        except WallpaperUpdateError as error:
            warn(str(error))


class GnomeWallpaperSetter(WallpaperSetter):
    platform = "linux"

    def apply(self, wallpaper_location: Path) -> None:
        run_command(
            self.gsettings("picture-uri", wallpaper_location),
            action="set desktop background",
        )

        # picture-uri-dark only exists from GNOME 42 on
        try:
            run_command(
                self.gsettings("picture-uri-dark", wallpaper_location),
                action="set dark mode desktop background",
            )
        except WallpaperUpdateError as error:
            log("%s", error)

    @staticmethod
    def gsettings(key: str, wallpaper_location: Path) -> OrderedDict:
        return OrderedDict(
            [
                ("cmd", "gsettings"),
                ("subcmd", "set"),
                ("schema", "org.gnome.desktop.background"),
                ("key", key),
                ("value", wallpaper_location.as_uri()),
            ]
        )


SETTERS = {
    MacWallpaperSetter.platform: MacWallpaperSetter,
    GnomeWallpaperSetter.platform: GnomeWallpaperSetter,
}


def get_wallpaper_setter(platform: str = sys.platform) -> WallpaperSetter:
    """
    Return the setter for platform (a sys.platform value). Raise UnsupportedPlatformError otherwise.
    """

    key = "linux" if platform.startswith("linux") else platform

    try:
        return SETTERS[key]()

    except KeyError:
        raise UnsupportedPlatformError(platform) from None


def update_wallpaper(img_path, platform: str = sys.platform) -> Path:
    """
    Update the background image to the one at img_path. Raise WallpaperUpdateError if issues are
    encountered during the attempt to update the background.
    """

    return get_wallpaper_setter(platform).set_wallpaper(img_path)
