"""
art-exposure Configuration Management

This file handles utilities related to generating and loading variables from a configuration file.
ArtExposureConfig is loaded at import time, before any attempt at command processing is done.
Raise an ArtExposureConfigError for any issues that arise in processing or retrieving these
configuration variables.

The configuration file is "config.json" and is saved at ~/.config/art-exposure/config.json
as per modern Linux app development conventions. Set the ART_EXPOSURE_CONFIG_DIR environment
variable to point art-exposure at a different directory.
"""

import json
import os
from dataclasses import dataclass
from dataclasses import asdict
from dataclasses import fields
from pathlib import Path, PurePath

from artexposure.errors import FatalError
from artexposure.cli_utils.console import warn


class ArtExposureConfigError(FatalError):
    """Raise when an issue occurs with handling art-exposure configuration."""

    pass


class PathEncoder(json.JSONEncoder):
    """
    custom encoder adds support for serializing pathlib objects as strings
    """

    def default(self, o):
        if isinstance(o, PurePath):
            return str(o)

        else:
            return json.JSONEncoder.default(self, o)


@dataclass
class ArtExposureConfig:
    """
    Dataclass to represent configuration variables for art-exposure. Provides a namespace for
    the directories art-exposure writes to and the tunables of the selection and framing steps.

    The pattern applied is to instantiate an ArtExposureConfig by supplying variadic keyword arguments
    from a deserialized json object. That way application code references the identifiers in the
    dataclass without ever touching brittle dictionary keys. The json object is fully flat.
    """

    CONFIG_DIR: Path = Path("~/.config/art-exposure").expanduser()
    MEDIA_DIR: Path = Path("~/.art-exposure").expanduser()
    DEFAULT_QUERY: str = "Impressionism"
    MAX_TRIES: int = 20
    BORDER_WIDTH: int = 100
    REQUEST_TIMEOUT: float = 30.0
    FALLBACK_DISPLAY_HEIGHT: int = 1080
    FONT_PATH: str = ""

    def __post_init__(self):
        """
        Handle the case where a new ArtExposureConfig is created from JSON, which cannot
        deserialize a str into a Path.
        """

        self.CONFIG_DIR = Path(self.CONFIG_DIR).expanduser()
        self.MEDIA_DIR = Path(self.MEDIA_DIR).expanduser()

        if self.MAX_TRIES < 0:
            raise ArtExposureConfigError(f"MAX_TRIES must not be negative, got {self.MAX_TRIES}")

        if self.BORDER_WIDTH < 0:
            raise ArtExposureConfigError(
                f"BORDER_WIDTH must not be negative, got {self.BORDER_WIDTH}"
            )

    def generate_config_json(self) -> Path:
        """
        Write the ArtExposureConfig to file, serializing to JSON. Returns filepath of written
        config.json file located at CONFIG_DIR.

        Warning: will overwrite any existing config file.
        """

        try:
            to_json = json.dumps(asdict(self), sort_keys=True, indent=4, cls=PathEncoder)

        except TypeError as error:
            raise ArtExposureConfigError(
                f"There was an error trying to serialize config data to JSON: {error}"
            ) from error

        try:
            self.CONFIG_DIR.mkdir(parents=True, exist_ok=True)

            dest_file = self.CONFIG_DIR / "config.json"
            with open(dest_file, "w") as file:
                file.write(to_json)

        except OSError as error:
            raise ArtExposureConfigError(
                f"There was an error saving the configuration file: {error}."
            ) from error

        return dest_file


def config_dir() -> Path:
    """Directory holding config.json, taken from ART_EXPOSURE_CONFIG_DIR when set."""

    try:
        return Path(os.environ["ART_EXPOSURE_CONFIG_DIR"]).expanduser()

    except KeyError:
        return ArtExposureConfig.CONFIG_DIR


def load_config(config_src: Path = None) -> ArtExposureConfig:
    """
    Load a config.json from config_dir() and instantiate variables as an ArtExposureConfig dataclass.
    Raise ArtExposureConfigError if a config file can't be found or read at that location.
    """

    if config_src is None:
        config_src = config_dir() / "config.json"

    try:
        with config_src.open("r") as file:
            from_json = json.loads(file.read())

    except json.JSONDecodeError as error:
        raise ArtExposureConfigError(f"There was an issue reading the config: {error}") from error

    except OSError as error:
        raise ArtExposureConfigError(f"There was an issue opening the config: {error}") from error

    if not isinstance(from_json, dict):
        raise ArtExposureConfigError(f"{config_src} must hold a JSON object of settings.")

    known = {field.name for field in fields(ArtExposureConfig)}
    unknown = set(from_json) - known
    if unknown:
        raise ArtExposureConfigError(
            f"Unknown setting(s) in {config_src}: {', '.join(sorted(unknown))}"
        )

    try:
        return ArtExposureConfig(**from_json)

    except TypeError as error:
        raise ArtExposureConfigError(f"Invalid setting type in {config_src}: {error}") from error


def init() -> ArtExposureConfig:
    """
    initialize art-exposure, creating a default config file on first run. An existing config
    file that cannot be parsed is an error rather than something to overwrite.
    """

    if (config_dir() / "config.json").exists():
        return load_config()

    settings = ArtExposureConfig(CONFIG_DIR=config_dir())

    try:
        settings.generate_config_json()

    except ArtExposureConfigError as error:
        # defaults stay usable even when the config directory is read-only
        warn(f"Using default settings. {error}")

    return settings


config = init()
