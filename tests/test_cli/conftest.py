"""
conftest.py

Test configuration for CLI and entrypoint tests.

Defines pytest fixtures specifically related to CLI and click operations, plus patches for the
collection API so that no test reaches the network.
"""

import unittest.mock

import pytest
import click

from artexposure.cli import cli
from artexposure.models import Artwork
from artexposure.cli_utils.console import set_verbosity
from artexposure.cli_utils.utils import import_commands
from artexposure.cli_utils.utils import attach_commands
from artexposure.cli_utils.decorators import generator
from artexposure.cli_utils.decorators import callback


@pytest.fixture(scope="session")
def subcommands():
    """
    Import and attach all of the commands found in the /subcommands folder *without*
    invoking the entrypoint (cli).
    """

    cmds = import_commands()

    @click.command(name="_test")
    @callback
    @generator
    def test_command(artwork: Artwork):

        print(f"TEST COMMAND - {artwork.record.title} is {artwork.image.width}x{artwork.image.height}")
        return artwork

    cmds.append(test_command)

    return cmds


@pytest.fixture(autouse=True)
def setup(subcommands, reset_commands, entry_point: click.Group = cli):
    attach_commands(entry_point, subcommands)
    yield
    reset_commands(entry_point=entry_point)
    set_verbosity("verbose")


@pytest.fixture
def reset_commands():
    def inner(entry_point: click.Group = cli):
        # teardown the commands that may have been added to clean the test environment.
        entry_point.commands = {}

    return inner


@pytest.fixture
def met_api(record, jpeg_bytes):
    """
    Patch the collection search, object lookup and image download. Every search finds the same
    three candidates and every lookup returns record, so a pipeline always resolves on its first
    attempt. Tests reconfigure the mocks for failure cases.
    """

    with unittest.mock.patch(
        "artexposure.met_handler.search", autospec=True
    ) as mock_search, unittest.mock.patch(
        "artexposure.met_handler.get_object", autospec=True
    ) as mock_get_object, unittest.mock.patch(
        "artexposure.image_handler.download_image_bytes", autospec=True
    ) as mock_download:

        mock_search.return_value = (436532, 437984, 11417)
        mock_get_object.return_value = record
        mock_download.return_value = jpeg_bytes

        yield unittest.mock.Mock(
            search=mock_search, get_object=mock_get_object, download=mock_download
        )
