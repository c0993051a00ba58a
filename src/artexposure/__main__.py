"""
__main__.py

This file adds support for running art-exposure as a python module (python -m artexposure) and is
also the target of the "art-exposure" console script.
"""


from artexposure.cli import cli
from artexposure.cli_utils.utils import import_commands
from artexposure.cli_utils.utils import attach_commands


def main():

    commands = import_commands()
    attach_commands(cli, commands)
    cli()


if __name__ == "__main__":
    main()
