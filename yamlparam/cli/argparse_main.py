##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
Main CLI parser setup for the yamlparam command-line interface.

This module defines the primary argument parser for the `yamlparam` CLI tool,
including custom error handling and integration of all available subcommands.
"""

import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter

from yamlparam import VERSION
from yamlparam.cli.commands import ALL_COMMANDS


DESCRIPTION = "Validate YAML job parameters and submit their values."


class HelpParser(ArgumentParser):
    """
    This class overrides the error message of the argument parser to
    print the help message when an error happens.

    Methods:
        error: Override the error message of the `ArgumentParser` class.
    """

    def error(self, message: str):
        """
        Override the error message of the `ArgumentParser` class.

        Args:
            message: The error message to log.
        """
        sys.stderr.write(f"error: {message}\n")
        self.print_help()
        sys.exit(2)


def build_main_parser() -> ArgumentParser:
    """
    Set up the command-line argument parser for the yamlparam package.

    Returns:
        An `ArgumentParser` object with every command registered.
    """
    parser = HelpParser(
        prog="yamlparam",
        description=DESCRIPTION,
        formatter_class=RawDescriptionHelpFormatter,
        epilog="See yamlparam <command> --help for more info",
    )
    parser.add_argument("-v", "--version", action="version", version=VERSION)
    parser.add_argument(
        "-lvl",
        "--level",
        type=str,
        default=None,
        help="Set log level: DEBUG, INFO, WARNING, ERROR [Default: the app.yaml setting, else INFO]",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to an app.yaml file, or a directory containing one.",
    )
    subparsers = parser.add_subparsers(dest="subparsers", required=True)

    for command in ALL_COMMANDS:
        command.add_parser(subparsers)

    return parser
