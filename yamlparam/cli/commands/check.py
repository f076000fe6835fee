##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
yamlparam CLI `check` command module.

This module defines the `CheckCommand` class, which runs the same live
validation the configuration form uses against text given on the command
line or read from a file.
"""

import logging
import sys
from argparse import ArgumentParser, ArgumentTypeError, Namespace, RawTextHelpFormatter

from yamlparam.cli.commands.command_entry_point import CommandEntryPoint
from yamlparam.exceptions import InvalidYamlSyntaxError
from yamlparam.parameters import FormValidation, Permission, YamlParameterDescriptor


LOG = logging.getLogger("yamlparam")


class LocalFileResource:
    """
    The resource configured from a terminal: the user owns the text being
    checked, so every permission is granted.
    """

    def __init__(self, label: str):
        self.label = label

    def check_permission(self, permission: Permission) -> None:
        LOG.debug(f"Granting {permission.value} on {self.label} to the local user.")


class CheckCommand(CommandEntryPoint):
    """
    Handles `check` CLI command for validating YAML text.

    Methods:
        add_parser: Adds the `check` command to the CLI parser.
        process_command: Processes the CLI input and reports the result.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `check` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `check` command parser will be added.
        """
        check: ArgumentParser = subparsers.add_parser(
            "check",
            help="Check that a YAML blob is syntactically valid.",
            formatter_class=RawTextHelpFormatter,
        )
        check.set_defaults(func=self.process_command)
        check.add_argument(
            "text",
            action="store",
            type=str,
            nargs="?",
            default=None,
            help="The YAML text to check. Use '-' to read from stdin.",
        )
        check.add_argument(
            "-f",
            "--file",
            action="store",
            type=str,
            default=None,
            help="Read the YAML text from this file instead.",
        )
        check.add_argument(
            "-m",
            "--failed-validation-message",
            dest="failed_validation_message",
            action="store",
            type=str,
            default=None,
            help="Custom message to report when the text is invalid.",
        )

    @staticmethod
    def _read_text(args: Namespace) -> str:
        """
        Work out which text the user wants checked.

        Args:
            args: Parsed command-line arguments.

        Returns:
            The text to check.

        Raises:
            ArgumentTypeError: If both or neither of `text` and `--file` are given,
                or the file can't be read.
        """
        if args.file is not None and args.text is not None:
            raise ArgumentTypeError("Provide either TEXT or --file, not both.")
        if args.file is not None:
            try:
                with open(args.file, "r") as yaml_file:
                    return yaml_file.read()
            except OSError as exc:
                raise ArgumentTypeError(f"Could not read '{args.file}': {exc}") from exc
        if args.text == "-":
            return sys.stdin.read()
        if args.text is None:
            raise ArgumentTypeError("Nothing to check: provide TEXT or --file.")
        return args.text

    def process_command(self, args: Namespace):
        """
        CLI command to validate YAML text.

        Prints `OK` when the text is valid.

        Args:
            args: Parsed command-line arguments, which may include:\n
                - `text`: The YAML text, or '-' for stdin.
                - `file`: A file to read the YAML text from.
                - `failed_validation_message`: Custom message to report on failure.

        Raises:
            InvalidYamlSyntaxError: If the text is not valid YAML.
        """
        text = self._read_text(args)
        resource = LocalFileResource(args.file or "command-line text")
        validation = YamlParameterDescriptor().do_validate(text, args.failed_validation_message, resource)
        if validation.kind == FormValidation.Kind.ERROR:
            raise InvalidYamlSyntaxError(validation.message)
        print("OK")
