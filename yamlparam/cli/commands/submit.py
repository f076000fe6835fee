##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
yamlparam CLI `submit` command module.

This module defines the `SubmitCommand` class. It reads a job file, builds a
value for each of the job's parameters through the command-line submission
path, runs the execution gates of those values and reports the result.
"""

import logging
from argparse import ArgumentParser, ArgumentTypeError, Namespace, RawTextHelpFormatter
from typing import Dict, List

import yaml
from tabulate import tabulate

from yamlparam.cli.commands.command_entry_point import CommandEntryPoint
from yamlparam.config import Config
from yamlparam.exceptions import InvocationAbortedError
from yamlparam.execution import run_with_parameters
from yamlparam.job import load_job_parameters
from yamlparam.parameters import ParameterSource, ParameterValue, SubmissionKind
from yamlparam.utils import parse_key_value_pairs


LOG = logging.getLogger("yamlparam")


def _serialize(value: ParameterValue) -> Dict:
    """Return the plain-scalar form of a resolved value."""
    if hasattr(value, "to_dict"):
        return value.to_dict()
    return {"name": value.name, "value": getattr(value, "value", None)}


def resolve_cli_values(definitions: List[ParameterSource], submitted: Dict[str, List[str]]) -> List[ParameterValue]:
    """
    Build one value per definition from command-line arguments.

    Args:
        definitions: The job's parameter definitions.
        submitted: The raw `NAME=VALUE` arguments grouped by name.

    Returns:
        The values, in the order of `definitions`.

    Raises:
        InvocationAbortedError: If an argument names an unknown parameter, a
            parameter is given more than once, or a value is invalid.
    """
    known = {definition.name for definition in definitions}
    unknown = sorted(set(submitted) - known)
    if unknown:
        raise InvocationAbortedError(f"Unknown parameter(s): {', '.join(unknown)}")

    values = []
    for definition in definitions:
        raw = submitted.get(definition.name, [])
        if len(raw) > 1:
            raise InvocationAbortedError(f"Parameter [{definition.name}] was given {len(raw)} times.")
        values.append(definition.create_value(SubmissionKind.CLI, raw[0] if raw else None))
    return values


class SubmitCommand(CommandEntryPoint):
    """
    Handles `submit` CLI command for resolving a job's parameter values.

    Methods:
        add_parser: Adds the `submit` command to the CLI parser.
        process_command: Processes the CLI input and prints the resolved values.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `submit` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `submit` command parser will be added.
        """
        submit: ArgumentParser = subparsers.add_parser(
            "submit",
            help="Resolve and validate the parameter values for a job.",
            formatter_class=RawTextHelpFormatter,
        )
        submit.set_defaults(func=self.process_command)
        submit.add_argument("job_file", action="store", type=str, help="Path to the job file defining the parameters.")
        submit.add_argument(
            "-p",
            "--parameter",
            dest="parameters",
            action="append",
            default=[],
            metavar="NAME=VALUE",
            help="A parameter value. Parameters that aren't given use their default value.",
        )
        submit.add_argument(
            "-o",
            "--output",
            action="store",
            type=str,
            default=None,
            help="Write the resolved values to this YAML file.",
        )

    def process_command(self, args: Namespace):
        """
        CLI command to resolve a job's parameter values.

        Args:
            args: Parsed command-line arguments, which may include:\n
                - `job_file`: The job file to read.
                - `parameters`: `NAME=VALUE` strings.
                - `output`: Optional file to write the resolved values to.
                - `app_config`: The loaded `Config`.

        Raises:
            InvocationAbortedError: If a value is rejected on submission.
            ExecutionGateFailure: If a resolved value fails its execution gate.
        """
        try:
            submitted = parse_key_value_pairs(args.parameters)
        except ValueError as exc:
            raise ArgumentTypeError(str(exc)) from exc

        definitions = load_job_parameters(args.job_file)
        values = resolve_cli_values(definitions, submitted)

        # Defaults are handed out unchecked, so the gates run here as well
        run_with_parameters(values, lambda env: env)

        config = getattr(args, "app_config", None) or Config()
        rows = [[value.name, getattr(value, "value", "")] for value in values]
        print(tabulate(rows, headers=["Parameter", "Value"], tablefmt=config.display.table_format))

        if args.output:
            with open(args.output, "w") as output_file:
                yaml.safe_dump([_serialize(value) for value in values], output_file, sort_keys=False)
            LOG.info(f"Wrote {len(values)} resolved value(s) to {args.output}")
