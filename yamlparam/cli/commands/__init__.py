##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
yamlparam CLI Commands Package.

Modules:
    command_entry_point: Defines the abstract base class `CommandEntryPoint` for all CLI commands.
    check: Implements the `check` command for validating a YAML blob.
    submit: Implements the `submit` command for resolving a job's parameter values.
"""

from yamlparam.cli.commands.check import CheckCommand
from yamlparam.cli.commands.submit import SubmitCommand


# Keep these in alphabetical order
ALL_COMMANDS = [
    CheckCommand(),
    SubmitCommand(),
]
