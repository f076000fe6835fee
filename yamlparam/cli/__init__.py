##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
The `cli` package builds the yamlparam command-line interface.

Modules:
    argparse_main: Builds the top-level argument parser.
    commands: The individual CLI commands.
"""
