##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
Main entry point into yamlparam's codebase.
"""

import logging
import sys
import traceback

from yamlparam.cli.argparse_main import build_main_parser
from yamlparam.config.configfile import get_config
from yamlparam.log_formatter import setup_logging


LOG = logging.getLogger("yamlparam")


def main():
    """
    Entry point for the yamlparam command-line interface (CLI) operations.

    This function sets up the argument parser, loads the application
    configuration, initializes logging, and executes the function attached to
    the chosen command. Any exception raised by the command aborts the
    invocation with exit status 1.
    """
    parser = build_main_parser()
    if len(sys.argv) == 1:
        parser.print_help(sys.stdout)
        return 1
    args = parser.parse_args()

    try:
        args.app_config = get_config(args.config)
    except ValueError as excpt:
        sys.stderr.write(f"error: {excpt}\n")
        sys.exit(1)

    log_level = (args.level or args.app_config.logging.level).upper()
    setup_logging(logger=LOG, log_level=log_level, colors=bool(args.app_config.logging.colors))

    try:
        args.func(args)
        # pylint complains that this exception is too broad - being at the literal top of the program stack, it's ok.
    except Exception as excpt:  # pylint: disable=broad-except
        LOG.debug(traceback.format_exc())
        LOG.error(str(excpt))
        sys.exit(1)

    sys.exit()


if __name__ == "__main__":
    main()
