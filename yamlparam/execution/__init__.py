##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
The `execution` package sets up parameter execution gates before a step runs.

Modules:
    gates: Collects the gates of a set of parameter values and runs a step behind them.
"""

from yamlparam.execution.gates import build_step_environment, collect_execution_gates, run_with_parameters


__all__ = ["build_step_environment", "collect_execution_gates", "run_with_parameters"]
