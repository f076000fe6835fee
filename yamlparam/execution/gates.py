##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
Running an execution step behind the execution gates of its parameter values.

Every value is asked for a gate right before the step runs. Gates are set up
in order and the first failing gate aborts the step, which is then never
called.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

from yamlparam.parameters.base import ParameterValue


LOG = logging.getLogger(__name__)


def collect_execution_gates(values: Iterable[Optional[ParameterValue]]) -> List[Any]:
    """
    Ask each value for its execution gate.

    Args:
        values: The parameter values a step will use. None entries are skipped.

    Returns:
        The gates that were installed, in the order of `values`.
    """
    gates = []
    for value in values:
        if value is None:
            continue
        gate = value.create_execution_gate()
        if gate is not None:
            gates.append(gate)
    return gates


def build_step_environment(values: Iterable[Optional[ParameterValue]]) -> Dict[str, str]:
    """
    Merge the environment variables contributed by each value.

    Args:
        values: The parameter values a step will use. None entries are skipped.

    Returns:
        The merged environment. Later values win on name clashes.
    """
    env: Dict[str, str] = {}
    for value in values:
        if value is not None:
            env.update(value.build_environment())
    return env


def run_with_parameters(
    values: Iterable[Optional[ParameterValue]], step: Callable[[Dict[str, str]], Any], context: Any = None
) -> Any:
    """
    Set up the execution gates of `values` and then run `step`.

    Args:
        values: The parameter values the step will use.
        step: The step to run. It receives the environment built from `values`.
        context: The host's execution context, handed to each gate.

    Returns:
        Whatever `step` returns.

    Raises:
        ExecutionGateFailure: If a value is invalid. `step` is not called.
    """
    values = list(values)
    for gate in collect_execution_gates(values):
        gate.set_up(context)

    LOG.debug(f"All execution gates passed for {len(values)} parameter value(s).")
    return step(build_step_environment(values))
