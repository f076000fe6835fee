##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
The `parameters` package holds the job parameter types.

Modules:
    base: Contracts shared by all parameter types (`ParameterSource`, `ParameterValue`, ...).
    value: `YamlParameterValue` and its `ExecutionGate`.
    definition: `YamlParameterDefinition` and `YamlParameterDescriptor`.
    registry: `ParameterTypeFactory`, mapping type symbols to definition classes.
"""

from yamlparam.parameters.base import (
    ConfigurableResource,
    FormValidation,
    ParameterSource,
    ParameterValue,
    Permission,
    StringParameterValue,
    SubmissionKind,
)
from yamlparam.parameters.definition import YamlParameterDefinition, YamlParameterDescriptor
from yamlparam.parameters.value import ExecutionGate, YamlParameterValue


__all__ = [
    "ConfigurableResource",
    "ExecutionGate",
    "FormValidation",
    "ParameterSource",
    "ParameterValue",
    "Permission",
    "StringParameterValue",
    "SubmissionKind",
    "YamlParameterDefinition",
    "YamlParameterDescriptor",
    "YamlParameterValue",
]
