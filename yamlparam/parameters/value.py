##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
This module contains `YamlParameterValue`, the value produced by a
`YamlParameterDefinition`, and the `ExecutionGate` that stops an execution
step from using a value that isn't valid YAML.

Validity is never stored on the value. Every call to
`create_execution_gate` parses the stored text again, so a value restored
from persisted state or forged by a client is still caught before it runs.
"""

import logging
from typing import Any, Dict, Optional

from yamlparam.exceptions import ExecutionGateFailure
from yamlparam.parameters.base import StringParameterValue
from yamlparam.validation import check_yaml


LOG = logging.getLogger(__name__)


class ExecutionGate:
    """
    A deferred failure installed in front of an execution step.

    The host calls `set_up` right before the step runs; the gate then
    aborts the step.

    Attributes:
        name: The name of the offending parameter.
        value: The offending value.
    """

    def __init__(self, name: str, value: Optional[str]):
        self.name = name
        self.value = value

    @property
    def message(self) -> str:
        return f"Invalid value for parameter [{self.name}] specified: {self.value}"

    def set_up(self, context: Any = None):
        """
        Abort the execution step that is about to use the offending value.

        Args:
            context: The host's execution context. Unused.

        Raises:
            ExecutionGateFailure: Always.
        """
        LOG.error(self.message)
        raise ExecutionGateFailure(self.message)

    def __repr__(self) -> str:
        return f"ExecutionGate({self.name!r}, {self.value!r})"


class YamlParameterValue(StringParameterValue):
    """
    A parameter value whose text is expected to be valid YAML.

    Equality and hashing only look at the parameter name and value;
    the failure message and description are ignored.

    Attributes:
        name: The parameter name.
        value: The YAML text, exactly as submitted.
        failed_validation_message: Optional custom message to show when the text is invalid.
        description: Free-form description.

    Methods:
        create_execution_gate: Re-check the value and return a gate if it is invalid.
        to_dict: Serialize the value into plain scalars.
        from_dict: Build a value from the output of `to_dict`.
    """

    def __init__(
        self,
        name: str,
        value: Optional[str],
        failed_validation_message: Optional[str] = None,
        description: str = "",
    ):
        super().__init__(name, value, description)
        self._failed_validation_message = failed_validation_message

    @property
    def failed_validation_message(self) -> Optional[str]:
        return self._failed_validation_message

    def create_execution_gate(self) -> Optional[ExecutionGate]:
        """
        Parse the stored value again and decide whether the execution step
        using it may proceed.

        Returns:
            An `ExecutionGate` that fails the step if the value is not valid
            YAML, otherwise None.
        """
        if check_yaml(self.value).ok:
            return None
        LOG.debug(f"Installing execution gate for parameter '{self.name}'.")
        return ExecutionGate(self.name, self.value)

    def to_dict(self) -> Dict[str, Optional[str]]:
        """
        Serialize this value into a dict of plain scalars for the host to persist.

        Returns:
            A dict with the keys `name`, `value`, `failedValidationMessage` and `description`.
        """
        return {
            "name": self.name,
            "value": self.value,
            "failedValidationMessage": self.failed_validation_message,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "YamlParameterValue":
        """
        Build a value from a dict produced by `to_dict`. The value is not
        validated here; the execution gate catches invalid text later.

        Args:
            data: The persisted fields.

        Returns:
            A new `YamlParameterValue`.
        """
        return cls(
            data["name"],
            data.get("value"),
            failed_validation_message=data.get("failedValidationMessage"),
            description=data.get("description") or "",
        )
