##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
This module contains `YamlParameterDefinition`, a job parameter that only
accepts values which are syntactically valid YAML, and
`YamlParameterDescriptor`, which answers live validation queries from the
host's configuration form.

A definition can create values through three entry points:

- `create_value_from_form`: a structured payload from an interactive form.
- `create_value_from_request`: raw key/value entries from an API request.
- `create_value_from_cli`: a single string from the command line.

Each path checks the submitted text and either returns a
`YamlParameterValue` or raises. The default value is never checked when it
is handed out; invalid defaults are caught by the value's execution gate.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Sequence

from yamlparam.exceptions import ConfigurationRejectedError, InvocationAbortedError
from yamlparam.parameters.base import (
    ConfigurableResource,
    FormValidation,
    ParameterSource,
    ParameterValue,
    Permission,
    SubmissionKind,
)
from yamlparam.parameters.value import YamlParameterValue
from yamlparam.utils import first_entry
from yamlparam.validation import check_yaml


LOG = logging.getLogger(__name__)

SYMBOL = "validatingYamlParameter"
DISPLAY_NAME = "Validating Yaml Parameter"


def decode_form_submission(payload: Mapping[str, Any], default_name: str) -> YamlParameterValue:
    """
    Decode a structured form payload into a `YamlParameterValue`.

    The payload is expected to carry a `value` key and may carry `name`,
    `failedValidationMessage` and `description`. A missing name falls back
    to `default_name`. No YAML checking happens here.

    Args:
        payload: The structured data submitted by the form.
        default_name: The name to use when the payload doesn't carry one.

    Returns:
        The decoded value.

    Raises:
        ConfigurationRejectedError: If the payload isn't a mapping or has no `value`.
    """
    if not isinstance(payload, Mapping):
        raise ConfigurationRejectedError(
            f"Req: Malformed submission for parameter [{default_name}]: expected a mapping, "
            f"got {type(payload).__name__}"
        )
    if "value" not in payload:
        raise ConfigurationRejectedError(f"Req: Malformed submission for parameter [{default_name}]: missing 'value'")

    value = payload["value"]
    if value is not None and not isinstance(value, str):
        raise ConfigurationRejectedError(
            f"Req: Malformed submission for parameter [{default_name}]: 'value' must be a string"
        )

    return YamlParameterValue(
        payload.get("name") or default_name,
        value,
        failed_validation_message=payload.get("failedValidationMessage"),
        description=payload.get("description") or "",
    )


class YamlParameterDefinition(ParameterSource):
    """
    A job parameter whose value must be valid YAML.

    Definitions are never modified after construction; `copy_with_default_value`
    returns a new definition instead.

    Attributes:
        name: The parameter name.
        default_value: The YAML text used when nothing is submitted.
        failed_validation_message: Optional custom message for invalid input.
        description: Free-form description.

    Methods:
        get_default_parameter_value: Build a fresh value from the default.
        create_value: Dispatch a submission to the matching creation path.
        create_value_from_form: Create a value from an interactive form payload.
        create_value_from_request: Create a value from raw request entries.
        create_value_from_cli: Create a value from a command-line argument.
        copy_with_default_value: Return a new definition with a different default.
        to_dict: Serialize the definition into plain scalars.
        from_dict: Build a definition from a job configuration entry.
    """

    symbol = SYMBOL

    def __init__(
        self,
        name: str,
        default_value: Optional[str],
        failed_validation_message: Optional[str] = None,
        description: str = "",
    ):
        super().__init__(name, description)
        self._default_value = default_value
        self._failed_validation_message = failed_validation_message

    @property
    def default_value(self) -> Optional[str]:
        return self._default_value

    @property
    def value(self) -> Optional[str]:
        """The configured default, under the name the host form binds to."""
        return self._default_value

    @property
    def failed_validation_message(self) -> Optional[str]:
        return self._failed_validation_message

    def get_default_parameter_value(self) -> YamlParameterValue:
        """
        Build a fresh value from the stored default. The default is not checked.

        Returns:
            A new `YamlParameterValue` holding the default text.
        """
        return YamlParameterValue(self.name, self._default_value)

    def create_value(self, kind: SubmissionKind, payload: Any) -> ParameterValue:
        """
        Create a value from a submission of the given kind.

        Args:
            kind: Which entry point the submission came through.
            payload: The structured payload (`FORM`), the raw key/value entries
                (`REQUEST`), or the single string (`CLI`).

        Returns:
            The created value.

        Raises:
            ValueError: If `kind` isn't a known `SubmissionKind`.
        """
        if kind == SubmissionKind.FORM:
            return self.create_value_from_form(payload)
        if kind == SubmissionKind.REQUEST:
            return self.create_value_from_request(payload)
        if kind == SubmissionKind.CLI:
            return self.create_value_from_cli(payload)
        raise ValueError(f"Unknown submission kind: {kind}")

    def create_value_from_form(self, payload: Mapping[str, Any]) -> YamlParameterValue:
        """
        Create a value from the structured data of an interactive form submission.

        Args:
            payload: The submitted structured data.

        Returns:
            The decoded value, unchanged.

        Raises:
            ConfigurationRejectedError: If the payload is malformed or its value
                isn't valid YAML.
        """
        value = decode_form_submission(payload, self.name)
        if not check_yaml(value.value).ok:
            LOG.warning(f"Rejected form submission for parameter '{self.name}'.")
            raise ConfigurationRejectedError(
                f"Req: Invalid YAML syntax for parameter [{self.name}] specified: {value.value}"
            )
        return value

    def create_value_from_request(self, parameters: Optional[Mapping[str, Sequence[str]]]) -> YamlParameterValue:
        """
        Create a value from the raw key/value entries of a request.

        Only the first entry stored under this parameter's name is used. When
        there is no entry at all, the default value is returned.

        Args:
            parameters: Raw entries keyed by parameter name, as produced by
                e.g. `urllib.parse.parse_qs`. May be None.

        Returns:
            The created value, or a fresh default value.

        Raises:
            ConfigurationRejectedError: If the first entry isn't valid YAML.
        """
        entries = parameters.get(self.name) if parameters is not None else None
        if isinstance(entries, str):
            entries = [entries]
        found, raw = first_entry(entries)
        if not found:
            LOG.debug(f"No entries submitted for parameter '{self.name}'; using the default value.")
            return self.get_default_parameter_value()

        if not check_yaml(raw).ok:
            LOG.warning(f"Rejected request submission for parameter '{self.name}'.")
            raise ConfigurationRejectedError(f"Req: Invalid value for parameter [{self.name}] specified: {raw}")
        return YamlParameterValue(self.name, raw)

    def create_value_from_cli(self, value: Optional[str]) -> YamlParameterValue:
        """
        Create a value from a command-line argument.

        Args:
            value: The argument. None or an empty string selects the default value.

        Returns:
            The created value carrying this definition's custom failure
            message, or a fresh default value.

        Raises:
            InvocationAbortedError: If the argument isn't valid YAML.
        """
        if not value:
            return self.get_default_parameter_value()

        if not check_yaml(value).ok:
            raise InvocationAbortedError(f"Invalid value for parameter [{self.name}] specified: {value}")
        return YamlParameterValue(self.name, value, self._failed_validation_message)

    def copy_with_default_value(self, default_value: ParameterValue) -> ParameterSource:
        """
        Return a definition whose default is taken from `default_value`.

        Args:
            default_value: The candidate value.

        Returns:
            A new definition with the same name, failure message and description
            if `default_value` is a `YamlParameterValue`; otherwise this same
            definition.
        """
        if isinstance(default_value, YamlParameterValue):
            return YamlParameterDefinition(
                self.name, default_value.value, self._failed_validation_message, self.description
            )
        return self

    def to_dict(self) -> Dict[str, Optional[str]]:
        """
        Serialize this definition into a dict of plain scalars.

        Returns:
            A dict with the keys `name`, `defaultValue`, `failedValidationMessage` and `description`.
        """
        return {
            "name": self.name,
            "defaultValue": self._default_value,
            "failedValidationMessage": self._failed_validation_message,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "YamlParameterDefinition":
        """
        Build a definition from a job configuration entry.

        Args:
            data: A mapping with a required `name` key and optional
                `defaultValue`, `failedValidationMessage` and `description` keys.

        Returns:
            A new `YamlParameterDefinition`.
        """
        return cls(
            data["name"],
            data.get("defaultValue"),
            failed_validation_message=data.get("failedValidationMessage"),
            description=data.get("description") or "",
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, YamlParameterDefinition):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(tuple(self.to_dict().items()))

    def __repr__(self) -> str:
        return (
            f"YamlParameterDefinition({self.name!r}, {self._default_value!r}, "
            f"{self._failed_validation_message!r}, {self.description!r})"
        )


class YamlParameterDescriptor:
    """
    Host-facing metadata for the YAML parameter type and the endpoint used
    by the configuration form to validate text as it is typed.

    Attributes:
        display_name: The human-readable name of the parameter type.
        symbol: The short name used in job configuration files.

    Methods:
        do_validate: Check YAML text on behalf of a configurable resource.
    """

    display_name = DISPLAY_NAME
    symbol = SYMBOL

    def do_validate(
        self,
        value: Optional[str],
        failed_validation_message: Optional[str],
        item: Optional[ConfigurableResource],
    ) -> FormValidation:
        """
        Check `value` for YAML syntax errors.

        When there is no resource being configured the query is answered with
        OK and nothing is parsed. Otherwise the caller must hold the configure
        permission on `item`.

        Args:
            value: The text to check.
            failed_validation_message: Optional custom message to report on failure.
            item: The resource being configured, or None.

        Returns:
            `FormValidation.ok()` for valid text, otherwise an error carrying the
            custom message when it is non-empty or `Invalid yaml string: <detail>`.

        Raises:
            AccessDeniedError: If the caller lacks the configure permission on `item`.
        """
        if item is None:
            return FormValidation.ok()
        item.check_permission(Permission.CONFIGURE)

        result = check_yaml(value)
        if result.ok:
            return FormValidation.ok()
        if failed_validation_message:
            return FormValidation.error(failed_validation_message)
        return FormValidation.error(f"Invalid yaml string: {result.error_detail}")
