##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
Contracts shared by every parameter type.

This module defines the pieces a job host sees regardless of the concrete
parameter type: the value hierarchy, the `ParameterSource` interface that a
parameter definition implements, the kinds of submission a value can come
from, and the result/permission types used by live form validation.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional, Protocol, runtime_checkable


class SubmissionKind(Enum):
    """
    The entry points through which a parameter value can be submitted.

    Attributes:
        FORM: Interactive form submission carrying a structured payload.
        REQUEST: Programmatic submission carrying raw key/value entries.
        CLI: Command-line submission carrying a single string.
    """

    FORM = "form"
    REQUEST = "request"
    CLI = "cli"


class Permission(Enum):
    """Permissions a host can check on a configurable resource."""

    CONFIGURE = "configure"
    READ = "read"


@runtime_checkable
class ConfigurableResource(Protocol):
    """
    A host-side resource (such as a job) against which permissions are checked.

    Implementations raise `AccessDeniedError` from `check_permission` when the
    current caller lacks `permission`.
    """

    def check_permission(self, permission: Permission) -> None:
        """Raise `AccessDeniedError` unless the caller holds `permission`."""


class FormValidation:
    """
    Result of a live form validation query.

    Attributes:
        kind: Whether the check passed (`Kind.OK`) or failed (`Kind.ERROR`).
        message: The error message shown to the user, None when OK.
    """

    class Kind(Enum):
        """The possible outcomes of a form validation."""

        OK = "ok"
        ERROR = "error"

    def __init__(self, kind: "FormValidation.Kind", message: Optional[str] = None):
        self.kind = kind
        self.message = message

    @classmethod
    def ok(cls) -> "FormValidation":
        """Return a passing validation."""
        return cls(cls.Kind.OK)

    @classmethod
    def error(cls, message: str) -> "FormValidation":
        """Return a failing validation carrying `message`."""
        return cls(cls.Kind.ERROR, message)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FormValidation):
            return NotImplemented
        return self.kind == other.kind and self.message == other.message

    def __hash__(self) -> int:
        return hash((self.kind, self.message))

    def __repr__(self) -> str:
        return f"FormValidation({self.kind.name}, {self.message!r})"


class ParameterValue:
    """
    One submitted or resolved instance of a job parameter.

    Attributes:
        name: The parameter name. Non-empty and fixed for the object's lifetime.
        description: Free-form description, not part of equality.
    """

    def __init__(self, name: str, description: str = ""):
        if not isinstance(name, str) or not name:
            raise ValueError("A parameter value needs a non-empty name.")
        self._name = name
        self._description = description

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    def build_environment(self) -> Dict[str, str]:
        """
        Return the environment variables this value contributes to an
        execution step. The base value contributes nothing.
        """
        return {}

    def create_execution_gate(self):
        """
        Return a gate the host must set up before an execution step uses this
        value, or None when no gate is needed. The base value needs none.
        """
        return None

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if other is None or type(self) is not type(other):
            return False
        return self._name == other._name

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._name))


class StringParameterValue(ParameterValue):
    """
    A parameter value holding a plain string.

    Attributes:
        value: The submitted string, stored exactly as given. May be None.
    """

    def __init__(self, name: str, value: Optional[str], description: str = ""):
        super().__init__(name, description)
        self._value = value

    @property
    def value(self) -> Optional[str]:
        return self._value

    def build_environment(self) -> Dict[str, str]:
        """
        Expose the value as an environment variable named after the parameter.

        Returns:
            A single-entry dict, or an empty dict when the value is None.
        """
        if self._value is None:
            return {}
        return {self.name: self._value}

    def __eq__(self, other: Any) -> bool:
        if not super().__eq__(other):
            return False
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name, self._value))

    def __str__(self) -> str:
        return f"({type(self).__name__}) {self.name}='{self._value}'"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self._value!r})"


class ParameterSource(ABC):
    """
    Interface every parameter definition implements so a host can create
    values from it without knowing its concrete type.

    Methods:
        get_default_parameter_value: Build a value from the configured default.
        create_value: Build a value from a submission of the given kind.
        copy_with_default_value: Return a definition whose default is taken from a value.
    """

    def __init__(self, name: str, description: str = ""):
        if not isinstance(name, str) or not name:
            raise ValueError("A parameter definition needs a non-empty name.")
        self._name = name
        self._description = description or ""

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @abstractmethod
    def get_default_parameter_value(self) -> ParameterValue:
        """Build a fresh value from the configured default."""
        raise NotImplementedError("Subclasses of `ParameterSource` must implement `get_default_parameter_value`.")

    @abstractmethod
    def create_value(self, kind: SubmissionKind, payload: Any) -> ParameterValue:
        """Build a value from a submission of the given kind."""
        raise NotImplementedError("Subclasses of `ParameterSource` must implement `create_value`.")

    @abstractmethod
    def copy_with_default_value(self, default_value: ParameterValue) -> "ParameterSource":
        """Return a definition whose default is taken from `default_value`."""
        raise NotImplementedError("Subclasses of `ParameterSource` must implement `copy_with_default_value`.")
