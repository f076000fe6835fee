##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
Module of all yamlparam-specific exception types.
"""

from typing import Optional


__all__ = (
    "YamlParamException",
    "InvalidYamlSyntaxError",
    "ConfigurationRejectedError",
    "InvocationAbortedError",
    "ExecutionGateFailure",
    "AccessDeniedError",
    "JobConfigurationError",
    "UnsupportedParameterTypeError",
)


class YamlParamException(Exception):
    """
    Base class for every error raised by yamlparam.
    """


class InvalidYamlSyntaxError(YamlParamException):
    """
    Exception for YAML text that could not be parsed.

    Attributes:
        error_detail: Human-readable description of the parser error.
    """

    def __init__(self, error_detail: Optional[str]):
        super().__init__(error_detail)
        self.error_detail = error_detail


class ConfigurationRejectedError(YamlParamException):
    """
    Exception raised back to a configuration-time submitter (form or request)
    when the submitted value is rejected. Prior state is left untouched.
    """


class InvocationAbortedError(YamlParamException):
    """
    Exception for a command-line submission that must terminate the
    invoking command with a non-zero status.
    """


class ExecutionGateFailure(YamlParamException):
    """
    Exception raised when a parameter value turns out to be invalid at the
    moment it is about to be used by an execution step. The step must not run.
    """


class AccessDeniedError(YamlParamException):
    """
    Exception to signal that the caller lacks a permission on a
    configurable resource.
    """


class JobConfigurationError(YamlParamException):
    """
    Exception for job configuration files that can't be turned into
    parameter definitions.
    """


class UnsupportedParameterTypeError(YamlParamException):
    """
    Exception to signal that an unknown parameter type was requested.
    """
