##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
YAML syntax checking.

The checker only ever parses with PyYAML's `SafeLoader`, so a document can
produce plain scalars, sequences and mappings but never arbitrary Python
objects. Tags like `!!python/object/apply` are reported as errors.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import yaml

from yamlparam.exceptions import InvalidYamlSyntaxError


LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of a single YAML syntax check.

    Attributes:
        ok: True if the text parsed.
        error_detail: Description of the parser error when `ok` is False.
    """

    ok: bool
    error_detail: Optional[str] = None

    def raise_for_error(self):
        """
        Raise an `InvalidYamlSyntaxError` if this result is a failure.

        Raises:
            InvalidYamlSyntaxError: If `ok` is False.
        """
        if not self.ok:
            raise InvalidYamlSyntaxError(self.error_detail)


def _describe_error(exc: Exception) -> str:
    """
    Build a human-readable description of a parser exception. PyYAML's
    marked errors already include the line and column of the problem.

    Args:
        exc: The exception raised while parsing.

    Returns:
        The exception's class name followed by its message.
    """
    message = str(exc).strip()
    if not message:
        return type(exc).__name__
    return f"{type(exc).__name__}: {message}"


class YamlSyntaxChecker:
    """
    Stateless YAML syntax checker.

    Instances hold no state between calls, so one instance can be shared
    by any number of concurrent callers.

    Methods:
        check: Parse a text blob and report whether it is valid YAML.
    """

    def check(self, text: Optional[str]) -> ValidationResult:
        """
        Parse `text` as YAML using safe semantics.

        An empty or missing document is valid YAML.

        Args:
            text: The YAML text to check. May be None.

        Returns:
            A `ValidationResult` describing the outcome.
        """
        if text is None:
            text = ""
        try:
            yaml.safe_load(text)
        except Exception as exc:  # pylint: disable=broad-except
            detail = _describe_error(exc)
            LOG.debug(f"YAML syntax check failed: {detail}")
            return ValidationResult(ok=False, error_detail=detail)
        return ValidationResult(ok=True)


_CHECKER = YamlSyntaxChecker()


def check_yaml(text: Optional[str]) -> ValidationResult:
    """
    Check `text` with a shared `YamlSyntaxChecker`.

    Args:
        text: The YAML text to check. May be None.

    Returns:
        A `ValidationResult` describing the outcome.
    """
    return _CHECKER.check(text)
