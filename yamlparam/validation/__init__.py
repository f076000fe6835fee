##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
The `validation` package checks text for YAML syntax errors.

Modules:
    yaml_checker: Contains `YamlSyntaxChecker` and the `ValidationResult` it returns.
"""

from yamlparam.validation.yaml_checker import ValidationResult, YamlSyntaxChecker, check_yaml


__all__ = ["ValidationResult", "YamlSyntaxChecker", "check_yaml"]
