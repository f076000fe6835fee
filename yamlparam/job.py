##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
Loading parameter definitions from a job configuration file.

A job file is YAML with a `parameters` list. Each entry is a mapping with a
single key, the parameter type symbol, whose value holds the definition's
fields:

```yaml
parameters:
  - validatingYamlParameter:
      name: DEPLOY_CONFIG
      defaultValue: |
        replicas: 1
      failedValidationMessage: Deploy config must be valid YAML
      description: Settings passed to the deploy step
```
"""

import logging
from io import StringIO
from typing import List, TextIO, Union

import yaml

from yamlparam.exceptions import JobConfigurationError, UnsupportedParameterTypeError
from yamlparam.parameters.base import ParameterSource
from yamlparam.parameters.registry import parameter_type_factory
from yamlparam.utils import expand_path


LOG = logging.getLogger(__name__)

# Entry fields that must load as strings
TEXT_FIELDS = ("defaultValue", "failedValidationMessage", "description")


def load_job_parameters(path: str) -> List[ParameterSource]:
    """
    Read a job configuration file and build its parameter definitions.

    Args:
        path: The path to the job file.

    Returns:
        The parameter definitions, in file order.

    Raises:
        JobConfigurationError: If the file can't be read or doesn't describe
            valid parameter definitions.
    """
    path = expand_path(path)
    LOG.info(f"Loading job parameters from path: {path}")
    try:
        with open(path, "r") as job_file:
            return load_job_parameters_from_string(job_file)
    except OSError as exc:
        raise JobConfigurationError(f"Could not read job file '{path}': {exc}") from exc


def load_job_parameters_from_string(string: Union[str, TextIO]) -> List[ParameterSource]:
    """
    Build parameter definitions from the contents of a job configuration file.

    Args:
        string: The YAML text, or a stream containing it.

    Returns:
        The parameter definitions, in file order.

    Raises:
        JobConfigurationError: If the text isn't valid YAML, an entry is
            malformed, a type is unknown, or a name is used twice.
    """
    data = StringIO(string) if isinstance(string, str) else string
    try:
        job = yaml.safe_load(data)
    except yaml.YAMLError as exc:
        raise JobConfigurationError(f"The job file is not valid YAML: {exc}") from exc

    if job is None:
        return []
    if not isinstance(job, dict):
        raise JobConfigurationError("The job file must contain a mapping at the top level.")

    entries = job.get("parameters") or []
    if not isinstance(entries, list):
        raise JobConfigurationError("The 'parameters' section must be a list.")

    definitions: List[ParameterSource] = []
    seen = set()
    for index, entry in enumerate(entries):
        definition = _build_definition(index, entry)
        if definition.name in seen:
            raise JobConfigurationError(f"Parameter '{definition.name}' is defined more than once.")
        seen.add(definition.name)
        definitions.append(definition)

    LOG.debug(f"Loaded {len(definitions)} parameter definition(s).")
    return definitions


def _build_definition(index: int, entry: object) -> ParameterSource:
    """
    Turn one entry of the `parameters` list into a definition.

    Args:
        index: The entry's position, used in error messages.
        entry: The parsed entry.

    Returns:
        The parameter definition.

    Raises:
        JobConfigurationError: If the entry is malformed, a text field isn't a
            string, or its type is unknown.
    """
    if not isinstance(entry, dict) or len(entry) != 1:
        raise JobConfigurationError(f"Parameter entry {index} must be a mapping with exactly one type key.")

    ((type_name, fields),) = entry.items()
    if not isinstance(fields, dict) or not fields.get("name"):
        raise JobConfigurationError(f"Parameter entry {index} ({type_name}) needs a 'name'.")

    for field in TEXT_FIELDS:
        if fields.get(field) is not None and not isinstance(fields[field], str):
            raise JobConfigurationError(f"Parameter entry {index} ({type_name}): '{field}' must be a string.")

    try:
        return parameter_type_factory.from_config(type_name, fields)
    except UnsupportedParameterTypeError as exc:
        raise JobConfigurationError(f"Parameter entry {index}: {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise JobConfigurationError(f"Parameter entry {index} ({type_name}) is invalid: {exc}") from exc
