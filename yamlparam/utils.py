##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
Utility functions shared across yamlparam.
"""

import logging
import os
from types import SimpleNamespace
from typing import Any, Dict, Iterable, List, Tuple

import yaml


LOG = logging.getLogger(__name__)


def load_yaml(filepath: str) -> Dict:
    """
    Safely read a YAML file and return its contents.

    Args:
        filepath: The file path to the YAML file to be read.

    Returns:
        A dict representing the contents of the YAML file.
    """
    with open(filepath, "r") as _file:
        return yaml.safe_load(_file)


def expand_path(path: str) -> str:
    """
    Expand environment variables and the user's home directory in `path`
    and return its absolute form.

    Args:
        path: The path to expand.

    Returns:
        The expanded, absolute path.
    """
    return os.path.abspath(os.path.expandvars(os.path.expanduser(path)))


def nested_dict_to_namespaces(dic: Dict) -> SimpleNamespace:
    """
    Code for recursively converting dictionaries of dictionaries
    into SimpleNamespaces instead.

    Args:
        dic: The dictionary to convert.

    Returns:
        A SimpleNamespace mirroring the structure of `dic`.
    """

    def recurse(dic: Any) -> Any:
        if not isinstance(dic, dict):
            return dic
        for key, val in list(dic.items()):
            dic[key] = recurse(val)
        return SimpleNamespace(**dic)

    if not isinstance(dic, dict):
        raise TypeError(f"Expected a dict, got {type(dic).__name__}")

    return recurse(dic)


def parse_key_value_pairs(pairs: Iterable[str]) -> Dict[str, List[str]]:
    """
    Turn `NAME=VALUE` strings into a mapping of name to every value given
    for it, in the order they were given.

    Args:
        pairs: Strings of the form `NAME=VALUE`. The value may be empty and
            may itself contain `=` characters.

    Returns:
        A dict mapping each name to the list of its values.

    Raises:
        ValueError: If an entry has no `=` or an empty name.
    """
    parsed: Dict[str, List[str]] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise ValueError(f"Expected NAME=VALUE but got '{pair}'")
        parsed.setdefault(name, []).append(value)
    return parsed


def first_entry(values: Iterable[str]) -> Tuple[bool, str]:
    """
    Return the first item of `values`, if any.

    Args:
        values: An iterable of raw values, possibly None.

    Returns:
        A tuple of (found, value). `value` is None when nothing was found.
    """
    if values is None:
        return False, None
    for value in values:
        return True, value
    return False, None
