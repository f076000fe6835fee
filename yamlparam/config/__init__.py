##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
Used to store the application configuration.

The `config` package loads the optional `app.yaml` file that controls how the
yamlparam command line logs and displays its output.

Modules:
    config_filepaths: Constants for the locations searched for `app.yaml`.
    configfile: Locates and loads `app.yaml` into a `Config` object.
"""
from copy import deepcopy
from types import SimpleNamespace
from typing import Dict, List

from yamlparam.utils import nested_dict_to_namespaces


DEFAULT_SETTINGS: Dict = {
    "logging": {"level": "INFO", "colors": True},
    "display": {"table_format": "presto"},
}


class Config:  # pylint: disable=R0903
    """
    Stores all yamlparam settings in one place. Sections missing from the
    loaded file keep their default values.

    Attributes:
        logging (SimpleNamespace): Log `level` and whether to use `colors`.
        display (SimpleNamespace): The `table_format` used when printing tables.

    Methods:
        load_app_into_namespaces: Converts the provided configuration dictionary into namespaces.
    """

    fields: List[str] = ["logging", "display"]

    def __init__(self, app_dict: Dict = None):
        """
        Args:
            app_dict: The contents of `app.yaml`, or None to use the defaults.
        """
        self.logging: SimpleNamespace
        self.display: SimpleNamespace
        self.load_app_into_namespaces(app_dict or {})

    def __str__(self) -> str:
        formatted_str = "config:"
        for name in self.fields:
            items = (f"    {k}: {v!r}" for k, v in getattr(self, name).__dict__.items())
            joined_items = "\n".join(items)
            formatted_str += f"\n  {name}:\n{joined_items}"
        return formatted_str

    def load_app_into_namespaces(self, app_dict: Dict):
        """
        Merge `app_dict` over the defaults and assign each section as a namespace.

        Args:
            app_dict: A dictionary containing configuration data for the application.
        """
        for field in self.fields:
            section = deepcopy(DEFAULT_SETTINGS[field])
            user_section = app_dict.get(field)
            if isinstance(user_section, dict):
                section.update(user_section)
            setattr(self, field, nested_dict_to_namespaces(section))
