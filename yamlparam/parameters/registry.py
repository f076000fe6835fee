##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
Registry of parameter types.

Job configuration files name a parameter type by its symbol. This module maps
those symbols to `ParameterSource` classes. Third-party packages can add types
through the `yamlparam.parameter_types` entry point group.
"""

from typing import Any, Dict

from yamlparam.abstracts import YamlParamBaseFactory
from yamlparam.exceptions import UnsupportedParameterTypeError
from yamlparam.parameters.base import ParameterSource
from yamlparam.parameters.definition import YamlParameterDefinition


class ParameterTypeFactory(YamlParamBaseFactory):
    """
    Factory for parameter definitions, keyed by the type symbol used in job files.

    Methods:
        from_config: Build a definition of the named type from a job configuration entry.
    """

    def _register_builtins(self):
        self.register(YamlParameterDefinition.symbol, YamlParameterDefinition, aliases=["yaml"])

    def _validate_component(self, component_class: Any):
        if not isinstance(component_class, type) or not issubclass(component_class, ParameterSource):
            raise TypeError(f"{component_class} must be a subclass of ParameterSource")

    def _entry_point_group(self) -> str:
        return "yamlparam.parameter_types"

    def _raise_component_error_class(self, msg: str):
        raise UnsupportedParameterTypeError(msg)

    def from_config(self, component_type: str, data: Dict) -> ParameterSource:
        """
        Build a parameter definition of type `component_type` from `data`.

        Types that provide a `from_dict` classmethod are built with it; other
        types receive `data` as keyword arguments.

        Args:
            component_type: The type symbol or alias.
            data: The entry's fields.

        Returns:
            The new parameter definition.
        """
        component_class = self.resolve(component_type)
        if hasattr(component_class, "from_dict"):
            return component_class.from_dict(data)
        return self.create(component_type, config=dict(data))


parameter_type_factory = ParameterTypeFactory()
