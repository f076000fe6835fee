##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
Tests for the `registry.py` module of the `parameters/` folder.
"""

import pytest
from pytest_mock import MockerFixture

from yamlparam.exceptions import UnsupportedParameterTypeError
from yamlparam.parameters import ParameterSource, StringParameterValue, YamlParameterDefinition
from yamlparam.parameters.registry import ParameterTypeFactory, parameter_type_factory


@pytest.fixture
def factory(mocker: MockerFixture) -> ParameterTypeFactory:
    """
    A `ParameterTypeFactory` that sees no installed plugins.

    Args:
        mocker: PyTest mocker fixture.

    Returns:
        A fresh `ParameterTypeFactory`.
    """
    mocker.patch("yamlparam.abstracts.factory._iter_entry_points", return_value=[])
    return ParameterTypeFactory()


def test_builtin_type_is_registered(factory: ParameterTypeFactory):
    """
    Test that the YAML parameter is available under its symbol and its alias.

    Args:
        factory: A `ParameterTypeFactory` for testing.
    """
    assert factory.list_available() == ["validatingYamlParameter"]
    assert factory.resolve("validatingYamlParameter") is YamlParameterDefinition
    assert factory.resolve("yaml") is YamlParameterDefinition


def test_module_level_factory():
    """
    Test that the shared factory knows the YAML parameter.
    """
    assert parameter_type_factory.resolve("yaml") is YamlParameterDefinition


def test_only_parameter_sources_can_be_registered(factory: ParameterTypeFactory):
    """
    Test that classes that aren't parameter definitions are refused.

    Args:
        factory: A `ParameterTypeFactory` for testing.
    """
    with pytest.raises(TypeError, match="ParameterSource"):
        factory.register("string", StringParameterValue)
    with pytest.raises(TypeError):
        factory.register("instance", YamlParameterDefinition("N", "a: b"))


def test_unknown_type(factory: ParameterTypeFactory):
    """
    Test that an unknown type symbol raises `UnsupportedParameterTypeError`.

    Args:
        factory: A `ParameterTypeFactory` for testing.
    """
    with pytest.raises(UnsupportedParameterTypeError, match="Component 'choice' is not supported"):
        factory.resolve("choice")


def test_from_config(factory: ParameterTypeFactory):
    """
    Test that a job configuration entry becomes a definition.

    Args:
        factory: A `ParameterTypeFactory` for testing.
    """
    data = {"name": "CONFIG", "defaultValue": "a: 1", "failedValidationMessage": "bad", "description": "d"}
    definition = factory.from_config("yaml", data)
    assert definition == YamlParameterDefinition("CONFIG", "a: 1", "bad", "d")


def test_from_config_without_from_dict(factory: ParameterTypeFactory):
    """
    Test that a type without `from_dict` receives the entry as keyword arguments.

    Args:
        factory: A `ParameterTypeFactory` for testing.
    """

    class KeywordDefinition(ParameterSource):
        def __init__(self, name, default_value=None):
            super().__init__(name)
            self.default_value = default_value

        def get_default_parameter_value(self):
            return StringParameterValue(self.name, self.default_value)

        def create_value(self, kind, payload):
            return StringParameterValue(self.name, payload)

        def copy_with_default_value(self, default_value):
            return self

    factory.register("kw", KeywordDefinition)
    definition = factory.from_config("kw", {"name": "KW", "default_value": "a: 1"})
    assert isinstance(definition, KeywordDefinition)
    assert definition.get_default_parameter_value() == StringParameterValue("KW", "a: 1")
