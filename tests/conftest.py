##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
This module contains pytest fixtures to be used throughout the entire test suite.
"""
import os

import pytest
from _pytest.tmpdir import TempPathFactory

from tests.fixture_types import FixtureCallable, FixtureStr
from tests.utils import FakeItem
from yamlparam.parameters import YamlParameterDefinition


# pylint: disable=redefined-outer-name


#######################################
######### Fixture Definitions #########
#######################################


@pytest.fixture(scope="session")
def create_testing_dir() -> FixtureCallable:
    """
    Fixture to create a temporary testing directory.

    Returns:
        A function that creates the testing directory.
    """

    def _create_testing_dir(base_dir: str, sub_dir: str) -> str:
        """
        Helper function to create a temporary testing directory.

        Args:
            base_dir: The base directory where the testing directory will be created.
            sub_dir: The name of the subdirectory to create.

        Returns:
            The path to the created testing directory.
        """
        testing_dir = os.path.join(base_dir, sub_dir)
        if not os.path.exists(testing_dir):
            os.makedirs(testing_dir)
        return testing_dir

    return _create_testing_dir


@pytest.fixture(scope="session")
def temp_output_dir(tmp_path_factory: TempPathFactory) -> FixtureStr:
    """
    A temporary directory to store output files of this test run.

    Args:
        tmp_path_factory: A built in factory with pytest to help create temp paths for testing.

    Returns:
        The path to the temp output directory we'll use for this test run.
    """
    return str(tmp_path_factory.mktemp("yamlparam_tests"))


@pytest.fixture
def definition() -> YamlParameterDefinition:
    """
    A definition named `DUMMY` with a valid default value.

    Returns:
        A `YamlParameterDefinition` for testing.
    """
    return YamlParameterDefinition("DUMMY", "default: value", "error", "description")


@pytest.fixture
def fake_item() -> FakeItem:
    """
    A resource that grants every permission.

    Returns:
        A `FakeItem` for testing.
    """
    return FakeItem()
