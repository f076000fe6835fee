##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
Tests for the `configfile.py` module.
"""

import os

import pytest
from pytest_mock import MockerFixture

from tests.fixture_types import FixtureCallable, FixtureStr
from tests.utils import write_file
from yamlparam.config import Config
from yamlparam.config.configfile import find_config_file, get_config, load_config


@pytest.fixture
def config_testing_dir(create_testing_dir: FixtureCallable, temp_output_dir: FixtureStr) -> FixtureStr:
    """
    The directory config files for these tests are written to.

    Args:
        create_testing_dir: A fixture which returns a function that creates the testing directory.
        temp_output_dir: The path to the temporary output directory we'll be using for this test run.

    Returns:
        The path to the directory.
    """
    return create_testing_dir(temp_output_dir, "config_testing")


class TestFindConfigFile:
    """
    Tests for `find_config_file`.
    """

    def test_in_cwd(self, mocker: MockerFixture, config_testing_dir: FixtureStr):
        """
        Test that an `app.yaml` in the current working directory is found first.

        Args:
            mocker: PyTest mocker fixture.
            config_testing_dir: The directory config files for these tests are written to.
        """
        mocker.patch("os.getcwd", return_value=config_testing_dir)
        app_path = write_file(os.path.join(config_testing_dir, "app.yaml"), "logging:\n  level: DEBUG\n")
        try:
            assert find_config_file() == app_path
        finally:
            os.remove(app_path)

    def test_in_home(self, mocker: MockerFixture, create_testing_dir: FixtureCallable, config_testing_dir: FixtureStr):
        """
        Test that the home config directory is searched when the working directory has no `app.yaml`.

        Args:
            mocker: PyTest mocker fixture.
            create_testing_dir: A fixture which returns a function that creates the testing directory.
            config_testing_dir: The directory config files for these tests are written to.
        """
        home = create_testing_dir(config_testing_dir, "home")
        empty_cwd = create_testing_dir(config_testing_dir, "empty_cwd")
        mocker.patch("os.getcwd", return_value=empty_cwd)
        mocker.patch("yamlparam.config.configfile.YAMLPARAM_HOME", home)
        app_path = write_file(os.path.join(home, "app.yaml"), "{}\n")
        assert find_config_file() == app_path

    def test_not_found(self, mocker: MockerFixture, create_testing_dir: FixtureCallable, config_testing_dir: FixtureStr):
        """
        Test that None is returned when no `app.yaml` exists anywhere.

        Args:
            mocker: PyTest mocker fixture.
            create_testing_dir: A fixture which returns a function that creates the testing directory.
            config_testing_dir: The directory config files for these tests are written to.
        """
        nowhere = create_testing_dir(config_testing_dir, "nowhere")
        mocker.patch("os.getcwd", return_value=nowhere)
        mocker.patch("yamlparam.config.configfile.YAMLPARAM_HOME", nowhere)
        assert find_config_file() is None
        assert find_config_file(nowhere) is None

    def test_given_directory(self, create_testing_dir: FixtureCallable, config_testing_dir: FixtureStr):
        """
        Test that a given directory is searched.

        Args:
            create_testing_dir: A fixture which returns a function that creates the testing directory.
            config_testing_dir: The directory config files for these tests are written to.
        """
        given = create_testing_dir(config_testing_dir, "given")
        app_path = write_file(os.path.join(given, "app.yaml"), "{}\n")
        assert find_config_file(given) == app_path


class TestLoadConfig:
    """
    Tests for `load_config`.
    """

    def test_missing_file(self, config_testing_dir: FixtureStr):
        """
        Test that a missing file gives None.

        Args:
            config_testing_dir: The directory config files for these tests are written to.
        """
        assert load_config(os.path.join(config_testing_dir, "missing.yaml")) is None

    def test_empty_file(self, config_testing_dir: FixtureStr):
        """
        Test that an empty file gives an empty dict.

        Args:
            config_testing_dir: The directory config files for these tests are written to.
        """
        path = write_file(os.path.join(config_testing_dir, "empty.yaml"), "")
        assert load_config(path) == {}

    @pytest.mark.parametrize("contents, match", [("logging: [\n", "not a valid YAML"), ("- a\n", "must contain a mapping")])
    def test_bad_file(self, config_testing_dir: FixtureStr, contents: str, match: str):
        """
        Test that unusable files raise `ValueError`.

        Args:
            config_testing_dir: The directory config files for these tests are written to.
            contents: The file contents.
            match: A pattern the error message must contain.
        """
        path = write_file(os.path.join(config_testing_dir, "bad.yaml"), contents)
        with pytest.raises(ValueError, match=match):
            load_config(path)


class TestGetConfig:
    """
    Tests for `get_config`.
    """

    def test_from_file(self, config_testing_dir: FixtureStr):
        """
        Test that a file path is loaded directly and merged over the defaults.

        Args:
            config_testing_dir: The directory config files for these tests are written to.
        """
        path = write_file(os.path.join(config_testing_dir, "custom.yaml"), "logging:\n  level: DEBUG\n")
        config = get_config(path)
        assert config.logging.level == "DEBUG"
        assert config.logging.colors is True
        assert config.display.table_format == "presto"

    def test_defaults(self, mocker: MockerFixture):
        """
        Test that the defaults are used when no file is found.

        Args:
            mocker: PyTest mocker fixture.
        """
        mocker.patch("yamlparam.config.configfile.find_config_file", return_value=None)
        config = get_config()
        assert isinstance(config, Config)
        assert config.logging.level == "INFO"
