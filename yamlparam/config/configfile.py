##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
This module locates and reads the yamlparam application configuration file.
"""
import logging
import os
from typing import Dict, Optional

import yaml

from yamlparam.config import Config
from yamlparam.config.config_filepaths import APP_FILENAME, YAMLPARAM_HOME
from yamlparam.utils import load_yaml


LOG: logging.Logger = logging.getLogger(__name__)


def find_config_file(path: str = None) -> Optional[str]:
    """
    Locate the application configuration file (`app.yaml`).

    With no `path`, the current working directory is checked first and then
    `YAMLPARAM_HOME`. With a `path`, only that directory is checked.

    Args:
        path: A specific directory to look for `app.yaml`.

    Returns:
        The full path to the `app.yaml` file if found, otherwise `None`.
    """
    if path is None:
        local_app = os.path.join(os.getcwd(), APP_FILENAME)
        if os.path.isfile(local_app):
            return local_app

        path_app = os.path.join(YAMLPARAM_HOME, APP_FILENAME)
        if os.path.isfile(path_app):
            return path_app

        return None

    app_path = os.path.join(path, APP_FILENAME)
    if os.path.isfile(app_path):
        return app_path

    return None


def load_config(filepath: str) -> Optional[Dict]:
    """
    Reads a YAML configuration file and returns its contents as a dictionary.

    Args:
        filepath: The path to the YAML configuration file.

    Returns:
        A dictionary containing the contents of the YAML file or None if the file doesn't exist.

    Raises:
        ValueError: If the file isn't valid YAML or doesn't hold a mapping.
    """
    if not os.path.isfile(filepath):
        LOG.info(f"No app config file at {filepath}")
        return None
    LOG.debug(f"Reading app config from file {filepath}")
    try:
        contents = load_yaml(filepath)
    except yaml.YAMLError as exc:
        raise ValueError(f"The config file '{filepath}' is not a valid YAML file.") from exc
    if contents is None:
        return {}
    if not isinstance(contents, dict):
        raise ValueError(f"The config file '{filepath}' must contain a mapping.")
    return contents


def get_config(path: str = None) -> Config:
    """
    Load the application configuration, falling back to the defaults when
    no `app.yaml` exists.

    Args:
        path: Either a directory to search for `app.yaml` or the file itself.

    Returns:
        The loaded `Config`.
    """
    if path is not None and os.path.isfile(path):
        filepath = path
    else:
        filepath = find_config_file(path)

    if filepath is None:
        return Config()
    return Config(load_config(filepath))
