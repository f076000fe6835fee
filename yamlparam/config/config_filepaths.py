##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
This module stores constants representing file paths that will be needed for
yamlparam's configuration.
"""

import os


APP_FILENAME: str = "app.yaml"
USER_HOME: str = os.path.expanduser("~")
YAMLPARAM_HOME: str = os.path.join(USER_HOME, ".yamlparam")
