##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
yamlparam: job parameters whose values must be valid YAML.

This package contains the YAML syntax checker, the parameter definition and
value types, and the command line used to submit parameter values.
"""

__version__ = "1.0.0"
VERSION = __version__
