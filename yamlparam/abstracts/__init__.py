##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
The `abstracts` package provides ABC classes that can be used throughout
yamlparam's codebase.

Modules:
    factory: Contains `YamlParamBaseFactory`, used to manage pluggable components.
"""

from yamlparam.abstracts.factory import YamlParamBaseFactory


__all__ = ["YamlParamBaseFactory"]
