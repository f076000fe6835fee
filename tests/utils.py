##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

"""
Utility classes and functions used by the test suite.
"""

from yamlparam.exceptions import AccessDeniedError
from yamlparam.parameters import Permission


class FakeItem:
    """
    Stand-in for a host resource. Records every permission check and denies
    the permissions listed in `denied`.
    """

    def __init__(self, denied=()):
        self.denied = set(denied)
        self.checked = []

    def check_permission(self, permission: Permission) -> None:
        self.checked.append(permission)
        if permission in self.denied:
            raise AccessDeniedError(f"Missing {permission.value} permission")


def write_file(path: str, contents: str) -> str:
    """
    Write `contents` to `path` and return the path.

    Args:
        path: Where to write.
        contents: The text to write.

    Returns:
        `path`.
    """
    with open(path, "w") as _file:
        _file.write(contents)
    return path
