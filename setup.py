##############################################################################
# Copyright (c) the yamlparam project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to yamlparam.
##############################################################################

import os

from setuptools import find_packages, setup


version = __import__("yamlparam").VERSION

extras = ["dev"]

HERE = os.path.dirname(os.path.abspath(__file__))


def readme():
    with open(os.path.join(HERE, "README.md")) as f:
        return f.read()


def _strip_comments(line: str):
    """Removes comments from a line passed in from _reqs()."""
    return line.split("#", 1)[0].strip()


def _pip_requirement(req, *root):
    if req.startswith("-r "):
        _, path = req.split()
        return reqs(*root, *path.split(os.path.sep))
    return [req]


def _reqs(*f):
    with open(os.path.join(HERE, "requirements", *f)) as req_file:
        lines = req_file.readlines()
    return [_pip_requirement(r, *f[:-1]) for r in (_strip_comments(line) for line in lines) if r]


def reqs(*f):
    """Parse requirement file.
    Example:
        reqs('release.txt')          # requirements/release.txt
    Returns:
        List[str]: list of requirements specified in the file.
    """
    trl = [req for subreq in _reqs(*f) for req in subreq]
    rl = [r for r in trl if "-e" not in r]
    return rl


def install_requires():
    """Get list of requirements required for installation."""
    return reqs("release.txt")


def extras_require():
    """Get map of all extra requirements."""
    return {x: reqs(x + ".txt") for x in extras}


setup(
    name="validating-yaml-parameter",
    author="yamlparam project developers",
    version=version,
    description="Job parameters whose values must be valid YAML.",
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    keywords="yaml parameter validation jobs",
    license="MIT",
    packages=find_packages(exclude=["tests.*", "tests"]),
    python_requires=">=3.9",
    install_requires=install_requires(),
    extras_require=extras_require(),
    entry_points={
        "console_scripts": [
            "yamlparam=yamlparam.main:main",
        ]
    },
    include_package_data=True,
    zip_safe=False,
)
