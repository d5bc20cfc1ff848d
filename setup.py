#!/usr/bin/env python3
"""
Setup script for yamlindex.

yamlindex is a pure Python package on top of PyYAML's event parser and
emitter. When PyYAML was built with its libyaml binding, the C parser is
used automatically; otherwise the pure Python parser is.

Install for development:
    pip install -e .[test]
"""

import os
import re

from setuptools import setup


def read_version():
    """Read __version__ from the package without importing it."""
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                        'yamlindex', '__init__.py')
    with open(path, encoding='utf-8') as file:
        match = re.search(r'^__version__ = "([^"]+)"', file.read(), re.M)
    if not match:
        raise RuntimeError("unable to find __version__ in %s" % path)
    return match.group(1)


setup(
    name='yamlindex',
    version=read_version(),
    description='Path-style accessors over a YAML event stream',
    packages=['yamlindex'],
    package_data={'yamlindex': ['*.pyi']},
    python_requires='>=3.8',
    install_requires=['PyYAML>=5.1'],
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['yamlindex = yamlindex.cli:main']},
)
