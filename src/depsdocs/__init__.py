"""
Deps Docs - collect dependency READMEs and licenses for compliance review.

This package reads a project's ``package.json``, looks up every runtime and
development dependency under ``node_modules/`` and copies its ``README.md``
and license files into a local output directory, one folder per package.
"""

__version__ = "0.1.0"
__author__ = "Deps Docs Team"
