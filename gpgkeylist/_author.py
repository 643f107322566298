"""_author.py

Canonical location for authorship information
__version__ is a PEP-440 compliant version string,
normalized with packaging.version.Version
"""

from packaging.version import Version

__all__ = ['__author__',
           '__copyright__',
           '__license__',
           '__version__']

__author__ = "The gpgkeylist developers"
__copyright__ = "Copyright (c) 2026 The gpgkeylist developers"
__license__ = "BSD"
__version__ = str(Version("0.1.0"))
