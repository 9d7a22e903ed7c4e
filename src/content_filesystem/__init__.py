"""
Content Filesystem

Filesystem facade rooted at a base directory, with URL derivation for
files below the content directory.
"""

from .config import config
from .exceptions import FilesystemError, UnknownProviderError, UnsupportedOperationError
from .filesystem import Filesystem
from .providers import DirectFilesystem, FilesystemProvider, get_filesystem

__all__ = [
    "config",
    "Filesystem",
    "FilesystemError",
    "UnknownProviderError",
    "UnsupportedOperationError",
    "DirectFilesystem",
    "FilesystemProvider",
    "get_filesystem",
]
