"""
Filesystem Providers Module

Provides the provider interface, the local "direct" provider and the
registry holding the shared provider instance.
"""

from .base import DirEntry, FilesystemProvider
from .direct import DirectFilesystem, mkdir_p
from .registry import get_filesystem, register_provider, reset_filesystem, set_filesystem

__all__ = [
    "DirEntry",
    "FilesystemProvider",
    "DirectFilesystem",
    "mkdir_p",
    "get_filesystem",
    "register_provider",
    "reset_filesystem",
    "set_filesystem",
]
