"""
Filesystem Module

Provides the Filesystem facade rooted at a base directory.
"""

from .facade import Filesystem, PREFIXED_METHODS

__all__ = ["Filesystem", "PREFIXED_METHODS"]
