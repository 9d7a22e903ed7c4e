"""
Provider Registry

Creates the process-wide filesystem provider on first use and hands the
same instance to every caller afterwards.
"""

import logging
import threading
from typing import Callable, Dict, Optional

from ..config import config
from ..exceptions import UnknownProviderError
from .base import FilesystemProvider
from .direct import DirectFilesystem


logger = logging.getLogger(__name__)

ProviderFactory = Callable[[], FilesystemProvider]

_factories: Dict[str, ProviderFactory] = {
    DirectFilesystem.method: DirectFilesystem,
}

_filesystem: Optional[FilesystemProvider] = None
_lock = threading.Lock()


def register_provider(method: str, factory: ProviderFactory) -> None:
    """
    Register a factory for a provider kind.

    Args:
        method: Backend kind, matched against config.filesystem.method.
        factory: Callable returning a new provider.
    """
    with _lock:
        _factories[method] = factory
    logger.debug(f"Registered filesystem provider: {method}")


def get_filesystem() -> FilesystemProvider:
    """
    Get the shared filesystem provider, creating it exactly once.

    Returns:
        The provider for the configured method.

    Raises:
        UnknownProviderError: If no factory is registered for the method.
    """
    global _filesystem

    if _filesystem is None:
        with _lock:
            if _filesystem is None:
                method = config.filesystem.method
                factory = _factories.get(method)
                if factory is None:
                    raise UnknownProviderError(
                        f"No filesystem provider registered for method '{method}'. "
                        f"Available: {sorted(_factories)}"
                    )
                _filesystem = factory()
                logger.info(f"Filesystem provider initialized (method: {method})")

    return _filesystem


def set_filesystem(provider: FilesystemProvider) -> None:
    """Install an externally constructed provider as the shared one."""
    global _filesystem
    with _lock:
        _filesystem = provider


def reset_filesystem() -> None:
    """Drop the shared provider so the next call creates a new one."""
    global _filesystem
    with _lock:
        _filesystem = None
