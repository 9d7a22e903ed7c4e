"""Exceptions raised by the content filesystem."""


class FilesystemError(RuntimeError):
    pass


class UnsupportedOperationError(FilesystemError):
    """The active provider cannot perform the requested operation."""


class UnknownProviderError(FilesystemError):
    """No provider is registered for the configured method."""
