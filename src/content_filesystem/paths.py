"""
Path string helpers.

Pure string operations, nothing here touches the disk.
"""

import re


_DUPLICATE_SLASHES = re.compile(r"(?<=.)/+")
_DRIVE_LETTER = re.compile(r"^([a-z]):")


def normalize_path(path: str) -> str:
    """
    Normalize a filesystem path to forward slashes.

    Backslashes become slashes, repeated slashes are collapsed (a leading
    double slash is kept for network shares) and a Windows drive letter
    is upper-cased.

    Args:
        path: Path in platform-native or forward-slash form.

    Returns:
        Normalized path.
    """
    path = str(path).replace("\\", "/")
    path = _DUPLICATE_SLASHES.sub("/", path)
    return _DRIVE_LETTER.sub(lambda m: m.group(1).upper() + ":", path)


def untrailingslashit(path: str) -> str:
    """Remove trailing forward and back slashes."""
    return path.rstrip("/\\")


def trailingslashit(path: str) -> str:
    """Ensure exactly one trailing slash."""
    return untrailingslashit(path) + "/"
