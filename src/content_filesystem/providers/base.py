"""
Filesystem Provider Interface

Defines the operations a provider must implement so the Filesystem
facade can forward to it. All path arguments are absolute.

Failures are reported the way the host platform reports them: boolean
operations return False and value operations return None.
"""

import logging
import re
import stat
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from ..paths import normalize_path, trailingslashit, untrailingslashit


logger = logging.getLogger(__name__)

_NON_PRINTABLE = re.compile(r"[^\x20-\x7E]")


@dataclass
class DirEntry:
    """Single entry of a directory listing."""
    name: str
    perms: Optional[str]
    permsn: Optional[str]
    owner: Optional[str]
    group: Optional[str]
    size: Optional[int]
    lastmodunix: Optional[float]
    type: str  # "f", "d" or "l"
    files: Dict[str, "DirEntry"] = field(default_factory=dict)


class FilesystemProvider(ABC):
    """
    Base class for filesystem providers.

    Subclasses set `method` to the backend kind they implement,
    e.g. "direct" for the local filesystem.
    """

    method: str = ""

    # Reading and writing

    @abstractmethod
    def get_contents(self, file: str) -> Optional[bytes]:
        """Read the whole file, None if it cannot be read."""

    @abstractmethod
    def get_contents_array(self, file: str) -> Optional[List[str]]:
        """Read the file as a list of lines, line endings kept."""

    @abstractmethod
    def put_contents(self, file: str, contents: Union[str, bytes],
                     mode: Optional[int] = None) -> bool:
        """Write contents to the file, replacing it."""

    # Working directory

    @abstractmethod
    def cwd(self) -> Optional[str]:
        """Get the current working directory, None if unavailable."""

    @abstractmethod
    def chdir(self, dir: str) -> bool:
        """Change the current working directory."""

    # Permissions and ownership

    @abstractmethod
    def chgrp(self, file: str, group: Union[str, int], recursive: bool = False) -> bool:
        """
        Change the group of a file or directory.

        Args:
            file: Path to the file or directory.
            group: Group name or numeric id.
            recursive: Also change everything below a directory.

        Returns:
            True on success, False otherwise.
        """

    @abstractmethod
    def chmod(self, file: str, mode: Optional[int] = None, recursive: bool = False) -> bool:
        """
        Change the permission bits of a file or directory.

        Args:
            file: Path to the file or directory.
            mode: Permission bits, the configured file or dir mode if None.
            recursive: Also change everything below a directory.

        Returns:
            True on success, False otherwise.
        """

    @abstractmethod
    def chown(self, file: str, owner: Union[str, int], recursive: bool = False) -> bool:
        """Change the owner of a file or directory, see chgrp."""

    @abstractmethod
    def owner(self, file: str) -> Optional[str]:
        """Get the owner name of a file."""

    @abstractmethod
    def group(self, file: str) -> Optional[str]:
        """Get the group name of a file."""

    @abstractmethod
    def getchmod(self, file: str) -> Optional[str]:
        """Permission bits as an octal string, e.g. "644"."""

    # Queries

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check whether a file or directory exists."""

    @abstractmethod
    def is_file(self, file: str) -> bool:
        """Check whether the path is a regular file."""

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Check whether the path is a directory."""

    @abstractmethod
    def is_readable(self, file: str) -> bool:
        """Check whether the path can be read."""

    @abstractmethod
    def is_writable(self, path: str) -> bool:
        """Check whether the path can be written."""

    @abstractmethod
    def atime(self, file: str) -> Optional[float]:
        """Last access time as a Unix timestamp."""

    @abstractmethod
    def mtime(self, file: str) -> Optional[float]:
        """Last modification time as a Unix timestamp."""

    @abstractmethod
    def size(self, file: str) -> Optional[int]:
        """File size in bytes."""

    # Mutations

    @abstractmethod
    def touch(self, file: str, time: float = 0, atime: float = 0) -> bool:
        """
        Set the access and modification times, creating the file if missing.

        Args:
            file: Path to the file.
            time: Modification time, now if 0.
            atime: Access time, same as `time` if 0.

        Returns:
            True on success, False otherwise.
        """

    @abstractmethod
    def delete(self, file: str, recursive: bool = False,
               file_type: Optional[str] = None) -> bool:
        """
        Delete a file or directory.

        Args:
            file: Path to delete.
            recursive: Delete a non-empty directory with its contents.
            file_type: "f" to force file deletion.

        Returns:
            True on success, False otherwise.
        """

    @abstractmethod
    def mkdir(self, path: str, chmod: Optional[int] = None,
              chown: Union[str, int, None] = None,
              chgrp: Union[str, int, None] = None) -> bool:
        """Create a single directory, then apply mode, owner and group."""

    @abstractmethod
    def rmdir(self, path: str, recursive: bool = False) -> bool:
        """Remove a directory."""

    @abstractmethod
    def dirlist(self, path: str, include_hidden: bool = True,
                recursive: bool = False) -> Optional[Dict[str, DirEntry]]:
        """
        List a directory.

        Args:
            path: Directory to list, or a file to list on its own.
            include_hidden: Include names starting with a dot.
            recursive: Fill `files` of directory entries.

        Returns:
            Entries keyed by name, None if the directory cannot be read.
        """

    # Helpers built on the operations above

    def gethchmod(self, file: str) -> Optional[str]:
        """
        Get the permissions in symbolic form, e.g. "-rw-r--r--".

        Args:
            file: Path to the file or directory.

        Returns:
            Ten character permission string, None if unavailable.
        """
        perms = self.getchmod(file)
        if perms is None:
            return None

        type_char = "d" if self.is_dir(file) else "-"
        return type_char + stat.filemode(int(perms, 8))[1:]

    def getnumchmodfromh(self, mode: str) -> str:
        """
        Convert symbolic permissions to an octal string.

        "-rwxr-xr-x" gives "755", setuid/setgid/sticky bits add a
        leading digit ("-rwsr-xr-x" gives "4755").
        """
        mode = mode[-9:]
        special = 0
        digits = []

        for index, special_bit in enumerate((4, 2, 1)):
            triad = mode[index * 3:index * 3 + 3].ljust(3, "-")
            value = 0
            if triad[0] == "r":
                value += 4
            if triad[1] == "w":
                value += 2
            if triad[2] in "xst":
                value += 1
            if triad[2] in "sStT":
                special += special_bit
            digits.append(str(value))

        numeric = "".join(digits)
        if special:
            numeric = str(special) + numeric
        return numeric

    def is_binary(self, text: Union[str, bytes]) -> bool:
        """Check whether text contains anything but printable ASCII."""
        if isinstance(text, bytes):
            text = text.decode("latin-1")
        return bool(_NON_PRINTABLE.search(text))

    def find_folder(self, folder: str) -> Optional[str]:
        """Return the folder with a trailing slash if it exists."""
        folder = normalize_path(folder)
        if self.is_dir(folder):
            return trailingslashit(folder)
        return None

    def search_for_folder(self, folder: str, base: str = "/") -> Optional[str]:
        """
        Locate a folder below `base`.

        Tries the full folder path first, then drops leading components
        one at a time until an existing directory is found.
        """
        parts = [part for part in normalize_path(folder).split("/") if part]
        base = untrailingslashit(normalize_path(base))

        for index in range(len(parts)):
            candidate = base + "/" + "/".join(parts[index:])
            if self.is_dir(candidate):
                logger.debug(f"Found folder {folder} at {candidate}")
                return trailingslashit(candidate)

        return None

    def copy(self, source: str, destination: str, overwrite: bool = False,
             mode: Optional[int] = None) -> bool:
        """Copy a file by reading it and writing it back out."""
        if not overwrite and self.exists(destination):
            return False

        contents = self.get_contents(source)
        if contents is None:
            return False

        return self.put_contents(destination, contents, mode)

    def move(self, source: str, destination: str, overwrite: bool = False) -> bool:
        """Move a file as a copy followed by a delete."""
        if self.copy(source, destination, overwrite) and self.exists(destination):
            self.delete(source)
            return True
        return False
