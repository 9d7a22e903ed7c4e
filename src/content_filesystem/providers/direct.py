"""
Direct Filesystem Provider

Provider for the local filesystem of the machine the process runs on.
The only provider able to create directory trees in one call.
"""

import logging
import os
import shutil
import time as _time
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..config import config
from ..paths import untrailingslashit
from .base import DirEntry, FilesystemProvider


logger = logging.getLogger(__name__)


def mkdir_p(path: str, mode: Optional[int] = None) -> bool:
    """
    Recursively create a directory if it is missing.

    Args:
        path: Absolute directory path.
        mode: Permission bits for the created directory.

    Returns:
        True if the directory exists afterwards, False otherwise.
    """
    if mode is None:
        mode = config.filesystem.dir_mode

    if os.path.isdir(path):
        return True

    try:
        os.makedirs(path, mode=mode, exist_ok=True)
        # makedirs is subject to the umask
        os.chmod(path, mode)
    except OSError as e:
        logger.warning(f"Failed to create directory {path}: {e}")
        return False

    logger.debug(f"Created directory: {path}")
    return True


class DirectFilesystem(FilesystemProvider):
    """
    Filesystem provider backed by os and shutil.
    """

    method = "direct"

    def get_contents(self, file: str) -> Optional[bytes]:
        """Read the file as bytes."""
        try:
            return Path(file).read_bytes()
        except OSError as e:
            logger.warning(f"Error reading file {file}: {e}")
            return None

    def get_contents_array(self, file: str) -> Optional[List[str]]:
        """Read the file as UTF-8 lines, line endings kept."""
        try:
            with open(file, "r", encoding="utf-8", newline="") as f:
                return f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Error reading file {file}: {e}")
            return None

    def put_contents(self, file: str, contents: Union[str, bytes],
                     mode: Optional[int] = None) -> bool:
        """Write text or bytes, then apply the mode."""
        if isinstance(contents, str):
            contents = contents.encode("utf-8")

        try:
            with open(file, "wb") as f:
                f.write(contents)
        except OSError as e:
            logger.warning(f"Error writing file {file}: {e}")
            return False

        self.chmod(file, mode)
        return True

    def cwd(self) -> Optional[str]:
        """Get the process working directory."""
        try:
            return os.getcwd()
        except OSError:
            return None

    def chdir(self, dir: str) -> bool:
        """Change the process working directory."""
        try:
            os.chdir(dir)
        except OSError as e:
            logger.debug(f"Cannot change directory to {dir}: {e}")
            return False
        return True

    def _walk(self, path: str):
        """Yield the path and, for directories, everything below it."""
        yield path
        if self.is_dir(path):
            for root, dirs, files in os.walk(path):
                for name in dirs + files:
                    yield os.path.join(root, name)

    def _chown(self, file: str, recursive: bool, **kwargs) -> bool:
        """Apply shutil.chown to the path, recursively if asked."""
        if not self.exists(file):
            return False

        targets = self._walk(file) if recursive else [file]
        try:
            for target in targets:
                shutil.chown(target, **kwargs)
        except (OSError, LookupError) as e:
            logger.warning(f"Failed to change ownership of {file}: {e}")
            return False
        return True

    def chgrp(self, file: str, group: Union[str, int], recursive: bool = False) -> bool:
        """Change the group via shutil.chown."""
        return self._chown(file, recursive, group=group)

    def chown(self, file: str, owner: Union[str, int], recursive: bool = False) -> bool:
        """Change the owner via shutil.chown."""
        return self._chown(file, recursive, user=owner)

    def chmod(self, file: str, mode: Optional[int] = None, recursive: bool = False) -> bool:
        """Change permission bits, defaulting by file or directory."""
        if mode is None:
            if self.is_file(file):
                mode = config.filesystem.file_mode
            elif self.is_dir(file):
                mode = config.filesystem.dir_mode
            else:
                return False

        targets = self._walk(file) if recursive else [file]
        try:
            for target in targets:
                os.chmod(target, mode)
        except OSError as e:
            logger.warning(f"Failed to chmod {file}: {e}")
            return False
        return True

    def owner(self, file: str) -> Optional[str]:
        """Get the owner name, the numeric uid if it has no name."""
        try:
            return Path(file).owner()
        except KeyError:
            # No passwd entry, fall back to the numeric id
            return str(os.stat(file).st_uid)
        except (OSError, NotImplementedError):
            return None

    def group(self, file: str) -> Optional[str]:
        """Get the group name, the numeric gid if it has no name."""
        try:
            return Path(file).group()
        except KeyError:
            return str(os.stat(file).st_gid)
        except (OSError, NotImplementedError):
            return None

    def getchmod(self, file: str) -> Optional[str]:
        """Get the permission bits as an octal string."""
        try:
            return format(os.stat(file).st_mode & 0o7777, "o")
        except OSError:
            return None

    def exists(self, path: str) -> bool:
        """Check whether the path exists."""
        return os.path.exists(path)

    def is_file(self, file: str) -> bool:
        """Check whether the path is a regular file."""
        return os.path.isfile(file)

    def is_dir(self, path: str) -> bool:
        """Check whether the path is a directory."""
        return os.path.isdir(path)

    def is_readable(self, file: str) -> bool:
        """Check read access for the current process."""
        return os.access(file, os.R_OK)

    def is_writable(self, path: str) -> bool:
        """Check write access for the current process."""
        return os.access(path, os.W_OK)

    def atime(self, file: str) -> Optional[float]:
        """Get the last access time."""
        try:
            return os.path.getatime(file)
        except OSError:
            return None

    def mtime(self, file: str) -> Optional[float]:
        """Get the last modification time."""
        try:
            return os.path.getmtime(file)
        except OSError:
            return None

    def size(self, file: str) -> Optional[int]:
        """Get the file size in bytes."""
        try:
            return os.path.getsize(file)
        except OSError:
            return None

    def touch(self, file: str, time: float = 0, atime: float = 0) -> bool:
        """Create the file if missing and set its times."""
        if not time:
            time = _time.time()
        if not atime:
            atime = time

        try:
            Path(file).touch(exist_ok=True)
            os.utime(file, (atime, time))
        except OSError as e:
            logger.warning(f"Failed to touch {file}: {e}")
            return False
        return True

    def delete(self, file: str, recursive: bool = False,
               file_type: Optional[str] = None) -> bool:
        """Delete a file, an empty directory or a whole tree."""
        if not file:
            # An empty path would resolve to the working directory
            return False

        file = file.replace("\\", "/")

        try:
            if file_type == "f" or self.is_file(file) or os.path.islink(file):
                os.remove(file)
            elif not recursive and self.is_dir(file):
                os.rmdir(file)
            elif self.is_dir(file):
                shutil.rmtree(file)
            else:
                return False
        except OSError as e:
            logger.warning(f"Failed to delete {file}: {e}")
            return False

        logger.debug(f"Deleted: {file}")
        return True

    def mkdir(self, path: str, chmod: Optional[int] = None,
              chown: Union[str, int, None] = None,
              chgrp: Union[str, int, None] = None) -> bool:
        """Create one directory, parents must exist."""
        path = untrailingslashit(path)
        if not path:
            return False

        try:
            os.mkdir(path)
        except OSError as e:
            logger.debug(f"Cannot create directory {path}: {e}")
            return False

        self.chmod(path, chmod if chmod is not None else config.filesystem.dir_mode)
        if chown is not None:
            self.chown(path, chown)
        if chgrp is not None:
            self.chgrp(path, chgrp)

        return True

    def rmdir(self, path: str, recursive: bool = False) -> bool:
        """Remove a directory, see delete."""
        return self.delete(path, recursive)

    def copy(self, source: str, destination: str, overwrite: bool = False,
             mode: Optional[int] = None) -> bool:
        """Copy a file with shutil."""
        if not overwrite and self.exists(destination):
            return False

        try:
            shutil.copyfile(source, destination)
        except OSError as e:
            logger.warning(f"Failed to copy {source} to {destination}: {e}")
            return False

        if mode is not None:
            self.chmod(destination, mode)
        return True

    def move(self, source: str, destination: str, overwrite: bool = False) -> bool:
        """Rename a file, copying across devices."""
        if not overwrite and self.exists(destination):
            return False

        try:
            os.replace(source, destination)
        except OSError:
            # Cross-device moves fall back to copy and delete
            return super().move(source, destination, overwrite=True)
        return True

    def dirlist(self, path: str, include_hidden: bool = True,
                recursive: bool = False) -> Optional[Dict[str, DirEntry]]:
        """List a directory into DirEntry records."""
        limit_file = None
        if self.is_file(path):
            limit_file = os.path.basename(path)
            path = os.path.dirname(path)

        if not self.is_dir(path) or not self.is_readable(path):
            return None

        entries: Dict[str, DirEntry] = {}

        for name in sorted(os.listdir(path)):
            if not include_hidden and name.startswith("."):
                continue
            if limit_file and name != limit_file:
                continue

            full = os.path.join(path, name)
            perms = self.gethchmod(full)

            if os.path.islink(full):
                entry_type = "l"
            elif self.is_dir(full):
                entry_type = "d"
            else:
                entry_type = "f"

            entry = DirEntry(
                name=name,
                perms=perms,
                permsn=self.getnumchmodfromh(perms) if perms else None,
                owner=self.owner(full),
                group=self.group(full),
                size=self.size(full),
                lastmodunix=self.mtime(full),
                type=entry_type,
            )

            if entry_type == "d" and recursive:
                entry.files = self.dirlist(full, include_hidden, recursive) or {}

            entries[name] = entry

        return entries
