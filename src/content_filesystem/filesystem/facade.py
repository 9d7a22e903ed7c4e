"""
Filesystem Facade Module

Wraps a filesystem provider and presents it rooted at a base directory.
Handles relative path resolution, URL derivation and a few convenience
operations built on top of the provider.
"""

import base64
import functools
import logging
import os
from typing import Optional, Union

from ..config import ContentConfig, config
from ..exceptions import UnsupportedOperationError
from ..paths import normalize_path, trailingslashit, untrailingslashit
from ..providers import DirectFilesystem, FilesystemProvider, get_filesystem, mkdir_p


logger = logging.getLogger(__name__)


# Provider operations whose first argument is a path relative to the base dir
PREFIXED_METHODS = frozenset({
    "find_folder",
    "search_for_folder",
    "gethchmod",
    "getchmod",
    "chown",
    "get_contents",
    "get_contents_array",
    "put_contents",
    "chdir",
    "chgrp",
    "chmod",
    "owner",
    "group",
    "delete",
    "exists",
    "is_file",
    "is_dir",
    "is_readable",
    "is_writable",
    "atime",
    "mtime",
    "size",
    "touch",
    "mkdir",
    "rmdir",
    "dirlist",
})


class Filesystem:
    """
    Filesystem rooted at a base directory.

    Any provider operation can be called on the instance. Operations in
    PREFIXED_METHODS take a path relative to the base directory as their
    first argument, everything else is passed to the provider untouched.

    Example:
        fs = Filesystem("/var/www/html/wp-content/plugins/my-plugin")
        fs.put_contents("cache/data.json", payload)
        fs.url("assets/logo.png")
    """

    def __init__(
        self,
        base_dir: str,
        provider: Optional[FilesystemProvider] = None,
        content: Optional[ContentConfig] = None,
    ):
        """
        Initialize the filesystem.

        Args:
            base_dir: Absolute path to the base directory.
            provider: Provider to forward to, the shared one if None.
            content: Content dir to URL mapping, config.content if None.
        """
        self.base_dir = trailingslashit(normalize_path(base_dir))
        self.content = content or config.content
        self.provider = provider or get_filesystem()
        logger.debug(f"Filesystem initialized (base: {self.base_dir})")

    def __getattr__(self, name: str):
        """Pass the attribute lookup on to the provider."""
        # Not yet set during __init__ or copying
        if name.startswith("_") or "provider" not in self.__dict__:
            raise AttributeError(name)

        target = getattr(self.provider, name)
        if name not in PREFIXED_METHODS or not callable(target):
            return target

        @functools.wraps(target)
        def prefixed(*args, **kwargs):
            args = list(args)
            if not args:
                args.append("")
            args[0] = self.path(args[0])
            return target(*args, **kwargs)

        return prefixed

    def path_to_url(self, path: Union[str, os.PathLike]) -> str:
        """
        Change a full path into a URL.

        Paths outside the content directory are returned unchanged, as
        is every path when no content directory is configured.
        """
        if not self.content.content_dir:
            return str(path)
        return str(path).replace(self.content.content_dir, self.content.content_url)

    def base_url(self) -> str:
        """Get the URL of the base directory."""
        return self.path_to_url(self.base_dir)

    def path(self, rel_path: str = "") -> str:
        """Replace a relative path with the full path."""
        return self.base_dir + rel_path

    def url(self, uri: str = "") -> str:
        """Replace a relative URI with the full URL."""
        return self.base_url() + uri

    def mkdir(
        self,
        path: str = "",
        chmod: Optional[int] = None,
        chown: Union[str, int, None] = None,
        chgrp: Union[str, int, None] = None,
        recursive: bool = False,
    ) -> bool:
        """
        Create a directory below the base directory.

        Only the direct provider can create a whole tree at once. Owner
        and group are applied after creation on a best-effort basis.

        Args:
            path: Directory path relative to the base dir.
            chmod: Permission bits, config.filesystem.dir_mode if None.
            chown: Owner to set on the created directory.
            chgrp: Group to set on the created directory.
            recursive: Create missing parent directories.

        Returns:
            True if the directory was created, False otherwise.

        Raises:
            UnsupportedOperationError: If recursive creation is requested
                from a provider other than the direct one.
        """
        method = getattr(self.provider, "method", None)
        if method != DirectFilesystem.method:
            if recursive:
                raise UnsupportedOperationError(
                    f"Recursive mkdir is not supported by the "
                    f"'{method}' filesystem provider"
                )
            return self.provider.mkdir(self.path(path), chmod, chown, chgrp)

        # The base dir may be the root itself
        full_path = untrailingslashit(self.path(path)) or "/"
        if chmod is None:
            chmod = config.filesystem.dir_mode

        if not mkdir_p(full_path, chmod):
            return False

        if chown is not None and not self.provider.chown(full_path, chown):
            logger.warning(f"Could not change owner of {full_path} to {chown}")
        if chgrp is not None and not self.provider.chgrp(full_path, chgrp):
            logger.warning(f"Could not change group of {full_path} to {chgrp}")

        return True

    def image_to_base64(self, image_path: str) -> str:
        """
        Convert an image file to a base64 data URI.

        Args:
            image_path: Image path relative to the base dir.

        Returns:
            The data URI, or an empty string if the file is missing
            or unreadable.
        """
        if not self.exists(image_path):
            return ""

        name = os.path.basename(self.path(image_path))
        _, dot, image_type = name.rpartition(".")
        if not dot:
            image_type = ""

        # SVG mime type fix
        if image_type == "svg":
            image_type = "svg+xml"

        contents = self.get_contents(image_path)
        if contents is None:
            logger.warning(f"Could not read image: {self.path(image_path)}")
            return ""

        if isinstance(contents, str):
            contents = contents.encode("utf-8")

        encoded = base64.b64encode(contents).decode("ascii")
        return f"data:image/{image_type};base64,{encoded}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.base_dir!r})"
