"""
Tests for Configuration and Path Helpers
"""

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from content_filesystem.config import Config, ContentConfig, FilesystemConfig
from content_filesystem.paths import normalize_path, trailingslashit, untrailingslashit


class TestNormalizePath:
    """Tests for path normalization."""

    @pytest.mark.parametrize("raw,expected", [
        ("/var/www/html", "/var/www/html"),
        ("C:\\www\\site", "C:/www/site"),
        ("c:/www/site", "C:/www/site"),
        ("/var//www///html/", "/var/www/html/"),
        ("//server/share//dir", "//server/share/dir"),
        ("relative\\dir", "relative/dir"),
        ("", ""),
    ])
    def test_normalize(self, raw, expected):
        """Test separator and drive letter normalization."""
        assert normalize_path(raw) == expected

    def test_accepts_path_objects(self):
        """Test that Path objects are normalized as strings."""
        assert normalize_path(Path("/srv/data")) == "/srv/data"


class TestTrailingSlashes:
    """Tests for trailing slash helpers."""

    @pytest.mark.parametrize("raw", ["/a/b", "/a/b/", "/a/b//", "/a/b\\"])
    def test_trailingslashit(self, raw):
        """Test that exactly one slash is appended."""
        assert trailingslashit(raw) == "/a/b/"

    def test_untrailingslashit(self):
        """Test stripping trailing slashes."""
        assert untrailingslashit("/a/b/\\/") == "/a/b"
        assert untrailingslashit("/a/b") == "/a/b"


class TestConfig:
    """Tests for configuration defaults and environment overrides."""

    def test_content_defaults(self, monkeypatch):
        """Test the default content mapping."""
        monkeypatch.delenv("CONTENT_DIR", raising=False)
        monkeypatch.delenv("CONTENT_URL", raising=False)

        content = ContentConfig()

        assert content.content_dir == "/var/www/html/wp-content"
        assert content.content_url == "http://localhost/wp-content"

    def test_content_from_environment(self, monkeypatch):
        """Test that the environment overrides the content mapping."""
        monkeypatch.setenv("CONTENT_DIR", "d:\\sites\\blog\\content\\")
        monkeypatch.setenv("CONTENT_URL", "https://blog.example.com/content/")

        content = ContentConfig()

        assert content.content_dir == "D:/sites/blog/content"
        assert content.content_url == "https://blog.example.com/content"

    def test_filesystem_method_from_environment(self, monkeypatch):
        """Test selecting the provider kind from the environment."""
        monkeypatch.setenv("FS_METHOD", "ssh2")

        assert FilesystemConfig().method == "ssh2"

    def test_filesystem_defaults(self, monkeypatch):
        """Test default permission bits."""
        monkeypatch.delenv("FS_METHOD", raising=False)
        fs_config = FilesystemConfig()

        assert fs_config.method == "direct"
        assert fs_config.dir_mode == 0o755
        assert fs_config.file_mode == 0o644

    def test_master_config(self):
        """Test that the master config holds all sections."""
        master = Config()

        assert isinstance(master.content, ContentConfig)
        assert master.log.log_file_path.name == "content_filesystem.log"


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])
