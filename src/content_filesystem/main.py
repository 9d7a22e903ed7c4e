"""
Command Line Entry Point

Small command line front end to the Filesystem facade, handy for
checking how a base directory resolves on a given host:

    content-fs /var/www/html/wp-content/plugins/demo url assets/logo.png
    content-fs /var/www/html/wp-content/plugins/demo data-uri assets/logo.svg
    content-fs /var/www/html/wp-content/plugins/demo mkdir cache/images --recursive
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import config
from .exceptions import FilesystemError, UnsupportedOperationError
from .filesystem import Filesystem


# Configure logging
def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Set up logging for the application."""
    # Ensure log directory exists
    config.log.log_directory.mkdir(parents=True, exist_ok=True)

    # Create logger
    logger = logging.getLogger("content_filesystem")
    logger.setLevel(getattr(logging, log_level.upper()))

    # Console handler, stderr so results on stdout stay clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_format = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    )
    console_handler.setFormatter(console_format)

    # File handler
    file_handler = logging.FileHandler(
        config.log.log_file_path,
        mode='a',
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(config.log.log_format))

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="content-fs",
        description="Resolve paths and URLs relative to a base directory.",
    )
    parser.add_argument("base_dir", help="Absolute path to the base directory")
    parser.add_argument(
        "command",
        choices=["path", "url", "data-uri", "mkdir"],
        help="Operation to run",
    )
    parser.add_argument("rel_path", nargs="?", default="", help="Path relative to the base dir")
    parser.add_argument("--recursive", action="store_true", help="mkdir: create parents")
    parser.add_argument(
        "--mode",
        type=lambda value: int(value, 8),
        default=None,
        help="mkdir: permission bits in octal, e.g. 755",
    )
    parser.add_argument("--log-level", default=config.log.log_level)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the command line tool."""
    args = build_parser().parse_args(argv)
    logger = setup_logging(args.log_level)

    try:
        fs = Filesystem(args.base_dir)

        if args.command == "path":
            print(fs.path(args.rel_path))
        elif args.command == "url":
            print(fs.url(args.rel_path))
        elif args.command == "data-uri":
            data_uri = fs.image_to_base64(args.rel_path)
            if not data_uri:
                logger.error(f"Could not embed image: {fs.path(args.rel_path)}")
                return 1
            print(data_uri)
        else:
            if not fs.mkdir(args.rel_path, chmod=args.mode, recursive=args.recursive):
                logger.error(f"Could not create directory: {fs.path(args.rel_path)}")
                return 1
            print(fs.path(args.rel_path))

    except UnsupportedOperationError as e:
        logger.error(str(e))
        return 2
    except FilesystemError as e:
        logger.error(f"Filesystem error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
