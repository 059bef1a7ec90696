"""
Core Utilities - Shared helper functions for AniStream.

This module provides logging setup and small URL helpers used by
source plugins.
"""

import re
import sys
import logging


def setup_logging(debug: bool = False) -> None:
    """
    Set up application logging.

    Hosts embedding AniStream usually configure logging themselves;
    this is a convenience for scripts and interactive sessions.

    Args:
        debug: Enable debug logging
    """
    level = logging.DEBUG if debug else logging.INFO

    # Configure root logger
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )

    # Reduce noise from third-party libraries
    if not debug:
        logging.getLogger("aiohttp").setLevel(logging.WARNING)


def url_directory(url: str) -> str:
    """
    Get the directory-equivalent prefix of a URL.

    Everything after the final ``/`` is dropped and the slash kept,
    so ``https://cdn/x/master.m3u8`` becomes ``https://cdn/x/``.
    A string without any slash is returned unchanged.

    Args:
        url: Absolute URL

    Returns:
        URL prefix ending in ``/``
    """
    return re.sub(r'/[^/]*$', '/', url)


__all__ = ["setup_logging", "url_directory"]
