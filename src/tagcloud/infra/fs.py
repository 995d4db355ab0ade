from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path manipulation and output destination helpers.
Acts as an abstraction over the 'os' module to ensure uniform behavior
across Windows and Unix-like systems.
"""

import os
from typing import Optional, Tuple

from tagcloud.domain.constants import OUTPUT_EXTENSION

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "TagCloud"
UNIX_APP_DIR_NAME = ".tagcloud"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/TagCloud
    - Linux/Mac: ~/.tagcloud

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is blank.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def derive_output_path(input_path: str) -> str:
    """
    Calculate the default document destination for an input file.

    The document is placed next to the input, sharing its stem:
    '/data/book.txt' becomes '/data/book.html'.

    Args:
        input_path: Absolute input file path.

    Returns:
        str: Absolute output file path.
    """
    stem, _ = os.path.splitext(input_path)
    return stem + OUTPUT_EXTENSION

# -----------------------------------------------------------------------------
# FILESYSTEM VALIDATION API
# -----------------------------------------------------------------------------

def is_readable_file(path: str) -> bool:
    """Check that a path points to an existing regular file."""
    return os.path.isfile(path)


def output_exists(path: str) -> bool:
    """Identify a naming collision at the target output path."""
    return os.path.exists(path)


def is_same_file(first: str, second: str) -> bool:
    """
    Check whether two paths designate the same file.

    Links and case-insensitive filesystems are resolved through
    os.path.samefile when both paths exist; otherwise the normalized
    path strings are compared.

    Args:
        first: Absolute path of the first file.
        second: Absolute path of the second file.

    Returns:
        bool: True if writing 'second' would replace 'first'.
    """
    if os.path.exists(first) and os.path.exists(second):
        return os.path.samefile(first, second)
    return os.path.normcase(os.path.realpath(first)) == os.path.normcase(os.path.realpath(second))


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)
