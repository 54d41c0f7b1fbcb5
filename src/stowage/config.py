# SPDX-License-Identifier: MIT
"""Configuration management for stowage.

This module handles:
- Logging setup
- Default store type selection
- File backend root path with security checks
"""

import logging
import os
import pathlib
import sys
from functools import lru_cache

# ---------- Logging configuration ----------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("stowage")


# ---------- Store selection ----------
def get_default_store_type() -> str:
    """Default store type from ``STOWAGE_DEFAULT_STORE`` (``"File"`` when unset or blank)."""
    value = os.getenv("STOWAGE_DEFAULT_STORE", "").strip()
    return value or "File"


# ---------- File backend root (runtime) ----------
@lru_cache(maxsize=1)
def get_file_root() -> pathlib.Path:
    """Get and validate the ``File`` backend root directory from ``STOWAGE_FILE_PATH``.

    Resolved lazily on first use so importing stowage never touches the disk.

    Security: Rejects a symlinked root to prevent directory traversal.

    Returns:
        Validated absolute path

    Raises:
        RuntimeError: If the variable is not set, the path is malformed, doesn't
            exist, isn't a directory, or is a symlink
    """
    path_str = os.getenv("STOWAGE_FILE_PATH", "").strip()
    if not path_str:
        raise RuntimeError("File content store not configured. Set STOWAGE_FILE_PATH")

    try:
        path = pathlib.Path(path_str).resolve()
    except (ValueError, OSError) as e:
        raise RuntimeError(f"Invalid STOWAGE_FILE_PATH '{path_str}': {e}") from e

    # Check the original path before resolution to catch symlinks
    original_path = pathlib.Path(path_str)
    try:
        if original_path.exists() and original_path.is_symlink():
            raise RuntimeError(f"STOWAGE_FILE_PATH cannot be a symbolic link: {path_str}")
    except PermissionError as e:
        raise RuntimeError(f"Cannot validate STOWAGE_FILE_PATH: permission denied for {path_str}") from e

    if not path.exists():
        raise RuntimeError(f"STOWAGE_FILE_PATH: content directory does not exist: {path}")
    if not path.is_dir():
        raise RuntimeError(f"STOWAGE_FILE_PATH: content directory is not a directory: {path}")

    logger.debug("File content root: %s", path)
    return path
