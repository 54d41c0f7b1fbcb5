# SPDX-License-Identifier: MIT
"""Path safety helpers for filesystem-backed content stores."""

import pathlib


def check_not_symlink(path: pathlib.Path, description: str = "file") -> None:
    """Reject *path* if it is a symbolic link.

    Must be called on the unresolved path; resolution follows the link.

    Raises:
        ValueError: If *path* is a symlink.
    """
    if path.is_symlink():
        raise ValueError(f"Invalid {description}: symbolic links are not allowed ({path.name})")


def validate_safe_path(base_path: pathlib.Path, filename: str, allow_create: bool = False) -> pathlib.Path:
    """Resolve *filename* under *base_path*, refusing anything that escapes it.

    Args:
        base_path: Directory all content must stay inside
        filename: Relative name supplied by the caller
        allow_create: Accept a path that does not exist yet

    Returns:
        Resolved absolute path inside *base_path*

    Raises:
        ValueError: On path traversal, or if the file is missing and
            *allow_create* is False
    """
    base = base_path.resolve()
    target = (base / filename).resolve()
    try:
        target.relative_to(base)
    except ValueError:
        raise ValueError(f"Invalid filename: path traversal detected ({filename})") from None

    if not allow_create and not target.exists():
        raise ValueError(f"File not found: {filename}")
    return target
