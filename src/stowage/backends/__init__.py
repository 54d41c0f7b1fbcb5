# SPDX-License-Identifier: MIT
"""Content backends shipped with stowage."""

from .file import FileContentReader, FileContentWriter

__all__ = ["FileContentReader", "FileContentWriter"]
