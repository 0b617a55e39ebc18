"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/filters.py
Filename filter compiled from the optional --file-filter pattern.

Pattern rules:
- no pattern        : every file passes
- "*.<ext>"         : files whose extension equals <ext> exactly
- anything else     : files whose name equals the pattern exactly
Comparisons are case-sensitive; no other wildcards are supported.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union
from pathlib import PurePath

EXTENSION_PREFIX = "*."


class FilterMode(Enum):
    """
    How a file filter pattern is interpreted.
    """
    NONE = "none"
    EXACT_NAME = "exact-name"
    EXTENSION = "extension"

    @property
    def display_name(self) -> str:
        """Human-readable name for console output."""
        mapping = {
            FilterMode.NONE: "No filter",
            FilterMode.EXACT_NAME: "Exact filename",
            FilterMode.EXTENSION: "Extension",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


def file_extension(name: str) -> Optional[str]:
    """
    Returns the text after the last dot of a file name, or None if the name has no extension.
    A leading dot alone does not start an extension: ".bashrc" has none, "a.log.bak" has "bak".
    """
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return None
    return ext


@dataclass(frozen=True)
class FileFilter:
    mode: FilterMode = FilterMode.NONE
    value: Optional[str] = None

    def __post_init__(self):
        if self.mode is FilterMode.NONE and self.value is not None:
            raise ValueError("A disabled filter cannot carry a value")
        if self.mode is not FilterMode.NONE and self.value is None:
            raise ValueError(f"{self.mode.display_name} filter requires a value")

    @classmethod
    def from_pattern(cls, pattern: Optional[str]) -> 'FileFilter':
        if pattern is None:
            return cls()
        if pattern.startswith(EXTENSION_PREFIX):
            return cls(FilterMode.EXTENSION, pattern[len(EXTENSION_PREFIX):])
        return cls(FilterMode.EXACT_NAME, pattern)

    @property
    def description(self) -> str:
        if self.mode is FilterMode.EXACT_NAME:
            return f"files named '{self.value}'"
        if self.mode is FilterMode.EXTENSION:
            return f"files with extension '.{self.value}'"
        return "all files"

    def passes(self, path: Union[str, PurePath]) -> bool:
        if self.mode is FilterMode.NONE:
            return True

        name = os.path.basename(os.fspath(path))
        if self.mode is FilterMode.EXACT_NAME:
            return name == self.value
        return file_extension(name) == self.value


def passes(path: Union[str, PurePath], file_filter: FileFilter) -> bool:
    """Returns True if the path is in scope for the given filter."""
    return file_filter.passes(path)
