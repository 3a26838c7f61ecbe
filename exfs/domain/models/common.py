"""Defines common Value Objects used across the exfs layers.

These objects represent simple values like file paths, command names and
editor programs, keeping signatures explicit about what a string means.
"""

from dataclasses import dataclass
from typing import NewType

# === Core Value Objects ===

# Using NewType for semantic clarity, although they are strings at runtime.
FilePath = NewType("FilePath", str)            # Absolute path to a file or directory
FileName = NewType("FileName", str)            # Bare file name searched for by the locator
FileContent = NewType("FileContent", str)      # Text read from or written to a file

# === Process Context ===
CommandName = NewType("CommandName", str)      # Executable name or path, never a shell line
EditorProgram = NewType("EditorProgram", str)  # Already-resolved editor executable


@dataclass(frozen=True)
class CaptureResult:
    """Text captured from a command that exited successfully."""

    stdout: str
    stderr: str
