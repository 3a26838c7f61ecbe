"""Error taxonomy shared by every exfs layer.

Plain I/O failures (temp file creation, reads, path resolution) are not
wrapped: they surface as the builtin ``OSError`` family.
"""

from typing import Optional, Sequence


class ExfsError(Exception):
    """Base exception for exfs errors."""


class OutsideHomeError(ExfsError):
    """Raised when an upward search starts outside the home directory subtree."""

    def __init__(self, working_dir: str, home: str):
        super().__init__("Cannot search above user home directory.")
        self.working_dir = working_dir
        self.home = home


class FileNotFoundAboveError(ExfsError):
    """Raised when the upward search reaches the home directory without a match."""

    def __init__(self, file_name: str, home: str):
        super().__init__(f"Reached user home dir & did not find file: {file_name}")
        self.file_name = file_name
        self.home = home


class InvalidFileNameError(ExfsError, ValueError):
    """Raised when a name to look up could resolve outside the directory being searched."""

    def __init__(self, file_name: str):
        super().__init__(f"Invalid file name to search for: {file_name!r}")
        self.file_name = file_name


class ProcessExecutionError(ExfsError):
    """Raised when a command cannot be spawned or exits with a non-zero status.

    Attributes:
        command: The command that was run.
        command_args: Arguments passed to the command.
        returncode: Exit status, or None when the process never started.
        stdout: Captured standard output ("" in interactive mode).
        stderr: Captured standard error ("" in interactive mode).
    """

    def __init__(
        self,
        message: str,
        command: str,
        command_args: Sequence[str] = (),
        returncode: Optional[int] = None,
        stdout: str = "",
        stderr: str = "",
    ):
        super().__init__(message)
        self.command = command
        self.command_args = list(command_args)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

    @property
    def spawn_failed(self) -> bool:
        return self.returncode is None


class EditAbortedError(ExfsError):
    """Raised when the user leaves the scratch file empty."""

    def __init__(self, message: str = "Aborting with empty file content"):
        super().__init__(message)


class TempFileCleanupError(ExfsError):
    """Raised when the edit succeeded but the scratch file could not be removed.

    The edited text is kept on the exception so the caller does not lose it.
    """

    def __init__(self, path: str, text: str, reason: OSError):
        super().__init__(f"Failed to remove temporary file {path}: {reason}")
        self.path = path
        self.text = text


class EditorNotConfiguredError(ExfsError):
    """Raised when no editor program can be resolved from options or configuration."""

    def __init__(self):
        super().__init__("No editor configured. Set the EDITOR environment variable or pass --editor.")


class UnsupportedPlatformError(ExfsError):
    """Raised when no handler exists for the running platform."""

    def __init__(self, platform_name: str):
        super().__init__(f"Did not recognize os: {platform_name}")
        self.platform_name = platform_name
