"""Command Handler: Orchestrates CLI command execution.

Receives commands from the main entry point (main.py), delegates the work to
the FileSystem facade and turns results and failures into user-visible output
and process exit codes.
"""

import logging
from typing import Optional, Sequence

from exfs.core.file_system import FileSystem
from exfs.domain.exceptions import (
    EditAbortedError,
    EditorNotConfiguredError,
    ExfsError,
    FileNotFoundAboveError,
    InvalidFileNameError,
    OutsideHomeError,
    ProcessExecutionError,
    TempFileCleanupError,
)
from exfs.domain.interfaces.user_interface import UserInterface
from exfs.domain.models.common import CommandName, EditorProgram, FileName

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_CLEANUP_FAILED = 3
EXIT_SPAWN_FAILED = 127
EXIT_SIGNAL_BASE = 128


def _exit_status(returncode: int) -> int:
    """Maps a child killed by signal N (returncode -N) to the shell convention 128 + N."""
    return EXIT_SIGNAL_BASE - returncode if returncode < 0 else returncode


class CommandHandler:
    """Handles incoming commands and delegates to the FileSystem facade."""

    def __init__(self, file_system: FileSystem, ui: UserInterface):
        """Initializes the CommandHandler with the facade and the UI."""
        self.file_system = file_system
        self.ui = ui

    def handle_run(self, command: str, args: Sequence[str]) -> int:
        """Handles the 'run' command. Returns the child's exit status."""
        logger.info(f"Handling 'run' command: {command} {list(args)}")
        try:
            self.file_system.execute(CommandName(command), list(args))
        except ProcessExecutionError as e:
            if e.spawn_failed:
                self.ui.display_error(str(e))
                return EXIT_SPAWN_FAILED
            # The child already wrote its own diagnostics to the terminal.
            logger.info(str(e))
            return _exit_status(e.returncode)
        return EXIT_OK

    def handle_capture(self, command: str, args: Sequence[str]) -> int:
        """Handles the 'capture' command: prints stdout, reports stderr separately."""
        logger.info(f"Handling 'capture' command: {command} {list(args)}")
        try:
            result = self.file_system.capture(CommandName(command), list(args))
        except ProcessExecutionError as e:
            if e.stdout:
                self.ui.display_output(e.stdout, end="")
            self.ui.display_error(str(e))
            return EXIT_SPAWN_FAILED if e.spawn_failed else _exit_status(e.returncode)

        if result.stdout:
            self.ui.display_output(result.stdout, end="")
        if result.stderr:
            self.ui.display_warning(result.stderr.rstrip("\n"))
        return EXIT_OK

    def handle_edit(self, editor: Optional[str], name: str, text: str) -> int:
        """Handles the 'edit' command: prints the saved text on success."""
        logger.info(f"Handling 'edit' command with editor: {editor}")
        try:
            if not editor:
                raise EditorNotConfiguredError()
            edited = self.file_system.edit_temporary_file(EditorProgram(editor), name, text)
        except EditorNotConfiguredError as e:
            self.ui.display_error(str(e))
            return EXIT_USAGE
        except EditAbortedError as e:
            self.ui.display_warning(str(e))
            return EXIT_FAILURE
        except TempFileCleanupError as e:
            self.ui.display_output(e.text, end="")
            self.ui.display_warning(f"Edit saved, but cleanup failed: {e}")
            return EXIT_CLEANUP_FAILED
        except (ExfsError, OSError, ValueError) as e:
            logger.error(f"Edit command failed: {e}", exc_info=True)
            self.ui.display_error(f"Edit failed: {e}")
            return EXIT_FAILURE

        self.ui.display_output(edited, end="")
        return EXIT_OK

    def handle_locate(self, file_name: str) -> int:
        """Handles the 'locate' command: prints the path of the nearest match."""
        logger.info(f"Handling 'locate' command for: {file_name}")
        try:
            found = self.file_system.find_file_in_above_cur_dir(FileName(file_name))
        except (FileNotFoundAboveError, OutsideHomeError, InvalidFileNameError) as e:
            self.ui.display_error(str(e))
            return EXIT_FAILURE
        except (OSError, RuntimeError, KeyError) as e:
            logger.error(f"Locate command failed: {e}", exc_info=True)
            self.ui.display_error(f"Locate failed: {e}")
            return EXIT_FAILURE

        self.ui.display_output(found)
        return EXIT_OK
