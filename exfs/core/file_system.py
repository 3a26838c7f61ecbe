"""FileSystem facade: one object exposing process execution, editing and upward lookup.

Collaborators are injected; the defaults wire the subprocess-backed runner
into the temporary file editor so both share the same runner.
"""

import logging
from typing import Optional, Sequence

from exfs.core.services.editor_service import TemporaryFileEditor
from exfs.core.services.locate_service import UpwardFileLocator
from exfs.domain.interfaces.process_runner import ProcessRunner
from exfs.domain.models.common import (
    CaptureResult,
    CommandName,
    EditorProgram,
    FileContent,
    FileName,
    FilePath,
)
from exfs.infrastructure.process.subprocess_runner import SubprocessRunner

logger = logging.getLogger(__name__)


class FileSystem:
    """Facade over the process runner, temporary file editor and upward file locator."""

    def __init__(
        self,
        runner: Optional[ProcessRunner] = None,
        editor: Optional[TemporaryFileEditor] = None,
        locator: Optional[UpwardFileLocator] = None,
    ):
        self.runner = runner or SubprocessRunner()
        self.editor = editor or TemporaryFileEditor(runner=self.runner)
        self.locator = locator or UpwardFileLocator()

    def execute(self, command: CommandName, args: Sequence[str]) -> None:
        """Runs the command with the terminal's stdin, stdout and stderr."""
        self.runner.run(command, args)

    def capture(self, command: CommandName, args: Sequence[str]) -> CaptureResult:
        """Runs the command and returns its stdout and stderr text."""
        return self.runner.capture(command, args)

    def edit_temporary_file(self, editor: EditorProgram, name: str, text: str) -> FileContent:
        """Opens ``text`` in ``editor`` via a scratch file named after ``name`` and returns the result."""
        return self.editor.edit(editor, name, text)

    def find_file_in_above_cur_dir(self, file_name: FileName) -> FilePath:
        """Looks for ``file_name`` in the working directory and its ancestors up to home."""
        return self.locator.locate(file_name)
