"""Round-trips text through an external editor using a scratch file."""

import logging
import os
import tempfile
from typing import Optional, Tuple

from exfs.domain.exceptions import EditAbortedError, TempFileCleanupError
from exfs.domain.interfaces.process_runner import ProcessRunner
from exfs.domain.models.common import EditorProgram, FileContent

logger = logging.getLogger(__name__)

DEFAULT_NAME_HINT = "exfs.txt"


def _split_hint(file_name_hint: str) -> Tuple[str, str]:
    """Turns a hint like 'task.md' into a ('task-', '.md') prefix/suffix pair."""
    base = os.path.basename(file_name_hint) or DEFAULT_NAME_HINT
    stem, suffix = os.path.splitext(base)
    return f"{stem}-", suffix


class TemporaryFileEditor:
    """Opens caller text in an editor and returns what the user saved."""

    def __init__(self, runner: ProcessRunner, temp_dir: Optional[str] = None):
        """Initializes the TemporaryFileEditor.

        Args:
            runner: Process runner used to launch the editor interactively.
            temp_dir: Directory for scratch files. Defaults to the system temp dir.
        """
        self.runner = runner
        self.temp_dir = temp_dir

    def edit(self, editor: EditorProgram, file_name_hint: str, initial_text: str) -> FileContent:
        """Writes ``initial_text`` to a fresh scratch file, opens it and reads it back.

        The scratch file is removed once the editor session is over, whatever
        the outcome. A failing editor discards any partial edit.

        Args:
            editor: Already-resolved editor executable.
            file_name_hint: Seed for the scratch file name; its extension is kept.
            initial_text: Text the user starts editing from.

        Returns:
            The saved text, never empty. Bytes that are not valid UTF-8 are read back
            as U+FFFD rather than failing the edit.

        Raises:
            OSError: If the scratch file cannot be created, written or read.
            ProcessExecutionError: If the editor cannot be launched or exits non-zero.
            EditAbortedError: If the user saved an empty file.
            TempFileCleanupError: If the edit succeeded but the scratch file could not be
                removed. The edited text is available on the exception.
        """
        prefix, suffix = _split_hint(file_name_hint)
        fd, path = tempfile.mkstemp(prefix=prefix, suffix=suffix, dir=self.temp_dir, text=True)
        logger.debug(f"Created scratch file {path}")

        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
                handle.write(initial_text)

            self.runner.run(editor, [path])

            with open(path, "r", encoding="utf-8", errors="replace", newline="") as handle:
                text = handle.read()
        except BaseException:
            self._discard(path)
            raise

        if text == "":
            self._discard(path)
            raise EditAbortedError()

        try:
            os.remove(path)
        except OSError as e:
            logger.error(f"Edit succeeded but scratch file {path} could not be removed: {e}")
            raise TempFileCleanupError(path, text, e) from e

        logger.debug(f"Read {len(text)} characters back from {path}")
        return FileContent(text)

    @staticmethod
    def _discard(path: str) -> None:
        # The primary failure is what the caller sees; a cleanup failure here is only logged.
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Could not remove scratch file {path}: {e}")
