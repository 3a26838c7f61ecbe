"""Interface for running external commands.

Defines the contract for spawning a command either fully interactively or
with its output captured, allowing services such as the temporary file editor
to be tested without launching real programs.
"""

import abc
from typing import Sequence

from exfs.domain.models.common import CaptureResult, CommandName


class ProcessRunner(abc.ABC):
    """Abstract Base Class for process execution."""

    @abc.abstractmethod
    def run(self, command: CommandName, args: Sequence[str]) -> None:
        """Runs a command with stdin, stdout and stderr inherited from this process.

        Blocks until the command exits. Arguments are passed literally,
        never through a shell.

        Args:
            command: Executable name or path.
            args: Ordered argument strings.

        Raises:
            ProcessExecutionError: If the command cannot be spawned or exits non-zero.
        """
        pass

    @abc.abstractmethod
    def capture(self, command: CommandName, args: Sequence[str]) -> CaptureResult:
        """Runs a command capturing stdout and stderr; stdin stays inherited.

        Args:
            command: Executable name or path.
            args: Ordered argument strings.

        Returns:
            The captured stdout and stderr text.

        Raises:
            ProcessExecutionError: If the command cannot be spawned or exits non-zero.
                Whatever text was captured is available on the exception.
        """
        pass
