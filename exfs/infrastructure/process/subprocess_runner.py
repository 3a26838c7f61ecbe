"""Concrete implementation of the ProcessRunner interface using `subprocess`.

Commands are always launched from an argument list, never through a shell.
"""

import logging
import subprocess
from typing import List, Sequence

from exfs.domain.exceptions import ProcessExecutionError
from exfs.domain.interfaces.process_runner import ProcessRunner
from exfs.domain.models.common import CaptureResult, CommandName

logger = logging.getLogger(__name__)


def _argv(command: CommandName, args: Sequence[str]) -> List[str]:
    return [command, *args]


class SubprocessRunner(ProcessRunner):
    """Runs commands as child processes of the current interpreter."""

    def run(self, command: CommandName, args: Sequence[str]) -> None:
        """Runs a command with the terminal's stdin, stdout and stderr."""
        argv = _argv(command, args)
        logger.debug(f"Running command: {argv}")
        try:
            completed = subprocess.run(argv, check=False)
        except OSError as e:
            logger.debug(f"Failed to start '{command}': {e}")
            raise ProcessExecutionError(
                f"Failed to run '{command}': {e}", command=command, command_args=args
            ) from e

        if completed.returncode != 0:
            raise ProcessExecutionError(
                f"Command '{command}' exited with status {completed.returncode}",
                command=command,
                command_args=args,
                returncode=completed.returncode,
            )

    def capture(self, command: CommandName, args: Sequence[str]) -> CaptureResult:
        """Runs a command collecting stdout and stderr; stdin stays attached to the terminal.

        Output is decoded as UTF-8; undecodable bytes become U+FFFD.
        """
        argv = _argv(command, args)
        logger.debug(f"Capturing command: {argv}")
        try:
            completed = subprocess.run(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            logger.debug(f"Failed to start '{command}': {e}")
            raise ProcessExecutionError(
                f"Failed to run '{command}': {e}", command=command, command_args=args
            ) from e

        if completed.returncode != 0:
            stderr_text = completed.stderr.strip()
            message = f"Command '{command}' exited with status {completed.returncode}"
            if stderr_text:
                message = f"{message}: {stderr_text}"
            raise ProcessExecutionError(
                message,
                command=command,
                command_args=args,
                returncode=completed.returncode,
                stdout=completed.stdout,
                stderr=completed.stderr,
            )

        logger.debug(f"Captured {len(completed.stdout)} stdout and {len(completed.stderr)} stderr characters")
        return CaptureResult(stdout=completed.stdout, stderr=completed.stderr)
