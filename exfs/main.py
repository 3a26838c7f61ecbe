"""Main entry point for the exfs application.

Sets up the Typer CLI application, performs dependency injection (Composition Root),
defines CLI commands, and delegates execution to the CommandHandler.
"""

import logging
import sys
from typing import Annotated, Any, Dict, List, Optional

import typer

# --- Core Layer ---
from exfs.core.command_handler import CommandHandler
from exfs.core.file_system import FileSystem
from exfs.core.services.editor_service import DEFAULT_NAME_HINT, TemporaryFileEditor
from exfs.core.services.locate_service import UpwardFileLocator

# --- Infrastructure Layer ---
from exfs.infrastructure.cli.display import ConsoleDisplay
from exfs.infrastructure.config.settings import get_config, get_editor, load_configuration
from exfs.infrastructure.monitoring.logger_setup import DEFAULT_LOG_FORMAT, level_from_name, setup_logging
from exfs.infrastructure.process.subprocess_runner import SubprocessRunner

logger = logging.getLogger(__name__)

# --- Dependency Injection Container (Manual) ---

def create_dependencies(verbose: bool = False) -> Dict[str, Any]:
    """Creates and wires up all dependencies for the application.

    This acts as the Composition Root.
    """
    dependencies: Dict[str, Any] = {}

    # 1. Load Configuration First, then configure logging from it
    load_configuration()
    log_level = logging.DEBUG if verbose else level_from_name(get_config('logging.level'))
    setup_logging(
        log_level=log_level,
        log_format=get_config('logging.format', DEFAULT_LOG_FORMAT),
        log_file=get_config('logging.file'),
    )
    logger.debug("Configuration and logging initialized.")

    # 2. Infrastructure adapters
    dependencies['ui'] = ConsoleDisplay()
    dependencies['runner'] = SubprocessRunner()

    # 3. Core services, sharing the one runner
    dependencies['editor'] = TemporaryFileEditor(runner=dependencies['runner'])
    dependencies['locator'] = UpwardFileLocator()
    dependencies['file_system'] = FileSystem(
        runner=dependencies['runner'],
        editor=dependencies['editor'],
        locator=dependencies['locator'],
    )

    # 4. Command handler
    dependencies['command_handler'] = CommandHandler(
        file_system=dependencies['file_system'],
        ui=dependencies['ui'],
    )
    logger.debug("All dependencies initialized successfully.")
    return dependencies


# Populated by the app callback before any command runs.
_dependencies: Dict[str, Any] = {}


def _handler() -> CommandHandler:
    if not _dependencies:
        _dependencies.update(create_dependencies())
    return _dependencies['command_handler']


# --- Typer App Definition ---
app = typer.Typer(
    name="exfs",
    help="Run commands, edit text in your $EDITOR, and find files above the current directory.",
    add_completion=False,
)

# Lets `exfs run ls -la` pass '-la' through to the command instead of parsing it.
PASSTHROUGH_SETTINGS = {"allow_extra_args": True, "ignore_unknown_options": True}

CommandArgument = Annotated[str, typer.Argument(help="Executable to run (no shell interpretation).")]
CommandArgs = Annotated[Optional[List[str]], typer.Argument(help="Arguments passed literally to the command.")]


@app.callback()
def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """exfs: process and filesystem helpers for the command line."""
    _dependencies.clear()
    _dependencies.update(create_dependencies(verbose=verbose))


@app.command(context_settings=PASSTHROUGH_SETTINGS)
def run(command: CommandArgument, args: CommandArgs = None):
    """Run a command attached to the terminal and exit with its status."""
    raise typer.Exit(code=_handler().handle_run(command, args or []))


@app.command(context_settings=PASSTHROUGH_SETTINGS)
def capture(command: CommandArgument, args: CommandArgs = None):
    """Run a command, printing its captured stdout and reporting stderr separately."""
    raise typer.Exit(code=_handler().handle_capture(command, args or []))


@app.command()
def edit(
    editor: Annotated[Optional[str], typer.Option("--editor", "-e", help="Editor program. Defaults to $EDITOR.")] = None,
    name: Annotated[str, typer.Option("--name", "-n", help="Scratch file name hint; the extension is kept.")] = DEFAULT_NAME_HINT,
    text: Annotated[str, typer.Option("--text", "-t", help="Initial text to edit.")] = "",
):
    """Edit text in an external editor and print the saved result."""
    raise typer.Exit(code=_handler().handle_edit(editor or get_editor(), name, text))


@app.command()
def locate(
    file_name: Annotated[str, typer.Argument(help="File or directory name to look for.")],
):
    """Print the path of FILE_NAME in the current directory or the nearest ancestor up to home."""
    raise typer.Exit(code=_handler().handle_locate(file_name))


# --- Main Execution Guard ---

def cli_entry_point():
    """Function to be called by the script entry point in pyproject.toml."""
    try:
        app()
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    cli_entry_point()
