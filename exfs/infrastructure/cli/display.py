import logging
from typing import Any, Optional

from rich.box import HEAVY, SIMPLE
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from exfs.domain.interfaces.user_interface import UserInterface

logger = logging.getLogger(__name__)


class ConsoleDisplay(UserInterface):
    """Concrete implementation of UserInterface using the rich library for console output.

    Result text goes to stdout untouched so it can be piped; status panels
    (errors, warnings, info) go to stderr.
    """

    def __init__(self, console: Optional[Console] = None, err_console: Optional[Console] = None):
        """Initializes the rich Consoles."""
        self._console = console or Console()
        self._err_console = err_console or Console(stderr=True)

    @property
    def console(self) -> Console:
        """Get the Rich console used for result output."""
        return self._console

    @property
    def err_console(self) -> Console:
        """Get the Rich console used for status messages."""
        return self._err_console

    def display_output(self, output: str, **kwargs: Any) -> None:
        """Prints result text verbatim, without markup, highlighting or wrapping.

        Args:
            output: The text to display.
            **kwargs: Supports ``end`` (default "\\n").
        """
        end = kwargs.get("end", "\n")
        self.console.print(output, markup=False, highlight=False, soft_wrap=True, end=end)

    def display_error(self, error_message: str, **kwargs: Any) -> None:
        """Displays an error message in a distinct style.

        Args:
            error_message: The error message to display.
        """
        panel = Panel(
            Text(error_message, style="white"),
            title="[bold red]Error[/bold red]",
            border_style="red",
            box=HEAVY,
            padding=(0, 1)
        )
        self.err_console.print(panel)

    def display_info(self, info_message: str, **kwargs: Any) -> None:
        """Displays an informational message.

        Args:
            info_message: The informational message to display.
        """
        panel = Panel(
            Text(info_message, style="white"),
            title="[bold blue]Info[/bold blue]",
            border_style="blue",
            box=SIMPLE,
            padding=(0, 1)
        )
        self.err_console.print(panel)

    def display_warning(self, warning_message: str, **kwargs: Any) -> None:
        """Displays a warning message.

        Args:
            warning_message: The warning message to display.
        """
        logger.warning(f"Display warning: {warning_message}")
        panel = Panel(
            Text(warning_message, style="white"),
            title="[bold yellow]Warning[/bold yellow]",
            border_style="yellow",
            box=HEAVY,
            padding=(0, 1)
        )
        self.err_console.print(panel)
