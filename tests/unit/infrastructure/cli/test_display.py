import pytest
from unittest.mock import MagicMock

from rich.panel import Panel

from exfs.infrastructure.cli.display import ConsoleDisplay


@pytest.fixture
def mock_console():
    """Fixture to create a mock rich Console object for results."""
    return MagicMock()


@pytest.fixture
def mock_err_console():
    """Fixture to create a mock rich Console object for status messages."""
    return MagicMock()


@pytest.fixture
def console_display(mock_console: MagicMock, mock_err_console: MagicMock):
    return ConsoleDisplay(console=mock_console, err_console=mock_err_console)


def test_display_output_is_verbatim(console_display: ConsoleDisplay, mock_console: MagicMock, mock_err_console: MagicMock):
    """Result text is printed without markup so '[red]' survives."""
    console_display.display_output("[red]/home/u/x.txt")

    mock_console.print.assert_called_once_with(
        "[red]/home/u/x.txt", markup=False, highlight=False, soft_wrap=True, end="\n"
    )
    mock_err_console.print.assert_not_called()


def test_display_output_custom_end(console_display: ConsoleDisplay, mock_console: MagicMock):
    console_display.display_output("edited", end="")
    assert mock_console.print.call_args.kwargs["end"] == ""


@pytest.mark.parametrize("method, title", [
    ("display_error", "Error"),
    ("display_info", "Info"),
    ("display_warning", "Warning"),
])
def test_status_messages_go_to_stderr_console(console_display: ConsoleDisplay, mock_console: MagicMock, mock_err_console: MagicMock, method, title):
    getattr(console_display, method)("Something happened")

    mock_console.print.assert_not_called()
    mock_err_console.print.assert_called_once()
    panel = mock_err_console.print.call_args.args[0]
    assert isinstance(panel, Panel)
    assert title in str(panel.title)
    assert panel.renderable.plain == "Something happened"
