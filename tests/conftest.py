import logging
import os
import stat
from pathlib import Path

import pytest
from typer.testing import CliRunner

from exfs.infrastructure.cli.display import ConsoleDisplay
from exfs.infrastructure.config import settings


@pytest.fixture(scope="session")
def runner():
    """Provides a Typer CliRunner instance."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch):
    """Keeps tests away from the developer's real config, .env and EDITOR."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.delenv("EDITOR", raising=False)
    monkeypatch.delenv("LOGGING_LEVEL", raising=False)
    monkeypatch.delenv("LOGGING_FILE", raising=False)
    monkeypatch.delenv("LOGGING_FORMAT", raising=False)
    monkeypatch.chdir(tmp_path)
    settings.reset_configuration()
    settings.clear_test_config()
    yield
    settings.reset_configuration()
    settings.clear_test_config()


@pytest.fixture
def mock_console_display(mocker):
    """Mocks the ConsoleDisplay created by the composition root in main.py."""
    mock = mocker.MagicMock(spec=ConsoleDisplay)
    mocker.patch('exfs.main.ConsoleDisplay', return_value=mock)
    return mock


@pytest.fixture
def home_tree(tmp_path: Path):
    """Creates home/u/a/b under tmp_path and returns (home, working_dir) as real paths."""
    home = tmp_path / "home" / "u"
    working_dir = home / "a" / "b"
    working_dir.mkdir(parents=True)
    return Path(os.path.realpath(home)), Path(os.path.realpath(working_dir))


@pytest.fixture
def appending_editor(tmp_path: Path):
    """An executable 'editor' that appends ' appended' to the file it is given."""
    script = tmp_path / "bin" / "fake-editor"
    script.parent.mkdir()
    script.write_text("#!/bin/sh\nprintf ' appended' >> \"$1\"\n")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture
def root_logger():
    """Restores the root logger's level and handlers after setup_logging has replaced them."""
    root = logging.getLogger()
    saved_level = root.level
    saved_handlers = root.handlers[:]
    yield root
    for handler in root.handlers[:]:
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in saved_handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(saved_level)
