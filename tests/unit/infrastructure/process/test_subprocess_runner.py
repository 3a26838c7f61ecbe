import sys
from pathlib import Path

import pytest

from exfs.domain.exceptions import ProcessExecutionError
from exfs.infrastructure.process.subprocess_runner import SubprocessRunner

MISSING_COMMAND = "notACommand-exfs-test"


@pytest.fixture
def process_runner():
    return SubprocessRunner()


def python_args(code: str):
    return ["-c", code]


def test_run_success(process_runner: SubprocessRunner, tmp_path: Path):
    target = tmp_path / "hello.txt"
    process_runner.run(sys.executable, python_args(f"open({str(target)!r}, 'w').close()"))
    assert target.exists()


def test_run_non_zero_exit(process_runner: SubprocessRunner):
    with pytest.raises(ProcessExecutionError) as exc_info:
        process_runner.run(sys.executable, python_args("raise SystemExit(3)"))

    assert exc_info.value.returncode == 3
    assert not exc_info.value.spawn_failed


def test_run_missing_command(process_runner: SubprocessRunner):
    with pytest.raises(ProcessExecutionError, match=MISSING_COMMAND) as exc_info:
        process_runner.run(MISSING_COMMAND, [])

    assert exc_info.value.spawn_failed
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_arguments_are_not_shell_interpreted(process_runner: SubprocessRunner):
    result = process_runner.capture(sys.executable, python_args("import sys; print(sys.argv[1])") + ["$HOME; echo hi"])
    assert result.stdout.strip() == "$HOME; echo hi"


def test_capture_splits_streams(process_runner: SubprocessRunner):
    result = process_runner.capture(
        sys.executable,
        python_args("import sys; sys.stdout.write('out'); sys.stderr.write('mock_standard_error_output')"),
    )

    assert result.stdout == "out"
    assert result.stderr == "mock_standard_error_output"


def test_capture_empty_output(process_runner: SubprocessRunner):
    result = process_runner.capture(sys.executable, python_args("pass"))
    assert result.stdout == ""
    assert result.stderr == ""


def test_capture_failure_keeps_captured_text(process_runner: SubprocessRunner):
    code = "import sys; sys.stdout.write('partial'); sys.stderr.write('went wrong'); sys.exit(2)"

    with pytest.raises(ProcessExecutionError, match="went wrong") as exc_info:
        process_runner.capture(sys.executable, python_args(code))

    error = exc_info.value
    assert error.returncode == 2
    assert error.stdout == "partial"
    assert error.stderr == "went wrong"


def test_capture_missing_command(process_runner: SubprocessRunner):
    with pytest.raises(ProcessExecutionError) as exc_info:
        process_runner.capture(MISSING_COMMAND, [])

    error = exc_info.value
    assert error.spawn_failed
    assert error.stdout == ""
    assert MISSING_COMMAND in str(error)


def test_failure_message_survives_on_exception(process_runner: SubprocessRunner):
    code = "import sys; sys.stderr.write('boom'); sys.exit(2)"

    with pytest.raises(ProcessExecutionError) as exc_info:
        process_runner.capture(sys.executable, python_args(code))

    error = exc_info.value
    assert str(error) == f"Command '{sys.executable}' exited with status 2: boom"
    assert error.args == (str(error),)
    assert error.command_args == python_args(code)


def test_run_missing_command_message(process_runner: SubprocessRunner):
    with pytest.raises(ProcessExecutionError) as exc_info:
        process_runner.run(MISSING_COMMAND, ["--flag"])

    error = exc_info.value
    assert str(error).startswith(f"Failed to run '{MISSING_COMMAND}': ")
    assert error.command_args == ["--flag"]


def test_capture_replaces_undecodable_bytes(process_runner: SubprocessRunner):
    code = "import sys; sys.stdout.buffer.write(b'ok\\xff\\xfe'); sys.stderr.buffer.write(b'\\xff')"

    result = process_runner.capture(sys.executable, python_args(code))

    assert result.stdout == "ok\ufffd\ufffd"
    assert result.stderr == "\ufffd"


def test_capture_failure_with_undecodable_stderr(process_runner: SubprocessRunner):
    code = "import sys; sys.stderr.buffer.write(b'bad \\xff'); sys.exit(1)"

    with pytest.raises(ProcessExecutionError, match="bad \ufffd") as exc_info:
        process_runner.capture(sys.executable, python_args(code))

    assert exc_info.value.returncode == 1
