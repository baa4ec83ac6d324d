import subprocess
import sys

import pytest

import autodocker.services.command_runner as command_runner_module
from autodocker.errors import InstallerError
from autodocker.services.command_runner import CommandRunner


class DummyLogger:
    def debug(self, *_args, **_kwargs):
        return None

    def warning(self, *_args, **_kwargs):
        return None


def test_command_runner_raises_with_stderr():
    runner = CommandRunner(logger=DummyLogger())

    with pytest.raises(InstallerError, match="boom"):
        runner.run(
            [sys.executable, "-c", "import sys; sys.stderr.write('boom'); sys.exit(1)"],
            check=True,
            capture_output=True,
        )


def test_command_runner_returns_when_check_disabled():
    runner = CommandRunner(logger=DummyLogger())

    result = runner.run(
        [sys.executable, "-c", "import sys; sys.exit(1)"],
        check=False,
        capture_output=True,
    )

    assert result.returncode == 1


def test_command_runner_timeout_raises_error():
    runner = CommandRunner(logger=DummyLogger())

    with pytest.raises(InstallerError, match="timed out"):
        runner.run(
            [sys.executable, "-c", "import time; time.sleep(2)"],
            check=True,
            capture_output=True,
            timeout=0.1,
        )


def test_command_runner_uses_default_timeout():
    runner = CommandRunner(logger=DummyLogger(), default_timeout=0.1)

    with pytest.raises(InstallerError, match="timed out after 0.1s"):
        runner.run([sys.executable, "-c", "import time; time.sleep(2)"], capture_output=True)


def test_command_runner_feeds_input_text():
    runner = CommandRunner(logger=DummyLogger())

    result = runner.run(
        [sys.executable, "-c", "import sys; sys.stdout.write(sys.stdin.read().upper())"],
        capture_output=True,
        input_text="deb stable\n",
    )

    assert result.stdout == "DEB STABLE\n"


def test_command_runner_reports_missing_binary():
    runner = CommandRunner(logger=DummyLogger())

    with pytest.raises(InstallerError, match="Required command not found: definitely-not-a-binary"):
        runner.run(["definitely-not-a-binary"])


def test_command_runner_prefixes_privileged_commands_with_sudo(monkeypatch):
    captured = {}

    def fake_run(cmd, **kwargs):
        captured["cmd"] = cmd
        captured["kwargs"] = kwargs
        return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")

    monkeypatch.setattr(command_runner_module.subprocess, "run", fake_run)
    runner = CommandRunner(logger=DummyLogger())

    runner.run(["apt-get", "update", "-qq"], privileged=True)

    assert captured["cmd"] == ["sudo", "apt-get", "update", "-qq"]
    assert captured["kwargs"]["text"] is True
