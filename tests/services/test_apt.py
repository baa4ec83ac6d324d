import subprocess

import pytest

from autodocker.constants import DOCKER_PACKAGES
from autodocker.errors import InstallerError
from autodocker.services.apt import AptService


class DummyLogger:
    def info(self, *_args, **_kwargs):
        return None

    def debug(self, *_args, **_kwargs):
        return None


class DummyConsole:
    def print(self, *_args, **_kwargs):
        return None


class RecordingRunCmd:
    def __init__(self, fail_on=None):
        self.calls = []
        self.fail_on = fail_on

    def __call__(self, cmd, **kwargs):
        self.calls.append((cmd, kwargs))
        if self.fail_on and self.fail_on in cmd:
            raise InstallerError(f"Command failed (100): {' '.join(cmd)}")
        return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")


def _service():
    return AptService(logger=DummyLogger(), console=DummyConsole())


def test_latest_keeps_package_names_unpinned():
    assert AptService.pin_packages(DOCKER_PACKAGES, "latest") == list(DOCKER_PACKAGES)


def test_explicit_version_pins_every_package_once():
    pin = "5:24.0.7-1~ubuntu.22.04~jammy"

    pinned = AptService.pin_packages(DOCKER_PACKAGES, pin)

    assert len(pinned) == len(DOCKER_PACKAGES)
    for name, pinned_name in zip(DOCKER_PACKAGES, pinned):
        assert pinned_name == f"{name}={pin}"
        assert pinned_name.count(f"={pin}") == 1


def test_update_runs_privileged_quiet_refresh():
    run_cmd = RecordingRunCmd()

    _service().update(run_cmd, "Failed to update package lists.")

    assert run_cmd.calls == [(["apt-get", "update", "-qq"], {"privileged": True})]


def test_update_failure_uses_stage_diagnostic():
    run_cmd = RecordingRunCmd(fail_on="update")

    with pytest.raises(InstallerError, match="Failed to update package lists with Docker repository"):
        _service().update(run_cmd, "Failed to update package lists with Docker repository.")


def test_install_suppresses_output_and_issues_single_command():
    run_cmd = RecordingRunCmd()

    _service().install(["curl", "gnupg"], run_cmd, "Failed to install dependencies.")

    cmd, kwargs = run_cmd.calls[0]
    assert cmd == ["apt-get", "install", "-y", "-qq", "curl", "gnupg"]
    assert kwargs == {"privileged": True, "capture_output": True}
    assert len(run_cmd.calls) == 1


def test_install_failure_uses_stage_diagnostic():
    run_cmd = RecordingRunCmd(fail_on="install")

    with pytest.raises(InstallerError, match="Failed to install Docker packages"):
        _service().install(DOCKER_PACKAGES, run_cmd, "Failed to install Docker packages.")

    assert len(run_cmd.calls) == 1


def test_write_source_list_replaces_file_through_tee():
    run_cmd = RecordingRunCmd()

    _service().write_source_list("/etc/apt/sources.list.d/docker.list", "deb x y stable", run_cmd)

    cmd, kwargs = run_cmd.calls[0]
    assert cmd == ["tee", "/etc/apt/sources.list.d/docker.list"]
    assert "-a" not in cmd
    assert kwargs["input_text"] == "deb x y stable\n"
    assert kwargs["privileged"] is True
