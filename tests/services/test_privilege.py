import subprocess

import pytest

from autodocker.errors import InstallerError, PreconditionError
from autodocker.services.privilege import PrivilegeService


class DummyLogger:
    def debug(self, *_args, **_kwargs):
        return None


class DummyConsole:
    def print(self, *_args, **_kwargs):
        return None


def _service(euid=1000):
    return PrivilegeService(logger=DummyLogger(), console=DummyConsole(), geteuid=lambda: euid)


def test_root_is_rejected_before_any_command():
    calls = []

    def run_cmd(cmd, **kwargs):
        calls.append(cmd)
        return subprocess.CompletedProcess(cmd, 0)

    with pytest.raises(PreconditionError, match="should not be run as root"):
        _service(euid=0).check(run_cmd)

    assert calls == []


def test_cached_credentials_skip_password_prompt():
    calls = []

    def run_cmd(cmd, **kwargs):
        calls.append(cmd)
        return subprocess.CompletedProcess(cmd, 0)

    _service().check(run_cmd)

    assert calls == [["sudo", "-n", "true"]]


def test_password_prompt_uses_prompt_timeout():
    calls = []

    def run_cmd(cmd, **kwargs):
        calls.append((cmd, kwargs))
        returncode = 1 if cmd == ["sudo", "-n", "true"] else 0
        return subprocess.CompletedProcess(cmd, returncode)

    _service().check(run_cmd, prompt_timeout=30.0)

    assert calls[1] == (["sudo", "-v"], {"timeout": 30.0})


def test_refused_authentication_is_fatal():
    def run_cmd(cmd, check=True, **kwargs):
        if cmd == ["sudo", "-v"]:
            raise InstallerError("Command failed (1): sudo -v")
        return subprocess.CompletedProcess(cmd, 1)

    with pytest.raises(InstallerError, match="Sudo authentication failed"):
        _service().check(run_cmd)


def test_missing_sudo_is_fatal():
    def run_cmd(cmd, **kwargs):
        raise InstallerError("Required command not found: sudo")

    with pytest.raises(InstallerError, match="Sudo authentication failed"):
        _service().check(run_cmd)
