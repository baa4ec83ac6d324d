"""Privilege guard for auto-docker-installer."""

import os
from typing import Callable, Optional

from autodocker.errors import InstallerError, PreconditionError
from autodocker.errors_catalog import actionable_error


class PrivilegeService:
    """Refuses to run as root and primes the sudo credential cache."""

    def __init__(self, logger, console, geteuid: Callable[[], int] = os.geteuid):
        self.logger = logger
        self.console = console
        self.geteuid = geteuid

    def ensure_not_root(self):
        if self.geteuid() == 0:
            raise PreconditionError(actionable_error("running_as_root"))

    def ensure_sudo(self, run_cmd: Callable, prompt_timeout: Optional[float] = None):
        try:
            probe = run_cmd(["sudo", "-n", "true"], check=False, capture_output=True)
        except InstallerError as exc:
            raise InstallerError(actionable_error("sudo_failed")) from exc

        if probe.returncode == 0:
            self.logger.debug("Cached sudo credentials found.")
            return

        self.console.print("[blue]Please enter your sudo password when prompted[/blue]")
        try:
            run_cmd(["sudo", "-v"], timeout=prompt_timeout)
        except InstallerError as exc:
            raise InstallerError(actionable_error("sudo_failed")) from exc

    def check(self, run_cmd: Callable, prompt_timeout: Optional[float] = None):
        self.ensure_not_root()
        self.ensure_sudo(run_cmd, prompt_timeout=prompt_timeout)
