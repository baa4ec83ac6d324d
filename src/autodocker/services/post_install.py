"""Post-install configuration: group membership, services and user directory."""

from pathlib import Path
from typing import Callable, Optional

from autodocker.constants import DOCKER_GROUP, DOCKER_SERVICE, DOCKER_UNITS, USER_CONFIG_DIR_NAME
from autodocker.errors import InstallerError
from autodocker.errors_catalog import actionable_error


class PostInstallService:
    """Grants the invoking user docker access and brings the daemon up."""

    def __init__(self, logger, console, filesystem_service):
        self.logger = logger
        self.console = console
        self.filesystem_service = filesystem_service

    def add_user_to_group(self, user: str, run_cmd: Callable):
        try:
            run_cmd(["usermod", "-aG", DOCKER_GROUP, user], privileged=True)
        except InstallerError as exc:
            raise InstallerError(actionable_error("usermod_failed", user=user)) from exc
        self.logger.info("Added %s to the %s group", user, DOCKER_GROUP)

    def enable_services(self, run_cmd: Callable):
        try:
            run_cmd(["systemctl", "enable"] + list(DOCKER_UNITS), privileged=True, capture_output=True)
        except InstallerError as exc:
            raise InstallerError(actionable_error("enable_failed")) from exc

    def is_service_active(self, run_cmd: Callable) -> bool:
        result = run_cmd(["systemctl", "is-active", "--quiet", DOCKER_SERVICE], check=False)
        return result.returncode == 0

    def start_service(self, run_cmd: Callable):
        if self.is_service_active(run_cmd):
            self.logger.info("Docker service is already running")
            return

        try:
            run_cmd(["systemctl", "start", DOCKER_SERVICE], privileged=True)
        except InstallerError as exc:
            raise InstallerError(actionable_error("start_failed")) from exc

    def prepare_user_dir(self, user: str, run_cmd: Callable, home: Optional[Path] = None) -> Path:
        config_dir = (home or Path.home()) / USER_CONFIG_DIR_NAME
        try:
            self.filesystem_service.ensure_dir(config_dir)
        except OSError as exc:
            raise InstallerError(actionable_error("user_dir_failed", path=str(config_dir))) from exc

        try:
            # "user:" selects the user's login group
            run_cmd(["chown", "-R", f"{user}:", str(config_dir)], privileged=True)
        except InstallerError as exc:
            raise InstallerError(
                actionable_error("chown_failed", path=str(config_dir), user=user)
            ) from exc
        return config_dir

    def configure(self, user: str, run_cmd: Callable, home: Optional[Path] = None) -> Path:
        self.console.print("[blue]Configuring Docker...[/blue]")
        self.add_user_to_group(user, run_cmd)
        self.enable_services(run_cmd)
        self.start_service(run_cmd)
        return self.prepare_user_dir(user, run_cmd, home=home)
