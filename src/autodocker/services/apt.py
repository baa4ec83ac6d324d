"""APT package manager operations for auto-docker-installer."""

from typing import Callable, Iterable, List, Optional

from autodocker.constants import DEFAULT_DOCKER_VERSION
from autodocker.errors import InstallerError


class AptService:
    """Wraps apt-get index refreshes, installs and source-list writes."""

    APT = "apt-get"

    def __init__(self, logger, console):
        self.logger = logger
        self.console = console

    @staticmethod
    def pin_packages(packages: Iterable[str], docker_version: str) -> List[str]:
        if docker_version == DEFAULT_DOCKER_VERSION:
            return list(packages)
        return [f"{package}={docker_version}" for package in packages]

    def update(self, run_cmd: Callable, error_message: str):
        self.logger.debug("Refreshing APT package index")
        try:
            run_cmd([self.APT, "update", "-qq"], privileged=True)
        except InstallerError as exc:
            raise InstallerError(error_message) from exc

    def install(self, packages: Iterable[str], run_cmd: Callable, error_message: str):
        package_list = list(packages)
        self.logger.info("Installing packages: %s", " ".join(package_list))
        try:
            run_cmd(
                [self.APT, "install", "-y", "-qq"] + package_list,
                privileged=True,
                capture_output=True,
            )
        except InstallerError as exc:
            self.logger.debug("APT install failure: %s", exc)
            raise InstallerError(error_message) from exc

    def write_source_list(
        self,
        path: str,
        line: str,
        run_cmd: Callable,
        error_message: Optional[str] = None,
    ):
        """Replaces the content of `path` with `line` via `sudo tee` (never appends)."""
        self.logger.debug("Writing APT source %s: %s", path, line)
        try:
            run_cmd(["tee", path], privileged=True, capture_output=True, input_text=f"{line}\n")
        except InstallerError as exc:
            raise InstallerError(error_message or str(exc)) from exc
