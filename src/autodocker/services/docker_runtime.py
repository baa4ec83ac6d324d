"""Docker runtime queries for auto-docker-installer."""

import shutil
from typing import Callable, Optional

from autodocker.constants import TEST_EXPECTED_OUTPUT, TEST_IMAGE
from autodocker.errors import InstallerError
from autodocker.services.versions import VersionExtractor


class DockerRuntimeService:
    """Detects the docker binary, reports versions and runs the smoke test."""

    def __init__(
        self,
        logger,
        console,
        version_extractor: Optional[VersionExtractor] = None,
        which=shutil.which,
    ):
        self.logger = logger
        self.console = console
        self.version_extractor = version_extractor or VersionExtractor()
        self.which = which

    def is_installed(self) -> bool:
        return self.which("docker") is not None

    def engine_version(self, run_cmd: Callable) -> str:
        result = run_cmd(["docker", "--version"], capture_output=True)
        return self.version_extractor.engine_version(result.stdout)

    def compose_version(self, run_cmd: Callable) -> str:
        result = run_cmd(["docker", "compose", "version"], capture_output=True)
        return self.version_extractor.compose_version(result.stdout)

    def engine_version_or_unknown(self, run_cmd: Callable) -> str:
        try:
            return self.engine_version(run_cmd)
        except InstallerError as exc:
            self.logger.debug("Could not determine Docker version: %s", exc)
            return "unknown"

    def compose_version_or_unknown(self, run_cmd: Callable) -> str:
        try:
            return self.compose_version(run_cmd)
        except InstallerError as exc:
            self.logger.debug("Could not determine Docker Compose version: %s", exc)
            return "unknown"

    def responds(self, run_cmd: Callable) -> bool:
        try:
            result = run_cmd(["docker", "--version"], check=False, capture_output=True)
        except InstallerError:
            return False
        return result.returncode == 0

    def run_smoke_test(self, run_cmd: Callable) -> bool:
        """Runs a throwaway hello-world container; True when its output looks right.

        Runs through sudo because the docker group membership granted earlier is not
        active in the current login session yet.
        """
        try:
            result = run_cmd(
                ["docker", "run", "--rm", TEST_IMAGE],
                check=False,
                capture_output=True,
                privileged=True,
            )
        except InstallerError as exc:
            self.logger.warning("Could not run the %s container: %s", TEST_IMAGE, exc)
            return False

        output = (result.stdout or "") + (result.stderr or "")
        return TEST_EXPECTED_OUTPUT in output
