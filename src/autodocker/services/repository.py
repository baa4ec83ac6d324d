"""Docker APT repository and signing key setup."""

import os
from typing import Callable

from autodocker.constants import (
    DOCKER_GPG_URL,
    DOCKER_KEYRING_PATH,
    DOCKER_REPO_URL,
    DOCKER_SOURCE_LIST_PATH,
    KEYRINGS_DIR,
    KEYRINGS_DIR_MODE,
)
from autodocker.errors import InstallerError
from autodocker.errors_catalog import actionable_error
from autodocker.models import PlatformDescriptor, RepositoryDefinition


class RepositoryService:
    """Provisions the keyring and source list for download.docker.com."""

    def __init__(
        self,
        logger,
        console,
        apt_service,
        download_service,
        keyring_path: str = DOCKER_KEYRING_PATH,
        source_list_path: str = DOCKER_SOURCE_LIST_PATH,
        key_url: str = DOCKER_GPG_URL,
        repo_url: str = DOCKER_REPO_URL,
    ):
        self.logger = logger
        self.console = console
        self.apt_service = apt_service
        self.download_service = download_service
        self.keyring_path = keyring_path
        self.source_list_path = source_list_path
        self.key_url = key_url
        self.repo_url = repo_url

    def ensure_keyring_dir(self, run_cmd: Callable):
        keyring_dir = os.path.dirname(self.keyring_path) or KEYRINGS_DIR
        try:
            run_cmd(["install", "-m", KEYRINGS_DIR_MODE, "-d", keyring_dir], privileged=True)
        except InstallerError as exc:
            raise InstallerError(actionable_error("keyring_dir_failed", path=keyring_dir)) from exc

    def install_signing_key(self, run_cmd: Callable, work_dir: str):
        armored_key = os.path.join(work_dir, "docker.asc")
        try:
            self.download_service.download_file(self.key_url, armored_key, "Docker GPG key")
            run_cmd(
                ["gpg", "--batch", "--yes", "--dearmor", "-o", self.keyring_path, armored_key],
                privileged=True,
                capture_output=True,
            )
        except InstallerError as exc:
            self.logger.debug("Signing key setup failed: %s", exc)
            raise InstallerError(actionable_error("gpg_key_failed", url=self.key_url)) from exc

        run_cmd(["chmod", "a+r", self.keyring_path], privileged=True)

    def detect_architecture(self, run_cmd: Callable) -> str:
        result = run_cmd(["dpkg", "--print-architecture"], capture_output=True)
        architecture = (result.stdout or "").strip()
        if not architecture:
            raise InstallerError("Could not determine the host architecture from dpkg.")
        return architecture

    def build_definition(self, architecture: str, codename: str) -> RepositoryDefinition:
        return RepositoryDefinition(
            architecture=architecture,
            keyring_path=self.keyring_path,
            base_url=self.repo_url,
            codename=codename,
        )

    def write_definition(self, definition: RepositoryDefinition, run_cmd: Callable):
        self.apt_service.write_source_list(
            self.source_list_path,
            definition.source_line(),
            run_cmd,
            error_message=actionable_error("source_list_failed", path=self.source_list_path),
        )

    def configure(
        self,
        platform: PlatformDescriptor,
        run_cmd: Callable,
        work_dir: str,
    ) -> RepositoryDefinition:
        self.console.print("[blue]Setting up Docker repository...[/blue]")

        self.ensure_keyring_dir(run_cmd)
        self.install_signing_key(run_cmd, work_dir)

        definition = self.build_definition(self.detect_architecture(run_cmd), platform.codename)
        self.write_definition(definition, run_cmd)

        self.apt_service.update(
            run_cmd,
            actionable_error("repo_update_failed", path=self.source_list_path),
        )
        self.console.print("[green]Docker repository configured.[/green]")
        return definition
