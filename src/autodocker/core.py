import getpass
import logging
import subprocess
from typing import Callable, List, Optional

import requests
from rich.console import Console
from rich.markup import escape

from .constants import (
    DEFAULT_DOCKER_VERSION,
    DEPENDENCY_PACKAGES,
    DOCKER_PACKAGES,
    OS_RELEASE_PATH,
)
from .errors import InstallerError
from .errors_catalog import actionable_error
from .models import STATUS_CANCELLED, PlatformDescriptor, RunConfiguration, StageResult
from .services.apt import AptService
from .services.command_runner import CommandRunner
from .services.docker_runtime import DockerRuntimeService
from .services.download import DownloadService
from .services.filesystem import FileSystemService
from .services.os_release import PlatformService
from .services.post_install import PostInstallService
from .services.privilege import PrivilegeService
from .services.prompt import AssumeYesConfirmer, ConsoleConfirmer
from .services.report import ReportService
from .services.repository import RepositoryService
from .services.versions import VersionExtractor

console = Console()
logger = logging.getLogger("autodocker")


class DockerInstaller:
    """Runs the Docker installation stages in order and stops at the first failure.

    There is no rollback: a failure after the repository or packages were set up
    leaves the host partially configured.
    """

    STAGES = (
        ("check_privileges", "Check that the installer runs as a sudo-capable user"),
        ("validate_platform", "Validate the Ubuntu release"),
        ("detect_existing_installation", "Detect an existing Docker installation"),
        ("install_dependencies", "Install prerequisite packages"),
        ("configure_repository", "Add the Docker signing key and APT repository"),
        ("install_docker_packages", "Install Docker Engine and plugins"),
        ("configure_docker", "Configure docker group, services and ~/.docker"),
        ("verify_installation", "Verify Docker with a hello-world container"),
        ("show_summary", "Print the installation summary"),
    )

    def __init__(
        self,
        docker_version: str = DEFAULT_DOCKER_VERSION,
        verbose: bool = False,
        assume_yes: bool = False,
        prompt_timeout: Optional[float] = None,
        command_timeout: Optional[float] = None,
        os_release_path: str = OS_RELEASE_PATH,
        confirmer=None,
    ):
        self.config = RunConfiguration(
            docker_version=self._normalize_docker_version(docker_version),
            prompt_timeout=prompt_timeout,
            command_timeout=command_timeout,
            assume_yes=assume_yes,
        )
        self.verbose = verbose

        self.platform: Optional[PlatformDescriptor] = None
        self.work_dir: Optional[str] = None
        self.results: List[StageResult] = []
        self.current_step_name: Optional[str] = None
        self.engine_version: Optional[str] = None
        self.compose_version: Optional[str] = None

        self.command_runner = CommandRunner(logger=logger, default_timeout=command_timeout)
        self.filesystem_service = FileSystemService(logger=logger, console=console)
        self.privilege_service = PrivilegeService(logger=logger, console=console)
        self.platform_service = PlatformService(
            logger=logger,
            console=console,
            os_release_path=os_release_path,
        )
        self.docker_runtime_service = DockerRuntimeService(
            logger=logger,
            console=console,
            version_extractor=VersionExtractor(),
        )
        self.apt_service = AptService(logger=logger, console=console)
        self.download_service = DownloadService(logger=logger, requests_module=requests)
        self.repository_service = RepositoryService(
            logger=logger,
            console=console,
            apt_service=self.apt_service,
            download_service=self.download_service,
        )
        self.post_install_service = PostInstallService(
            logger=logger,
            console=console,
            filesystem_service=self.filesystem_service,
        )
        self.report_service = ReportService(console=console)

        if confirmer is not None:
            self.confirmer = confirmer
        elif assume_yes:
            self.confirmer = AssumeYesConfirmer(console=console)
        else:
            self.confirmer = ConsoleConfirmer(console=console, logger=logger, timeout=prompt_timeout)

    @staticmethod
    def _normalize_docker_version(value: Optional[str]) -> str:
        clean_value = (value or "").strip()
        if not clean_value or any(char.isspace() for char in clean_value):
            raise InstallerError(
                "--docker-version must be 'latest' or an exact APT version string without spaces."
            )
        return clean_value

    @classmethod
    def plan(cls) -> List[str]:
        return [title for _, title in cls.STAGES]

    def _run_step(self, name: str, callback: Callable[[], Optional[StageResult]]) -> StageResult:
        self.current_step_name = name
        logger.debug("Starting stage: %s", name)

        try:
            outcome = callback()
        except InstallerError as exc:
            result = StageResult.failure(name, str(exc))
        else:
            result = outcome if outcome is not None else StageResult.success(name)

        logger.debug("Stage %s finished with status %s", name, result.status)
        self.results.append(result)
        self.current_step_name = None
        return result

    def _run_cmd(
        self,
        cmd: List[str],
        check: bool = True,
        capture_output: bool = False,
        privileged: bool = False,
        input_text: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> subprocess.CompletedProcess:
        return self.command_runner.run(
            cmd,
            check=check,
            capture_output=capture_output,
            privileged=privileged,
            input_text=input_text,
            timeout=timeout,
        )

    def check_privileges(self):
        self.privilege_service.check(self._run_cmd, prompt_timeout=self.config.prompt_timeout)

    def validate_platform(self):
        self.platform = self.platform_service.detect_and_validate(self.config.min_ubuntu_version)

    def detect_existing_installation(self) -> Optional[StageResult]:
        if not self.docker_runtime_service.is_installed():
            return None

        current = self.docker_runtime_service.engine_version_or_unknown(self._run_cmd)
        console.print(f"[yellow]Warning:[/yellow] Docker is already installed: version {current}")
        logger.warning("Docker is already installed: version %s", current)

        if not self.confirmer.confirm("Do you want to reinstall Docker?"):
            return StageResult.cancelled("detect_existing_installation", "Installation cancelled")

        console.print("[blue]Proceeding with reinstallation...[/blue]")
        return None

    def install_dependencies(self):
        console.print("[blue]Installing required dependencies...[/blue]")
        self.apt_service.update(self._run_cmd, actionable_error("apt_update_failed"))
        self.apt_service.install(
            DEPENDENCY_PACKAGES,
            self._run_cmd,
            actionable_error("dependencies_failed"),
        )

    def configure_repository(self):
        if self.platform is None:
            raise InstallerError("Platform must be validated before configuring the repository.")
        if self.work_dir is None:
            self.work_dir = self.filesystem_service.make_work_dir()
        self.repository_service.configure(self.platform, self._run_cmd, self.work_dir)

    def install_docker_packages(self):
        console.print("[blue]Installing Docker packages...[/blue]")
        packages = self.apt_service.pin_packages(DOCKER_PACKAGES, self.config.docker_version)
        self.apt_service.install(
            packages,
            self._run_cmd,
            actionable_error("packages_failed", version=self.config.docker_version),
        )

    def configure_docker(self):
        user = getpass.getuser()
        self.post_install_service.configure(user, self._run_cmd)

    def verify_installation(self) -> Optional[StageResult]:
        console.print("[blue]Verifying installation...[/blue]")

        if not self.docker_runtime_service.responds(self._run_cmd):
            return StageResult.failure("verify_installation", actionable_error("docker_missing"))

        self.engine_version = self.docker_runtime_service.engine_version(self._run_cmd)
        console.print(f"[green]Docker installed: version {self.engine_version}[/green]")

        try:
            self.compose_version = self.docker_runtime_service.compose_version(self._run_cmd)
        except InstallerError as exc:
            console.print(
                "[yellow]Warning:[/yellow] Could not determine Docker Compose version: "
                f"{escape(str(exc))}"
            )
            logger.warning("Could not determine Docker Compose version: %s", exc)
        else:
            console.print(f"[green]Docker Compose installed: version {self.compose_version}[/green]")

        console.print("[blue]Testing Docker with hello-world container...[/blue]")
        if self.docker_runtime_service.run_smoke_test(self._run_cmd):
            console.print("[green]Docker test successful![/green]")
        else:
            console.print(
                "[yellow]Warning:[/yellow] Docker test completed but output verification failed"
            )
            logger.warning("Docker test completed but output verification failed")
        return None

    def show_summary(self):
        self.report_service.show_summary(
            engine_version=self.docker_runtime_service.engine_version_or_unknown(self._run_cmd),
            compose_version=self.docker_runtime_service.compose_version_or_unknown(self._run_cmd),
        )
        if self.verbose:
            self.report_service.show_stages(self.results)

    def cleanup(self):
        logger.info("Cleaning up temporary files...")
        self.filesystem_service.cleanup_dir(self.work_dir)
        self.work_dir = None

    def run(self) -> int:
        exit_code = 1

        try:
            console.print(
                f"[blue]Starting {self.config.program_name} v{self.config.program_version}[/blue]"
            )
            console.print(f"[blue]Target Docker version: {self.config.docker_version}[/blue]")
            logger.debug("Run configuration: %s", self.config)

            for name, _ in self.STAGES:
                result = self._run_step(name, getattr(self, name))
                if result.ok:
                    continue

                if result.status == STATUS_CANCELLED:
                    console.print(f"[blue]{result.message}[/blue]")
                    logger.info(result.message)
                    exit_code = 0
                    return exit_code

                console.print(f"[bold red]Error:[/bold red] {escape(result.message or '')}")
                logger.error("Stage '%s' failed: %s", name, result.message)
                exit_code = 1
                return exit_code

            console.print("[bold green]Installation completed successfully![/bold green]")
            logger.info("Installation completed successfully")
            exit_code = 0
            return exit_code

        except KeyboardInterrupt:
            console.print("[bold red]Operation cancelled by user.[/bold red]")
            logger.info("Operation cancelled by user during %s", self.current_step_name or "startup")
            exit_code = 130
            return exit_code
        except Exception as exc:
            console.print(f"[bold red]Unexpected error:[/bold red] {escape(str(exc))}")
            logger.exception("Unexpected error")
            exit_code = 1
            return exit_code
        finally:
            self.cleanup()
