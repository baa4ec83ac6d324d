"""Shared domain models for auto-docker-installer."""

from dataclasses import dataclass
from typing import Optional

from .constants import (
    DEFAULT_DOCKER_VERSION,
    MIN_UBUNTU_VERSION,
    REPO_SUITE,
    SCRIPT_NAME,
    SCRIPT_VERSION,
)

STATUS_SUCCESS = "success"
STATUS_FAILED = "failed"
STATUS_CANCELLED = "cancelled"


@dataclass(frozen=True)
class RunConfiguration:
    """Immutable parameters for one invocation."""

    docker_version: str = DEFAULT_DOCKER_VERSION
    min_ubuntu_version: str = MIN_UBUNTU_VERSION
    program_name: str = SCRIPT_NAME
    program_version: str = SCRIPT_VERSION
    prompt_timeout: Optional[float] = None
    command_timeout: Optional[float] = None
    assume_yes: bool = False


@dataclass(frozen=True)
class PlatformDescriptor:
    """Facts read once from the host's os-release file."""

    distribution_id: str
    version_id: str
    codename: str


@dataclass(frozen=True)
class StageResult:
    """Outcome of one pipeline stage."""

    name: str
    status: str
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_SUCCESS

    @classmethod
    def success(cls, name: str, message: Optional[str] = None) -> "StageResult":
        return cls(name=name, status=STATUS_SUCCESS, message=message)

    @classmethod
    def failure(cls, name: str, message: str) -> "StageResult":
        return cls(name=name, status=STATUS_FAILED, message=message)

    @classmethod
    def cancelled(cls, name: str, message: str) -> "StageResult":
        return cls(name=name, status=STATUS_CANCELLED, message=message)


@dataclass(frozen=True)
class RepositoryDefinition:
    """APT source entry for the upstream Docker repository."""

    architecture: str
    keyring_path: str
    base_url: str
    codename: str
    suite: str = REPO_SUITE

    def source_line(self) -> str:
        return (
            f"deb [arch={self.architecture} signed-by={self.keyring_path}] "
            f"{self.base_url} {self.codename} {self.suite}"
        )
