"""Host platform detection and validation for auto-docker-installer."""

from pathlib import Path
from typing import Dict

from packaging import version

from autodocker.constants import OS_RELEASE_PATH, SUPPORTED_OS_ID
from autodocker.errors import PreconditionError
from autodocker.errors_catalog import actionable_error
from autodocker.models import PlatformDescriptor


class PlatformService:
    """Reads os-release metadata and checks it against the supported platform."""

    def __init__(self, logger, console, os_release_path: str = OS_RELEASE_PATH):
        self.logger = logger
        self.console = console
        self.os_release_path = os_release_path

    def read_os_release(self) -> Dict[str, str]:
        path = Path(self.os_release_path)
        if not path.is_file():
            raise PreconditionError(actionable_error("os_release_missing", path=str(path)))

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise PreconditionError(f"Could not read {path}: {exc}") from exc

        return self.parse_os_release(content)

    @staticmethod
    def parse_os_release(content: str) -> Dict[str, str]:
        values: Dict[str, str] = {}
        for raw_line in content.splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, _, value = line.partition("=")
            value = value.strip()
            if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
                value = value[1:-1]
            values[key.strip()] = value
        return values

    @staticmethod
    def major_minor(version_id: str) -> version.Version:
        """Parses the first two dot-separated components, e.g. "22.04.3" -> 22.4."""
        truncated = ".".join(version_id.strip().split(".")[:2])
        try:
            return version.Version(truncated)
        except version.InvalidVersion as exc:
            raise PreconditionError(f"Unrecognized Ubuntu version: {version_id!r}") from exc

    def detect(self) -> PlatformDescriptor:
        values = self.read_os_release()
        return PlatformDescriptor(
            distribution_id=values.get("ID", ""),
            version_id=values.get("VERSION_ID", ""),
            codename=values.get("VERSION_CODENAME", ""),
        )

    def validate(self, platform: PlatformDescriptor, minimum: str):
        if platform.distribution_id != SUPPORTED_OS_ID:
            raise PreconditionError(
                actionable_error("unsupported_os", os_id=platform.distribution_id or "<unknown>")
            )

        if not platform.version_id:
            raise PreconditionError(f"{self.os_release_path} does not define VERSION_ID.")

        if self.major_minor(platform.version_id) < self.major_minor(minimum):
            raise PreconditionError(
                actionable_error(
                    "unsupported_version",
                    version=platform.version_id,
                    minimum=minimum,
                )
            )

        if not platform.codename:
            raise PreconditionError(f"{self.os_release_path} does not define VERSION_CODENAME.")

        self.console.print(
            f"[blue]Detected Ubuntu {platform.version_id} ({platform.codename})[/blue]"
        )
        self.logger.info("Detected Ubuntu %s (%s)", platform.version_id, platform.codename)

    def detect_and_validate(self, minimum: str) -> PlatformDescriptor:
        platform = self.detect()
        self.validate(platform, minimum)
        return platform
