"""Version string extraction from docker command output."""

import re

from autodocker.errors import VersionParseError

_VERSION_PATTERN = re.compile(r"^\d+(\.\d+)*")


class VersionExtractor:
    """Parses versions positionally from `docker --version` and `docker compose version`.

    `Docker version 24.0.7, build afdd53b` yields `24.0.7` (third field, trailing
    punctuation removed). `Docker Compose version v2.21.0` yields `2.21.0` (fourth
    field, leading "v" removed).
    """

    TRAILING_PUNCTUATION = ",;:"

    def engine_version(self, output: str) -> str:
        field = self._field(output, 2, "docker --version")
        return self._validated(field.rstrip(self.TRAILING_PUNCTUATION), output)

    def compose_version(self, output: str) -> str:
        field = self._field(output, 3, "docker compose version")
        cleaned = field.rstrip(self.TRAILING_PUNCTUATION).lstrip("vV")
        return self._validated(cleaned, output)

    @staticmethod
    def _field(output: str, index: int, command: str) -> str:
        lines = (output or "").strip().splitlines()
        fields = lines[0].split() if lines else []
        if len(fields) <= index:
            raise VersionParseError(
                f"Unexpected output from `{command}`: {(output or '').strip()!r}"
            )
        return fields[index]

    @staticmethod
    def _validated(value: str, output: str) -> str:
        if not _VERSION_PATTERN.match(value):
            raise VersionParseError(f"Could not parse a version from {output.strip()!r}")
        return value
