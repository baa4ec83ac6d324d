"""Domain errors for auto-docker-installer."""


class InstallerError(RuntimeError):
    """Raised when the installation cannot continue safely."""


class PreconditionError(InstallerError):
    """Raised when the invoking identity or host platform is not supported."""


class VersionParseError(InstallerError):
    """Raised when a version string cannot be extracted from command output."""
