"""
auto-docker-installer - Docker Engine and Compose installer for Ubuntu hosts
"""

__version__ = "2.0"

from .core import DockerInstaller, InstallerError

__all__ = ["DockerInstaller", "InstallerError"]
