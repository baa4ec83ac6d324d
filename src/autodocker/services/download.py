"""Signing key download service for auto-docker-installer."""

import os
from urllib.parse import urlparse

import requests

from autodocker.constants import DOWNLOAD_TIMEOUT_SECONDS
from autodocker.errors import InstallerError


class DownloadService:
    """Fetches small remote files over HTTPS."""

    def __init__(self, logger, requests_module=requests, timeout: float = DOWNLOAD_TIMEOUT_SECONDS):
        self.logger = logger
        self.requests = requests_module
        self.timeout = timeout

    def enforce_https(self, url: str):
        if urlparse(url).scheme.lower() != "https":
            raise InstallerError(f"Refusing to download over an insecure channel: {url}")

    def download_file(self, url: str, dest_path: str, description: str = "file"):
        self.logger.info("Downloading %s to %s", url, dest_path)
        self.enforce_https(url)

        written = 0
        try:
            with self.requests.get(url, stream=True, timeout=self.timeout) as response:
                response.raise_for_status()
                os.makedirs(os.path.dirname(dest_path) or ".", exist_ok=True)
                with open(dest_path, "wb") as file_obj:
                    for chunk in response.iter_content(chunk_size=8192):
                        if not chunk:
                            continue
                        file_obj.write(chunk)
                        written += len(chunk)
        except self.requests.RequestException as exc:
            raise InstallerError(f"Download failed for {description}: {exc}") from exc
        except OSError as exc:
            raise InstallerError(f"Could not write {description} to {dest_path}: {exc}") from exc

        if written == 0:
            raise InstallerError(f"Download failed for {description}: empty response from {url}")

        self.logger.debug("Downloaded %s bytes for %s", written, description)
        return dest_path
