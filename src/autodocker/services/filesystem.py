"""Filesystem helpers for auto-docker-installer."""

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Union

from rich.console import Console


class FileSystemService:
    """Encapsulates local file and directory side effects."""

    def __init__(self, logger: logging.Logger, console: Console):
        self.logger = logger
        self.console = console

    def ensure_dir(self, path: Union[str, Path]) -> Path:
        directory = Path(path)
        if not directory.is_dir():
            directory.mkdir(parents=True, exist_ok=True)
            self.logger.debug("Created directory: %s", directory)
        return directory

    def make_work_dir(self) -> str:
        path = tempfile.mkdtemp(prefix="autodocker-")
        self.logger.debug("Created working directory: %s", path)
        return path

    def cleanup_dir(self, path: Union[str, Path, None]):
        if path and Path(path).exists():
            try:
                shutil.rmtree(path)
                self.logger.debug("Removed directory: %s", path)
            except OSError as exc:
                message = f"Warning: Could not remove {path}: {exc}"
                self.console.print(f"[yellow]{message}[/yellow]")
                self.logger.warning(message)
