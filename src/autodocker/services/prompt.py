"""Interactive yes/no confirmation for auto-docker-installer."""

import select
import sys
from typing import Optional


class ConsoleConfirmer:
    """Asks a yes/no question on the terminal. Anything but y/Y means no."""

    AFFIRMATIVE = ("y", "Y")

    def __init__(self, console, logger, timeout: Optional[float] = None, stdin=None):
        self.console = console
        self.logger = logger
        self.timeout = timeout
        self.stdin = stdin if stdin is not None else sys.stdin

    def confirm(self, prompt: str) -> bool:
        self.console.print(f"{prompt} (y/N): ", end="")
        answer = self._read_answer()
        if answer is None:
            self.console.print()
            self.logger.warning("No answer received within %ss; assuming 'no'.", self.timeout)
            return False
        return answer.strip()[:1] in self.AFFIRMATIVE

    def _read_answer(self) -> Optional[str]:
        if self.timeout is not None:
            ready, _, _ = select.select([self.stdin], [], [], self.timeout)
            if not ready:
                return None
        return self.stdin.readline()


class AssumeYesConfirmer:
    """Answers yes to every question; used with --yes."""

    def __init__(self, console):
        self.console = console

    def confirm(self, prompt: str) -> bool:
        self.console.print(f"{prompt} (y/N): y [dim](--yes)[/dim]")
        return True
