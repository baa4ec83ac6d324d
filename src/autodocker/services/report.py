"""Post-install summary output."""

from typing import Iterable

from rich.table import Table

from autodocker.models import StageResult

_STATUS_STYLES = {
    "success": "green",
    "failed": "red",
    "cancelled": "yellow",
}


class ReportService:
    """Prints the completion banner and next-step guidance."""

    RULE = "=" * 64

    def __init__(self, console):
        self.console = console

    def show_summary(self, engine_version: str, compose_version: str):
        lines = [
            "",
            self.RULE,
            " Docker Installation Complete!",
            self.RULE,
            "",
            " Installed:",
            f"   • Docker Engine: {engine_version}",
            f"   • Docker Compose: {compose_version}",
            "",
            "  Important:",
            "   • You must LOG OUT and LOG BACK IN for group changes to take effect",
            "   • After that, you can run Docker commands without sudo",
            "",
            " Quick test after logging back in:",
            "   docker run hello-world",
            "   docker --version",
            "",
            " Next steps:",
            "   • Learn Docker: https://docs.docker.com/get-started/",
            "   • Find images: https://hub.docker.com/",
            "",
            " Tip: Run 'docker info' to see detailed Docker information",
            self.RULE,
        ]
        for line in lines:
            self.console.print(line, markup=False, highlight=False)

    def show_stages(self, results: Iterable[StageResult]):
        table = Table(title="Stages", show_header=True, header_style="bold")
        table.add_column("Stage")
        table.add_column("Status")
        for result in results:
            style = _STATUS_STYLES.get(result.status, "white")
            table.add_row(result.name, f"[{style}]{result.status}[/{style}]")
        self.console.print(table)
