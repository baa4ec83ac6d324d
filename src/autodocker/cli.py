import logging
import os

import click
from rich.logging import RichHandler

from .constants import DEFAULT_CONFIG_FILE, DEFAULT_DOCKER_VERSION, SCRIPT_NAME, SCRIPT_VERSION
from .core import DockerInstaller, InstallerError
from .services.config_loader import ConfigLoader


def _resolve_option(cli_value, config, key, default=None):
    if cli_value is not None:
        return cli_value
    if key in config:
        return config[key]
    return default


def _optional_float(value):
    return None if value is None else float(value)


logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True, show_level=False, show_path=False)],
)


class InstallerCommand(click.Command):
    """Reports unknown options and stray arguments with exit code 1."""

    def parse_args(self, ctx, args):
        try:
            remaining = super().parse_args(ctx, args)
        except click.NoSuchOption as exc:
            raise self._usage_error(ctx, exc.option_name) from exc
        except click.UsageError as exc:
            exc.exit_code = 1
            raise

        if ctx.args:
            raise self._usage_error(ctx, ctx.args[0])
        return remaining

    @staticmethod
    def _usage_error(ctx, argument):
        error = click.UsageError(f"Unknown option: {argument}", ctx)
        error.exit_code = 1
        return error


@click.command(
    cls=InstallerCommand,
    context_settings={"help_option_names": ["-h", "--help"], "allow_extra_args": True},
)
@click.version_option(
    SCRIPT_VERSION,
    "-v",
    "--version",
    prog_name=SCRIPT_NAME,
    message="%(prog)s v%(version)s",
    help="Show script version",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Simulate installation without making changes",
)
@click.option(
    "--config",
    required=False,
    type=click.Path(),
    help=f"Path to a YAML configuration file. Defaults to {DEFAULT_CONFIG_FILE} if present.",
)
@click.option(
    "--docker-version",
    required=False,
    help="Exact Docker package version to pin, or 'latest' (default).",
)
@click.option(
    "--yes",
    "assume_yes",
    is_flag=True,
    default=None,
    help="Answer yes to the reinstall prompt.",
)
@click.option(
    "--prompt-timeout",
    required=False,
    type=float,
    default=None,
    help="Seconds to wait for interactive answers before giving up.",
)
@click.option(
    "--command-timeout",
    required=False,
    type=float,
    default=None,
    help="Seconds each external command may run before it is aborted.",
)
@click.option("--verbose", is_flag=True, default=None, help="Enable verbose logging")
@click.option("--log-file", type=click.Path(), help="Path to log file")
def main(
    dry_run,
    config,
    docker_version,
    assume_yes,
    prompt_timeout,
    command_timeout,
    verbose,
    log_file,
):
    """This script automates Docker installation on Ubuntu systems."""
    logger = logging.getLogger("autodocker")

    if dry_run:
        click.echo("Dry run mode - no changes will be made")
        for index, title in enumerate(DockerInstaller.plan(), start=1):
            click.echo(f"  {index}. {title}")
        return

    try:
        config_loader = ConfigLoader()
        resolved_config = config
        if resolved_config is None:
            default_config_path = os.path.join(os.getcwd(), DEFAULT_CONFIG_FILE)
            if os.path.exists(default_config_path):
                resolved_config = default_config_path

        config_values = config_loader.load(resolved_config)

        docker_version = str(
            _resolve_option(
                docker_version,
                config_values,
                "docker_version",
                default=DEFAULT_DOCKER_VERSION,
            )
        )
        assume_yes = bool(_resolve_option(assume_yes, config_values, "assume_yes", default=False))
        prompt_timeout = _optional_float(
            _resolve_option(prompt_timeout, config_values, "prompt_timeout")
        )
        command_timeout = _optional_float(
            _resolve_option(command_timeout, config_values, "command_timeout")
        )
    except (InstallerError, TypeError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc

    verbose = bool(_resolve_option(verbose, config_values, "verbose", default=False))
    log_file = _resolve_option(log_file, config_values, "log_file")

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(file_handler)

    try:
        installer = DockerInstaller(
            docker_version=docker_version,
            verbose=verbose,
            assume_yes=assume_yes,
            prompt_timeout=prompt_timeout,
            command_timeout=command_timeout,
        )
    except InstallerError as exc:
        raise click.ClickException(str(exc)) from exc

    raise SystemExit(installer.run())


if __name__ == "__main__":
    main()
