"""CLI entry point for Roster."""

from __future__ import annotations

from pathlib import Path

import click
import uvicorn

from roster.config import ConfigError, RosterConfig, find_config, load_config
from roster.logging import setup_logging


def _resolve_config(config_path: Path | None) -> RosterConfig:
    """Load an explicit config, else the nearest roster.yaml, else defaults."""
    if config_path is None:
        try:
            config_path = find_config()
        except ConfigError:
            return RosterConfig()
    return load_config(config_path)


@click.group()
@click.version_option(package_name="roster")
def main() -> None:
    """Roster - manage a roster of student records."""
    pass


@main.command()
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to roster.yaml (auto-detected if not specified)",
)
@click.option("--host", default=None, help="Bind address (overrides config)")
@click.option("--port", type=click.IntRange(1, 65535), default=None, help="Port (overrides config)")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (overrides config)",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable debug logging",
)
def serve(
    config_path: Path | None,
    host: str | None,
    port: int | None,
    log_level: str | None,
    verbose: bool,
) -> None:
    """Run the Roster REST API."""
    try:
        config = _resolve_config(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        log_level = "DEBUG"
    level = (log_level or config.logging.level).upper()
    logger = setup_logging(
        log_dir=config.get_log_dir(),
        log_file=config.logging.file,
        level=level,
        console=config.logging.console,
    )

    bind_host = host or config.server.host
    bind_port = port or config.server.port
    logger.info("Starting %s on %s:%d", config.name, bind_host, bind_port)

    from roster.api import create_app  # noqa: PLC0415

    uvicorn.run(create_app(), host=bind_host, port=bind_port, log_level=level.lower())


if __name__ == "__main__":
    main()
