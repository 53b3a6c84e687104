"""Main entry point for the scoreline command line interface."""

from __future__ import annotations

from pathlib import Path

import typer

from scoreline.core.config import LoggingConfig, load_config
from scoreline.core.exceptions import ConfigError
from scoreline.core.logging import configure_logging

from .utils import fail
from .wins import register as register_wins_command


def create_app() -> typer.Typer:
    """Create a Typer application instance for scoreline."""

    app = typer.Typer(add_completion=False, help="scoreline command line interface")

    @app.callback()
    def main(
        ctx: typer.Context,
        config_path: Path | None = typer.Option(
            None,
            "--config",
            "-c",
            help="TOML configuration file.",
        ),
        log_level: str | None = typer.Option(
            None,
            "--log-level",
            help="Logging level; overrides the configuration.",
        ),
    ) -> None:
        ctx.ensure_object(dict)
        try:
            config = load_config(config_path)
            if log_level is not None:
                config.logging = LoggingConfig(
                    level=log_level,
                    serialize=config.logging.serialize,
                    file_path=config.logging.file_path,
                )
        except ConfigError as error:
            raise fail(error) from error

        configure_logging(
            config.logging.level,
            serialize=config.logging.serialize,
            file_output=config.logging.file_path is not None,
            file_path=config.logging.file_path,
        )
        ctx.obj["config"] = config

    register_wins_command(app)
    return app


app = create_app()
