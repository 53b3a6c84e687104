"""``wins`` command: count the wins of one team."""

from __future__ import annotations

from pathlib import Path

import typer
from loguru import logger

from scoreline.core.analysis import WinsAnalysis
from scoreline.core.exceptions import ScorelineError
from scoreline.core.logging import log_context
from scoreline.core.reading import TabularReader
from scoreline.core.reports import OutputTarget, create_target
from scoreline.core.summary import Summary

from .utils import fail, get_config


def register(app: typer.Typer) -> None:
    """Register the wins command on the root CLI application."""

    app.command("wins")(wins_command)


def wins_command(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="Comma separated match results file."),
    team: str = typer.Option(..., "--team", "-t", help="Exact team name."),
    target: list[str] = typer.Option(
        ["console"],
        "--target",
        help="Output target (console or file). Repeat for several reports.",
        show_default=True,
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Destination of the file report.",
    ),
    header: bool | None = typer.Option(
        None,
        "--header/--no-header",
        help="Skip the first line of the input file. Defaults to the configuration.",
        show_default=False,
    ),
    date_format: str | None = typer.Option(None, "--date-format", help="strptime format of the date column."),
    delimiter: str | None = typer.Option(None, "--delimiter", help="Field separator."),
) -> None:
    """Print how many games TEAM won in PATH."""

    config = get_config(ctx)
    with log_context(command="wins", team=team, source=str(path)):
        try:
            targets = [_build_target(name, output, ctx) for name in target]
            reader = TabularReader.for_matches(
                date_format=date_format or config.reader.date_format,
                delimiter=delimiter or config.reader.delimiter,
                encoding=config.reader.encoding,
                has_header=config.reader.has_header if header is None else header,
            )
            matches = reader.load(path)
        except ScorelineError as error:
            raise fail(error) from error

        analysis = WinsAnalysis(team)
        for output_target in targets:
            try:
                Summary(analysis, output_target).build_and_print(matches)
            except ScorelineError as error:
                raise fail(error) from error
        logger.info("Reported wins for {} to {} target(s)", team, len(targets))


def _build_target(name: str, output: Path | None, ctx: typer.Context) -> OutputTarget:
    config = get_config(ctx)
    if name.strip().lower() == "file":
        return create_target(name, path=output or config.report.path, encoding=config.report.encoding)
    return create_target(name)


__all__ = ["register", "wins_command"]
