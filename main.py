#!/usr/bin/env python3
"""
scoreline demo run

Loads a season of results and reports wins to the console and to an HTML file.
"""

import argparse

from loguru import logger

from scoreline import ConsoleReport, FileReport, Summary, TabularReader, WinsAnalysis
from scoreline.core.logging import configure_logging


def run_demo(path: str, team: str, other_team: str, report_path: str) -> None:
    """Reproduce the reference run: one analysis, two targets, then the shortcut."""
    reader = TabularReader.for_matches()
    matches = reader.load(path)
    logger.info(f"Loaded {len(matches)} matches from {path}")

    wins_analysis = WinsAnalysis(team)

    # console
    Summary(wins_analysis, ConsoleReport()).build_and_print(reader.records)

    # same analysis, swapped target
    Summary(wins_analysis, FileReport(report_path)).build_and_print(reader.records)

    shortcut_reader = TabularReader.for_matches()
    shortcut_reader.load(path)
    Summary.wins_analysis_with_file_report(other_team, report_path).build_and_print(shortcut_reader.records)
    logger.info(f"Report written to {report_path}")


def main():
    configure_logging(level="INFO")

    parser = argparse.ArgumentParser(description="scoreline - match result reports")
    parser.add_argument("path", nargs="?", default="football.csv", help="match results file")
    parser.add_argument("--team", default="Man United", help="team for the console report")
    parser.add_argument("--other-team", default="Bournemouth", help="team for the shortcut report")
    parser.add_argument("--report", default="report.html", help="HTML report destination")

    args = parser.parse_args()
    run_demo(args.path, args.team, args.other_team, args.report)


if __name__ == "__main__":
    main()
