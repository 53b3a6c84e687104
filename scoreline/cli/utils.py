"""Utility helpers shared across CLI commands."""

from __future__ import annotations

import json
from typing import Mapping, Sequence

import typer

from scoreline.core.config import ScorelineConfig, get_default_config
from scoreline.core.exceptions import ResourceIOError, ScorelineError

from .constants import IO_EXIT_CODE, VALIDATION_EXIT_CODE


def get_config(ctx: typer.Context) -> ScorelineConfig:
    """Return the configuration resolved by the root callback."""

    ctx.ensure_object(dict)
    config = (ctx.obj or {}).get("config")
    return config if isinstance(config, ScorelineConfig) else get_default_config()


def fail(error: ScorelineError) -> typer.Exit:
    """Report ``error`` and build the matching :class:`typer.Exit`."""

    payload = error.to_payload()
    if "details" in payload:
        payload["details"] = _sanitize_details(payload["details"])
    typer.echo(json.dumps(payload, ensure_ascii=False, default=str), err=True)
    code = IO_EXIT_CODE if isinstance(error, ResourceIOError) else VALIDATION_EXIT_CODE
    return typer.Exit(code=code)


def _sanitize_details(details: Mapping[str, object]) -> Mapping[str, object]:
    sanitized: dict[str, object] = {}
    for key, value in details.items():
        if isinstance(value, (str, int, float, bool)) or value is None:
            sanitized[key] = value
        elif isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
            sanitized[key] = [str(item) for item in value]
        else:
            sanitized[key] = str(value)
    return sanitized


__all__ = ["get_config", "fail"]
