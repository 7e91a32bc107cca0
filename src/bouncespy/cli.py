"""bouncespy command-line interface."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from email.message import EmailMessage
from pathlib import Path
from typing import Annotated, NoReturn

import typer

from . import __version__
from .analyzer import analyze_message, extract_body
from .codes import STATUS_TABLE, describe, lookup, to_status_code
from .config import CONFIG_ENV_VAR, Config, ConfigError, load_config
from .finder import find_bounce_reason
from .logging import configure_logging
from .maildir import MaildirError, collect_message_paths, read_message
from .types import Result, Severity, StatusCode

app = typer.Typer(help="Classify the delivery failure reason of bounce notifications.")
LOGGER = logging.getLogger(__name__)


@dataclass
class CLIState:
    """Stores shared CLI options."""

    config_path: Path | None


@app.callback()
def _bouncespy(
    ctx: typer.Context,
    config: Annotated[
        Path | None,
        typer.Option(
            "-c",
            "--config",
            help=(
                f"Path to bouncespy config (env {CONFIG_ENV_VAR} or "
                "~/.config/bouncespy/config.yaml)."
            ),
        ),
    ] = None,
) -> None:
    """Capture global CLI options."""

    resolved = config.expanduser() if config else None
    ctx.obj = CLIState(config_path=resolved)


@app.command()
def analyze(
    ctx: typer.Context,
    paths: Annotated[
        list[Path],
        typer.Argument(..., help="Message files (.eml) or maildir folders."),
    ],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Emit one JSON object per message."),
    ] = False,
) -> None:
    """Classify each bounce message and report severity, reason and spam score."""

    config = _load_environment(_state(ctx))
    try:
        messages = collect_message_paths(paths)
    except MaildirError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc

    for message_path in messages:
        result = _analyze_path(message_path, config)
        if as_json:
            typer.echo(json.dumps(_result_payload(message_path, result)))
            continue
        reason = result.reason.value or "-"
        typer.echo(
            f"{message_path}: {result.severity.value} {reason} "
            f"spam={result.spam_score:.2f}"
        )
        typer.echo(f"  {result.description}")


@app.command()
def reason(
    ctx: typer.Context,
    message: Annotated[Path, typer.Argument(..., help="Path to a message file.")],
    raw: Annotated[
        bool,
        typer.Option("--raw", help="Treat the file contents as the bounce body itself."),
    ] = False,
) -> None:
    """Print only the status code found in a bounce."""

    _load_environment(_state(ctx))
    message_path = message.expanduser()
    if not message_path.is_file():
        typer.secho(f"Message file not found: {message_path}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from None

    if raw:
        body = message_path.read_bytes()
    else:
        body = extract_body(_read_or_exit(message_path))
    typer.echo(describe(find_bounce_reason(body)))


@app.command()
def codes(
    severity: Annotated[
        Severity | None,
        typer.Option("--severity", help="Only list codes with this severity."),
    ] = None,
) -> None:
    """List the classification table."""

    for code, entry in STATUS_TABLE.items():
        if severity is not None and entry.severity is not severity:
            continue
        kind = "enhanced" if entry.specific else "basic"
        typer.echo(f"{code.value:<6} {entry.severity.value:<4} {kind:<8} {describe(code)}")


@app.command(name="describe")
def describe_code(
    code: Annotated[str, typer.Argument(..., help="Status code such as 550 or 5.1.1.")],
) -> None:
    """Show the classification of a single status code."""

    member = to_status_code(code.strip())
    entry = lookup(member) if member is not None else None
    if member is None or entry is None:
        typer.secho(f"Unknown status code '{code}'.", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from None
    typer.echo(describe(member))
    typer.echo(f"severity: {entry.severity.value}")
    typer.echo(f"specific: {'yes' if entry.specific else 'no'}")


@app.command()
def version() -> None:
    """Print the installed bouncespy version."""

    typer.echo(__version__)


def _state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise RuntimeError("CLI state missing from context.")
    return state


def _load_environment(state: CLIState) -> Config:
    config = _load_config(state.config_path)
    configure_logging(config.logging, config.root_dir)
    return config


def _load_config(path: Path | None) -> Config:
    try:
        return load_config(path)
    except ConfigError as exc:
        _config_failure(exc)


def _config_failure(exc: ConfigError) -> NoReturn:
    typer.secho(f"Configuration error: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(2) from exc


def _read_or_exit(path: Path) -> EmailMessage:
    try:
        return read_message(path)
    except (MaildirError, OSError) as exc:
        typer.secho(f"Failed to read message {path}: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc


def _analyze_path(path: Path, config: Config) -> Result:
    parsed = _read_or_exit(path)
    result = analyze_message(parsed, spam_header=config.spam_score_header)
    LOGGER.debug(
        "%s classified as %s (%s)",
        path,
        result.severity.value,
        result.reason.value or "no code",
    )
    return result


def _result_payload(path: Path, result: Result) -> dict[str, object]:
    return {
        "path": str(path),
        "severity": result.severity.value,
        "reason": result.reason.value,
        "description": result.description,
        "spam_score": result.spam_score,
        "found": result.reason is not StatusCode.NOT_FOUND,
    }


def main() -> None:  # pragma: no cover - delegated to Typer
    app()


__all__ = ["app", "main"]
