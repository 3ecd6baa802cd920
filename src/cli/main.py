"""Typer entry point for redirect-check.

Single dispatcher: every outcome ends here, and this is the only place that
maps outcomes to exit codes. Positional arguments after HOST are accepted and
ignored.
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from adapters.json_exporter import render_result_json
from adapters.redirect_resolver import HttpxRedirectResolver
from cli.ui_components import build_chain_table
from core.config import AppSettings
from core.domain.models import CheckRequest
from core.domain.outcome import CheckOutcome
from core.errors import ConfigError, MismatchError, NetworkError, UsageError
from core.interfaces.resolver import RedirectResolver
from core.services.redirect_check import check_redirect

app = typer.Typer(
    add_completion=False,
    help="Check that a URL redirects to the expected final URL.",
)

_err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    """Route log records to stderr through Rich."""

    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.addHandler(RichHandler(console=_err_console, show_path=False))
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    # httpcore is too chatty even in verbose mode.
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def build_resolver(settings: AppSettings) -> RedirectResolver:
    return HttpxRedirectResolver(settings=settings)


def _finish(outcome: CheckOutcome, message: str) -> None:
    typer.echo(message)
    raise typer.Exit(code=outcome.exit_code)


@app.command(context_settings={"allow_extra_args": True})
def check(
    target_url: Optional[str] = typer.Argument(None, metavar="TARGET_URL", help="URL to request.", show_default=False),
    expected_url: Optional[str] = typer.Argument(
        None, metavar="EXPECTED_URL", help="URL the redirect chain must end on.", show_default=False
    ),
    host_override: Optional[str] = typer.Argument(
        None, metavar="[HOST]", help="Host header for the initial request.", show_default=False
    ),
    json_output: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every hop and show the chain on stderr."),
) -> None:
    """Fetch TARGET_URL, follow redirects and compare the final URL to EXPECTED_URL."""

    configure_logging(verbose)

    try:
        if not target_url or not expected_url:
            raise UsageError()
        request = CheckRequest(
            target_url=target_url,
            expected_url=expected_url,
            host_override=host_override,
        )
        try:
            settings = AppSettings()
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc
        result = check_redirect(request, resolver=build_resolver(settings))
    except (UsageError, ConfigError) as exc:
        _finish(exc.outcome, f"Error: {exc}")
    except NetworkError as exc:
        _finish(exc.outcome, f"Error: {exc}")

    if verbose:
        _err_console.print(build_chain_table(result))

    try:
        result.raise_for_mismatch()
    except MismatchError as exc:
        _finish(exc.outcome, render_result_json(result) if json_output else f"WARNING: {exc}")

    _finish(
        result.outcome,
        render_result_json(result) if json_output else f"OK: Returns url {result.resolved_url}",
    )


def run() -> None:
    app()
