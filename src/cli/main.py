"""Command-line interface (Typer).

Thin shell over `core.services.status_client.StatusClient`: parses flags,
builds requests, prints rendered results and turns `StatusError` into exit
code 1.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, TypeVar

import typer

from cli import doctor
from cli.context import AppContext
from cli.logging_setup import configure_logging
from cli.prompts import prompt_set_request
from cli.ui_components import (
    format_member_line,
    format_set_confirmation,
    format_status_line,
    print_error,
)
from core.domain.errors import StatusError
from core.domain.expiry import parse_expiry
from core.domain.models import GetRequest, SetRequest
from core.services.status_client import StatusClient

logger = logging.getLogger(__name__)

T = TypeVar("T")

app = typer.Typer(
    name="gh-user-status",
    no_args_is_help=True,
    add_completion=False,
    help="Read or change GitHub user statuses through the gh CLI.",
)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    if ctx.obj is None:
        ctx.obj = AppContext()
    app_ctx: AppContext = ctx.obj
    configure_logging(logging.DEBUG if verbose else app_ctx.settings.log_level)


def _call(app_ctx: AppContext, operation: Callable[[], T]) -> T:
    try:
        return operation()
    except StatusError as exc:
        logger.debug("operation failed", exc_info=True)
        print_error(app_ctx.err_console, exc)
        raise typer.Exit(code=1) from exc


def _echo(app_ctx: AppContext, client: StatusClient, line: str) -> None:
    app_ctx.console.print(client.renderer.replace_all(line), markup=False, soft_wrap=True)


@app.command("set")
def set_status(
    ctx: typer.Context,
    message: str = typer.Argument("", help="Status message. Prompts interactively when omitted."),
    emoji: str | None = typer.Option(None, "--emoji", "-e", help="Emoji alias for the status."),
    limited: bool = typer.Option(False, "--limited", "-l", help="Indicate limited availability."),
    expiry: str = typer.Option("0s", "--expiry", "-E", help="Expire status after this duration (e.g. 30m, 4h, 7d)."),
    org: str | None = typer.Option(None, "--org", "-o", help="Limit status visibility to an organization (not yet supported)."),
) -> None:
    """Set your GitHub status."""

    app_ctx: AppContext = ctx.obj
    settings = app_ctx.settings

    if message:
        try:
            duration = parse_expiry(expiry)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--expiry") from exc
        request = SetRequest(
            message=message,
            emoji=settings.default_emoji if emoji is None else emoji,
            limited=limited,
            expiry=duration,
            org_scope=org,
        )
    else:
        request = prompt_set_request(
            app_ctx.catalog,
            console=app_ctx.console,
            default_emoji=settings.default_emoji,
            org_scope=org,
        )

    if request.org_scope:
        logger.warning("--org is not supported yet; the status will be visible to everyone")

    client = app_ctx.build_client()
    status = _call(app_ctx, lambda: client.set_status(request))
    if status is None:
        return
    _echo(app_ctx, client, format_set_confirmation(request))


@app.command("clear")
def clear_status(ctx: typer.Context) -> None:
    """Clear your GitHub status."""

    app_ctx: AppContext = ctx.obj
    client = app_ctx.build_client()
    status = _call(app_ctx, client.clear_status)
    if status is None:
        return
    _echo(app_ctx, client, "✓ Status cleared")


@app.command("get")
def get_status(
    ctx: typer.Context,
    login: str = typer.Argument("", help="Username, or org/team-slug for a whole team. Defaults to you."),
) -> None:
    """Get a GitHub user's status, a team's statuses, or your own."""

    app_ctx: AppContext = ctx.obj
    client = app_ctx.build_client()
    result = _call(app_ctx, lambda: client.get_status(GetRequest(login=login)))

    if isinstance(result, list):
        for member in result:
            _echo(app_ctx, client, format_member_line(member))
        return
    _echo(app_ctx, client, format_status_line(result))


app.command("doctor")(doctor.run)


def run(argv: list[str] | None = None) -> None:
    # Glyphs would raise UnicodeEncodeError on cp1252 Windows consoles.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    app(args=argv, prog_name="gh-user-status")
