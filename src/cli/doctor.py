"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer

from cli.context import AppContext
from cli.ui_components import build_doctor_table
from core.domain.errors import StatusError


def run(ctx: typer.Context) -> None:
    """Check that gh is installed and show the effective configuration."""

    app_ctx: AppContext = ctx.obj
    settings = app_ctx.settings
    table = build_doctor_table()

    invoker = app_ctx.invoker
    locate = getattr(invoker, "locate", None)
    ok_gh = True
    if locate is not None:
        try:
            table.add_row("gh binary", "OK", locate())
        except StatusError as exc:
            ok_gh = False
            table.add_row("gh binary", "FAIL", str(exc))

    if ok_gh:
        try:
            output = invoker.invoke(["--version"])
            version = output.stdout.decode("utf-8", errors="replace").strip().splitlines()
            table.add_row("gh version", "OK", version[0] if version else "unknown")
        except StatusError as exc:
            ok_gh = False
            table.add_row("gh version", "FAIL", str(exc))

    table.add_row("Required scope", "OK", settings.required_scope)

    glyph = app_ctx.catalog.glyph(settings.default_emoji)
    if glyph is None:
        table.add_row("Default emoji", "WARN", f"{settings.default_emoji} is not in the catalog")
    else:
        table.add_row("Default emoji", "OK", f"{glyph} {settings.default_emoji}")
    table.add_row("Emoji catalog", "OK", f"{len(app_ctx.catalog)} entries")

    app_ctx.console.print(table)

    if not ok_gh:
        app_ctx.console.print(
            "\n[yellow]Note:[/yellow] install the GitHub CLI from https://cli.github.com and run `gh auth login`."
        )
        raise typer.Exit(code=1)
