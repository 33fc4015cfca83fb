"""Interactive prompts (Rich).

`RichPrompter` is the terminal implementation of `core.interfaces.prompter.Prompter`;
`prompt_set_request` collects a status from a human when `set` gets no message.
"""

from __future__ import annotations

from rich.console import Console
from rich.prompt import Confirm, Prompt

from cli.ui_components import build_emoji_choices
from core.domain.expiry import EXPIRY_CHOICES, NEVER, parse_expiry
from core.domain.models import SetRequest
from core.emoji.catalog import EmojiCatalog
from core.interfaces.prompter import Prompter


class RichPrompter(Prompter):
    """Asks questions on the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)

    def notify(self, message: str) -> None:
        self._console.print(f"! {message}", style="yellow", markup=False, emoji=False)

    def confirm(self, message: str, *, default: bool = True) -> bool:
        return Confirm.ask(message, default=default, console=self._console)


def _ask_message(console: Console) -> str:
    while True:
        message = Prompt.ask("Status", console=console).strip()
        if message:
            return message
        console.print("Value is required", style="red")


def _ask_emoji(console: Console, catalog: EmojiCatalog, default_alias: str) -> str:
    """Pick an emoji by number or alias; returns the canonical alias."""

    entries = list(catalog)
    console.print(build_emoji_choices(catalog))
    options: dict[str, str] = {}
    if default_alias in catalog:
        options["default"] = str(catalog.index_of(default_alias) + 1)

    while True:
        answer = Prompt.ask("Emoji (number or alias)", console=console, **options)
        answer = (answer or "").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(entries):
            return entries[int(answer) - 1].name
        emoji = catalog.lookup(answer)
        if emoji is not None:
            return emoji.name
        console.print(f"Unknown emoji: {answer}", style="red", markup=False, emoji=False)


def prompt_set_request(
    catalog: EmojiCatalog,
    *,
    console: Console | None = None,
    default_emoji: str = "thought_balloon",
    org_scope: str | None = None,
) -> SetRequest:
    """Ask for message, emoji, limited availability and expiry."""

    console = console or Console()
    message = _ask_message(console)
    emoji = _ask_emoji(console, catalog, default_emoji)
    limited = Confirm.ask("Indicate limited availability?", default=False, console=console)
    expiry = Prompt.ask(
        "Clear status in",
        choices=list(EXPIRY_CHOICES),
        default=NEVER,
        console=console,
    )
    return SetRequest(
        message=message,
        emoji=emoji,
        limited=limited,
        expiry=parse_expiry(expiry),
        org_scope=org_scope,
    )
