"""Objects shared by every command of one CLI invocation."""

from __future__ import annotations

from dataclasses import dataclass, field

from rich.console import Console

from adapters.gh_cli import GhCli
from cli.prompts import RichPrompter
from core.config import AppSettings
from core.emoji.catalog import EmojiCatalog
from core.interfaces.prompter import Prompter
from core.interfaces.tool import ToolInvoker
from core.services.status_client import StatusClient


def _plain_console(*, stderr: bool = False) -> Console:
    # Rich's own `:emoji:` substitution would pre-empt the catalog renderer.
    return Console(stderr=stderr, emoji=False, highlight=False)


@dataclass
class AppContext:
    """Settings plus the collaborators the Status Client is built from.

    Tests pass their own instance (fake invoker/prompter) as the Click `obj`.
    """

    settings: AppSettings = field(default_factory=AppSettings)
    console: Console = field(default_factory=_plain_console)
    err_console: Console = field(default_factory=lambda: _plain_console(stderr=True))
    catalog: EmojiCatalog = field(default_factory=EmojiCatalog)
    invoker: ToolInvoker | None = None
    prompter: Prompter | None = None

    def __post_init__(self) -> None:
        if self.invoker is None:
            self.invoker = GhCli.from_settings(self.settings)
        if self.prompter is None:
            self.prompter = RichPrompter(self.err_console)

    def build_client(self) -> StatusClient:
        return StatusClient(
            self.invoker,
            self.prompter,
            self.catalog,
            scope=self.settings.required_scope,
        )
