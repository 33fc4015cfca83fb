"""Emoji catalog: alias -> `Emoji` lookup over a fixed table.

The catalog is an ordinary object built by whoever needs it and passed down
(Status Client, renderer, prompt). Tests can hand in a small substitute table.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from core.domain.models import Emoji
from core.emoji.table import EMOJI_TABLE


def _normalize(alias: str) -> str:
    return alias.strip().strip(":")


class EmojiCatalog:
    """Immutable, ordered collection of emoji indexed by every alias."""

    def __init__(self, entries: Iterable[Emoji] | None = None) -> None:
        if entries is None:
            entries = (
                Emoji(codepoint=glyph, names=names, description=description)
                for glyph, names, description in EMOJI_TABLE
            )
        self._entries: tuple[Emoji, ...] = tuple(entries)
        self._by_alias: dict[str, Emoji] = {}
        for emoji in self._entries:
            for name in emoji.names:
                # First occurrence wins on duplicate aliases.
                self._by_alias.setdefault(name, emoji)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Emoji]:
        return iter(self._entries)

    def __contains__(self, alias: object) -> bool:
        return isinstance(alias, str) and _normalize(alias) in self._by_alias

    def lookup(self, alias: str) -> Emoji | None:
        """Exact-match lookup; surrounding colons are ignored."""

        return self._by_alias.get(_normalize(alias))

    def glyph(self, alias: str, default: str | None = None) -> str | None:
        emoji = self.lookup(alias)
        return emoji.codepoint if emoji else default

    def aliases(self) -> list[str]:
        return list(self._by_alias)

    def index_of(self, alias: str) -> int:
        """Position of the entry owning `alias` in table order.

        Raises `KeyError` when the alias is unknown.
        """

        emoji = self.lookup(alias)
        if emoji is None:
            raise KeyError(alias)
        return self._entries.index(emoji)
