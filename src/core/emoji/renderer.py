"""Replace emoji shortcodes in human-readable text with their glyphs."""

from __future__ import annotations

import re

from core.emoji.catalog import EmojiCatalog

_SHORTCODE_RE = re.compile(r":([A-Za-z0-9_+\-]+):")
_BARE_TOKEN_RE = re.compile(r"(?<![A-Za-z0-9_])([A-Za-z0-9_]+)(?![A-Za-z0-9_])")


class EmojiRenderer:
    """Turns `:alias:` shortcodes (and optionally bare aliases) into glyphs.

    Unknown aliases are left as they are, so a status whose emoji is missing
    from the catalog still prints, just without a glyph. Rendering twice is a
    no-op because glyphs never match an alias token.

    `bare_tokens` is off by default: short aliases such as `a`, `x`, `ok` or
    `on` are ordinary words in status messages.
    """

    def __init__(self, catalog: EmojiCatalog, *, bare_tokens: bool = False) -> None:
        self._catalog = catalog
        self._bare_tokens = bare_tokens

    @property
    def catalog(self) -> EmojiCatalog:
        return self._catalog

    def replace_all(self, text: str) -> str:
        if not text:
            return text
        rendered = self._replace_shortcodes(text)
        if self._bare_tokens:
            rendered = _BARE_TOKEN_RE.sub(self._bare_glyph, rendered)
        return rendered

    def _replace_shortcodes(self, text: str) -> str:
        out: list[str] = []
        pos = 0
        while True:
            match = _SHORTCODE_RE.search(text, pos)
            if match is None:
                break
            glyph = self._catalog.glyph(match.group(1))
            if glyph is None:
                # Keep the closing colon available as the opening of the next shortcode.
                out.append(text[pos : match.end(1)])
                pos = match.end(1)
                continue
            out.append(text[pos : match.start()])
            out.append(glyph)
            pos = match.end()
        out.append(text[pos:])
        return "".join(out)

    def _bare_glyph(self, match: re.Match[str]) -> str:
        token = match.group(1)
        return self._catalog.glyph(token, default=token) or token
