"""Emoji catalog and shortcode rendering."""

from core.emoji.catalog import EmojiCatalog
from core.emoji.renderer import EmojiRenderer

__all__ = ["EmojiCatalog", "EmojiRenderer"]
