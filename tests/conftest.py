"""
Shared pytest fixtures for the gh-user-status test suite.

Usage in tests:
    def test_something(make_client):
        client, invoker, prompter = make_client({"data": ...})
        ...
"""

import pytest

from core.domain.models import Emoji
from core.emoji.catalog import EmojiCatalog
from core.services.status_client import StatusClient
from tests.fakes import FIXED_NOW, FakeInvoker, FakePrompter


@pytest.fixture
def small_catalog():
    """A substitute catalog with a handful of entries."""
    return EmojiCatalog(
        [
            Emoji(codepoint="👋", names=("wave",), description="waving hand"),
            Emoji(codepoint="🚀", names=("rocket",), description="rocket"),
            Emoji(codepoint="💭", names=("thought_balloon",), description="thought balloon"),
            Emoji(codepoint="👍", names=("+1", "thumbsup"), description="thumbs up"),
        ]
    )


@pytest.fixture
def make_client(small_catalog):
    """
    Build a StatusClient over fakes.

    Returns a factory: make_client(*responses, answers=()) -> (client, invoker, prompter).
    The clock is frozen at FIXED_NOW.
    """
    def _make(*responses, answers=()):
        invoker = FakeInvoker(*responses)
        prompter = FakePrompter(*answers)
        client = StatusClient(invoker, prompter, small_catalog, clock=lambda: FIXED_NOW)
        return client, invoker, prompter

    return _make
