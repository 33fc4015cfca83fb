"""Contract for talking to the human during scope recovery.

The Status Client never touches the terminal itself: it reports the missing
scope through `notify` and asks permission through `confirm`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Prompter(Protocol):
    def notify(self, message: str) -> None:
        """Tell the user about a condition that needs their attention."""

        ...

    def confirm(self, message: str, *, default: bool = True) -> bool:
        """Ask a yes/no question and return the answer."""

        ...
