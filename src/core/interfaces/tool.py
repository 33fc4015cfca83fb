"""Contract for the external CLI that talks to the GitHub API.

Two modes: `invoke` captures both output streams, `invoke_interactive` hands the
terminal to the child (for flows such as `gh auth refresh` that prompt the user).
Implementations raise `ToolNotFound` / `ToolExecutionFailed`; they never retry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence, runtime_checkable


@dataclass(frozen=True)
class ToolOutput:
    """Captured output of a successful invocation."""

    stdout: bytes = b""
    stderr: bytes = b""


@runtime_checkable
class ToolInvoker(Protocol):
    def invoke(self, args: Sequence[str]) -> ToolOutput:
        """Run the tool with `args`, capturing stdout and stderr."""

        ...

    def invoke_interactive(self, args: Sequence[str]) -> None:
        """Run the tool with `args` attached to the caller's stdin/stdout/stderr."""

        ...
