"""Errors raised by the core.

Every failure of a Status Client operation is a `StatusError`. They propagate
unchanged to the command layer, which turns them into a non-zero exit code.
"""

from __future__ import annotations

from typing import Sequence


class StatusError(Exception):
    """Base class for all status workflow failures."""


class ToolNotFound(StatusError):
    """The external `gh` binary could not be located on the search path."""

    def __init__(self, binary: str) -> None:
        self.binary = binary
        super().__init__(f"could not find {binary}. Is it installed?")


class ToolExecutionFailed(StatusError):
    """The external tool could not be started or exited non-zero."""

    def __init__(self, args: Sequence[str], exit_info: str, stderr: bytes = b"") -> None:
        self.args_vector = tuple(args)
        self.exit_info = exit_info
        self.stderr = stderr
        message = f"failed to run gh. error: {exit_info}"
        if self.stderr_text:
            message += f", stderr: {self.stderr_text}"
        super().__init__(message)

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode("utf-8", errors="replace").strip()


class DecodeError(StatusError):
    """The response was not JSON, or lacked the expected nested structure."""


class VerificationFailed(StatusError):
    """The mutation was accepted but the echoed emoji differs from the one sent."""

    def __init__(self, sent: str, echoed: str) -> None:
        self.sent = sent
        self.echoed = echoed
        super().__init__(
            f"failed to set status (sent emoji {sent!r}, got {echoed!r}). Perhaps try another emoji"
        )
