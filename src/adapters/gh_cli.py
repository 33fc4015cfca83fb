"""Subprocess wrapper around the `gh` CLI.

Implements `core.interfaces.tool.ToolInvoker`. One process per call, no
retries and no timeouts; callers decide what a failure means.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Sequence

from core.config import AppSettings
from core.domain.errors import ToolExecutionFailed, ToolNotFound
from core.interfaces.tool import ToolInvoker, ToolOutput

logger = logging.getLogger(__name__)


def _redact(args: Sequence[str]) -> list[str]:
    """Argument vector for logs, with GraphQL documents elided."""

    return ["query=<...>" if arg.startswith("query=") else arg for arg in args]


class GhCli(ToolInvoker):
    """Runs `gh` found on PATH."""

    def __init__(self, binary: str = "gh") -> None:
        self._binary = binary

    @classmethod
    def from_settings(cls, settings: AppSettings | None = None) -> "GhCli":
        settings = settings or AppSettings()
        return cls(binary=settings.gh_binary)

    @property
    def binary(self) -> str:
        return self._binary

    def locate(self) -> str:
        """Absolute path of the binary; raises `ToolNotFound` when missing."""

        path = shutil.which(self._binary)
        if path is None:
            raise ToolNotFound(self._binary)
        return path

    def invoke(self, args: Sequence[str]) -> ToolOutput:
        command = [self.locate(), *args]
        logger.debug("running %s %s", self._binary, _redact(args))
        try:
            result = subprocess.run(command, capture_output=True, check=False)
        except OSError as exc:
            raise ToolExecutionFailed(args, str(exc)) from exc

        logger.debug("%s exited with %s", self._binary, result.returncode)
        if result.returncode != 0:
            raise ToolExecutionFailed(args, f"exit status {result.returncode}", result.stderr)
        return ToolOutput(stdout=result.stdout, stderr=result.stderr)

    def invoke_interactive(self, args: Sequence[str]) -> None:
        command = [self.locate(), *args]
        logger.debug("running %s %s (interactive)", self._binary, _redact(args))
        try:
            # Inherit stdin/stdout/stderr for the lifetime of the child only.
            result = subprocess.run(command, check=False)
        except OSError as exc:
            raise ToolExecutionFailed(args, str(exc)) from exc

        logger.debug("%s exited with %s", self._binary, result.returncode)
        if result.returncode != 0:
            raise ToolExecutionFailed(args, f"exit status {result.returncode}")
