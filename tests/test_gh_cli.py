"""
Tests for GhCli: the subprocess ToolInvoker

subprocess.run and shutil.which are monkeypatched; no gh binary is needed.
"""

import subprocess

import pytest

from adapters import gh_cli
from adapters.gh_cli import GhCli
from core.config import AppSettings
from core.domain.errors import ToolExecutionFailed, ToolNotFound
from core.interfaces.tool import ToolInvoker


class RunRecorder:
    """Stand-in for subprocess.run returning a fixed CompletedProcess."""

    def __init__(self, returncode=0, stdout=b"", stderr=b"", error=None):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.error = error
        self.calls = []

    def __call__(self, command, **kwargs):
        self.calls.append((command, kwargs))
        if self.error is not None:
            raise self.error
        out = self.stdout if kwargs.get("capture_output") else None
        err = self.stderr if kwargs.get("capture_output") else None
        return subprocess.CompletedProcess(command, self.returncode, out, err)


@pytest.fixture
def gh_on_path(monkeypatch):
    monkeypatch.setattr(gh_cli.shutil, "which", lambda name: f"/usr/bin/{name}")


@pytest.fixture
def fake_run(monkeypatch):
    def _install(**kwargs):
        recorder = RunRecorder(**kwargs)
        monkeypatch.setattr(gh_cli.subprocess, "run", recorder)
        return recorder

    return _install


class TestLocate:
    def test_satisfies_protocol(self):
        assert isinstance(GhCli(), ToolInvoker)

    def test_missing_binary(self, monkeypatch):
        monkeypatch.setattr(gh_cli.shutil, "which", lambda name: None)

        with pytest.raises(ToolNotFound, match="could not find gh"):
            GhCli().invoke(["api", "graphql"])

    def test_missing_binary_interactive(self, monkeypatch):
        monkeypatch.setattr(gh_cli.shutil, "which", lambda name: None)

        with pytest.raises(ToolNotFound):
            GhCli().invoke_interactive(["auth", "refresh", "-s", "user"])

    def test_binary_from_settings(self, monkeypatch):
        monkeypatch.setenv("GH_USER_STATUS_GH_BINARY", "gh-beta")

        assert GhCli.from_settings(AppSettings()).binary == "gh-beta"


class TestInvoke:
    def test_captures_output(self, gh_on_path, fake_run):
        recorder = fake_run(stdout=b'{"data": {}}', stderr=b"warn")

        output = GhCli().invoke(["api", "graphql", "-f", "query=query { viewer { login } }"])

        assert output.stdout == b'{"data": {}}'
        assert output.stderr == b"warn"
        command, kwargs = recorder.calls[0]
        assert command == ["/usr/bin/gh", "api", "graphql", "-f", "query=query { viewer { login } }"]
        assert kwargs["capture_output"] is True

    def test_non_zero_exit(self, gh_on_path, fake_run):
        fake_run(returncode=1, stderr=b"GraphQL: Could not resolve to a User with the login of 'nobody'.")

        with pytest.raises(ToolExecutionFailed) as exc_info:
            GhCli().invoke(["api", "graphql"])

        assert exc_info.value.exit_info == "exit status 1"
        assert "Could not resolve" in exc_info.value.stderr_text
        assert "Could not resolve" in str(exc_info.value)

    def test_spawn_failure(self, gh_on_path, fake_run):
        fake_run(error=PermissionError("permission denied"))

        with pytest.raises(ToolExecutionFailed, match="permission denied"):
            GhCli().invoke(["api", "graphql"])

    def test_one_process_per_call(self, gh_on_path, fake_run):
        recorder = fake_run(returncode=1)

        with pytest.raises(ToolExecutionFailed):
            GhCli().invoke(["api", "graphql"])

        assert len(recorder.calls) == 1


class TestInvokeInteractive:
    def test_inherits_terminal(self, gh_on_path, fake_run):
        recorder = fake_run()

        assert GhCli().invoke_interactive(["auth", "refresh", "-s", "user"]) is None

        command, kwargs = recorder.calls[0]
        assert command == ["/usr/bin/gh", "auth", "refresh", "-s", "user"]
        assert "capture_output" not in kwargs
        assert "stdin" not in kwargs and "stdout" not in kwargs

    def test_non_zero_exit(self, gh_on_path, fake_run):
        fake_run(returncode=2)

        with pytest.raises(ToolExecutionFailed, match="exit status 2"):
            GhCli().invoke_interactive(["auth", "refresh", "-s", "user"])


class TestRedact:
    def test_query_text_is_elided(self):
        assert gh_cli._redact(["api", "graphql", "-f", "query=mutation {...}", "-f", "message=hi"]) == [
            "api", "graphql", "-f", "query=<...>", "-f", "message=hi",
        ]
