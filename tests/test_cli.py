"""
Tests for the Typer command layer

Commands run through typer.testing.CliRunner with an AppContext carrying
FakeInvoker/FakePrompter, so no gh process or terminal is involved.
"""

import logging

import pytest
from typer.testing import CliRunner

from cli.context import AppContext
from cli.main import app
from core.config import AppSettings
from core.domain.errors import ToolNotFound
from tests.fakes import (
    FakeInvoker,
    FakePrompter,
    field_value,
    member_node,
    mutation_payload,
    scope_failure,
    status_payload,
    team_payload,
)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def make_ctx(small_catalog):
    def _make(*responses, answers=()):
        return AppContext(
            settings=AppSettings(gh_binary="gh", required_scope="user", default_emoji="thought_balloon"),
            catalog=small_catalog,
            invoker=FakeInvoker(*responses),
            prompter=FakePrompter(*answers),
        )

    return _make


# ============================================================================
# get
# ============================================================================

class TestGet:
    def test_own_status(self, runner, make_ctx):
        ctx = make_ctx(status_payload("viewer", {"message": "shipping", "emoji": ":rocket:"}))

        result = runner.invoke(app, ["get"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "🚀 shipping"
        assert field_value(ctx.invoker.calls[0], "login") is None

    def test_limited_user_status(self, runner, make_ctx):
        ctx = make_ctx(
            status_payload("user", {"message": "away", "emoji": ":wave:", "indicatesLimitedAvailability": True})
        )

        result = runner.invoke(app, ["get", "octocat"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "👋 away (availability is limited)"

    def test_unknown_emoji_prints_raw_alias(self, runner, make_ctx):
        ctx = make_ctx(status_payload("user", {"message": "hi", "emoji": ":octocat:"}))

        result = runner.invoke(app, ["get", "octocat"], obj=ctx)

        assert result.exit_code == 0
        assert result.output.strip() == ":octocat: hi"

    def test_team(self, runner, make_ctx):
        ctx = make_ctx(team_payload([member_node("alice"), member_node("bob", emoji=":rocket:", message="ship")]))

        result = runner.invoke(app, ["get", "acme/core"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["alice: 👋 hi", "bob: 🚀 ship"]

    def test_no_status_exits_non_zero(self, runner, make_ctx):
        ctx = make_ctx(status_payload("user", None))

        result = runner.invoke(app, ["get", "octocat"], obj=ctx)

        assert result.exit_code == 1
        assert "failed to deserialize JSON" in result.output

    def test_missing_gh_exits_non_zero(self, runner, make_ctx):
        ctx = make_ctx(ToolNotFound("gh"))

        result = runner.invoke(app, ["get"], obj=ctx)

        assert result.exit_code == 1
        assert "could not find gh" in result.output


# ============================================================================
# set / clear
# ============================================================================

class TestSet:
    def test_with_message_and_flags(self, runner, make_ctx):
        ctx = make_ctx(mutation_payload(":rocket:", "shipping"))

        result = runner.invoke(app, ["set", "shipping", "-e", "rocket", "-l", "-E", "4h"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "✓ Status set to 🚀 shipping"
        args = ctx.invoker.calls[0]
        assert field_value(args, "emoji") == ":rocket:"
        assert field_value(args, "limited") == "true"
        assert field_value(args, "expiry") != "null"

    def test_default_emoji(self, runner, make_ctx):
        ctx = make_ctx(mutation_payload(":thought_balloon:", "thinking"))

        result = runner.invoke(app, ["set", "thinking"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "✓ Status set to 💭 thinking"
        assert field_value(ctx.invoker.calls[0], "expiry") == "null"

    def test_invalid_expiry(self, runner, make_ctx):
        ctx = make_ctx()

        result = runner.invoke(app, ["set", "hi", "--expiry", "soon"], obj=ctx)

        assert result.exit_code == 2
        assert ctx.invoker.calls == []

    @pytest.mark.parametrize("expiry", ["99999999d", "9999999999d"])
    def test_out_of_range_expiry(self, runner, make_ctx, expiry):
        ctx = make_ctx()

        result = runner.invoke(app, ["set", "hi", "--expiry", expiry], obj=ctx)

        assert result.exit_code == 2
        assert not isinstance(result.exception, OverflowError)
        assert ctx.invoker.calls == []

    def test_verification_failure(self, runner, make_ctx):
        ctx = make_ctx(mutation_payload("", "hi"))

        result = runner.invoke(app, ["set", "hi", "-e", "not_an_emoji"], obj=ctx)

        assert result.exit_code == 1
        assert "Perhaps try another emoji" in result.output

    def test_declined_scope_is_success_without_output(self, runner, make_ctx):
        ctx = make_ctx(scope_failure(), answers=[False])

        result = runner.invoke(app, ["set", "hi"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert "Status set" not in result.output
        assert ctx.prompter.questions == ["Would you like to add the user scope now?"]

    def test_accepted_scope_retries(self, runner, make_ctx):
        ctx = make_ctx(scope_failure(), mutation_payload(":wave:", "hi"), answers=[True])

        result = runner.invoke(app, ["set", "hi", "-e", "wave"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert ctx.invoker.interactive_calls == [["auth", "refresh", "-s", "user"]]
        assert "✓ Status set to 👋 hi" in result.output

    def test_interactive_prompt(self, runner, make_ctx):
        ctx = make_ctx(mutation_payload(":rocket:", "Deploying"))

        result = runner.invoke(app, ["set"], obj=ctx, input="Deploying\nrocket\ny\n1h\n")

        assert result.exit_code == 0, result.output
        args = ctx.invoker.calls[0]
        assert field_value(args, "message") == "Deploying"
        assert field_value(args, "emoji") == ":rocket:"
        assert field_value(args, "limited") == "true"
        assert field_value(args, "expiry") != "null"
        assert "✓ Status set to 🚀 Deploying" in result.output

    def test_interactive_prompt_defaults(self, runner, make_ctx):
        """Emoji defaults to thought_balloon (by number), expiry to Never."""
        ctx = make_ctx(mutation_payload(":thought_balloon:", "Thinking"))

        result = runner.invoke(app, ["set"], obj=ctx, input="Thinking\n\n\n\n")

        assert result.exit_code == 0, result.output
        args = ctx.invoker.calls[0]
        assert field_value(args, "emoji") == ":thought_balloon:"
        assert field_value(args, "limited") == "false"
        assert field_value(args, "expiry") == "null"

    def test_interactive_emoji_by_number(self, runner, make_ctx):
        ctx = make_ctx(mutation_payload(":wave:", "Hello"))

        result = runner.invoke(app, ["set"], obj=ctx, input="Hello\n1\nn\nNever\n")

        assert result.exit_code == 0, result.output
        assert field_value(ctx.invoker.calls[0], "emoji") == ":wave:"


class TestClear:
    def test_clear(self, runner, make_ctx):
        ctx = make_ctx({"data": {"changeUserStatus": {"status": None}}})

        result = runner.invoke(app, ["clear"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "✓ Status cleared"
        assert field_value(ctx.invoker.calls[0], "message") == ""


# ============================================================================
# doctor
# ============================================================================

class TestDoctor:
    def test_reports_version(self, runner, make_ctx):
        ctx = make_ctx("gh version 2.62.0 (2024-11-14)\nhttps://github.com/cli/cli/releases/tag/v2.62.0\n")

        result = runner.invoke(app, ["doctor"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert "2.62.0" in result.output
        assert ctx.invoker.calls == [["--version"]]

    def test_missing_gh(self, runner, make_ctx):
        ctx = make_ctx(ToolNotFound("gh"))

        result = runner.invoke(app, ["doctor"], obj=ctx)

        assert result.exit_code == 1
        assert "FAIL" in result.output


# ============================================================================
# global options
# ============================================================================

class TestVerbose:
    def test_enables_debug_logging(self, runner, make_ctx):
        ctx = make_ctx(status_payload("viewer", {"message": "hi", "emoji": ""}))

        result = runner.invoke(app, ["--verbose", "get"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert logging.getLogger().level == logging.DEBUG

    def test_default_level_comes_from_settings(self, runner, make_ctx):
        ctx = make_ctx(status_payload("viewer", {"message": "hi", "emoji": ""}))

        result = runner.invoke(app, ["get"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert logging.getLogger().level == logging.WARNING


# ============================================================================
# entry points
# ============================================================================

class TestEntryPoint:
    def test_checkout_entry_point_runs_the_app(self, capsys):
        import main

        with pytest.raises(SystemExit) as excinfo:
            main.main(["--help"])

        assert excinfo.value.code == 0
        assert "gh-user-status" in capsys.readouterr().out
