"""Status read/write workflow over `gh api graphql`.

The client builds GraphQL documents, drives a `ToolInvoker`, decodes the JSON
envelope into domain models and implements the missing-scope recovery for
writes. It never prints and never logs: results and `StatusError`s go back to
the caller unchanged.

Decoding is strict about the path (`data -> ... -> status` must be present)
and tolerant about the leaves (extra fields are ignored, null strings become
empty). A drifted envelope therefore fails loudly with `DecodeError` instead
of yielding an empty status.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Callable, Sequence

from pydantic import ValidationError

from core.domain.errors import DecodeError, ToolExecutionFailed, VerificationFailed
from core.domain.expiry import format_expiry
from core.domain.models import GetRequest, SetRequest, Status, TeamMemberStatus
from core.emoji.catalog import EmojiCatalog
from core.emoji.renderer import EmojiRenderer
from core.interfaces.prompter import Prompter
from core.interfaces.tool import ToolInvoker, ToolOutput
from core.services.graphql import (
    CHANGE_STATUS_KEY,
    CHANGE_STATUS_MUTATION,
    OWNER_PLACEHOLDER,
    TEAM_STATUSES_QUERY,
    USER_STATUS_QUERY,
    VIEWER_STATUS_QUERY,
    auth_refresh_args,
    graphql_args,
    raw_field,
    typed_field,
)

DEFAULT_SCOPE = "user"


def scope_error_marker(scope: str) -> str:
    """Substring `gh` prints when the token lacks `scope`."""

    return f"one of the following scopes: ['{scope}']"


def _local_now() -> datetime:
    return datetime.now().astimezone()


def _decode_json(raw: bytes) -> dict[str, Any]:
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"failed to deserialize JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise DecodeError("failed to deserialize JSON: response is not an object")
    return payload


def _dig(payload: dict[str, Any], *path: str, allow_null_leaf: bool = False) -> Any:
    """Walk nested objects along `path`, raising `DecodeError` on any gap."""

    node: Any = payload
    for depth, key in enumerate(path):
        where = ".".join(path[: depth + 1])
        if not isinstance(node, dict) or key not in node:
            raise DecodeError(f"failed to deserialize JSON: missing '{where}'")
        node = node[key]
        is_leaf = depth == len(path) - 1
        if node is None and not (is_leaf and allow_null_leaf):
            raise DecodeError(f"failed to deserialize JSON: '{where}' is null")
    return node


def _validate_status(node: Any, where: str) -> Status:
    if not isinstance(node, dict):
        raise DecodeError(f"failed to deserialize JSON: '{where}' is not an object")
    try:
        return Status.model_validate(node)
    except ValidationError as exc:
        raise DecodeError(f"failed to deserialize JSON: invalid '{where}': {exc}") from exc


class StatusClient:
    """Reads and writes GitHub user statuses through the `gh` CLI."""

    def __init__(
        self,
        invoker: ToolInvoker,
        prompter: Prompter,
        catalog: EmojiCatalog,
        *,
        scope: str = DEFAULT_SCOPE,
        clock: Callable[[], datetime] = _local_now,
    ) -> None:
        self._invoker = invoker
        self._prompter = prompter
        self._catalog = catalog
        self._renderer = EmojiRenderer(catalog)
        self._scope = scope
        self._clock = clock

    @property
    def catalog(self) -> EmojiCatalog:
        return self._catalog

    @property
    def renderer(self) -> EmojiRenderer:
        return self._renderer

    # Reads

    def get_status(self, request: GetRequest) -> Status | list[TeamMemberStatus]:
        """Route a lookup: `org/team` goes to the roster query, anything else to a user."""

        if request.is_team:
            org, slug = request.team_target()
            return self.get_team_statuses(org, slug)
        return self.get_user_status(request.login)

    def get_user_status(self, login: str = "") -> Status:
        """Status of `login`, or of the authenticated user when `login` is empty.

        Raises `DecodeError` when the user has no status (`status: null`).
        """

        if login:
            key = "user"
            args = graphql_args(USER_STATUS_QUERY, [raw_field("login", login)])
        else:
            key = "viewer"
            args = graphql_args(VIEWER_STATUS_QUERY)

        payload = _decode_json(self._invoker.invoke(args).stdout)
        node = _dig(payload, "data", key, "status")
        return _validate_status(node, f"data.{key}.status")

    def get_team_statuses(self, org: str, team_slug: str) -> list[TeamMemberStatus]:
        """Statuses of the members of `org/team_slug`.

        Only the first page (`TEAM_PAGE_SIZE` members) is fetched. An empty
        `org` is resolved by `gh` from the current repository's owner.
        """

        org_field = typed_field("org", OWNER_PLACEHOLDER) if not org else raw_field("org", org)
        args = graphql_args(TEAM_STATUSES_QUERY, [org_field, raw_field("slug", team_slug)])

        payload = _decode_json(self._invoker.invoke(args).stdout)
        nodes = _dig(payload, "data", "organization", "team", "memberStatuses", "nodes")
        if not isinstance(nodes, list):
            raise DecodeError("failed to deserialize JSON: 'memberStatuses.nodes' is not a list")
        try:
            return [TeamMemberStatus.model_validate(node) for node in nodes]
        except ValidationError as exc:
            raise DecodeError(f"failed to deserialize JSON: invalid member status: {exc}") from exc

    # Writes

    def set_status(self, request: SetRequest) -> Status | None:
        """Change the authenticated user's status.

        Returns the status echoed by the API, or None when the token lacked the
        required scope and the user chose not to add it (nothing was changed).
        Raises `VerificationFailed` when the echoed emoji is not the one sent.
        """

        emoji = request.emoji_shortcode
        expiry = format_expiry(request.expires_at(self._clock()))
        args = graphql_args(
            CHANGE_STATUS_MUTATION,
            [
                raw_field("message", request.message),
                raw_field("emoji", emoji),
                typed_field("limited", "true" if request.limited else "false"),
                typed_field("expiry", expiry),
            ],
        )

        output = self._invoke_with_scope_recovery(args)
        if output is None:
            return None

        payload = _decode_json(output.stdout)
        # A cleared status is echoed back as null.
        node = _dig(payload, "data", CHANGE_STATUS_KEY, "status", allow_null_leaf=True)
        status = Status() if node is None else _validate_status(node, f"data.{CHANGE_STATUS_KEY}.status")
        if status.emoji != emoji:
            raise VerificationFailed(sent=emoji, echoed=status.emoji)
        return status

    def clear_status(self) -> Status | None:
        return self.set_status(SetRequest.cleared())

    def _invoke_with_scope_recovery(self, args: Sequence[str]) -> ToolOutput | None:
        try:
            return self._invoker.invoke(args)
        except ToolExecutionFailed as exc:
            if scope_error_marker(self._scope) not in exc.stderr_text:
                raise

        self._prompter.notify(f"Sorry, this extension requires the '{self._scope}' scope.")
        if not self._prompter.confirm(f"Would you like to add the {self._scope} scope now?", default=True):
            return None

        self._invoker.invoke_interactive(auth_refresh_args(self._scope))
        # Exactly one retry; a second failure propagates.
        return self._invoker.invoke(args)
