"""GraphQL documents and `gh api graphql` argument vectors.

Variables travel as `gh` fields: `-f key=value` for strings, `-F key=value`
for typed values (booleans, `null`, and `{owner}` placeholders, which `gh`
fills in from the current repository).
"""

from __future__ import annotations

from typing import Iterable

STATUS_FIELDS = "indicatesLimitedAvailability message emoji"

VIEWER_STATUS_QUERY = f"query {{ viewer {{ status {{ {STATUS_FIELDS} }} }} }}"

USER_STATUS_QUERY = (
    f"query($login: String!) {{ user(login: $login) {{ status {{ {STATUS_FIELDS} }} }} }}"
)

# Known limitation: a single page of member statuses, no cursor following.
TEAM_PAGE_SIZE = 100

TEAM_STATUSES_QUERY = f"""query($org: String!, $slug: String!) {{
  organization(login: $org) {{
    team(slug: $slug) {{
      memberStatuses(first: {TEAM_PAGE_SIZE}) {{
        nodes {{ {STATUS_FIELDS} user {{ login }} }}
      }}
    }}
  }}
}}"""

CHANGE_STATUS_MUTATION = """mutation($emoji: String!, $message: String!, $limited: Boolean!, $expiry: DateTime) {
  changeUserStatus(input: {emoji: $emoji, message: $message, limitedAvailability: $limited, expiresAt: $expiry}) {
    status {
      indicatesLimitedAvailability
      message
      emoji
    }
  }
}"""

CHANGE_STATUS_KEY = "changeUserStatus"

# `gh` resolves this from the git remote of the working directory.
OWNER_PLACEHOLDER = "{owner}"


def raw_field(key: str, value: str) -> tuple[str, str]:
    return "-f", f"{key}={value}"


def typed_field(key: str, value: str) -> tuple[str, str]:
    return "-F", f"{key}={value}"


def graphql_args(query: str, fields: Iterable[tuple[str, str]] = ()) -> list[str]:
    """Build `["api", "graphql", "-f", "query=...", <fields>...]`."""

    args = ["api", "graphql", *raw_field("query", query)]
    for flag, assignment in fields:
        args.extend((flag, assignment))
    return args


def auth_refresh_args(scope: str) -> list[str]:
    return ["auth", "refresh", "-s", scope]
