"""Domain models (Pydantic v2).

These describe *what* a status is, not *how* it is fetched. Every model is
frozen: requests are built once by the command layer and results are never
mutated after decoding.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.config import ConfigDict

from core.domain.expiry import MAX_EXPIRY

TEAM_SEPARATOR = "/"


class Emoji(BaseModel):
    """A catalog entry: glyph, aliases (first one canonical) and description."""

    model_config = ConfigDict(frozen=True)

    codepoint: str = Field(
        ...,
        min_length=1,
        description="Rendered glyph, e.g. '🚀'.",
    )
    names: tuple[str, ...] = Field(
        ...,
        min_length=1,
        description="Aliases without colons. The first one is canonical.",
    )
    description: str = Field(
        default="",
        description="Free text description shown in the emoji picker.",
    )

    @property
    def name(self) -> str:
        return self.names[0]


class Status(BaseModel):
    """A user status as returned by the GraphQL API.

    `emoji` keeps the API representation (a `:alias:` shortcode), never the
    glyph. An empty message and emoji mean "no status".
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    message: str = Field(
        default="",
        description="Status message, possibly empty.",
    )
    emoji: str = Field(
        default="",
        description="Emoji shortcode as returned by the API.",
    )
    limited: bool = Field(
        default=False,
        alias="indicatesLimitedAvailability",
        description="Whether the user indicates limited availability.",
    )

    @field_validator("message", "emoji", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("limited", mode="before")
    @classmethod
    def _null_as_false(cls, value: Any) -> Any:
        return False if value is None else value

    @property
    def is_empty(self) -> bool:
        return not self.message and not self.emoji


class TeamMemberStatus(BaseModel):
    """A team member's login together with their status.

    Validates directly from a `memberStatuses.nodes[]` entry, which carries the
    status fields inline and the login under `user.login`.
    """

    model_config = ConfigDict(frozen=True)

    login: str = Field(..., min_length=1)
    status: Status

    @model_validator(mode="before")
    @classmethod
    def _from_node(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "status" in data:
            return data
        user = data.get("user")
        login = user.get("login") if isinstance(user, dict) else None
        return {"login": login, "status": data}


class SetRequest(BaseModel):
    """Everything needed to change the caller's status."""

    model_config = ConfigDict(frozen=True)

    message: str = ""
    emoji: str = Field(
        default="",
        description="Emoji alias without colons; empty for no emoji.",
    )
    limited: bool = False
    expiry: timedelta = Field(
        default=timedelta(0),
        description="Time until the status clears; zero means never.",
    )
    org_scope: str | None = Field(
        default=None,
        description="Reserved: limit visibility to an organization (not sent).",
    )

    @field_validator("emoji", mode="before")
    @classmethod
    def _strip_colons(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().strip(":")
        return value

    @field_validator("expiry")
    @classmethod
    def _within_range(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("expiry must not be negative")
        if value > MAX_EXPIRY:
            raise ValueError("expiry is too far in the future")
        return value

    @classmethod
    def cleared(cls) -> "SetRequest":
        """The request that clears a status: empty message and emoji."""

        return cls()

    @property
    def emoji_shortcode(self) -> str:
        return f":{self.emoji}:" if self.emoji else ""

    def expires_at(self, now: datetime) -> datetime | None:
        if self.expiry > timedelta(0):
            return now + self.expiry
        return None


class GetRequest(BaseModel):
    """Whose status to read: yourself (empty), a user, or `org/team-slug`."""

    model_config = ConfigDict(frozen=True)

    login: str = ""

    @property
    def is_team(self) -> bool:
        return TEAM_SEPARATOR in self.login

    def team_target(self) -> tuple[str, str]:
        """Split `org/team-slug` into `(org, team_slug)`."""

        if not self.is_team:
            raise ValueError(f"not a team login: {self.login!r}")
        org, slug = self.login.split(TEAM_SEPARATOR, 1)
        return org, slug
