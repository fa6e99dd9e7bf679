from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from github_activity.errors import DecodeError

PUSH = "push"
ISSUE = "issue"
WATCH = "watch"
CREATE = "create"
DELETE = "delete"
FORK = "fork"
PULL_REQUEST = "pull_request"
PUBLIC = "public"
MEMBER = "member"

# GitHub API event type -> event kind
API_KINDS: Dict[str, str] = {
    "PushEvent": PUSH,
    "IssuesEvent": ISSUE,
    "WatchEvent": WATCH,
    "CreateEvent": CREATE,
    "DeleteEvent": DELETE,
    "ForkEvent": FORK,
    "PullRequestEvent": PULL_REQUEST,
    "PublicEvent": PUBLIC,
    "MemberEvent": MEMBER,
}


class Payload(BaseModel):
    """Optional per-kind fields; anything irrelevant to a kind stays empty."""

    model_config = ConfigDict(frozen=True)

    ref: str = ""
    ref_type: str = ""
    size: int = Field(default=0, ge=0)
    action: str = ""

    @model_validator(mode="before")
    @classmethod
    def _size_from_commits(cls, data: Any) -> Any:
        # Newer push payloads may omit size but still list the commits.
        if isinstance(data, dict) and data.get("size") is None:
            commits = data.get("commits")
            if isinstance(commits, list):
                return {**data, "size": len(commits)}
        return data

    @field_validator("ref", "ref_type", "action", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("size", mode="before")
    @classmethod
    def _none_as_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


class Event(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str
    repository_name: str
    payload: Payload = Field(default_factory=Payload)


class _ApiRepo(BaseModel):
    name: str


class _ApiEvent(BaseModel):
    type: str
    repo: _ApiRepo
    payload: Payload = Field(default_factory=Payload)

    @field_validator("payload", mode="before")
    @classmethod
    def _missing_payload(cls, value: Any) -> Any:
        return {} if value is None else value

    def to_event(self) -> Event:
        return Event(
            kind=API_KINDS.get(self.type, self.type),
            repository_name=self.repo.name,
            payload=self.payload,
        )


def parse_events(raw: Any) -> List[Event]:
    """Decode a parsed ``/users/{name}/events`` body into events.

    Known API types are mapped to their short kind; unknown types are kept
    verbatim. Raises DecodeError when the body is not a list of event objects.
    """
    if not isinstance(raw, list):
        raise DecodeError(f"expected a list of events, got {type(raw).__name__}")
    events: List[Event] = []
    for index, item in enumerate(raw):
        try:
            events.append(_ApiEvent.model_validate(item).to_event())
        except ValidationError as exc:
            raise DecodeError(f"malformed event at index {index}: {exc}") from exc
    return events
