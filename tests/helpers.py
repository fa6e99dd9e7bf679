from __future__ import annotations

from github_activity.models import Event, Payload


def make_event(kind: str, repo: str = "test/repo", **payload) -> Event:
    return Event(kind=kind, repository_name=repo, payload=Payload(**payload))


def push(repo: str, size: int) -> Event:
    return make_event("push", repo, size=size)


def api_event(type_: str, repo: str = "test/repo", **payload) -> dict:
    """Shape of one entry of the /users/{name}/events response."""
    return {"id": "1", "type": type_, "repo": {"id": 1, "name": repo}, "payload": payload}
