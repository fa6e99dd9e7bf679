"""Turn activity events into one-line human summaries."""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence

from github_activity.grouper import group_events
from github_activity.models import (
    CREATE,
    DELETE,
    FORK,
    ISSUE,
    MEMBER,
    PUBLIC,
    PULL_REQUEST,
    PUSH,
    WATCH,
    Event,
)

MARKER = "- "
DEFAULT_LIMIT = 10


def capitalize_action(action: str) -> str:
    """Upper-case the first letter only; ``"reopened"`` -> ``"Reopened"``."""
    return action[:1].upper() + action[1:]


def _push(event: Event) -> str:
    return f"Pushed {event.payload.size} commits to {event.repository_name}"


def _issue(event: Event) -> str:
    repo = event.repository_name
    action = event.payload.action
    if action == "opened":
        return f"Opened a new issue in {repo}"
    if action == "closed":
        return f"Closed an issue in {repo}"
    return f"{capitalize_action(action)} an issue in {repo}"


def _watch(event: Event) -> str:
    return f"Starred {event.repository_name}"


def _create(event: Event) -> str:
    repo = event.repository_name
    ref_type = event.payload.ref_type
    if ref_type == "repository":
        return f"Created repository {repo}"
    if ref_type == "branch":
        return f"Created branch {event.payload.ref} in {repo}"
    return f"Created {ref_type} in {repo}"


def _delete(event: Event) -> str:
    return f"Deleted {event.payload.ref_type} {event.payload.ref} in {event.repository_name}"


def _fork(event: Event) -> str:
    return f"Forked {event.repository_name}"


def _pull_request(event: Event) -> str:
    repo = event.repository_name
    action = event.payload.action
    if action == "opened":
        return f"Opened a new pull request in {repo}"
    if action == "closed":
        return f"Closed a pull request in {repo}"
    return f"{capitalize_action(action)} a pull request in {repo}"


def _public(event: Event) -> str:
    return f"Made {event.repository_name} public"


def _member(event: Event) -> str:
    return f"{capitalize_action(event.payload.action)} a collaborator to {event.repository_name}"


_FORMATTERS: Dict[str, Callable[[Event], str]] = {
    PUSH: _push,
    ISSUE: _issue,
    WATCH: _watch,
    CREATE: _create,
    DELETE: _delete,
    FORK: _fork,
    PULL_REQUEST: _pull_request,
    PUBLIC: _public,
    MEMBER: _member,
}


def format_event(event: Event) -> str:
    """Turn an event into a readable summary line."""
    formatter = _FORMATTERS.get(event.kind)
    if formatter is None:
        return f"{MARKER}{event.kind} in {event.repository_name}"
    return MARKER + formatter(event)


def render_events(events: Sequence[Event], limit: int = DEFAULT_LIMIT) -> List[str]:
    """Group the feed and format at most ``limit`` of the resulting entries."""
    return [format_event(event) for event in group_events(events)[:limit]]
