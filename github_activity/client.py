from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Any, List, Optional

from github_activity.env import DEFAULT_API_URL, DEFAULT_TIMEOUT
from github_activity.errors import (
    DecodeError,
    FetchError,
    NetworkError,
    UpstreamError,
    UserNotFoundError,
)
from github_activity.models import Event, parse_events

logger = logging.getLogger(__name__)

USER_AGENT = "github-activity-cli/1.0"


def events_url(username: str, api_url: str = DEFAULT_API_URL) -> str:
    return f"{api_url.rstrip('/')}/users/{urllib.parse.quote(username, safe='')}/events"


def _error_message(exc: urllib.error.HTTPError) -> Optional[str]:
    """Return the ``message`` field of a GitHub error body, if there is one."""
    try:
        err_json = json.loads(exc.read().decode("utf-8"))
    except (OSError, AttributeError, UnicodeDecodeError, json.JSONDecodeError):
        return None
    if isinstance(err_json, dict) and err_json.get("message"):
        return str(err_json["message"])
    return None


def _decode_body(body: bytes) -> Any:
    try:
        return json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DecodeError(f"failed to parse response: {exc}") from exc


def fetch_events(
    username: str, *, api_url: str = DEFAULT_API_URL, timeout: int = DEFAULT_TIMEOUT
) -> List[Event]:
    """Fetch the public events of ``username``, newest first. No retries."""
    url = events_url(username, api_url)
    logger.debug("Fetching %s", url)
    try:
        req = urllib.request.Request(url)
        req.add_header("User-Agent", USER_AGENT)
        req.add_header("Accept", "application/vnd.github.v3+json")
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            status = resp.status
            body = resp.read()
    except urllib.error.HTTPError as exc:
        if exc.code == 404:
            raise UserNotFoundError(username) from exc
        raise UpstreamError(exc.code, _error_message(exc)) from exc
    except urllib.error.URLError as exc:
        raise NetworkError(f"failed to fetch data: {exc.reason}") from exc
    except ValueError as exc:
        raise FetchError(f"invalid API URL {url!r}: {exc}") from exc
    except (TimeoutError, OSError, http.client.HTTPException) as exc:
        raise NetworkError(f"failed to fetch data: {exc}") from exc

    if status != 200:
        raise UpstreamError(status)

    events = parse_events(_decode_body(body))
    logger.info("Fetched %d events for %s", len(events), username)
    return events
