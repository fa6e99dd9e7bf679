from __future__ import annotations

from typing import Optional


class FetchError(RuntimeError):
    """Raised when the activity feed could not be fetched or decoded."""


class UserNotFoundError(FetchError):
    def __init__(self, username: str) -> None:
        super().__init__(f"user '{username}' not found")
        self.username = username


class UpstreamError(FetchError):
    """The API answered with a non-success status other than 404."""

    def __init__(self, status_code: int, message: Optional[str] = None) -> None:
        text = f"GitHub API returned status {status_code}"
        if message:
            text += f": {message}"
        super().__init__(text)
        self.status_code = status_code


class NetworkError(FetchError):
    pass


class DecodeError(FetchError):
    pass
