"""Exceptions raised by the voidstats API clients."""

from typing import Optional


class VoidStatsError(Exception):
    """Base class for voidstats errors."""


class PlayerNotFound(VoidStatsError):
    """The username has no Mojang profile or no Hypixel player record."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Player not found: {username}")
        self.username = username


class UpstreamError(VoidStatsError):
    """An upstream API failed, timed out or answered with an unexpected shape."""

    def __init__(self, service: str, status: Optional[int] = None, detail: str = "") -> None:
        message = f"{service} request failed"
        if status is not None:
            message += f" (status {status})"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.service = service
        self.status = status
