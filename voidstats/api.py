"""Async API clients for the Mojang profile API and the Hypixel API."""

import asyncio
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import aiohttp

from .errors import PlayerNotFound, UpstreamError

logger = logging.getLogger("voidstats")

REQUEST_TIMEOUT = 10


class _AsyncClient:
    """Shared session handling for the upstream clients."""

    BASE_URL = ""
    SERVICE = ""

    def __init__(self, headers: Optional[Dict[str, str]] = None) -> None:
        self._headers = headers or {}
        self._session: Optional[aiohttp.ClientSession] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=REQUEST_TIMEOUT)
            self._session = aiohttp.ClientSession(headers=self._headers, timeout=timeout)
        return self._session

    async def _get(self, path: str, params: Optional[Dict[str, str]] = None):
        """
        Perform a GET request.

        Returns:
            A ``(status, body)`` tuple where body is the decoded JSON, or None
            when the response carries no JSON.

        Raises:
            UpstreamError: On network errors and timeouts.
        """
        session = await self._get_session()
        url = f"{self.BASE_URL}{path}"
        try:
            async with session.get(url, params=params) as resp:
                body = None
                if resp.content_type and resp.content_type.startswith("application/json"):
                    body = await resp.json()
                return resp.status, body
        except asyncio.TimeoutError:
            logger.warning(f"{self.SERVICE} timeout: {path}")
            raise UpstreamError(self.SERVICE, detail="timeout")
        except aiohttp.ClientError as e:
            logger.warning(f"{self.SERVICE} error: {e}")
            raise UpstreamError(self.SERVICE, detail=str(e)) from e

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()


class MojangClient(_AsyncClient):
    """Resolves Minecraft usernames to UUIDs."""

    BASE_URL = "https://api.mojang.com"
    SERVICE = "Mojang"

    async def resolve_uuid(self, username: str) -> str:
        """
        Look up the UUID of a Minecraft account.

        Args:
            username: The name exactly as the user typed it.

        Returns:
            The account UUID without dashes.

        Raises:
            PlayerNotFound: If no profile exists for the name.
            UpstreamError: On any other failure.
        """
        status, body = await self._get(f"/users/profiles/minecraft/{quote(username, safe='')}")
        if status in (204, 404):
            raise PlayerNotFound(username)
        if status != 200:
            raise UpstreamError(self.SERVICE, status)
        if not isinstance(body, dict) or not body.get("id"):
            raise UpstreamError(self.SERVICE, status, "missing profile id")
        return body["id"]


class HypixelClient(_AsyncClient):
    """Fetches player records from the Hypixel public API."""

    BASE_URL = "https://api.hypixel.net"
    SERVICE = "Hypixel"

    def __init__(self, api_key: str) -> None:
        super().__init__({"API-Key": api_key})

    async def fetch_player(self, uuid: str) -> Dict[str, Any]:
        """
        Get the Bed Wars statistics object of a player.

        Args:
            uuid: The player's UUID.

        Returns:
            The ``player.stats.Bedwars`` mapping, empty if the player never
            played Bed Wars.

        Raises:
            PlayerNotFound: If Hypixel has no record for the UUID.
            UpstreamError: On a non-200 response or a malformed body.
        """
        status, body = await self._get("/player", params={"uuid": uuid})
        if status != 200 or not isinstance(body, dict):
            raise UpstreamError(self.SERVICE, status)
        player = body.get("player")
        if not player:
            raise PlayerNotFound(uuid)
        stats = player.get("stats") or {}
        return stats.get("Bedwars") or {}


class StatsFetcher:
    """Runs the username -> UUID -> Bed Wars stats sequence."""

    def __init__(self, mojang: MojangClient, hypixel: HypixelClient) -> None:
        self.mojang = mojang
        self.hypixel = hypixel

    async def __call__(self, username: str) -> Dict[str, Any]:
        uuid = await self.mojang.resolve_uuid(username)
        try:
            return await self.hypixel.fetch_player(uuid)
        except PlayerNotFound:
            raise PlayerNotFound(username) from None

    async def close(self) -> None:
        await self.mojang.close()
        await self.hypixel.close()
