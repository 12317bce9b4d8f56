"""Async HTTP client for the celebration REST API."""
import logging
from typing import Any

import httpx

from celebration.config import settings
from celebration.errors import RemoteRejected, TransientFailure

logger = logging.getLogger(__name__)


class CelebrationApi:
    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    @classmethod
    def from_settings(cls) -> "CelebrationApi":
        return cls(httpx.AsyncClient(base_url=settings.API_BASE_URL))

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            response = await self.http.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            try:
                body = exc.response.json()
            except ValueError:
                body = exc.response.text
            raise RemoteRejected(exc.response.status_code, body) from exc
        except httpx.HTTPError as exc:
            raise TransientFailure(f"{method} {path} failed: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise RemoteRejected(response.status_code, response.text) from exc

    async def create_rsvp(self, payload: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/api/rsvp", json=payload)

    async def list_rsvps(self) -> list[dict[str, Any]]:
        return await self._request("GET", "/api/rsvps")

    async def create_memory(self, payload: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/api/memories", json=payload)

    async def list_memories(self) -> list[dict[str, Any]]:
        return await self._request("GET", "/api/memories")

    async def aclose(self) -> None:
        await self.http.aclose()
