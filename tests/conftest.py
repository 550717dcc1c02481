"""Shared fixtures: a recording channel service and a mock-transport client."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from typing import Any, Callable

import httpx
import pytest

from discord_rest.client import RestClient


class RecordingChannelService:
    """Stands in for ``ChannelService``; records calls, returns or raises on demand."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self.result: Any = None
        self.error: Exception | None = None

    async def _respond(self, *call: Any) -> Any:
        self.calls.append(call)
        if self.error is not None:
            raise self.error
        return self.result

    async def get_channel(self, channel_id: int) -> Any:
        return await self._respond("get_channel", channel_id)

    async def create_message(self, channel_id: int, request: Any) -> Any:
        return await self._respond("create_message", channel_id, request)

    async def modify_channel(self, channel_id: int, request: Any, reason: str | None = None) -> Any:
        return await self._respond("modify_channel", channel_id, request, reason)

    async def delete_channel(self, channel_id: int, reason: str | None = None) -> Any:
        return await self._respond("delete_channel", channel_id, reason)


class RecordingClient:
    def __init__(self) -> None:
        self.channel_service = RecordingChannelService()


@pytest.fixture
def fake_client() -> RecordingClient:
    return RecordingClient()


@pytest.fixture
async def mock_api() -> AsyncIterator[Callable[..., tuple[RestClient, list[httpx.Request]]]]:
    """Build ``RestClient``s whose requests are answered by ``handler``; closed on teardown."""
    created: list[RestClient] = []

    def factory(
        status: int = 200, body: Any = None, handler: Callable[[httpx.Request], httpx.Response] | None = None
    ) -> tuple[RestClient, list[httpx.Request]]:
        seen: list[httpx.Request] = []

        def respond(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if handler is not None:
                return handler(request)
            content = b"" if body is None else json.dumps(body).encode()
            return httpx.Response(status, content=content)

        client = RestClient(
            "https://discord.test/api/v10/",
            "secret",
            transport=httpx.MockTransport(respond),
        )
        created.append(client)
        return client, seen

    yield factory

    for client in created:
        await client.close()
