"""Discord REST API client.

Owns the HTTP connection and exposes per-resource services. Entity handles
such as ``RestChannel`` keep a reference to a shared client and delegate to
those services.

Usage:
    from discord_rest.client import RestClient
    from discord_rest.config import Settings

    async with RestClient.from_settings(Settings()) as rest:
        channel = rest.get_channel_by_id(123456789012345678)
        data = await channel.fetch()
        await channel.post_message({"content": "hello"})
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx

from discord_rest.channel_service import ChannelService
from discord_rest.config import Settings
from discord_rest.entity import RestChannel

AUDIT_LOG_REASON_HEADER = "X-Audit-Log-Reason"


class RestClient:
    """Async Discord REST API client."""

    def __init__(
        self,
        url: str,
        token: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url.rstrip("/")
        self.timeout = timeout
        self._headers = {"Authorization": f"Bot {token}"} if token else {}
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._channel_service = ChannelService(self)

    @classmethod
    def from_settings(cls, settings: Settings) -> RestClient:
        return cls(
            settings.discord_api_url,
            settings.discord_token,
            timeout=settings.request_timeout_seconds,
        )

    async def __aenter__(self) -> RestClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.url,
                headers=self._headers,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    @property
    def channel_service(self) -> ChannelService:
        return self._channel_service

    def get_channel_by_id(self, channel_id: int) -> RestChannel:
        """Return a handle bound to ``channel_id``. No request is made."""
        return RestChannel(self, channel_id)

    async def request(
        self,
        method: str,
        path: str,
        *,
        reason: str | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        """Send a request and raise ``httpx.HTTPStatusError`` on non-2xx.

        A non-``None`` ``reason`` is sent URL-encoded in the audit log header,
        including the empty string.
        """
        headers = dict(kwargs.pop("headers", None) or {})
        if reason is not None:
            headers[AUDIT_LOG_REASON_HEADER] = quote(reason, safe="")
        client = await self._get_client()
        resp = await client.request(method, path, headers=headers, **kwargs)
        resp.raise_for_status()
        return resp
