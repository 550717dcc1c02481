"""Identifier-scoped handles over a shared ``RestClient``.

A handle stores an id and a reference to the client, so callers don't have
to repeat the id on every service call. It owns nothing: closing the client
is the caller's job, and every error from the service reaches the caller
unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from discord_rest.multipart import MessageCreateRequest, MultipartRequest

if TYPE_CHECKING:
    from discord_rest.channel_service import ChannelData, ChannelModifyRequest, MessageData
    from discord_rest.client import RestClient


@dataclass(frozen=True)
class RestChannel:
    """A Discord channel addressed by id."""

    client: RestClient = field(repr=False)
    id: int

    async def fetch(self) -> ChannelData:
        """Request the current channel data."""
        return await self.client.channel_service.get_channel(self.id)

    async def post_message(
        self, request: MessageCreateRequest | MultipartRequest
    ) -> MessageData:
        """Create a message in this channel.

        Args:
            request: A message body, or a ``MultipartRequest`` carrying the
                body together with file attachments.

        Returns:
            The created message.
        """
        if not isinstance(request, MultipartRequest):
            request = MultipartRequest(request)
        return await self.client.channel_service.create_message(self.id, request)

    async def edit(
        self, request: ChannelModifyRequest, reason: str | None = None
    ) -> ChannelData:
        """Edit this channel, optionally recording an audit log reason.

        ``reason=None`` sends no reason; ``""`` sends an empty one.
        """
        return await self.client.channel_service.modify_channel(self.id, request, reason)

    async def remove(self, reason: str | None = None) -> None:
        """Delete this channel, optionally recording an audit log reason."""
        await self.client.channel_service.delete_channel(self.id, reason)
