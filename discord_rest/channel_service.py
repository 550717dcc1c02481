"""Channel endpoints of the Discord REST API."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from discord_rest.log import get_logger
from discord_rest.multipart import MultipartRequest

if TYPE_CHECKING:
    from discord_rest.client import RestClient

logger = get_logger("channel-service")

# Response and request bodies are passed through untouched.
ChannelData = dict[str, Any]
MessageData = dict[str, Any]
ChannelModifyRequest = dict[str, Any]


class ChannelService:
    """Issues channel requests through a shared ``RestClient``."""

    def __init__(self, rest: RestClient) -> None:
        self._rest = rest

    async def get_channel(self, channel_id: int) -> ChannelData:
        """Get a channel by id."""
        resp = await self._rest.request("GET", f"/channels/{channel_id}")
        return resp.json()

    async def create_message(self, channel_id: int, request: MultipartRequest) -> MessageData:
        """Post a message, as JSON or as a multipart form when files are attached."""
        path = f"/channels/{channel_id}/messages"
        if request.has_files:
            files = [
                (f"files[{i}]", (filename, content))
                for i, (filename, content) in enumerate(request.files)
            ]
            resp = await self._rest.request(
                "POST",
                path,
                data={"payload_json": json.dumps(request.request)},
                files=files,
            )
        else:
            resp = await self._rest.request("POST", path, json=request.request)
        logger.info("message_created", channel_id=channel_id, files=len(request.files))
        return resp.json()

    async def modify_channel(
        self,
        channel_id: int,
        request: ChannelModifyRequest,
        reason: str | None = None,
    ) -> ChannelData:
        """Update a channel's settings."""
        resp = await self._rest.request(
            "PATCH", f"/channels/{channel_id}", json=request, reason=reason
        )
        logger.info("channel_modified", channel_id=channel_id, fields=sorted(request))
        return resp.json()

    async def delete_channel(
        self, channel_id: int, reason: str | None = None
    ) -> ChannelData | None:
        """Delete a channel. Returns the deleted channel, if the API sent one."""
        resp = await self._rest.request("DELETE", f"/channels/{channel_id}", reason=reason)
        logger.info("channel_deleted", channel_id=channel_id)
        if not resp.content:
            return None
        return resp.json()
