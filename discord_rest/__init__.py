"""Async Discord REST client with identifier-scoped entity handles."""

from discord_rest.client import RestClient
from discord_rest.config import Settings
from discord_rest.entity import RestChannel
from discord_rest.log import get_logger, setup_logging
from discord_rest.multipart import MultipartRequest

__all__ = ["MultipartRequest", "RestChannel", "RestClient", "Settings", "get_logger", "setup_logging"]
