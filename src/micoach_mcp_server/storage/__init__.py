"""Storage modules for the MiCoach MCP Server."""

from micoach_mcp_server.storage.base import BaseStorage, KeyValueStorage, get_data_dir
from micoach_mcp_server.storage.coaching import CoachingStorage

__all__ = [
    "BaseStorage",
    "get_data_dir",
    "KeyValueStorage",
    "CoachingStorage",
]
