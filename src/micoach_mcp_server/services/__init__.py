"""Services for the MiCoach MCP Server."""

from micoach_mcp_server.services.coaching import (
    CoachingService,
    is_milestone_reached,
    next_milestone,
)

__all__ = [
    "CoachingService",
    "is_milestone_reached",
    "next_milestone",
]
