"""MCP tools for the MiCoach MCP Server."""

from micoach_mcp_server.tools.coaching import register_coaching_tools
from micoach_mcp_server.tools.fitness import register_fitness_tools

__all__ = [
    "register_coaching_tools",
    "register_fitness_tools",
]


def register_all_tools(mcp, service):
    """Register all MCP tools with the server."""
    register_coaching_tools(mcp, service)
    register_fitness_tools(mcp, service)
