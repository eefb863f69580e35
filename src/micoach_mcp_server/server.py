#!/usr/bin/env python3
"""
MCP server for the MiCoach personal coaching engine.
This server exposes onboarding, daily task tracking, progress and fitness
routine tools backed by local JSON storage.
"""

import logging

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from micoach_mcp_server.logging_config import configure_logging
from micoach_mcp_server.services.coaching import CoachingService
from micoach_mcp_server.storage.coaching import CoachingStorage
from micoach_mcp_server.tools import register_all_tools

logger = logging.getLogger(__name__)


def create_server(service: CoachingService) -> FastMCP:
    """Create the MCP server with every tool bound to the given service."""
    mcp = FastMCP("MiCoach MCP Server")
    register_all_tools(mcp, service)
    return mcp


def main() -> None:
    """Main function to start the MiCoach MCP server."""
    load_dotenv()
    configure_logging()

    service = CoachingService(CoachingStorage())
    service.load_data()

    logger.info("Starting MiCoach MCP server")
    create_server(service).run(transport="stdio")


if __name__ == "__main__":
    main()
