"""Utility functions for the MiCoach MCP Server."""

from micoach_mcp_server.utils.formatting import format_minutes, format_timeframe
from micoach_mcp_server.utils.dates import (
    add_days,
    is_before_day,
    is_same_calendar_day,
    parse_date,
)

__all__ = [
    "format_timeframe",
    "format_minutes",
    "add_days",
    "is_same_calendar_day",
    "is_before_day",
    "parse_date",
]
