"""Date utility functions for the MiCoach MCP Server."""

from datetime import date, datetime, timedelta


def add_days(start: datetime, days: int) -> datetime:
    """
    Offset a timestamp by a number of calendar days.

    Args:
        start: Timestamp to offset
        days: Number of days to add (may be negative)

    Returns:
        The offset timestamp, keeping the time of day
    """
    return start + timedelta(days=days)


def is_same_calendar_day(first: datetime, second: datetime) -> bool:
    """Whether two timestamps fall on the same calendar day."""
    return first.date() == second.date()


def is_before_day(moment: datetime, reference: datetime) -> bool:
    """Whether a timestamp falls on a calendar day strictly before the reference day."""
    return moment.date() < reference.date()


def parse_date(date_str: str) -> date:
    """
    Parse a date string in ISO format (YYYY-MM-DD).

    Args:
        date_str: Date string in ISO format

    Returns:
        Date object
    """
    try:
        return date.fromisoformat(date_str)
    except ValueError as err:
        raise ValueError(f"Invalid date format: {date_str}. Expected format: YYYY-MM-DD") from err
