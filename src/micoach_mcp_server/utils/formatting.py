"""Formatting utilities for plan timeframes and durations."""


def format_timeframe(days: int) -> str:
    """Render a plan length the way plans store it (e.g. '30 dias')."""
    return f"{days} dias"


def format_minutes(minutes: int) -> str:
    """Render a duration in minutes (e.g. '45 minutos')."""
    return f"{minutes} minutos"
