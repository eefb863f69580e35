"""Plan generation and the fitness routine library."""

from micoach_mcp_server.planner.generator import (
    determine_total_days,
    generate_plan,
    generate_tasks_for_day,
    milestone_offsets,
)
from micoach_mcp_server.planner.routines import (
    days_per_week_for_level,
    estimate_routine_minutes,
    generate_fitness_routine,
    parse_rest_minutes,
    routine_for_weekday,
)

__all__ = [
    "generate_plan",
    "determine_total_days",
    "milestone_offsets",
    "generate_tasks_for_day",
    "generate_fitness_routine",
    "days_per_week_for_level",
    "routine_for_weekday",
    "parse_rest_minutes",
    "estimate_routine_minutes",
]
