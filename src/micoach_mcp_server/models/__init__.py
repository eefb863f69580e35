"""Pydantic models for the MiCoach MCP Server."""

from micoach_mcp_server.models.assessment import (
    FITNESS_GOAL_KEY,
    FITNESS_LEVEL_KEY,
    Assessment,
    AssessmentPreferences,
    ObjectiveCategory,
    Pace,
    User,
)
from micoach_mcp_server.models.plan import (
    REFLECTION_TASK_TITLE,
    DailyTask,
    Exercise,
    FitnessRoutine,
    Milestone,
    Plan,
    TaskItem,
)
from micoach_mcp_server.models.progress import (
    DayTaskCount,
    Progress,
    ProgressSummary,
)

__all__ = [
    # Assessment models
    "ObjectiveCategory",
    "Pace",
    "FITNESS_GOAL_KEY",
    "FITNESS_LEVEL_KEY",
    "User",
    "AssessmentPreferences",
    "Assessment",
    # Plan models
    "REFLECTION_TASK_TITLE",
    "Milestone",
    "TaskItem",
    "DailyTask",
    "Exercise",
    "FitnessRoutine",
    "Plan",
    # Progress models
    "Progress",
    "ProgressSummary",
    "DayTaskCount",
]
