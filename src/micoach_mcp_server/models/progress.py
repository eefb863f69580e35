"""Pydantic models for progress tracking."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from micoach_mcp_server.models.plan import Milestone


class Progress(BaseModel):
    """Mutable tracking state for one plan."""

    id: str
    user_id: str
    plan_id: str
    current_day: int = 1
    completed_tasks: set[str] = Field(default_factory=set)
    streak: int = Field(default=0, ge=0)
    last_activity: datetime = Field(default_factory=datetime.now)

    # Metadata
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class ProgressSummary(BaseModel):
    """Aggregate view of a user's progress through their plan."""

    current_day: int
    total_days: int
    streak: int
    completion_percentage: float  # Not capped at 100
    next_milestone: Optional[Milestone] = None


class DayTaskCount(BaseModel):
    """Completed versus trackable tasks for one plan day."""

    day: int
    completed: int
    total: int
