"""Pydantic models for generated coaching plans."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_TOTAL_DAYS = 30

# Title of the reflection task appended to every non-empty day
REFLECTION_TASK_TITLE = "Reflexión diaria"


class Milestone(BaseModel):
    """A dated checkpoint within a plan."""

    id: str
    title: str
    description: str
    target_date: datetime
    order: int  # 1-based


class TaskItem(BaseModel):
    """One actionable item in a day's task bundle."""

    id: str
    title: str
    description: str
    importance: str
    category: str
    estimated_time: str

    @property
    def is_reflection(self) -> bool:
        return self.title == REFLECTION_TASK_TITLE


class DailyTask(BaseModel):
    """The bundle of tasks scheduled for one plan day."""

    id: str
    day: int  # 1-based
    tasks: list[TaskItem] = Field(default_factory=list)

    def task_ids(self) -> set[str]:
        return {task.id for task in self.tasks}


class Exercise(BaseModel):
    """One movement in a workout; the name identifies it within a routine."""

    name: str
    sets: int
    reps: str  # e.g. "8-10", "12", "30 seg"
    weight: str  # e.g. "Ligero", "Moderado", "Pesado"
    rest: str  # e.g. "60 seg", "2 min"
    notes: Optional[str] = None


class FitnessRoutine(BaseModel):
    """One workout day in a fitness program."""

    id: str
    day: str  # e.g. "Día 1"
    focus: str  # e.g. "Piernas y Core"
    exercises: list[Exercise] = Field(default_factory=list)


class Plan(BaseModel):
    """Coaching program generated from an assessment."""

    id: str
    user_id: str
    assessment_id: str
    objective: str
    timeframe: str  # "<days> dias"
    milestones: list[Milestone] = Field(default_factory=list)
    daily_guidance: list[DailyTask] = Field(default_factory=list)
    fitness_routines: Optional[list[FitnessRoutine]] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def total_days(self) -> int:
        """Number of days parsed from the timeframe string."""
        try:
            days = int(self.timeframe.split(" ")[0])
        except ValueError:
            return DEFAULT_TOTAL_DAYS
        return days if days > 0 else DEFAULT_TOTAL_DAYS

    def daily_task_for(self, day: int) -> Optional[DailyTask]:
        """Return the task bundle for a day, or None when the day is not scheduled."""
        return next((daily for daily in self.daily_guidance if daily.day == day), None)
