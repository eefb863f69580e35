"""Coaching service owning the active user, plan and progress."""

import logging
import threading
import uuid
from datetime import datetime
from typing import Callable, Optional

from micoach_mcp_server.models import (
    Assessment,
    DailyTask,
    DayTaskCount,
    Milestone,
    Plan,
    Progress,
    ProgressSummary,
    User,
)
from micoach_mcp_server.planner.generator import generate_plan
from micoach_mcp_server.storage.coaching import CoachingStorage
from micoach_mcp_server.utils.dates import is_before_day, is_same_calendar_day

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def is_milestone_reached(milestone: Milestone, now: datetime) -> bool:
    """Whether a milestone's target date is at or before the given moment."""
    return milestone.target_date <= now


def next_milestone(milestones: list[Milestone], now: datetime) -> Optional[Milestone]:
    """First milestone, by order, whose target day is today or later."""
    for milestone in sorted(milestones, key=lambda m: m.order):
        if not is_before_day(milestone.target_date, now):
            return milestone
    return None


class CoachingService:
    """
    Holds the active user, plan and progress and advances the user through the plan.

    All reads and writes of the in-memory state go through a single lock.
    Mutations are persisted before the in-memory copy is replaced, so a failed
    write leaves the service state untouched and the error reaches the caller.
    """

    def __init__(self, storage: CoachingStorage, clock: Optional[Clock] = None):
        """
        Initialize the coaching service.

        Args:
            storage: Storage for the user, assessment, plan and progress records
            clock: Callable returning the current time (defaults to datetime.now)
        """
        self.storage = storage
        self.clock: Clock = clock or datetime.now
        self._lock = threading.RLock()
        self._user: Optional[User] = None
        self._plan: Optional[Plan] = None
        self._progress: Optional[Progress] = None

    @property
    def current_user(self) -> Optional[User]:
        with self._lock:
            return self._user

    @property
    def current_plan(self) -> Optional[Plan]:
        with self._lock:
            return self._plan

    @property
    def progress(self) -> Optional[Progress]:
        with self._lock:
            return self._progress

    def load_data(self) -> None:
        """Load stored records into memory; unreadable or mismatched records load as absent."""
        with self._lock:
            self._user = self.storage.load_user()
            self._plan = self.storage.load_plan()
            progress = self.storage.load_progress()
            if progress is not None and (self._plan is None or progress.plan_id != self._plan.id):
                logger.warning("Ignoring stored progress that does not belong to the stored plan")
                progress = None
            self._progress = progress
            logger.info(
                "Loaded coaching data (user=%s, plan=%s, progress=%s)",
                self._user is not None,
                self._plan is not None,
                self._progress is not None,
            )

    def save_user(self, user: User) -> None:
        with self._lock:
            self.storage.save_user(user)
            self._user = user

    def create_plan(self, assessment: Assessment) -> Plan:
        """
        Generate and store a plan for an assessment, starting progress at day 1.

        Any previous plan and progress are replaced.

        Args:
            assessment: The onboarding assessment

        Returns:
            The generated plan

        Raises:
            StorageError: If any record could not be saved
        """
        with self._lock:
            self.storage.save_assessment(assessment)

            now = self.clock()
            plan = generate_plan(assessment, now=now)
            self.storage.save_plan(plan)

            progress = Progress(
                id=str(uuid.uuid4()),
                user_id=assessment.user_id,
                plan_id=plan.id,
                current_day=1,
                completed_tasks=set(),
                streak=0,
                last_activity=now,
                created_at=now,
                updated_at=now,
            )
            self.storage.save_progress(progress)

            self._plan = plan
            self._progress = progress

        logger.info("Created %s plan %s for user %s", plan.timeframe, plan.id, plan.user_id)
        return plan

    def get_todays_tasks(self, day: Optional[int] = None) -> Optional[DailyTask]:
        """
        Get the task bundle for a day.

        Args:
            day: Plan day to look up. Defaults to the current day.

        Returns:
            The day's tasks, or None when nothing is loaded or the day is not in the plan
        """
        with self._lock:
            if self._plan is None or self._progress is None:
                return None
            target_day = day if day is not None else self._progress.current_day
            return self._plan.daily_task_for(target_day)

    def complete_task(self, task_id: str) -> Optional[Progress]:
        """
        Mark a task as completed, advancing to the next day once the day is done.

        Completing the same task twice has no further effect on the completed set.

        Args:
            task_id: Id of the completed task

        Returns:
            The updated progress, or None when no progress is loaded

        Raises:
            StorageError: If the updated progress could not be saved
        """
        with self._lock:
            if self._progress is None:
                return None

            previous = self._progress
            now = self.clock()
            updated = previous.model_copy(deep=True)
            updated.completed_tasks.add(task_id)
            updated.last_activity = now
            updated.updated_at = now

            if self._is_day_complete(previous.current_day, updated.completed_tasks):
                updated.current_day = previous.current_day + 1
                updated.streak = self._calculate_streak(previous, now)
                logger.info(
                    "Day %d completed, advancing to day %d (streak %d)",
                    previous.current_day,
                    updated.current_day,
                    updated.streak,
                )

            self.storage.save_progress(updated)
            self._progress = updated
            return updated

    def get_progress_summary(self) -> Optional[ProgressSummary]:
        """Aggregate progress for the loaded plan, or None when nothing is loaded."""
        with self._lock:
            if self._plan is None or self._progress is None:
                return None
            total_days = self._plan.total_days
            return ProgressSummary(
                current_day=self._progress.current_day,
                total_days=total_days,
                streak=self._progress.streak,
                completion_percentage=self._progress.current_day / total_days * 100,
                next_milestone=next_milestone(self._plan.milestones, self.clock()),
            )

    def get_day_task_count(self, day: Optional[int] = None) -> Optional[DayTaskCount]:
        """
        Count completed versus trackable tasks for a day.

        The daily reflection is not a trackable goal and is left out of both counts.
        """
        with self._lock:
            daily_task = self.get_todays_tasks(day)
            if daily_task is None or self._progress is None:
                return None
            trackable = [task for task in daily_task.tasks if not task.is_reflection]
            completed = [task for task in trackable if task.id in self._progress.completed_tasks]
            return DayTaskCount(day=daily_task.day, completed=len(completed), total=len(trackable))

    def reset_today_tasks(self) -> Optional[Progress]:
        """
        Un-complete every task of the current day without moving the day or streak.

        Returns:
            The updated progress, or None when there is no current day to reset

        Raises:
            StorageError: If the updated progress could not be saved
        """
        with self._lock:
            daily_task = self.get_todays_tasks()
            if daily_task is None or self._progress is None:
                return None

            updated = self._progress.model_copy(deep=True)
            updated.completed_tasks -= daily_task.task_ids()
            self.storage.save_progress(updated)
            self._progress = updated

        logger.info("Reset tasks for day %d", daily_task.day)
        return updated

    def reset_all(self) -> None:
        """Forget the user, plan and progress, removing every stored record."""
        with self._lock:
            self.storage.clear()
            self._user = None
            self._plan = None
            self._progress = None
        logger.info("Cleared all coaching data")

    def _is_day_complete(self, day: int, completed_tasks: set[str]) -> bool:
        if self._plan is None:
            return False
        daily_task = self._plan.daily_task_for(day)
        if daily_task is None:
            return False
        return daily_task.task_ids() <= completed_tasks

    def _calculate_streak(self, progress: Progress, now: datetime) -> int:
        # Compares the activity timestamp stored before this completion.
        if is_same_calendar_day(progress.last_activity, now):
            return progress.streak + 1
        return 1
