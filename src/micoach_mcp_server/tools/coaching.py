"""MCP tools for onboarding, daily tasks and progress tracking."""

from typing import Any

from pydantic import ValidationError

from micoach_mcp_server.models import Assessment, User
from micoach_mcp_server.services.coaching import CoachingService, is_milestone_reached


def register_coaching_tools(mcp, service: CoachingService):
    """Register coaching MCP tools."""

    @mcp.tool()
    def save_user(user_json: str) -> dict[str, Any]:
        """
        Save the user account created during onboarding.

        Args:
            user_json: JSON string with id, email and name

        Returns:
            Dictionary with the saved user
        """
        try:
            user = User.model_validate_json(user_json)
        except ValidationError as e:
            return {"error": f"Invalid user: {e}"}

        try:
            service.save_user(user)
            return {"data": {"saved": True, "user": user.model_dump(mode="json")}}
        except Exception as e:
            return {"error": str(e)}

    @mcp.tool()
    def create_plan(assessment_json: str) -> dict[str, Any]:
        """
        Create a coaching plan from an onboarding assessment.

        The assessment's main_objective is a comma-separated list of
        objectives (Salud, Productividad, Aprendizaje, Otro). For Salud,
        metadata may carry fitnessGoal and fitnessLevel to add a weekly
        fitness program. Any previous plan and progress are replaced.

        Args:
            assessment_json: JSON string containing the assessment

        Returns:
            Dictionary with the plan summary (id, timeframe, milestones)
        """
        try:
            assessment = Assessment.model_validate_json(assessment_json)
        except ValidationError as e:
            return {"error": f"Invalid assessment: {e}"}

        try:
            plan = service.create_plan(assessment)
            return {
                "data": {
                    "plan_id": plan.id,
                    "objective": plan.objective,
                    "timeframe": plan.timeframe,
                    "milestones": [m.model_dump(mode="json") for m in plan.milestones],
                    "has_fitness_routines": plan.fitness_routines is not None,
                }
            }
        except Exception as e:
            return {"error": str(e)}

    @mcp.tool()
    def get_current_plan() -> dict[str, Any]:
        """
        Get the full active plan.

        Returns:
            Dictionary containing the plan, each milestone flagged with whether
            its target date has been reached, or a message when no plan exists
        """
        plan = service.current_plan
        if plan is None:
            return {"data": None, "message": "No plan yet. Complete onboarding first."}

        now = service.clock()
        payload = plan.model_dump(mode="json")
        for milestone, milestone_payload in zip(plan.milestones, payload["milestones"]):
            milestone_payload["reached"] = is_milestone_reached(milestone, now)
        return {"data": payload}

    @mcp.tool()
    def get_todays_tasks(day: int | None = None) -> dict[str, Any]:
        """
        Get the task list for today or for a specific plan day.

        Args:
            day: Optional 1-based plan day. Defaults to the current day.

        Returns:
            Dictionary with the day's tasks, or a message when there is nothing to show
        """
        daily_task = service.get_todays_tasks(day)
        if daily_task is None:
            return {"data": None, "message": "No tasks scheduled."}
        return {"data": daily_task.model_dump(mode="json")}

    @mcp.tool()
    def complete_task(task_id: str) -> dict[str, Any]:
        """
        Mark a task as completed.

        When every task of the current day is done the plan advances to the
        next day and the streak is updated.

        Args:
            task_id: Id of the completed task

        Returns:
            Dictionary with current_day, streak and completed task count
        """
        try:
            progress = service.complete_task(task_id)
        except Exception as e:
            return {"error": str(e)}

        if progress is None:
            return {"data": None, "message": "No active plan."}
        return {
            "data": {
                "current_day": progress.current_day,
                "streak": progress.streak,
                "completed_tasks": len(progress.completed_tasks),
            }
        }

    @mcp.tool()
    def get_progress_summary() -> dict[str, Any]:
        """
        Get overall progress through the plan.

        Returns:
            Dictionary containing:
            - current_day / total_days
            - streak
            - completion_percentage (can exceed 100 after the last day)
            - next_milestone
        """
        summary = service.get_progress_summary()
        if summary is None:
            return {"data": None, "message": "No active plan."}
        return {"data": summary.model_dump(mode="json")}

    @mcp.tool()
    def get_day_task_count(day: int | None = None) -> dict[str, Any]:
        """
        Count completed tasks for a day, not counting the daily reflection.

        Args:
            day: Optional 1-based plan day. Defaults to the current day.

        Returns:
            Dictionary with completed and total counts
        """
        count = service.get_day_task_count(day)
        if count is None:
            return {"data": None, "message": "No tasks scheduled."}
        return {"data": count.model_dump()}

    @mcp.tool()
    def reset_today_tasks() -> dict[str, Any]:
        """
        Mark every task of the current day as not completed.

        Returns:
            Dictionary with the reset status
        """
        try:
            progress = service.reset_today_tasks()
        except Exception as e:
            return {"error": str(e)}

        if progress is None:
            return {"data": None, "message": "No tasks to reset."}
        return {"data": {"reset": True, "current_day": progress.current_day}}

    @mcp.tool()
    def reset_all(confirm: bool = False) -> dict[str, Any]:
        """
        Delete the user, assessment, plan and progress to start onboarding again.

        Args:
            confirm: Must be true to actually delete the data

        Returns:
            Dictionary with the reset status
        """
        if not confirm:
            return {"error": "Pass confirm=true to delete all coaching data."}
        try:
            service.reset_all()
            return {"data": {"reset": True}}
        except Exception as e:
            return {"error": str(e)}
