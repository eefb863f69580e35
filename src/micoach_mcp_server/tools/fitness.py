"""MCP tools for browsing fitness routines."""

from typing import Any

from micoach_mcp_server.planner.routines import (
    days_per_week_for_level,
    estimate_routine_minutes,
    generate_fitness_routine,
    routine_for_weekday,
)
from micoach_mcp_server.services.coaching import CoachingService
from micoach_mcp_server.utils.dates import parse_date


def _routine_payload(routine) -> dict[str, Any]:
    payload = routine.model_dump(mode="json")
    payload["estimated_minutes"] = estimate_routine_minutes(routine)
    return payload


def register_fitness_tools(mcp, service: CoachingService):
    """Register fitness routine MCP tools."""

    @mcp.tool()
    def get_fitness_routines() -> dict[str, Any]:
        """
        Get the weekly fitness program of the active plan.

        Returns:
            Dictionary with the list of routines and their estimated duration
        """
        plan = service.current_plan
        if plan is None or not plan.fitness_routines:
            return {"data": None, "message": "The active plan has no fitness program."}
        routines = [_routine_payload(r) for r in plan.fitness_routines]
        return {"data": {"routines": routines, "count": len(routines)}}

    @mcp.tool()
    def get_todays_routine(on_date: str | None = None) -> dict[str, Any]:
        """
        Get the workout scheduled for a date.

        3-day programs train Monday, Wednesday and Friday, 4-day programs
        Monday, Tuesday, Thursday and Friday, 5-day programs Monday to Friday.

        Args:
            on_date: Optional date in ISO format (YYYY-MM-DD). Defaults to today.

        Returns:
            Dictionary with the routine, or a rest-day message
        """
        plan = service.current_plan
        if plan is None or not plan.fitness_routines:
            return {"data": None, "message": "The active plan has no fitness program."}

        try:
            target = parse_date(on_date) if on_date else service.clock().date()
        except ValueError as e:
            return {"error": str(e)}

        routine = routine_for_weekday(plan.fitness_routines, target.weekday())
        if routine is None:
            return {"data": None, "message": f"{target.isoformat()} is a rest day."}
        return {"data": _routine_payload(routine)}

    @mcp.tool()
    def preview_fitness_routine(goal: str, level: str) -> dict[str, Any]:
        """
        Preview the weekly program for a fitness goal and level without creating a plan.

        Args:
            goal: Fitness goal (Fuerza, Hipertrofia, Pérdida de peso, Resistencia, Tonificación)
            level: Experience level (Principiante, Intermedio, Avanzado)

        Returns:
            Dictionary with days per week and the routines
        """
        routines = generate_fitness_routine(goal, level)
        return {
            "data": {
                "days_per_week": days_per_week_for_level(level),
                "routines": [_routine_payload(r) for r in routines],
            }
        }
