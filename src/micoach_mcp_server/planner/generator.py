"""Rule-based plan generator turning an assessment into a coaching plan."""

import logging
import uuid
from datetime import datetime
from typing import Optional

from micoach_mcp_server.models import (
    REFLECTION_TASK_TITLE,
    Assessment,
    DailyTask,
    FitnessRoutine,
    Milestone,
    ObjectiveCategory,
    Pace,
    Plan,
    TaskItem,
)
from micoach_mcp_server.planner.routines import generate_fitness_routine
from micoach_mcp_server.utils.dates import add_days
from micoach_mcp_server.utils.formatting import format_minutes, format_timeframe

logger = logging.getLogger(__name__)

MIN_TIMEFRAME_DAYS = 30

# Plan length per category as (intensivo, moderado, any other pace)
TIMEFRAME_DAYS: dict[ObjectiveCategory, tuple[int, int, int]] = {
    ObjectiveCategory.SALUD: (30, 60, 90),
    ObjectiveCategory.PRODUCTIVIDAD: (21, 30, 45),
    ObjectiveCategory.APRENDIZAJE: (30, 60, 90),
}
DEFAULT_OBJECTIVE_DAYS = 30

GENERAL_MILESTONE_TITLES = (
    "Construir Bases",
    "Crear Rutinas",
    "Consolidar Hábitos",
    "Dominar el Sistema",
)
MILESTONE_TITLES: dict[ObjectiveCategory, tuple[str, str, str, str]] = {
    ObjectiveCategory.SALUD: (
        "Establecer Bases",
        "Primera Rutina",
        "Consistencia Diaria",
        "Hábito Consolidado",
    ),
    ObjectiveCategory.PRODUCTIVIDAD: (
        "Sistema Básico",
        "Automatización",
        "Optimización",
        "Maestría",
    ),
    ObjectiveCategory.APRENDIZAJE: (
        "Fundamentos",
        "Aplicación",
        "Profundización",
        "Dominio",
    ),
}

# Days within the first week keep the starting load
INITIAL_PHASE_DAYS = 7


def _new_id() -> str:
    return str(uuid.uuid4())


def days_for_objective(category: Optional[ObjectiveCategory], pace: str) -> int:
    """Look up the plan length for one objective at the given pace."""
    if category not in TIMEFRAME_DAYS:
        return DEFAULT_OBJECTIVE_DAYS
    intensive, moderate, relaxed = TIMEFRAME_DAYS[category]  # type: ignore[index]
    if pace == Pace.INTENSIVO.value:
        return intensive
    if pace == Pace.MODERADO.value:
        return moderate
    return relaxed


def determine_total_days(assessment: Assessment) -> int:
    """Longest plan length across the selected objectives, never below 30 days."""
    pace = assessment.preferences.pace
    max_days = MIN_TIMEFRAME_DAYS
    for tag in assessment.objective_tags():
        category = ObjectiveCategory.from_tag(tag)
        max_days = max(max_days, days_for_objective(category, pace))
    return max_days


def milestone_offsets(total_days: int) -> list[int]:
    """Day offsets at which milestones fall for a plan of the given length."""
    if total_days <= 30:
        return [5, 10, 20, 30]
    if total_days <= 60:
        return [7, 15, 30, 45, 60]
    return [10, 30, 60, 90]


def milestone_title(assessment: Assessment, index: int) -> str:
    """Title for the milestone at a 0-based index."""
    tags = assessment.objective_tags()
    if len(tags) > 1:
        return GENERAL_MILESTONE_TITLES[index % 4]

    category = ObjectiveCategory.from_tag(tags[0])
    titles = MILESTONE_TITLES.get(category) if category is not None else None
    if titles is None:
        return f"Hito #{index + 1}"
    return titles[index % 4]


def generate_milestones(
    assessment: Assessment, total_days: int, now: datetime
) -> list[Milestone]:
    milestones: list[Milestone] = []
    for index, offset in enumerate(milestone_offsets(total_days)):
        milestones.append(
            Milestone(
                id=_new_id(),
                title=milestone_title(assessment, index),
                description=f"Descripción del hito {index + 1} para {assessment.main_objective}",
                target_date=add_days(now, offset),
                order=index + 1,
            )
        )
    return milestones


def _ramp(day: int, total_days: int, start: int, end: int, plateau: bool = True) -> int:
    """
    Load for a day: fixed start during the first week, then proportional to plan progress.

    With plateau, the load holds at end once past the plan midpoint.
    """
    if day <= INITIAL_PHASE_DAYS:
        return start
    if plateau and day > total_days // 2:
        return end
    return day * end // total_days


def _walk_task(duration: int, description: str) -> TaskItem:
    return TaskItem(
        id=_new_id(),
        title=f"Caminar {duration} minutos",
        description=description,
        importance="Mantener un estilo de vida activo",
        category=ObjectiveCategory.SALUD.value,
        estimated_time=format_minutes(duration),
    )


def _health_task(assessment: Assessment, day: int, total_days: int) -> TaskItem:
    duration = _ramp(day, total_days, 30, 60)
    if not assessment.has_fitness_profile():
        return _walk_task(duration, "Actividad física para mejorar tu salud")

    if day % 2 == 1:
        goal = assessment.fitness_goal
        return TaskItem(
            id=_new_id(),
            title=f"Entrenamiento de {goal}",
            description=f"Sigue tu rutina de {goal} para hoy",
            importance="Fundamental para tu progreso físico",
            category="Fitness",
            estimated_time="45-60 minutos",
        )
    return _walk_task(duration, "Actividad cardiovascular en día de descanso")


def _learning_task(day: int, total_days: int) -> TaskItem:
    if day <= INITIAL_PHASE_DAYS:
        pages = 20
    elif day <= total_days // 2:
        # Half-up rounding of day / total_days * 50
        pages = (day * 100 + total_days) // (2 * total_days)
    else:
        pages = 50
    return TaskItem(
        id=_new_id(),
        title=f"Leer {pages} páginas",
        description="Lectura diaria para expandir tus conocimientos",
        importance="El aprendizaje constante es clave",
        category=ObjectiveCategory.APRENDIZAJE.value,
        estimated_time="30-40 minutos" if day <= INITIAL_PHASE_DAYS else "1 hora",
    )


def _productivity_task(day: int, total_days: int) -> TaskItem:
    if day <= INITIAL_PHASE_DAYS:
        title = "Planifica tus 3 tareas principales"
    elif day <= total_days // 2:
        title = "Optimiza tu flujo de trabajo"
    else:
        title = "Revisa y ajusta tu sistema"
    return TaskItem(
        id=_new_id(),
        title=title,
        description="Estructura tu día para máxima eficiencia",
        importance="La organización es fundamental",
        category=ObjectiveCategory.PRODUCTIVIDAD.value,
        estimated_time="20 minutos",
    )


def _personal_task(day: int, total_days: int) -> TaskItem:
    duration = _ramp(day, total_days, 30, 60, plateau=False)
    return TaskItem(
        id=_new_id(),
        title=f"Dedica {duration} minutos a tu objetivo personal",
        description="Avanza hacia tus metas personales",
        importance="Cada día cuenta",
        category=ObjectiveCategory.OTRO.value,
        estimated_time=format_minutes(duration),
    )


def _reflection_task() -> TaskItem:
    return TaskItem(
        id=_new_id(),
        title=REFLECTION_TASK_TITLE,
        description="Registra tu progreso de hoy",
        importance="La autoevaluación te ayuda a mejorar",
        category="General",
        estimated_time="5 minutos",
    )


def generate_tasks_for_day(
    assessment: Assessment, day: int, total_days: int
) -> list[TaskItem]:
    """Build the task list for one plan day, ending with the daily reflection."""
    tasks: list[TaskItem] = []
    for category in assessment.categories():
        if category is ObjectiveCategory.SALUD:
            tasks.append(_health_task(assessment, day, total_days))
        elif category is ObjectiveCategory.APRENDIZAJE:
            tasks.append(_learning_task(day, total_days))
        elif category is ObjectiveCategory.PRODUCTIVIDAD:
            tasks.append(_productivity_task(day, total_days))
        elif category is ObjectiveCategory.OTRO:
            tasks.append(_personal_task(day, total_days))

    if tasks:
        tasks.append(_reflection_task())
    return tasks


def generate_daily_tasks(assessment: Assessment, total_days: int) -> list[DailyTask]:
    return [
        DailyTask(
            id=_new_id(),
            day=day,
            tasks=generate_tasks_for_day(assessment, day, total_days),
        )
        for day in range(1, total_days + 1)
    ]


def generate_routines_for(assessment: Assessment) -> Optional[list[FitnessRoutine]]:
    """Fitness routines for Salud assessments carrying a fitness goal and level."""
    if ObjectiveCategory.SALUD not in assessment.categories():
        return None
    if not assessment.has_fitness_profile():
        return None
    return generate_fitness_routine(assessment.fitness_goal, assessment.fitness_level)  # type: ignore[arg-type]


def generate_plan(assessment: Assessment, now: Optional[datetime] = None) -> Plan:
    """
    Generate a coaching plan from an onboarding assessment.

    The result depends only on the assessment and the current time; ids are
    freshly generated on every call.

    Args:
        assessment: The onboarding assessment
        now: Reference time for milestone dates (defaults to datetime.now())

    Returns:
        A new Plan with milestones, one task bundle per day and, for Salud
        assessments with a fitness profile, a week of fitness routines
    """
    if now is None:
        now = datetime.now()

    total_days = determine_total_days(assessment)
    plan = Plan(
        id=_new_id(),
        user_id=assessment.user_id,
        assessment_id=assessment.id,
        objective=assessment.main_objective,
        timeframe=format_timeframe(total_days),
        milestones=generate_milestones(assessment, total_days, now),
        daily_guidance=generate_daily_tasks(assessment, total_days),
        fitness_routines=generate_routines_for(assessment),
        created_at=now,
    )
    logger.debug(
        "Generated %s plan for objective '%s' with %d milestones",
        plan.timeframe,
        plan.objective,
        len(plan.milestones),
    )
    return plan
