"""Fitness routine library: static workout tables and weekly scheduling."""

import uuid
from typing import Optional

from micoach_mcp_server.models import Exercise, FitnessRoutine

# (name, sets, reps, weight, rest)
ExerciseRow = tuple[str, int, str, str, str]
# (day label, focus label, exercises)
RoutineRow = tuple[str, str, tuple[ExerciseRow, ...]]

STRENGTH_3_DAYS: tuple[RoutineRow, ...] = (
    ("Día 1", "Piernas y Core", (
        ("Sentadillas", 3, "8-10", "Moderado", "2 min"),
        ("Peso muerto", 3, "8", "Moderado", "2 min"),
        ("Prensa de piernas", 3, "10", "Moderado", "90 seg"),
        ("Plancha", 3, "30 seg", "Peso corporal", "60 seg"),
    )),
    ("Día 2", "Pecho y Espalda", (
        ("Press de banca", 3, "8", "Moderado", "2 min"),
        ("Remo con barra", 3, "8-10", "Moderado", "2 min"),
        ("Dominadas asistidas", 3, "6-8", "Peso corporal", "90 seg"),
        ("Fondos en banco", 3, "10", "Peso corporal", "90 seg"),
    )),
    ("Día 3", "Hombros y Brazos", (
        ("Press militar", 3, "8-10", "Moderado", "2 min"),
        ("Curl de bíceps", 3, "10", "Moderado", "90 seg"),
        ("Extensión de tríceps", 3, "10", "Moderado", "90 seg"),
        ("Elevaciones laterales", 3, "12", "Ligero", "60 seg"),
    )),
)

STRENGTH_4_DAYS: tuple[RoutineRow, ...] = (
    ("Día 1", "Piernas", (
        ("Sentadillas", 4, "6-8", "Pesado", "2-3 min"),
        ("Peso muerto", 4, "6", "Pesado", "3 min"),
        ("Prensa de piernas", 3, "8-10", "Moderado-Pesado", "2 min"),
        ("Extensiones de cuádriceps", 3, "10-12", "Moderado", "90 seg"),
        ("Curl de isquiotibiales", 3, "10-12", "Moderado", "90 seg"),
    )),
    ("Día 2", "Pecho y Tríceps", (
        ("Press de banca", 4, "6-8", "Pesado", "2-3 min"),
        ("Press inclinado con mancuernas", 3, "8-10", "Moderado-Pesado", "2 min"),
        ("Fondos", 3, "8-10", "Peso corporal", "2 min"),
        ("Extensiones de tríceps con polea", 3, "10-12", "Moderado", "90 seg"),
    )),
    ("Día 3", "Espalda y Bíceps", (
        ("Dominadas", 4, "6-8", "Peso corporal", "2-3 min"),
        ("Remo con barra", 4, "6-8", "Pesado", "2-3 min"),
        ("Remo con mancuerna", 3, "10", "Moderado", "90 seg"),
        ("Curl de bíceps con barra", 3, "8-10", "Moderado-Pesado", "2 min"),
        ("Curl martillo", 3, "10-12", "Moderado", "90 seg"),
    )),
    ("Día 4", "Hombros y Core", (
        ("Press militar", 4, "6-8", "Pesado", "2-3 min"),
        ("Elevaciones laterales", 3, "10-12", "Moderado", "90 seg"),
        ("Remo al mentón", 3, "8-10", "Moderado", "90 seg"),
        ("Plancha", 3, "45-60 seg", "Peso corporal", "60 seg"),
        ("Crunch abdominal", 3, "15-20", "Peso corporal", "60 seg"),
    )),
)

STRENGTH_5_DAYS: tuple[RoutineRow, ...] = (
    ("Día 1", "Piernas", (
        ("Sentadillas", 5, "5", "Pesado", "3 min"),
        ("Peso muerto", 5, "5", "Pesado", "3 min"),
        ("Prensa de piernas", 4, "8", "Pesado", "2 min"),
        ("Extensiones de cuádriceps", 3, "10-12", "Moderado", "90 seg"),
        ("Curl de isquiotibiales", 3, "10-12", "Moderado", "90 seg"),
        ("Elevaciones de pantorrilla", 4, "15-20", "Moderado", "60 seg"),
    )),
    ("Día 2", "Pecho", (
        ("Press de banca", 5, "5", "Pesado", "3 min"),
        ("Press inclinado con barra", 4, "6-8", "Pesado", "2-3 min"),
        ("Aperturas con mancuernas", 3, "10-12", "Moderado", "90 seg"),
        ("Fondos", 4, "8-10", "Peso corporal+carga", "2 min"),
        ("Press declinado con mancuernas", 3, "10-12", "Moderado", "90 seg"),
    )),
    ("Día 3", "Espalda", (
        ("Dominadas", 5, "5-8", "Peso corporal+carga", "2-3 min"),
        ("Remo con barra", 5, "5", "Pesado", "3 min"),
        ("Remo con mancuerna", 3, "8-10", "Pesado", "2 min"),
        ("Jalón al pecho", 3, "10-12", "Moderado", "90 seg"),
        ("Peso muerto rumano", 3, "10-12", "Moderado", "90 seg"),
    )),
    ("Día 4", "Hombros", (
        ("Press militar", 5, "5", "Pesado", "3 min"),
        ("Press Arnold", 4, "8-10", "Moderado-Pesado", "2 min"),
        ("Elevaciones laterales", 4, "10-12", "Moderado", "90 seg"),
        ("Elevaciones frontales", 3, "10-12", "Moderado", "90 seg"),
        ("Remo al mentón", 3, "10-12", "Moderado", "90 seg"),
        ("Encogimientos de hombros", 4, "12-15", "Pesado", "90 seg"),
    )),
    ("Día 5", "Brazos y Core", (
        ("Curl de bíceps con barra", 4, "8-10", "Pesado", "2 min"),
        ("Curl concentrado", 3, "10-12", "Moderado", "90 seg"),
        ("Extensión de tríceps con polea", 4, "8-10", "Pesado", "2 min"),
        ("Press francés", 3, "10-12", "Moderado", "90 seg"),
        ("Plancha", 4, "60 seg", "Peso corporal", "60 seg"),
        ("Rueda abdominal", 3, "10-15", "Peso corporal", "90 seg"),
    )),
)

STRENGTH_TEMPLATE: dict[int, tuple[RoutineRow, ...]] = {
    3: STRENGTH_3_DAYS,
    4: STRENGTH_4_DAYS,
    5: STRENGTH_5_DAYS,
}

DAYS_PER_WEEK_BY_LEVEL = {
    "Principiante": 3,
    "Intermedio": 4,
    "Avanzado": 5,
}
DEFAULT_DAYS_PER_WEEK = 3

# Every goal shares the strength template until goal-specific content exists.
ROUTINE_TEMPLATES_BY_GOAL: dict[str, dict[int, tuple[RoutineRow, ...]]] = {
    "Fuerza": STRENGTH_TEMPLATE,
    "Hipertrofia": STRENGTH_TEMPLATE,
    "Pérdida de peso": STRENGTH_TEMPLATE,
    "Resistencia": STRENGTH_TEMPLATE,
    "Tonificación": STRENGTH_TEMPLATE,
}
GENERAL_TEMPLATE = STRENGTH_TEMPLATE

# Training weekdays (Monday=0) for each program size
TRAINING_WEEKDAYS: dict[int, tuple[int, ...]] = {
    3: (0, 2, 4),
    4: (0, 1, 3, 4),
    5: (0, 1, 2, 3, 4),
}

EXERCISE_EXECUTION_MINUTES = 2


def days_per_week_for_level(level: str) -> int:
    """Map an experience level to training days per week (3 when unrecognized)."""
    return DAYS_PER_WEEK_BY_LEVEL.get(level, DEFAULT_DAYS_PER_WEEK)


def _build_routine(row: RoutineRow) -> FitnessRoutine:
    day, focus, exercises = row
    return FitnessRoutine(
        id=str(uuid.uuid4()),
        day=day,
        focus=focus,
        exercises=[
            Exercise(name=name, sets=sets, reps=reps, weight=weight, rest=rest)
            for name, sets, reps, weight, rest in exercises
        ],
    )


def generate_fitness_routine(goal: str, level: str) -> list[FitnessRoutine]:
    """
    Build a week of workouts for a fitness goal and experience level.

    Args:
        goal: Fitness goal (Fuerza, Hipertrofia, Pérdida de peso, ...)
        level: Experience level (Principiante, Intermedio, Avanzado)

    Returns:
        One FitnessRoutine per training day, each with a fresh id
    """
    template = ROUTINE_TEMPLATES_BY_GOAL.get(goal, GENERAL_TEMPLATE)
    rows = template[days_per_week_for_level(level)]
    return [_build_routine(row) for row in rows]


def routine_for_weekday(
    routines: list[FitnessRoutine], weekday: int
) -> Optional[FitnessRoutine]:
    """
    Pick the routine scheduled for a weekday.

    3-day programs train Monday, Wednesday and Friday; 4-day programs Monday,
    Tuesday, Thursday and Friday; 5-day programs Monday to Friday.

    Args:
        routines: The week's routines in program order
        weekday: Day of the week, Monday=0 through Sunday=6

    Returns:
        The routine for that day, or None on a rest day
    """
    if not routines:
        return None
    training_days = TRAINING_WEEKDAYS.get(len(routines))
    if training_days is None:
        return routines[0]
    if weekday not in training_days:
        return None
    return routines[training_days.index(weekday)]


def parse_rest_minutes(rest: str) -> int:
    """Convert a rest label such as '60 seg' or '2 min' to whole minutes (at least 1)."""
    amount = rest.split(" ")[0]
    if "seg" in rest:
        if amount.isdigit():
            return max(1, int(amount) // 60)
    elif "min" in rest:
        if amount.isdigit():
            return int(amount)
    return 1


def estimate_routine_minutes(routine: FitnessRoutine) -> int:
    """Rough session length: rest between every set plus execution time per exercise."""
    total = 0
    for exercise in routine.exercises:
        total += exercise.sets * parse_rest_minutes(exercise.rest) + EXERCISE_EXECUTION_MINUTES
    return total
