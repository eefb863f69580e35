"""Tests for the fitness routine library."""

import pytest

from micoach_mcp_server.models import Exercise, FitnessRoutine
from micoach_mcp_server.planner.routines import (
    days_per_week_for_level,
    estimate_routine_minutes,
    generate_fitness_routine,
    parse_rest_minutes,
    routine_for_weekday,
)


def _shape(routines):
    return [
        (r.day, r.focus, [(e.name, e.sets, e.reps, e.weight, e.rest) for e in r.exercises])
        for r in routines
    ]


class TestRoutineGeneration:
    """Program size and content by goal and level."""

    @pytest.mark.parametrize(
        "level,expected",
        [("Principiante", 3), ("Intermedio", 4), ("Avanzado", 5), ("Experto", 3), ("", 3)],
    )
    def test_routine_count_by_level(self, level, expected):
        assert days_per_week_for_level(level) == expected
        assert len(generate_fitness_routine("Fuerza", level)) == expected

    @pytest.mark.parametrize(
        "goal", ["Hipertrofia", "Pérdida de peso", "Resistencia", "Tonificación", "Yoga"]
    )
    def test_every_goal_uses_strength_template(self, goal):
        expected = _shape(generate_fitness_routine("Fuerza", "Intermedio"))
        assert _shape(generate_fitness_routine(goal, "Intermedio")) == expected

    def test_beginner_first_day(self):
        first = generate_fitness_routine("Fuerza", "Principiante")[0]
        assert first.day == "Día 1"
        assert first.focus == "Piernas y Core"
        assert [(e.name, e.sets, e.reps, e.weight, e.rest) for e in first.exercises] == [
            ("Sentadillas", 3, "8-10", "Moderado", "2 min"),
            ("Peso muerto", 3, "8", "Moderado", "2 min"),
            ("Prensa de piernas", 3, "10", "Moderado", "90 seg"),
            ("Plancha", 3, "30 seg", "Peso corporal", "60 seg"),
        ]
        assert all(e.notes is None for e in first.exercises)

    def test_advanced_focus_sequence(self):
        routines = generate_fitness_routine("Fuerza", "Avanzado")
        assert [r.focus for r in routines] == ["Piernas", "Pecho", "Espalda", "Hombros", "Brazos y Core"]
        assert [r.day for r in routines] == ["Día 1", "Día 2", "Día 3", "Día 4", "Día 5"]

    def test_intermediate_shoulders_day(self):
        shoulders = generate_fitness_routine("Fuerza", "Intermedio")[3]
        assert shoulders.focus == "Hombros y Core"
        assert shoulders.exercises[3].reps == "45-60 seg"
        assert shoulders.exercises[-1].name == "Crunch abdominal"

    @pytest.mark.parametrize("level", ["Principiante", "Intermedio", "Avanzado"])
    def test_exercise_names_unique_within_routine(self, level):
        for routine in generate_fitness_routine("Fuerza", level):
            names = [e.name for e in routine.exercises]
            assert len(names) == len(set(names))

    def test_routine_ids_are_fresh(self):
        first = generate_fitness_routine("Fuerza", "Avanzado")
        second = generate_fitness_routine("Fuerza", "Avanzado")
        ids = {r.id for r in first} | {r.id for r in second}
        assert len(ids) == 10


class TestWeeklySchedule:
    """Which routine falls on which weekday."""

    @pytest.mark.parametrize(
        "level,weekday,expected_day",
        [
            ("Principiante", 0, "Día 1"),
            ("Principiante", 1, None),
            ("Principiante", 2, "Día 2"),
            ("Principiante", 4, "Día 3"),
            ("Intermedio", 1, "Día 2"),
            ("Intermedio", 2, None),
            ("Intermedio", 3, "Día 3"),
            ("Intermedio", 4, "Día 4"),
            ("Avanzado", 2, "Día 3"),
            ("Avanzado", 5, None),
            ("Avanzado", 6, None),
        ],
    )
    def test_routine_for_weekday(self, level, weekday, expected_day):
        routine = routine_for_weekday(generate_fitness_routine("Fuerza", level), weekday)
        if expected_day is None:
            assert routine is None
        else:
            assert routine.day == expected_day

    def test_empty_program_has_no_routine(self):
        assert routine_for_weekday([], 0) is None

    def test_unusual_program_size_falls_back_to_first(self):
        routines = generate_fitness_routine("Fuerza", "Intermedio")[:2]
        assert routine_for_weekday(routines, 6) is routines[0]


class TestDurationEstimate:
    """Rest parsing and session length estimates."""

    @pytest.mark.parametrize(
        "rest,minutes",
        [("60 seg", 1), ("90 seg", 1), ("150 seg", 2), ("2 min", 2), ("3 min", 3), ("2-3 min", 1), ("", 1)],
    )
    def test_parse_rest_minutes(self, rest, minutes):
        assert parse_rest_minutes(rest) == minutes

    def test_estimate_beginner_legs(self):
        legs = generate_fitness_routine("Fuerza", "Principiante")[0]
        # 3x2+2, 3x2+2, 3x1+2, 3x1+2
        assert estimate_routine_minutes(legs) == 26

    def test_estimate_empty_routine(self):
        routine = FitnessRoutine(id="r", day="Día 1", focus="Descanso", exercises=[])
        assert estimate_routine_minutes(routine) == 0

    def test_estimate_single_exercise(self):
        routine = FitnessRoutine(
            id="r",
            day="Día 1",
            focus="Core",
            exercises=[Exercise(name="Plancha", sets=4, reps="60 seg", weight="Peso corporal", rest="2 min")],
        )
        assert estimate_routine_minutes(routine) == 10
