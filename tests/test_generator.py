"""Tests for the rule-based plan generator."""

from datetime import timedelta

import pytest

from conftest import START
from micoach_mcp_server.planner.generator import (
    determine_total_days,
    generate_plan,
    generate_tasks_for_day,
    milestone_offsets,
)

STRENGTH_PROFILE = {"fitnessGoal": "Fuerza", "fitnessLevel": "Principiante"}


class TestTimeframe:
    """Plan length selection from objectives and pace."""

    @pytest.mark.parametrize(
        "objective,pace,expected",
        [
            ("Salud", "intensivo", 30),
            ("Salud", "moderado", 60),
            ("Salud", "lento", 90),
            ("Productividad", "intensivo", 30),  # 21 raised to the 30-day floor
            ("Productividad", "moderado", 30),
            ("Productividad", "lento", 45),
            ("Aprendizaje", "intensivo", 30),
            ("Aprendizaje", "moderado", 60),
            ("Aprendizaje", "lento", 90),
            ("Otro", "lento", 30),
            ("Finanzas", "intensivo", 30),
        ],
    )
    def test_single_objective_lookup(self, make_assessment, objective, pace, expected):
        assessment = make_assessment(objective, pace)
        assert determine_total_days(assessment) == expected
        assert generate_plan(assessment, now=START).timeframe == f"{expected} dias"

    def test_unknown_pace_uses_relaxed_column(self, make_assessment):
        assert determine_total_days(make_assessment("Salud", "tranquilo")) == 90

    def test_multiple_objectives_take_the_longest(self, make_assessment):
        assessment = make_assessment("Productividad,Aprendizaje", "moderado")
        assert determine_total_days(assessment) == 60

    def test_tags_are_trimmed(self, make_assessment):
        assessment = make_assessment("Productividad, Salud", "lento")
        assert determine_total_days(assessment) == 90


class TestMilestones:
    """Milestone offsets, ordering and titles."""

    @pytest.mark.parametrize(
        "days,expected",
        [
            (30, [5, 10, 20, 30]),
            (45, [7, 15, 30, 45, 60]),
            (60, [7, 15, 30, 45, 60]),
            (90, [10, 30, 60, 90]),
        ],
    )
    def test_offsets_by_plan_length(self, days, expected):
        assert milestone_offsets(days) == expected

    def test_orders_are_contiguous_from_one(self, make_assessment):
        plan = generate_plan(make_assessment("Salud", "moderado"), now=START)
        assert [m.order for m in plan.milestones] == [1, 2, 3, 4, 5]

    def test_target_dates_offset_from_now(self, make_assessment):
        plan = generate_plan(make_assessment("Productividad,Aprendizaje", "moderado"), now=START)
        offsets = [(m.target_date - START).days for m in plan.milestones]
        assert offsets == [7, 15, 30, 45, 60]

    def test_multi_objective_titles_use_general_rotation(self, make_assessment):
        plan = generate_plan(make_assessment("Productividad,Aprendizaje", "moderado"), now=START)
        assert [m.title for m in plan.milestones] == [
            "Construir Bases",
            "Crear Rutinas",
            "Consolidar Hábitos",
            "Dominar el Sistema",
            "Construir Bases",
        ]

    def test_single_objective_titles_are_category_specific(self, make_assessment):
        plan = generate_plan(make_assessment("Salud", "intensivo"), now=START)
        assert [m.title for m in plan.milestones] == [
            "Establecer Bases",
            "Primera Rutina",
            "Consistencia Diaria",
            "Hábito Consolidado",
        ]

    def test_other_objective_titles_are_numbered(self, make_assessment):
        plan = generate_plan(make_assessment("Otro"), now=START)
        assert [m.title for m in plan.milestones] == ["Hito #1", "Hito #2", "Hito #3", "Hito #4"]

    def test_description_mentions_index_and_objective(self, make_assessment):
        plan = generate_plan(make_assessment("Aprendizaje", "intensivo"), now=START)
        assert plan.milestones[1].description == "Descripción del hito 2 para Aprendizaje"


class TestDailyTasks:
    """Per-day task rules."""

    @pytest.mark.parametrize("objective,pace", [("Salud", "lento"), ("Productividad", "lento"), ("Otro", "moderado")])
    def test_one_entry_per_day(self, make_assessment, objective, pace):
        plan = generate_plan(make_assessment(objective, pace), now=START)
        assert [d.day for d in plan.daily_guidance] == list(range(1, plan.total_days + 1))

    def test_reflection_closes_every_non_empty_day(self, make_assessment):
        plan = generate_plan(make_assessment("Salud,Aprendizaje"), now=START)
        for daily in plan.daily_guidance:
            assert len(daily.tasks) == 3
            assert daily.tasks[-1].title == "Reflexión diaria"
            assert daily.tasks[-1].category == "General"
            assert daily.tasks[-1].estimated_time == "5 minutos"

    def test_unknown_objective_has_no_tasks(self, make_assessment):
        plan = generate_plan(make_assessment("Finanzas"), now=START)
        assert len(plan.daily_guidance) == 30
        assert all(daily.tasks == [] for daily in plan.daily_guidance)

    def test_task_ids_are_unique(self, make_assessment):
        plan = generate_plan(make_assessment("Salud,Productividad,Aprendizaje,Otro", "lento"), now=START)
        ids = [task.id for daily in plan.daily_guidance for task in daily.tasks]
        assert len(ids) == len(set(ids))

    @pytest.mark.parametrize("day,minutes", [(1, 30), (7, 30), (8, 8), (20, 20), (30, 30), (31, 60), (60, 60)])
    def test_walk_duration_ramp(self, make_assessment, day, minutes):
        tasks = generate_tasks_for_day(make_assessment("Salud"), day, 60)
        assert tasks[0].title == f"Caminar {minutes} minutos"
        assert tasks[0].estimated_time == f"{minutes} minutos"
        assert tasks[0].category == "Salud"

    def test_fitness_profile_alternates_training_and_walks(self, make_assessment):
        assessment = make_assessment("Salud", "moderado", STRENGTH_PROFILE)
        training = generate_tasks_for_day(assessment, 9, 60)[0]
        walk = generate_tasks_for_day(assessment, 10, 60)[0]
        assert training.title == "Entrenamiento de Fuerza"
        assert training.category == "Fitness"
        assert training.estimated_time == "45-60 minutos"
        assert walk.title == "Caminar 10 minutos"
        assert walk.description == "Actividad cardiovascular en día de descanso"

    @pytest.mark.parametrize(
        "day,pages,estimated",
        [
            (1, 20, "30-40 minutos"),
            (7, 20, "30-40 minutos"),
            (8, 7, "1 hora"),
            (9, 8, "1 hora"),
            (15, 13, "1 hora"),
            (21, 18, "1 hora"),
            (27, 23, "1 hora"),
            (30, 25, "1 hora"),
            (31, 50, "1 hora"),
        ],
    )
    def test_reading_pages_ramp(self, make_assessment, day, pages, estimated):
        task = generate_tasks_for_day(make_assessment("Aprendizaje"), day, 60)[0]
        assert task.title == f"Leer {pages} páginas"
        assert task.estimated_time == estimated

    @pytest.mark.parametrize(
        "day,title",
        [
            (7, "Planifica tus 3 tareas principales"),
            (8, "Optimiza tu flujo de trabajo"),
            (22, "Optimiza tu flujo de trabajo"),
            (23, "Revisa y ajusta tu sistema"),
        ],
    )
    def test_productivity_title_by_phase(self, make_assessment, day, title):
        task = generate_tasks_for_day(make_assessment("Productividad"), day, 45)[0]
        assert task.title == title
        assert task.estimated_time == "20 minutos"

    @pytest.mark.parametrize("day,minutes", [(3, 30), (8, 16), (15, 30), (16, 32), (30, 60)])
    def test_personal_goal_ramp_has_no_plateau(self, make_assessment, day, minutes):
        task = generate_tasks_for_day(make_assessment("Otro"), day, 30)[0]
        assert task.title == f"Dedica {minutes} minutos a tu objetivo personal"
        assert task.category == "Otro"

    def test_tasks_follow_objective_order(self, make_assessment):
        tasks = generate_tasks_for_day(make_assessment("Aprendizaje,Productividad"), 1, 60)
        assert [t.category for t in tasks] == ["Aprendizaje", "Productividad", "General"]


class TestFitnessRoutines:
    """When a plan carries a fitness program."""

    def test_salud_with_profile_gets_routines(self, make_assessment):
        plan = generate_plan(make_assessment("Salud", "moderado", {"fitnessGoal": "Hipertrofia", "fitnessLevel": "Avanzado"}))
        assert plan.fitness_routines is not None
        assert len(plan.fitness_routines) == 5

    def test_salud_without_level_has_none(self, make_assessment):
        plan = generate_plan(make_assessment("Salud", "moderado", {"fitnessGoal": "Fuerza"}))
        assert plan.fitness_routines is None

    def test_other_objectives_ignore_fitness_metadata(self, make_assessment):
        plan = generate_plan(make_assessment("Productividad", "moderado", STRENGTH_PROFILE))
        assert plan.fitness_routines is None


class TestScenarios:
    """End-to-end generation scenarios."""

    def test_intensive_strength_beginner(self, make_assessment):
        plan = generate_plan(make_assessment("Salud", "intensivo", STRENGTH_PROFILE), now=START)

        assert plan.timeframe == "30 dias"
        assert plan.total_days == 30

        day_one = plan.daily_task_for(1)
        assert [t.category for t in day_one.tasks] == ["Fitness", "General"]

        day_two = plan.daily_task_for(2)
        assert [t.category for t in day_two.tasks] == ["Salud", "General"]
        assert day_two.tasks[0].title == "Caminar 30 minutos"

        assert len(plan.fitness_routines) == 3
        assert plan.user_id == "user-1"
        assert plan.assessment_id == "assessment-1"
        assert plan.objective == "Salud"

    def test_productivity_and_learning_moderate(self, make_assessment):
        plan = generate_plan(make_assessment("Productividad,Aprendizaje", "moderado"), now=START)

        assert plan.timeframe == "60 dias"
        assert [(m.target_date - START) for m in plan.milestones] == [
            timedelta(days=offset) for offset in (7, 15, 30, 45, 60)
        ]
        assert plan.fitness_routines is None

    def test_same_inputs_give_same_tasks(self, make_assessment):
        assessment = make_assessment("Salud,Otro", "lento", STRENGTH_PROFILE)
        first = generate_plan(assessment, now=START)
        second = generate_plan(assessment, now=START)

        def shape(plan):
            return [
                [(t.title, t.category, t.estimated_time) for t in daily.tasks]
                for daily in plan.daily_guidance
            ]

        assert shape(first) == shape(second)
        assert first.id != second.id
