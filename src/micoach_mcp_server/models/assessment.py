"""Pydantic models for users and onboarding assessments."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ObjectiveCategory(str, Enum):
    """Objective categories an assessment can select."""

    SALUD = "Salud"
    PRODUCTIVIDAD = "Productividad"
    APRENDIZAJE = "Aprendizaje"
    OTRO = "Otro"

    @classmethod
    def from_tag(cls, tag: str) -> Optional["ObjectiveCategory"]:
        """Parse a single objective tag, returning None for unknown tags."""
        try:
            return cls(tag.strip())
        except ValueError:
            return None


class Pace(str, Enum):
    """Pace chosen during onboarding."""

    INTENSIVO = "intensivo"
    MODERADO = "moderado"
    LENTO = "lento"


# Metadata keys carrying the fitness sub-goal and experience level
FITNESS_GOAL_KEY = "fitnessGoal"
FITNESS_LEVEL_KEY = "fitnessLevel"


class User(BaseModel):
    """An account created at onboarding."""

    id: str
    email: str
    name: str

    # Metadata
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class AssessmentPreferences(BaseModel):
    """Preferences captured by the onboarding questionnaire."""

    pace: str = Pace.MODERADO.value  # intensivo, moderado, lento
    learning_style: str = "visual"  # visual, auditivo, práctico
    time_of_day: str = "mañana"  # mañana, tarde, noche


class Assessment(BaseModel):
    """Result of the onboarding questionnaire."""

    id: str
    user_id: str
    main_objective: str  # Comma-joined tags, e.g. "Salud,Aprendizaje"
    current_situation: str = ""
    time_commitment: str = ""
    resources: list[str] = Field(default_factory=list)
    preferences: AssessmentPreferences = Field(default_factory=AssessmentPreferences)
    metadata: dict[str, str] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("main_objective")
    @classmethod
    def validate_main_objective(cls, value: str) -> str:
        """Reject assessments without any objective."""
        if not value.strip():
            raise ValueError("main_objective must name at least one objective")
        return value

    def objective_tags(self) -> list[str]:
        """Return the trimmed objective tags in the order they were selected."""
        return [tag.strip() for tag in self.main_objective.split(",")]

    def categories(self) -> list[ObjectiveCategory]:
        """Return the recognized objective categories, skipping unknown tags."""
        categories: list[ObjectiveCategory] = []
        for tag in self.objective_tags():
            category = ObjectiveCategory.from_tag(tag)
            if category is not None:
                categories.append(category)
        return categories

    @property
    def fitness_goal(self) -> Optional[str]:
        return self.metadata.get(FITNESS_GOAL_KEY)

    @property
    def fitness_level(self) -> Optional[str]:
        return self.metadata.get(FITNESS_LEVEL_KEY)

    def has_fitness_profile(self) -> bool:
        """Whether metadata carries both a fitness goal and a fitness level."""
        return self.fitness_goal is not None and self.fitness_level is not None
