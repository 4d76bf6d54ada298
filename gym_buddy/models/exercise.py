"""
Exercise model for the Gym Buddy workouts screen.
"""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

UNKNOWN_MUSCLE_GROUP = "Unknown Muscle Group"


class Exercise(BaseModel):
    """
    Exercise model representing an exercise from the remote catalog.
    """

    id: str
    name: str
    description: Optional[str] = ""
    muscle_group: Optional[str] = ""

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, value: Any) -> Any:
        return str(value) if isinstance(value, int) else value

    @classmethod
    def placeholder(cls, exercise_id: str) -> "Exercise":
        """Stand-in for an exercise id missing from the catalog."""
        return cls(
            id=str(exercise_id),
            name=f"Exercise {exercise_id}",
            description="",
            muscle_group=UNKNOWN_MUSCLE_GROUP,
        )


ExerciseMap = Dict[str, Exercise]


def build_exercise_map(exercises: List[Exercise]) -> ExerciseMap:
    """Index exercises by id.

    Duplicate ids resolve last-write-wins; a warning is logged for each one.

    Args:
        exercises: Exercises in fetch order

    Returns:
        Mapping of exercise id to exercise
    """
    exercise_map: ExerciseMap = {}
    for exercise in exercises:
        if exercise.id in exercise_map:
            logger.warning(
                f"Duplicate exercise id {exercise.id}, keeping the last record"
            )
        exercise_map[exercise.id] = exercise
    return exercise_map


def resolve_exercise(exercise_map: ExerciseMap, exercise_id: str) -> Exercise:
    """Look up an exercise, falling back to a placeholder for unknown ids."""
    exercise = exercise_map.get(str(exercise_id))
    if exercise is None:
        logger.warning(f"Exercise {exercise_id} not found in catalog, using placeholder")
        return Exercise.placeholder(exercise_id)
    return exercise
