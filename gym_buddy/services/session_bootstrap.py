"""
Service for turning a catalog workout into the session payload read by the
workout execution screen.
"""

import json
import logging
from typing import Dict

from gym_buddy.errors import WorkoutNotFoundError
from gym_buddy.models.catalog import Catalog
from gym_buddy.models.exercise import ExerciseMap, resolve_exercise
from gym_buddy.models.session import (
    EMPTY_MODE,
    TEMPLATE_MODE,
    SessionExercise,
    SessionPayload,
    SessionSet,
)
from gym_buddy.services.handoff_store import (
    CURRENT_WORKOUT_ID_KEY,
    EXERCISES_KEY,
    WORKOUT_TYPE_KEY,
    HandoffStore,
)

logger = logging.getLogger(__name__)


def start_from_workout(
    catalog: Catalog, exercise_map: ExerciseMap, workout_id: str
) -> SessionPayload:
    """Flatten a catalog workout into a fresh session payload.

    Args:
        catalog: The loaded catalog
        exercise_map: Exercises by id, used to resolve names
        workout_id: Workout to start

    Returns:
        SessionPayload in "from-template" mode with every set not completed

    Raises:
        WorkoutNotFoundError: If the workout is in neither partition
    """
    workout = catalog.find(workout_id)
    if workout is None:
        logger.error(f"Cannot start workout {workout_id}: not in catalog")
        raise WorkoutNotFoundError(str(workout_id))

    exercises = []
    for entry in workout.exercises:
        exercise = resolve_exercise(exercise_map, entry.exercise_id)
        sets = [
            SessionSet(
                set_number=workout_set.set_number,
                reps=workout_set.reps,
                lbs=workout_set.weight,
                rest_time=workout_set.rest_time,
                completed=False,
            )
            for workout_set in entry.sets
        ]
        exercises.append(
            SessionExercise(
                id=exercise.id,
                name=exercise.name,
                description=exercise.description,
                muscle_group=exercise.muscle_group,
                sets=sets,
            )
        )

    logger.info(f"Starting workout {workout.id} with {len(exercises)} exercises")
    return SessionPayload(mode=TEMPLATE_MODE, workout_id=workout.id, exercises=exercises)


def start_empty() -> SessionPayload:
    return SessionPayload(mode=EMPTY_MODE, exercises=[])


def handoff_values(payload: SessionPayload) -> Dict[str, str]:
    """Key/value pairs the handoff store should hold for a payload."""
    values = {
        WORKOUT_TYPE_KEY: "empty" if payload.is_empty else "non-empty",
        EXERCISES_KEY: json.dumps(payload.exercises_for_handoff()),
    }
    if not payload.is_empty and payload.workout_id is not None:
        values[CURRENT_WORKOUT_ID_KEY] = payload.workout_id
    return values


def persist(store: HandoffStore, payload: SessionPayload) -> None:
    """Write a session payload, replacing whatever the store held before.

    An empty session stores an empty exercise list and no workout id, so a
    previous templated session never leaks into the next screen.

    Raises:
        PersistError: If the store cannot be written
    """
    values = handoff_values(payload)
    store.replace(values)
    logger.info(f"Persisted {payload.mode} session to handoff store")
