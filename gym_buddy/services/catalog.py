"""
Service for assembling the workout catalog from the remote exercise and
workout collections.
"""

import logging
from typing import Any, List, Tuple

import requests
from pydantic import ValidationError

from gym_buddy.errors import CatalogLoadError, WorkoutNotFoundError
from gym_buddy.models.catalog import Catalog
from gym_buddy.models.exercise import (
    Exercise,
    build_exercise_map,
    resolve_exercise,
)
from gym_buddy.models.workout import Workout, WorkoutSet
from gym_buddy.services.catalog_api import CatalogAPI

logger = logging.getLogger(__name__)


def _parse_records(resource: str, records: Any, model) -> list:
    if not isinstance(records, list):
        raise CatalogLoadError(
            resource, f"expected a list, got {type(records).__name__}"
        )
    try:
        return [model.model_validate(record) for record in records]
    except ValidationError as e:
        raise CatalogLoadError(resource, str(e)) from e


def _fetch(resource: str, fetch, *args) -> Any:
    try:
        return fetch(*args)
    except (requests.exceptions.RequestException, ValueError) as e:
        raise CatalogLoadError(resource, str(e)) from e


def partition_workouts(workouts: List[Workout]) -> Tuple[List[Workout], List[Workout]]:
    """Split workouts into (public templates, custom workouts), keeping order."""
    default_workouts = [workout for workout in workouts if workout.is_public]
    custom_workouts = [workout for workout in workouts if not workout.is_public]
    return default_workouts, custom_workouts


def load_catalog(api: CatalogAPI, user_id: str) -> Catalog:
    """Fetch exercises and workouts and build the catalog for a user.

    Workout entries are kept unresolved; names are joined in when a session
    starts or a detail view is opened.

    Args:
        api: Remote catalog client
        user_id: User whose workouts to load

    Returns:
        Catalog with both partitions and the exercise map

    Raises:
        ValueError: If user_id is empty
        CatalogLoadError: If either fetch fails or returns malformed data
    """
    if not user_id:
        raise ValueError("A user id is required to load the workout catalog")

    logger.info(f"Loading workout catalog for user {user_id}")

    raw_exercises = _fetch("exercises", api.list_exercises)
    exercises = _parse_records("exercises", raw_exercises, Exercise)
    exercise_map = build_exercise_map(exercises)

    raw_workouts = _fetch("workouts", api.list_workouts, user_id)
    workouts = _parse_records("workouts", raw_workouts, Workout)

    default_workouts, custom_workouts = partition_workouts(workouts)
    logger.info(
        f"Loaded {len(exercises)} exercises, {len(default_workouts)} templates "
        f"and {len(custom_workouts)} custom workouts"
    )
    return Catalog(
        default_workouts=default_workouts,
        custom_workouts=custom_workouts,
        exercise_map=exercise_map,
    )


def describe_workout(
    catalog: Catalog, workout_id: str
) -> List[Tuple[Exercise, List[WorkoutSet]]]:
    """Resolve a workout's exercises for the detail view.

    Raises:
        WorkoutNotFoundError: If the workout is not in the catalog
    """
    workout = catalog.find(workout_id)
    if workout is None:
        raise WorkoutNotFoundError(str(workout_id))
    return [
        (resolve_exercise(catalog.exercise_map, entry.exercise_id), entry.sets)
        for entry in workout.exercises
    ]
