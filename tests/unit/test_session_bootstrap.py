import json

import pytest

from gym_buddy.errors import PersistError, WorkoutNotFoundError
from gym_buddy.models.catalog import Catalog
from gym_buddy.models.workout import Workout
from gym_buddy.services.catalog import load_catalog
from gym_buddy.services.handoff_store import FileHandoffStore
from gym_buddy.services.session_bootstrap import (
    persist,
    start_empty,
    start_from_workout,
)


@pytest.fixture
def catalog(catalog_api):
    return load_catalog(catalog_api, "u1")


@pytest.fixture
def store(tmp_path):
    return FileHandoffStore(str(tmp_path / "handoff.json"))


def test_start_from_workout_remaps_sets(catalog):
    payload = start_from_workout(catalog, catalog.exercise_map, 2)

    assert payload.mode == "from-template"
    assert payload.workout_id == "2"
    exercise = payload.exercises_for_handoff()[0]
    assert exercise["name"] == "Back Squat"
    assert exercise["muscleGroup"] == "Legs"
    assert exercise["sets"] == [
        {"set": 1, "reps": 10, "lbs": 135, "restTime": 60, "completed": False}
    ]


def test_start_from_workout_keeps_set_order(catalog):
    payload = start_from_workout(catalog, catalog.exercise_map, "1")

    assert [s.set_number for s in payload.exercises[0].sets] == [1, 2]


def test_unresolved_exercise_gets_placeholder():
    workout = Workout.model_validate(
        {
            "id": 7,
            "name": "Mystery",
            "is_public": False,
            "exercises": [
                {
                    "exercise_id": 99,
                    "performance_data": {"sets": [{"set": 1, "reps": 5}]},
                }
            ],
        }
    )
    catalog = Catalog(custom_workouts=[workout])

    payload = start_from_workout(catalog, {}, "7")

    exercise = payload.exercises[0]
    assert exercise.name == "Exercise 99"
    assert exercise.description == ""
    assert exercise.muscle_group == "Unknown Muscle Group"
    assert exercise.sets[0].completed is False


def test_start_from_unknown_workout(catalog):
    with pytest.raises(WorkoutNotFoundError) as excinfo:
        start_from_workout(catalog, catalog.exercise_map, "404")
    assert excinfo.value.workout_id == "404"


def test_start_empty_is_constant():
    payload = start_empty()

    assert payload.mode == "empty"
    assert payload.exercises == []
    assert payload.workout_id is None


def test_persist_templated_session(catalog, store):
    persist(store, start_from_workout(catalog, catalog.exercise_map, 2))

    assert store.get("workoutType") == "non-empty"
    assert store.get("currentWorkoutId") == "2"
    assert store.read_exercises()[0]["id"] == "ex-2"


def test_persist_is_idempotent(catalog, store):
    payload = start_from_workout(catalog, catalog.exercise_map, 2)

    persist(store, payload)
    once = store.read_all()
    persist(store, payload)

    assert store.read_all() == once


def test_empty_session_clears_previous_exercises(catalog, store):
    persist(store, start_from_workout(catalog, catalog.exercise_map, 2))

    persist(store, start_empty())

    assert store.get("workoutType") == "empty"
    assert json.loads(store.get("exercises")) == []
    assert store.get("currentWorkoutId") is None


def test_templated_session_after_empty_writes_exercises(catalog, store):
    persist(store, start_empty())

    persist(store, start_from_workout(catalog, catalog.exercise_map, 1))

    assert len(store.read_exercises()) == 1


def test_persist_failure_raises_persist_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    store = FileHandoffStore(str(blocker / "handoff.json"))

    with pytest.raises(PersistError):
        persist(store, start_empty())


def test_handoff_keeps_integer_weights_integral(catalog, store):
    persist(store, start_from_workout(catalog, catalog.exercise_map, 2))

    stored_set = store.read_exercises()[0]["sets"][0]
    assert stored_set["lbs"] == 135
    assert isinstance(stored_set["lbs"], int)
    assert '"lbs": 135,' in store.get("exercises")


def test_handoff_keeps_fractional_weights():
    workout = Workout.model_validate(
        {
            "id": 8,
            "name": "Plates",
            "is_public": False,
            "exercises": [
                {
                    "exercise_id": "ex-1",
                    "performance_data": {"sets": [{"set": 1, "reps": 5, "weight": 22.5}]},
                }
            ],
        }
    )
    catalog = Catalog(custom_workouts=[workout])

    payload = start_from_workout(catalog, {}, "8")

    assert payload.exercises_for_handoff()[0]["sets"][0]["lbs"] == 22.5
